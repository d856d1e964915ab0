"""Structured logging adapters."""

from mockmate_cache.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
