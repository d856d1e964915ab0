"""HTTP routers."""

from mockmate_cache.presentation.routers.system import system_router

__all__ = ["system_router"]
