"""Infrastructure layer - adapters for external systems.

Contains the Redis cache clients, the connection manager and the
structured logging adapter.
"""
