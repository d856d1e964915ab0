"""MockMate cache service.

Redis-backed storage for admin refresh tokens and access-token blacklisting,
with an in-memory stand-in when Redis is unreachable outside production.
"""

__version__ = "0.1.0"
