"""Integration tests for CacheService against an in-memory Redis (fakeredis).

Architecture:
- Real redis-py command path, fakeredis server per test
- Verifies reply values and TTL behavior through the service surface
"""

import asyncio

import pytest

from mockmate_cache.core.result import Success


@pytest.mark.integration
class TestCacheServiceRedis:
    """Uses cache_service fixture from conftest.py (connected, fakeredis)."""

    async def test_connected_after_connect(self, cache_service):
        assert cache_service.is_connected() is True
        assert await cache_service.ping() is True

    async def test_set_then_get(self, cache_service):
        assert await cache_service.set("greeting", "hello") == "OK"
        assert await cache_service.get("greeting") == "hello"

    async def test_get_missing_key(self, cache_service):
        assert await cache_service.get("missing") is None

    async def test_set_overwrites(self, cache_service):
        await cache_service.set("k", "v1")
        await cache_service.set("k", "v2")

        assert await cache_service.get("k") == "v2"

    async def test_set_without_ttl_is_persistent(self, cache_service):
        await cache_service.set("k", "v")

        assert await cache_service.ttl("k") is None

    async def test_set_with_ttl_uses_setex(self, cache_service):
        assert await cache_service.set("k", "v", ttl=60) == "OK"

        remaining = await cache_service.ttl("k")
        assert remaining is not None
        assert 0 < remaining <= 60

    async def test_setex_expires(self, cache_service):
        await cache_service.setex("short", 1, "v")
        assert await cache_service.get("short") == "v"

        await asyncio.sleep(1.1)

        assert await cache_service.get("short") is None
        assert await cache_service.exists("short") == 0

    async def test_delete_counts_removed_keys(self, cache_service):
        await cache_service.set("k", "v")

        assert await cache_service.delete("k") == 1
        assert await cache_service.delete("k") == 0
        assert await cache_service.get("k") is None

    async def test_exists(self, cache_service):
        await cache_service.set("present", "v")

        assert await cache_service.exists("present") == 1
        assert await cache_service.exists("absent") == 0

    async def test_expire(self, cache_service):
        await cache_service.set("k", "v")

        assert await cache_service.expire("k", 30) == 1
        assert await cache_service.expire("absent", 30) == 0
        assert 0 < await cache_service.ttl("k") <= 30

    async def test_increment(self, cache_service):
        assert await cache_service.increment("counter") == 1
        assert await cache_service.increment("counter") == 2
        assert await cache_service.increment("counter", 5) == 7
        assert await cache_service.get("counter") == "7"

    async def test_info_report(self, cache_service):
        info = await cache_service.info()

        assert isinstance(info["redis_version"], str)
        assert isinstance(info["connected_clients"], int)

    async def test_json_round_trip(self, cache_service):
        assert await cache_service.set_json("prefs", {"theme": "dark", "n": 2}) == "OK"

        assert await cache_service.get_json("prefs") == {"theme": "dark", "n": 2}
        assert await cache_service.get("prefs") == '{"theme": "dark", "n": 2}'

    async def test_set_json_with_ttl(self, cache_service):
        await cache_service.set_json("prefs", {"theme": "dark"}, ttl=60)

        assert 0 < await cache_service.ttl("prefs") <= 60

    async def test_increment_non_numeric_is_neutral(self, cache_service, mock_logger):
        await cache_service.set("k", "not-a-number")

        assert await cache_service.increment("k") == 0
        mock_logger.error.assert_any_call(
            "Redis operation failed",
            command="INCRBY",
            error_code="cache_operation_failed",
            reason="Redis INCRBY failed",
            key="k",
        )
        # A command error is not a connection loss.
        assert cache_service.is_connected() is True

    async def test_client_returns_results(self, connection_manager):
        await connection_manager.connect()
        client = connection_manager.client

        assert await client.set("k", "v") == Success(value="OK")
        assert await client.get("k") == Success(value="v")
        assert await client.ttl("k") == Success(value=None)

        await connection_manager.disconnect()

    async def test_disconnect_then_operations_are_neutral(self, cache_service):
        await cache_service.set("k", "v")
        await cache_service.disconnect()

        assert cache_service.is_connected() is False
        assert await cache_service.get("k") is None
