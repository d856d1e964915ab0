"""Unit tests for the composition root.

Tests cover:
- Logger selection per environment (JSON outside development)
- Logger singleton
- Cache service wiring
"""

from unittest.mock import MagicMock, patch

import pytest

from mockmate_cache.core.container import (
    CacheServices,
    build_cache_services,
    get_logger,
)
from mockmate_cache.core.enums import Environment
from mockmate_cache.infrastructure.cache import RedisConnectionManager
from mockmate_cache.services import (
    AdminTokenService,
    CacheService,
    SessionService,
    SocketConnectionService,
)
from tests.conftest import make_settings

CONSOLE_ADAPTER = "mockmate_cache.infrastructure.logging.console_adapter.ConsoleAdapter"


@pytest.fixture(autouse=True)
def clear_logger_cache():
    get_logger.cache_clear()
    yield
    get_logger.cache_clear()


@pytest.mark.unit
class TestGetLogger:
    @pytest.mark.parametrize(
        ("environment", "use_json"),
        [
            (Environment.DEVELOPMENT, False),
            (Environment.TESTING, True),
            (Environment.CI, True),
            (Environment.PRODUCTION, True),
        ],
    )
    def test_renderer_per_environment(self, environment, use_json):
        settings = make_settings(environment=environment, log_level="DEBUG")
        with (
            patch("mockmate_cache.core.container.get_settings", return_value=settings),
            patch(CONSOLE_ADAPTER) as mock_console,
        ):
            get_logger()

        mock_console.assert_called_once_with(use_json=use_json, level="DEBUG")

    def test_singleton(self):
        with (
            patch("mockmate_cache.core.container.get_settings", return_value=make_settings()),
            patch(CONSOLE_ADAPTER, side_effect=[MagicMock(), MagicMock()]),
        ):
            assert get_logger() is get_logger()


@pytest.mark.unit
class TestBuildCacheServices:
    def test_wiring(self, mock_logger):
        services = build_cache_services(make_settings(), mock_logger)

        assert isinstance(services, CacheServices)
        assert isinstance(services.cache, CacheService)
        assert isinstance(services.cache._connection, RedisConnectionManager)
        assert isinstance(services.tokens, AdminTokenService)
        assert isinstance(services.sessions, SessionService)
        assert isinstance(services.sockets, SocketConnectionService)
        assert services.tokens._cache is services.cache
        assert services.sessions._cache is services.cache
        assert services.sockets._cache is services.cache
        assert services.cache.is_connected() is False

    def test_component_loggers(self, mock_logger):
        build_cache_services(make_settings(), mock_logger)

        bound = {call.kwargs["component"] for call in mock_logger.bind.call_args_list}
        assert bound == {"redis", "cache", "admin_tokens", "sessions", "sockets"}

    def test_ttls_from_settings(self, mock_logger):
        settings = make_settings(
            refresh_token_ttl_seconds=60,
            blacklist_ttl_seconds=30,
            login_attempts_ttl_seconds=10,
            session_ttl_seconds=120,
        )

        services = build_cache_services(settings, mock_logger)

        assert services.tokens._refresh_ttl == 60
        assert services.tokens._blacklist_ttl == 30
        assert services.tokens._login_attempts_ttl == 10
        assert services.sessions._session_ttl == 120
