from __future__ import annotations

from poolscope.api import deps
from poolscope.api.service import PoolAnalyticsService
from poolscope.core.config import get_settings


def test_get_settings_reads_environment(monkeypatch):
    monkeypatch.setenv("SAILOR_API_BASE", "https://sailor.test/api")
    monkeypatch.setenv("POOL_MIN_ACTIVITY_USD", "2500")
    monkeypatch.setenv("DEFAULT_TICK_SPACING", "10")

    settings = get_settings()

    assert settings.sailor_api_base == "https://sailor.test/api"
    assert settings.pool_min_activity_usd == 2500.0
    assert settings.default_tick_spacing == 10


def test_get_settings_defaults(monkeypatch):
    for name in ("HTTP_TIMEOUT_SECONDS", "OPTIMAL_RANGE_INTERVAL_MINUTES", "OPTIMAL_RANGE_CANDLES"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.http_timeout_seconds == 10.0
    assert settings.optimal_range_interval_minutes == 15
    assert settings.optimal_range_candles == 30


def test_service_wiring_uses_dragonswap_as_primary():
    deps._get_settings.cache_clear()
    deps._get_sailor_client.cache_clear()
    deps._get_dragonswap_client.cache_clear()
    deps.get_pool_analytics_service.cache_clear()

    service = deps.get_pool_analytics_service()
    liquidity_use_case = deps.get_liquidity_use_case()

    assert isinstance(service, PoolAnalyticsService)
    assert deps.get_pool_analytics_service() is service
    assert liquidity_use_case._primary.name == "DragonSwap"
    assert liquidity_use_case._secondary.name == "Sailor"


def test_pool_list_queries_dragonswap_before_sailor():
    deps._get_settings.cache_clear()
    deps._get_sailor_client.cache_clear()
    deps._get_dragonswap_client.cache_clear()

    use_case = deps.get_list_pools_use_case()

    assert [venue.name for venue in use_case._venues] == ["DragonSwap", "Sailor"]
