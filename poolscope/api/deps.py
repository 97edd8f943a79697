from __future__ import annotations

from functools import lru_cache

from poolscope.api.service import PoolAnalyticsService
from poolscope.application.use_cases.get_candles import GetCandlesUseCase
from poolscope.application.use_cases.get_current_price import GetCurrentPriceUseCase
from poolscope.application.use_cases.get_liquidity import GetLiquidityUseCase
from poolscope.application.use_cases.get_liquidity_chart import GetLiquidityChartUseCase
from poolscope.application.use_cases.get_optimal_range import GetOptimalRangeUseCase
from poolscope.application.use_cases.get_price_history import GetPriceHistoryUseCase
from poolscope.application.use_cases.list_pools import ListPoolsUseCase
from poolscope.core.config import Settings, get_settings
from poolscope.infrastructure.clients.dragonswap_client import (
    DragonSwapClient,
    DragonSwapClientSettings,
)
from poolscope.infrastructure.clients.http_json_client import HttpJsonClient
from poolscope.infrastructure.clients.sailor_client import SailorClient, SailorClientSettings


@lru_cache(maxsize=1)
def _get_settings() -> Settings:
    return get_settings()


@lru_cache(maxsize=1)
def _get_sailor_client() -> SailorClient:
    settings = _get_settings()
    return SailorClient(
        SailorClientSettings(
            api_base=settings.sailor_api_base,
            min_activity_usd=settings.pool_min_activity_usd,
        ),
        HttpJsonClient(timeout_seconds=settings.http_timeout_seconds),
    )


@lru_cache(maxsize=1)
def _get_dragonswap_client() -> DragonSwapClient:
    settings = _get_settings()
    return DragonSwapClient(
        DragonSwapClientSettings(
            api_base=settings.dragonswap_api_base,
            min_activity_usd=settings.pool_min_activity_usd,
        ),
        HttpJsonClient(timeout_seconds=settings.http_timeout_seconds),
    )


def get_list_pools_use_case() -> ListPoolsUseCase:
    return ListPoolsUseCase(
        venues=[_get_dragonswap_client(), _get_sailor_client()],
        max_workers=_get_settings().pool_list_max_workers,
    )


def get_liquidity_use_case() -> GetLiquidityUseCase:
    return GetLiquidityUseCase(primary=_get_dragonswap_client(), secondary=_get_sailor_client())


def get_candles_use_case() -> GetCandlesUseCase:
    return GetCandlesUseCase(price_venue=_get_sailor_client())


def get_optimal_range_use_case() -> GetOptimalRangeUseCase:
    settings = _get_settings()
    return GetOptimalRangeUseCase(
        candles_use_case=get_candles_use_case(),
        default_tick_spacing=settings.default_tick_spacing,
        interval_minutes=settings.optimal_range_interval_minutes,
        window=settings.optimal_range_candles,
    )


@lru_cache(maxsize=1)
def get_pool_analytics_service() -> PoolAnalyticsService:
    candles_use_case = get_candles_use_case()
    liquidity_use_case = get_liquidity_use_case()
    return PoolAnalyticsService(
        list_pools_use_case=get_list_pools_use_case(),
        liquidity_use_case=liquidity_use_case,
        liquidity_chart_use_case=GetLiquidityChartUseCase(liquidity_use_case=liquidity_use_case),
        candles_use_case=candles_use_case,
        price_history_use_case=GetPriceHistoryUseCase(candles_use_case=candles_use_case),
        current_price_use_case=GetCurrentPriceUseCase(candles_use_case=candles_use_case),
        optimal_range_use_case=get_optimal_range_use_case(),
    )
