from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


@dataclass(frozen=True)
class Settings:
    sailor_api_base: str
    dragonswap_api_base: str
    http_timeout_seconds: float
    pool_min_activity_usd: float
    default_tick_spacing: int
    optimal_range_interval_minutes: int
    optimal_range_candles: int
    pool_list_max_workers: int


def get_settings() -> Settings:
    return Settings(
        sailor_api_base=_env("SAILOR_API_BASE", "https://asia-southeast1-ktx-finance-2.cloudfunctions.net"),
        dragonswap_api_base=_env("DRAGONSWAP_API_BASE", "https://sei-api.dragonswap.app/api/v1"),
        http_timeout_seconds=float(_env("HTTP_TIMEOUT_SECONDS", "10")),
        pool_min_activity_usd=float(_env("POOL_MIN_ACTIVITY_USD", "1000")),
        default_tick_spacing=int(_env("DEFAULT_TICK_SPACING", "60")),
        optimal_range_interval_minutes=int(_env("OPTIMAL_RANGE_INTERVAL_MINUTES", "15")),
        optimal_range_candles=int(_env("OPTIMAL_RANGE_CANDLES", "30")),
        pool_list_max_workers=int(_env("POOL_LIST_MAX_WORKERS", "4")),
    )
