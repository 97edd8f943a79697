from __future__ import annotations

from dataclasses import dataclass


MAX_CANDLE_LIMIT = 200
RECENT_PRICES_COUNT = 10


@dataclass(frozen=True)
class GetCandlesInput:
    token0: str
    token1: str
    interval_minutes: int = 1440
    limit: int = MAX_CANDLE_LIMIT


@dataclass(frozen=True)
class GetPriceHistoryInput:
    token0: str
    token1: str
    interval_minutes: int = 1440
    limit: int = MAX_CANDLE_LIMIT


@dataclass(frozen=True)
class GetCurrentPriceInput:
    token0: str
    token1: str
