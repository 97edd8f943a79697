from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class VolatilityLevel(str, Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class Trend(str, Enum):
    UPWARD = "UPWARD"
    DOWNWARD = "DOWNWARD"
    SIDEWAYS = "SIDEWAYS"


@dataclass(frozen=True)
class PricePoint:
    timestamp: int
    open: float
    high: float
    low: float
    close: float
    volume: float | None = None


@dataclass(frozen=True)
class PoolMeta:
    pool_id: str | None
    tvl: float | None
    fee_tier: str | None


@dataclass(frozen=True)
class CandleSeries:
    points: list[PricePoint] = field(default_factory=list)
    pool_meta: PoolMeta | None = None


@dataclass(frozen=True)
class VolatilityInfo:
    value: float
    percentage: float
    level: VolatilityLevel


@dataclass(frozen=True)
class PriceRange:
    min: float
    max: float
    average: float


@dataclass(frozen=True)
class RecommendationContext:
    center_price: float
    suggested_range_width_percent: float
    trend: Trend


@dataclass(frozen=True)
class PriceHistoryResult:
    pair: str
    price_range: PriceRange
    volatility: VolatilityInfo
    data_points: int
    interval_minutes: int
    pool_meta: PoolMeta | None
    recent_prices: list[PricePoint]
    recommendation: RecommendationContext
