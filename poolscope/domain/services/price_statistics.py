from __future__ import annotations

import math
from collections.abc import Sequence

from poolscope.domain.entities.price_history import (
    PricePoint,
    PriceRange,
    Trend,
    VolatilityInfo,
    VolatilityLevel,
)


LOW_VOLATILITY_MAX = 0.02
MEDIUM_VOLATILITY_MAX = 0.05
HIGH_VOLATILITY_MAX = 0.1
TREND_THRESHOLD = 0.02


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values)


def volatility(closes: Sequence[float]) -> float:
    """Population standard deviation of closes over their mean (coefficient of variation)."""
    if len(closes) < 2:
        return 0.0
    mean = _mean(closes)
    if mean == 0:
        return 0.0
    variance = sum((value - mean) ** 2 for value in closes) / len(closes)
    return abs(math.sqrt(variance) / mean)


def volatility_level(value: float) -> VolatilityLevel:
    if value < LOW_VOLATILITY_MAX:
        return VolatilityLevel.LOW
    if value < MEDIUM_VOLATILITY_MAX:
        return VolatilityLevel.MEDIUM
    return VolatilityLevel.HIGH


def suggested_range_width_percent(value: float) -> float:
    if value < LOW_VOLATILITY_MAX:
        return 5.0
    if value < MEDIUM_VOLATILITY_MAX:
        return 10.0
    if value < HIGH_VOLATILITY_MAX:
        return 20.0
    return 30.0


def trend(closes: Sequence[float]) -> Trend:
    if len(closes) < 2:
        return Trend.SIDEWAYS

    # Leading third vs trailing third; the middle is left out. Two points
    # still compare first against last.
    first_mean = _mean(closes[: max(1, len(closes) // 3)])
    last_mean = _mean(closes[len(closes) * 2 // 3 :])
    if first_mean == 0:
        return Trend.SIDEWAYS

    change = (last_mean - first_mean) / first_mean
    if change > TREND_THRESHOLD:
        return Trend.UPWARD
    if change < -TREND_THRESHOLD:
        return Trend.DOWNWARD
    return Trend.SIDEWAYS


def build_volatility_info(closes: Sequence[float]) -> VolatilityInfo:
    value = volatility(closes)
    return VolatilityInfo(
        value=value,
        percentage=value * 100.0,
        level=volatility_level(value),
    )


def build_price_range(points: Sequence[PricePoint]) -> PriceRange:
    if not points:
        raise ValueError("points must not be empty.")
    return PriceRange(
        min=min(point.low for point in points),
        max=max(point.high for point in points),
        average=_mean([point.close for point in points]),
    )
