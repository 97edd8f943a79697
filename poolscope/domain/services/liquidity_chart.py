from __future__ import annotations

import math
from typing import Literal

from poolscope.domain.entities.liquidity import LiquidityChartPoint, LiquidityTick
from poolscope.domain.services.pool_metrics import parse_optional_float
from poolscope.domain.services.tick_math import prices_from_tick


PriceField = Literal["price0", "price1"]
LOG_SCALE_RATIO = 10.0


def build_active_liquidity(
    *,
    ticks: list[LiquidityTick],
    token0_decimals: int,
    token1_decimals: int,
    price_field: PriceField = "price0",
) -> list[LiquidityChartPoint]:
    points: list[LiquidityChartPoint] = []
    for row in ticks:
        liquidity = parse_optional_float(row.liquidity_net)
        if liquidity is None or liquidity == 0:
            continue
        price0, price1 = prices_from_tick(row.tick_idx, token0_decimals, token1_decimals)
        points.append(
            LiquidityChartPoint(
                tick=str(row.tick_idx),
                price=price0 if price_field == "price0" else price1,
                liquidity=abs(liquidity),
            )
        )
    points.sort(key=lambda item: int(item.tick))
    return points


def top_liquidity(points: list[LiquidityChartPoint], top_n: int = 10) -> list[LiquidityChartPoint]:
    if top_n < 1:
        raise ValueError("top_n must be >= 1.")
    return sorted(points, key=lambda item: item.liquidity, reverse=True)[:top_n]


def liquidity_histogram(points: list[LiquidityChartPoint], num_bins: int = 20) -> list[LiquidityChartPoint]:
    if num_bins < 1:
        raise ValueError("num_bins must be >= 1.")
    if not points:
        return []

    prices = sorted(item.price for item in points)
    min_price = prices[0]
    max_price = prices[-1]
    use_log_scale = min_price > 0 and (max_price / min_price) > LOG_SCALE_RATIO

    if use_log_scale:
        log_min = math.log10(min_price)
        step = (math.log10(max_price) - log_min) / num_bins
        edges = [10 ** (log_min + i * step) for i in range(num_bins + 1)]
    else:
        step = (max_price - min_price) / num_bins
        edges = [min_price + i * step for i in range(num_bins + 1)]
    # Float drift must not push the largest price out of the last bin.
    edges[-1] = max_price

    bins: list[LiquidityChartPoint] = []
    for i in range(num_bins):
        start, end = edges[i], edges[i + 1]
        last = i == num_bins - 1
        total = sum(
            item.liquidity
            for item in points
            if start <= item.price < end or (last and item.price == end)
        )
        if total <= 0:
            continue
        center = math.sqrt(start * end) if use_log_scale else (start + end) / 2
        bins.append(LiquidityChartPoint(tick=f"bin_{i}", price=center, liquidity=total))
    return bins
