from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from poolscope.domain.entities.liquidity import LiquidityChartPoint, LiquidityTick


@dataclass(frozen=True)
class GetLiquidityInput:
    pool_address: str


@dataclass(frozen=True)
class GetLiquidityOutput:
    venue: str
    ticks: list[LiquidityTick]


@dataclass(frozen=True)
class GetLiquidityChartInput:
    pool_address: str
    token0_decimals: int
    token1_decimals: int
    transform: Literal["active", "top", "histogram"] = "histogram"
    price_field: Literal["price0", "price1"] = "price0"
    num_bins: int = 50
    top_n: int = 10


@dataclass(frozen=True)
class GetLiquidityChartOutput:
    venue: str
    status: str
    active_liquidity: list[LiquidityChartPoint]


@dataclass(frozen=True)
class GetOptimalRangeInput:
    token0: str
    token1: str
    tick_spacing: int | None = None
    token0_decimals: int = 18
    token1_decimals: int = 18
