from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LiquidityTick:
    tick_idx: int
    liquidity_net: str
    price0: str
    price1: str


@dataclass(frozen=True)
class LiquidityChartPoint:
    tick: str
    price: float
    liquidity: float


@dataclass(frozen=True)
class TickRange:
    lower_tick: int
    upper_tick: int
    lower_price: float
    upper_price: float
    tick_spacing: int
