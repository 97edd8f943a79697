from __future__ import annotations

import math

from poolscope.domain.entities.liquidity import TickRange
from poolscope.domain.exceptions import InvalidInputError


LOG_BASE = math.log(1.0001)
Q96 = 2.0 ** 96


def sqrt_price_x96_to_price(sqrt_price_x96: int, token0_decimals: int, token1_decimals: int) -> float:
    """Human price of token0 in token1 units.

    Float approximation for analytics only; never use it for settlement values.
    """
    if sqrt_price_x96 <= 0:
        raise InvalidInputError("sqrt_price_x96 must be positive.")
    sqrt_price = float(sqrt_price_x96) / Q96
    return (sqrt_price * sqrt_price) * (10.0 ** (token0_decimals - token1_decimals))


def tick_to_price(tick: int | float, token0_decimals: int, token1_decimals: int) -> float:
    decimal_adjust = 10.0 ** (token0_decimals - token1_decimals)
    return math.exp(float(tick) * LOG_BASE) * decimal_adjust


def prices_from_tick(tick: int, token0_decimals: int, token1_decimals: int) -> tuple[float, float]:
    price0 = tick_to_price(tick, token0_decimals, token1_decimals)
    return price0, 1.0 / price0


def price_to_tick(price: float, token0_decimals: int, token1_decimals: int) -> int:
    if not math.isfinite(price) or price <= 0:
        raise InvalidInputError(f"price must be a positive finite number, got {price!r}.")
    raw_price = price / (10.0 ** (token0_decimals - token1_decimals))
    if raw_price <= 0 or not math.isfinite(raw_price):
        raise InvalidInputError("price produced invalid raw value.")
    return _round_half_away_from_zero(math.log(raw_price) / LOG_BASE)


def _round_half_away_from_zero(value: float) -> int:
    magnitude = math.floor(abs(value) + 0.5)
    return magnitude if value >= 0 else -magnitude


def align_tick_to_spacing(tick: int, tick_spacing: int) -> int:
    # Symmetric around zero: align(-t) == -align(t); half a spacing goes outward.
    if tick_spacing <= 0:
        raise InvalidInputError("tick_spacing must be positive.")
    remainder = abs(tick) % tick_spacing
    magnitude = abs(tick) - remainder
    if remainder * 2 >= tick_spacing:
        magnitude += tick_spacing
    return magnitude if tick >= 0 else -magnitude


def optimal_tick_range(
    *,
    min_price: float,
    max_price: float,
    tick_spacing: int,
    token0_decimals: int = 18,
    token1_decimals: int = 18,
) -> TickRange:
    if min_price > max_price:
        raise InvalidInputError("min_price must not exceed max_price.")

    lower_tick = align_tick_to_spacing(
        price_to_tick(min_price, token0_decimals, token1_decimals),
        tick_spacing,
    )
    upper_tick = align_tick_to_spacing(
        price_to_tick(max_price, token0_decimals, token1_decimals),
        tick_spacing,
    )
    if lower_tick >= upper_tick:
        upper_tick = lower_tick + tick_spacing

    return TickRange(
        lower_tick=lower_tick,
        upper_tick=upper_tick,
        lower_price=tick_to_price(lower_tick, token0_decimals, token1_decimals),
        upper_price=tick_to_price(upper_tick, token0_decimals, token1_decimals),
        tick_spacing=tick_spacing,
    )
