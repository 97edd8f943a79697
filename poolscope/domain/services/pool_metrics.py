from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from typing import Any

from poolscope.domain.entities.pool import UnifiedPool


DEFAULT_TOKEN_DECIMALS = 18
FEE_TIER_NOT_AVAILABLE = "N/A"
FEE_TIER_UNKNOWN = "unknown"
FEE_TIER_DENOMINATOR = Decimal("1000000")


def parse_optional_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(parsed):
        return None
    return parsed


def parse_token_decimals(value: Any) -> int:
    parsed = parse_optional_float(value)
    if parsed is None or not parsed.is_integer():
        return DEFAULT_TOKEN_DECIMALS
    decimals = int(parsed)
    if decimals < 0 or decimals > 255:
        return DEFAULT_TOKEN_DECIMALS
    return decimals


def normalize_fee_tier(value: Any) -> str:
    """Normalize a venue fee into a fraction string such as ``"0.003"``.

    Integers >= 1 are read as hundredths of a basis point (3000 -> 0.003),
    values below 1 as a fraction already, and ``"0.3%"`` style strings as
    percentages. Missing fees map to ``"N/A"``, unreadable ones to ``"unknown"``.
    """
    if value is None:
        return FEE_TIER_NOT_AVAILABLE
    if isinstance(value, bool):
        return FEE_TIER_UNKNOWN

    raw = str(value).strip()
    if not raw:
        return FEE_TIER_NOT_AVAILABLE

    is_percent = raw.endswith("%")
    if is_percent:
        raw = raw[:-1].strip()
    try:
        amount = Decimal(raw)
    except InvalidOperation:
        return FEE_TIER_UNKNOWN
    if not amount.is_finite() or amount < 0:
        return FEE_TIER_UNKNOWN

    if is_percent:
        fraction = amount / Decimal("100")
    elif amount >= 1:
        fraction = amount / FEE_TIER_DENOMINATOR
    else:
        fraction = amount
    return format(fraction.normalize(), "f")


def fee_fraction(fee_tier: str) -> float | None:
    if fee_tier in (FEE_TIER_NOT_AVAILABLE, FEE_TIER_UNKNOWN):
        return None
    return parse_optional_float(fee_tier)


def estimate_apr(
    *,
    daily_volume: float | None,
    fee: float | None,
    tvl: float | None,
    boost_apr: float | None,
) -> float | None:
    """Annualized fee yield plus boost, in percent.

    ``fee`` is the fee fraction (0.003 for a 0.3% tier) and ``boost_apr`` a
    fraction as venues report it, so a 0.3% pool turning its TVL over once a
    day yields ``109.5``.
    """
    boost_component = boost_apr * 100.0 if boost_apr is not None else 0.0
    if daily_volume is None or fee is None or tvl is None:
        return boost_component if boost_apr is not None else None
    if tvl > 0:
        return (daily_volume * fee * 100.0 / tvl) * 365.0 + boost_component
    return boost_component


def passes_floor(value: float | None, floor: float) -> bool:
    # Absent is not zero: it neither passes nor counts as a known low value.
    return value is not None and value > floor


def is_active_pool(pool: UnifiedPool, floor: float) -> bool:
    known = [value for value in (pool.tvl, pool.daily_volume) if value is not None]
    if not known:
        return False
    return all(passes_floor(value, floor) for value in known)


def filter_active_pools(pools: list[UnifiedPool], floor: float) -> list[UnifiedPool]:
    return [pool for pool in pools if is_active_pool(pool, floor)]
