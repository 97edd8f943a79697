from __future__ import annotations

from poolscope.application.dto.price_history import MAX_CANDLE_LIMIT
from poolscope.domain.exceptions import InvalidInputError


def validate_candle_request(
    *,
    token0: str,
    token1: str,
    interval_minutes: int,
    limit: int,
) -> tuple[str, str]:
    token0 = (token0 or "").strip()
    token1 = (token1 or "").strip()
    if not token0 or not token1:
        raise InvalidInputError("token0 and token1 are required.")
    if token0.lower() == token1.lower():
        raise InvalidInputError("token0 and token1 must be different tokens.")
    if interval_minutes < 1:
        raise InvalidInputError("interval_minutes must be a positive integer.")
    if limit < 1 or limit > MAX_CANDLE_LIMIT:
        raise InvalidInputError(f"limit must be between 1 and {MAX_CANDLE_LIMIT}.")
    return token0, token1
