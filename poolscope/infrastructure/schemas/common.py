from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from poolscope.domain.services.pool_metrics import parse_optional_float, parse_token_decimals


class WireModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


def optional_float(value: Any) -> float | None:
    return parse_optional_float(value)


def token_decimals(value: Any) -> int:
    return parse_token_decimals(value)


def flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes")
    return bool(value)


def numeric_text(value: Any) -> str:
    if value is None:
        return "0"
    return str(value).strip()


def tick_index(value: Any) -> Any:
    # Ticks arrive as "-887220" as often as -887220.
    if isinstance(value, str):
        return int(value.strip())
    return value
