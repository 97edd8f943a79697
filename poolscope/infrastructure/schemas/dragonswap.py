from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, Field, field_validator

from poolscope.infrastructure.schemas.common import (
    WireModel,
    flag,
    numeric_text,
    optional_float,
    tick_index,
    token_decimals,
)


class DragonSwapTokenRow(WireModel):
    address: str
    symbol: str = ""
    name: str = ""
    decimals: int = 18
    verified: bool = Field(default=False, validation_alias=AliasChoices("verified", "is_verified"))

    @field_validator("decimals", mode="before")
    @classmethod
    def _decimals(cls, value: Any) -> int:
        return token_decimals(value)

    @field_validator("verified", mode="before")
    @classmethod
    def _verified(cls, value: Any) -> bool:
        return flag(value)


class DragonSwapPoolRow(WireModel):
    pool_address: str = Field(validation_alias=AliasChoices("pool_address", "poolAddress"))
    token0_address: str | None = None
    token1_address: str | None = None
    pool_type: str = Field(default="", validation_alias=AliasChoices("type", "pool_type"))
    daily_volume: float | None = None
    liquidity: float | None = None
    fee_tier: Any = None
    apr: float | None = None

    @field_validator("daily_volume", "liquidity", "apr", mode="before")
    @classmethod
    def _optional_float(cls, value: Any) -> float | None:
        return optional_float(value)


class DragonSwapPoolsPayload(WireModel):
    """``/pools`` body: a token directory plus a flat pool list, both validated per row."""

    status: str = ""
    tokens: list[Any] = Field(default_factory=list)
    pools: list[Any] = Field(default_factory=list)


class DragonSwapTickRow(WireModel):
    tick_idx: int = Field(validation_alias=AliasChoices("tickIdx", "tick_idx"))
    liquidity_net: str = Field(default="0", validation_alias=AliasChoices("liquidityNet", "liquidity_net"))
    price0: str = "0"
    price1: str = "0"

    @field_validator("tick_idx", mode="before")
    @classmethod
    def _tick_idx(cls, value: Any) -> Any:
        return tick_index(value)

    @field_validator("liquidity_net", "price0", "price1", mode="before")
    @classmethod
    def _numeric_text(cls, value: Any) -> str:
        return numeric_text(value)


class DragonSwapTicksData(WireModel):
    ticks: list[DragonSwapTickRow] = Field(default_factory=list)


class DragonSwapTicksPayload(WireModel):
    data: DragonSwapTicksData = Field(default_factory=DragonSwapTicksData)
