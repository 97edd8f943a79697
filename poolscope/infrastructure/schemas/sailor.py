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


class SailorTokenRow(WireModel):
    id: str = Field(validation_alias=AliasChoices("id", "address"))
    symbol: str = ""
    name: str = ""
    decimals: int = 18
    verified: bool = False

    @field_validator("decimals", mode="before")
    @classmethod
    def _decimals(cls, value: Any) -> int:
        return token_decimals(value)

    @field_validator("verified", mode="before")
    @classmethod
    def _verified(cls, value: Any) -> bool:
        return flag(value)


class SailorPeriodStats(WireModel):
    volume: float | None = None

    @field_validator("volume", mode="before")
    @classmethod
    def _volume(cls, value: Any) -> float | None:
        return optional_float(value)


class SailorPoolRow(WireModel):
    id: str
    fee_tier: Any = Field(default=None, validation_alias=AliasChoices("feeTier", "fee_tier"))
    tvl: float | None = None
    boost_apr: float | None = Field(default=None, validation_alias=AliasChoices("boostApr", "boost_apr"))
    day: SailorPeriodStats = Field(default_factory=SailorPeriodStats)
    token0: SailorTokenRow | None = None
    token1: SailorTokenRow | None = None

    @field_validator("tvl", "boost_apr", mode="before")
    @classmethod
    def _optional_float(cls, value: Any) -> float | None:
        return optional_float(value)

    @field_validator("day", mode="before")
    @classmethod
    def _day(cls, value: Any) -> Any:
        return {} if value is None else value


class SailorPoolListPayload(WireModel):
    """``getPoolList`` body. Rows stay raw and are validated one by one."""

    status: str = ""
    pool_stats: list[Any] = Field(
        default_factory=list,
        validation_alias=AliasChoices("poolStats", "pool_stats"),
    )


class SailorActiveLiquidityRow(WireModel):
    tick: int
    price: str = "0"
    liquidity: str = "0"

    @field_validator("tick", mode="before")
    @classmethod
    def _tick(cls, value: Any) -> Any:
        return tick_index(value)

    @field_validator("price", "liquidity", mode="before")
    @classmethod
    def _numeric_text(cls, value: Any) -> str:
        return numeric_text(value)


class SailorActiveLiquidityPayload(WireModel):
    status: str = ""
    active_liquidity: list[SailorActiveLiquidityRow] = Field(
        default_factory=list,
        validation_alias=AliasChoices("active_liquidity", "activeLiquidity"),
    )


class SailorKlineMeta(WireModel):
    pool_id: str | None = None
    tvl: float | None = None
    fee_tier: Any = None

    @field_validator("pool_id", mode="before")
    @classmethod
    def _pool_id(cls, value: Any) -> str | None:
        return str(value) if value is not None else None

    @field_validator("tvl", mode="before")
    @classmethod
    def _tvl(cls, value: Any) -> float | None:
        return optional_float(value)
