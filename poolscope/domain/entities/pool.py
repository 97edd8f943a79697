from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PoolProtocol(str, Enum):
    SAILOR = "Sailor"
    DRAGONSWAP = "DragonSwap"


@dataclass(frozen=True)
class Token:
    address: str
    symbol: str
    name: str
    decimals: int
    verified: bool = False


@dataclass(frozen=True)
class UnifiedPool:
    id: str
    protocol: PoolProtocol
    token0: Token
    token1: Token
    tvl: float | None
    daily_volume: float | None
    apr: float | None
    fee_tier: str
