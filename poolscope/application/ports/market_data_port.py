from __future__ import annotations

from typing import Protocol

from poolscope.domain.entities.liquidity import LiquidityTick
from poolscope.domain.entities.pool import UnifiedPool
from poolscope.domain.entities.price_history import CandleSeries


class MarketDataPort(Protocol):
    """One market-data venue.

    Every operation is part of the contract; a venue that does not offer one
    raises ``CapabilityUnsupportedError`` instead of returning empty data.
    """

    name: str

    def fetch_candles(
        self,
        *,
        token0: str,
        token1: str,
        interval_minutes: int,
        limit: int,
    ) -> CandleSeries:
        ...

    def fetch_liquidity(self, *, pool_address: str) -> list[LiquidityTick]:
        ...

    def list_pools(self) -> list[UnifiedPool]:
        ...

    def detect_ownership(self, *, pool_address: str) -> bool:
        ...
