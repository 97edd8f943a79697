from __future__ import annotations

from poolscope.application.dto.liquidity import GetLiquidityInput, GetLiquidityOutput
from poolscope.application.ports.market_data_port import MarketDataPort
from poolscope.application.use_cases.liquidity_venue_resolver import resolve_liquidity_venue
from poolscope.domain.exceptions import NoDataAvailableError


class GetLiquidityUseCase:
    def __init__(self, *, primary: MarketDataPort, secondary: MarketDataPort):
        self._primary = primary
        self._secondary = secondary

    def execute(self, command: GetLiquidityInput) -> GetLiquidityOutput:
        pool_address = command.pool_address.strip()
        venue = resolve_liquidity_venue(
            primary=self._primary,
            secondary=self._secondary,
            pool_address=pool_address,
        )

        ticks = venue.fetch_liquidity(pool_address=pool_address)
        if not ticks:
            raise NoDataAvailableError(f"No liquidity ticks for pool {pool_address} on {venue.name}.")
        return GetLiquidityOutput(venue=venue.name, ticks=ticks)
