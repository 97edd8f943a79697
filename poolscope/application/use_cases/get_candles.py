from __future__ import annotations

from poolscope.application.dto.price_history import GetCandlesInput
from poolscope.application.ports.market_data_port import MarketDataPort
from poolscope.application.use_cases.candle_request import validate_candle_request
from poolscope.domain.entities.price_history import CandleSeries


class GetCandlesUseCase:
    def __init__(self, *, price_venue: MarketDataPort):
        self._price_venue = price_venue

    def execute(self, command: GetCandlesInput) -> CandleSeries:
        token0, token1 = validate_candle_request(
            token0=command.token0,
            token1=command.token1,
            interval_minutes=command.interval_minutes,
            limit=command.limit,
        )
        return self._price_venue.fetch_candles(
            token0=token0,
            token1=token1,
            interval_minutes=command.interval_minutes,
            limit=command.limit,
        )
