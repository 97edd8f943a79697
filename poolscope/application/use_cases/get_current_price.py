from __future__ import annotations

from poolscope.application.dto.price_history import GetCandlesInput, GetCurrentPriceInput
from poolscope.application.use_cases.get_candles import GetCandlesUseCase
from poolscope.domain.entities.price_history import PricePoint
from poolscope.domain.exceptions import NoDataAvailableError


class GetCurrentPriceUseCase:
    def __init__(self, *, candles_use_case: GetCandlesUseCase):
        self._candles_use_case = candles_use_case

    def execute(self, command: GetCurrentPriceInput) -> PricePoint:
        series = self._candles_use_case.execute(
            GetCandlesInput(token0=command.token0, token1=command.token1, interval_minutes=1, limit=1)
        )
        if not series.points:
            raise NoDataAvailableError(f"No current price for {command.token0}/{command.token1}.")
        return series.points[-1]
