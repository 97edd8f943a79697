from __future__ import annotations

import logging

from poolscope.application.dto.liquidity import GetOptimalRangeInput
from poolscope.application.dto.price_history import GetCandlesInput
from poolscope.application.use_cases.get_candles import GetCandlesUseCase
from poolscope.domain.entities.liquidity import TickRange
from poolscope.domain.exceptions import InvalidInputError, NoDataAvailableError
from poolscope.domain.services.tick_math import optimal_tick_range


logger = logging.getLogger(__name__)


class GetOptimalRangeUseCase:
    """Liquidity range spanning the recent low/high window of a pair.

    The tick spacing should follow the pool fee tier; callers that do not know
    it get the configured default spacing.
    """

    def __init__(
        self,
        *,
        candles_use_case: GetCandlesUseCase,
        default_tick_spacing: int,
        interval_minutes: int = 15,
        window: int = 30,
    ):
        self._candles_use_case = candles_use_case
        self._default_tick_spacing = default_tick_spacing
        self._interval_minutes = interval_minutes
        self._window = window

    def execute(self, command: GetOptimalRangeInput) -> TickRange:
        tick_spacing = command.tick_spacing if command.tick_spacing is not None else self._default_tick_spacing
        if tick_spacing <= 0:
            raise InvalidInputError("tick_spacing must be positive.")

        series = self._candles_use_case.execute(
            GetCandlesInput(
                token0=command.token0,
                token1=command.token1,
                interval_minutes=self._interval_minutes,
                limit=self._window,
            )
        )
        if not series.points:
            raise NoDataAvailableError(f"No candles to size a range for {command.token0}/{command.token1}.")

        tick_range = optimal_tick_range(
            min_price=min(point.low for point in series.points),
            max_price=max(point.high for point in series.points),
            tick_spacing=tick_spacing,
            token0_decimals=command.token0_decimals,
            token1_decimals=command.token1_decimals,
        )
        logger.info(
            "get_optimal_range: pair=%s/%s candles=%s lower_tick=%s upper_tick=%s spacing=%s",
            command.token0,
            command.token1,
            len(series.points),
            tick_range.lower_tick,
            tick_range.upper_tick,
            tick_spacing,
        )
        return tick_range
