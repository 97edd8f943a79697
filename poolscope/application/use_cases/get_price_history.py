from __future__ import annotations

import logging

from poolscope.application.dto.price_history import (
    RECENT_PRICES_COUNT,
    GetCandlesInput,
    GetPriceHistoryInput,
)
from poolscope.application.use_cases.get_candles import GetCandlesUseCase
from poolscope.domain.entities.price_history import PriceHistoryResult, RecommendationContext
from poolscope.domain.exceptions import NoDataAvailableError
from poolscope.domain.services.price_statistics import (
    build_price_range,
    build_volatility_info,
    suggested_range_width_percent,
    trend,
)


logger = logging.getLogger(__name__)


class GetPriceHistoryUseCase:
    def __init__(self, *, candles_use_case: GetCandlesUseCase):
        self._candles_use_case = candles_use_case

    def execute(self, command: GetPriceHistoryInput) -> PriceHistoryResult:
        series = self._candles_use_case.execute(
            GetCandlesInput(
                token0=command.token0,
                token1=command.token1,
                interval_minutes=command.interval_minutes,
                limit=command.limit,
            )
        )
        points = series.points
        if not points:
            raise NoDataAvailableError(
                f"No price history data available for {command.token0}/{command.token1}."
            )

        closes = [point.close for point in points]
        volatility = build_volatility_info(closes)
        price_range = build_price_range(points)
        result = PriceHistoryResult(
            pair=f"{command.token0}/{command.token1}",
            price_range=price_range,
            volatility=volatility,
            data_points=len(points),
            interval_minutes=command.interval_minutes,
            pool_meta=series.pool_meta,
            recent_prices=list(reversed(points[-RECENT_PRICES_COUNT:])),
            recommendation=RecommendationContext(
                center_price=price_range.average,
                suggested_range_width_percent=suggested_range_width_percent(volatility.value),
                trend=trend(closes),
            ),
        )
        logger.info(
            "get_price_history: analyzed pair=%s points=%s volatility=%.6f level=%s trend=%s",
            result.pair,
            result.data_points,
            volatility.value,
            volatility.level.value,
            result.recommendation.trend.value,
        )
        return result
