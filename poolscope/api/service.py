from __future__ import annotations

from poolscope.application.dto.liquidity import (
    GetLiquidityChartInput,
    GetLiquidityChartOutput,
    GetLiquidityInput,
    GetOptimalRangeInput,
)
from poolscope.application.dto.pools import ListPoolsOutput
from poolscope.application.dto.price_history import (
    GetCandlesInput,
    GetCurrentPriceInput,
    GetPriceHistoryInput,
)
from poolscope.application.use_cases.get_candles import GetCandlesUseCase
from poolscope.application.use_cases.get_current_price import GetCurrentPriceUseCase
from poolscope.application.use_cases.get_liquidity import GetLiquidityUseCase
from poolscope.application.use_cases.get_liquidity_chart import GetLiquidityChartUseCase
from poolscope.application.use_cases.get_optimal_range import GetOptimalRangeUseCase
from poolscope.application.use_cases.get_price_history import GetPriceHistoryUseCase
from poolscope.application.use_cases.list_pools import ListPoolsUseCase
from poolscope.domain.entities.liquidity import LiquidityTick, TickRange
from poolscope.domain.entities.pool import UnifiedPool
from poolscope.domain.entities.price_history import PriceHistoryResult, PricePoint


class PoolAnalyticsService:
    """Operations offered to outer layers (HTTP handlers, agent tools, scripts).

    Inputs are plain values; results are domain dataclasses. Errors are the
    ``poolscope.domain.exceptions`` taxonomy.
    """

    def __init__(
        self,
        *,
        list_pools_use_case: ListPoolsUseCase,
        liquidity_use_case: GetLiquidityUseCase,
        liquidity_chart_use_case: GetLiquidityChartUseCase,
        candles_use_case: GetCandlesUseCase,
        price_history_use_case: GetPriceHistoryUseCase,
        current_price_use_case: GetCurrentPriceUseCase,
        optimal_range_use_case: GetOptimalRangeUseCase,
    ):
        self._list_pools = list_pools_use_case
        self._liquidity = liquidity_use_case
        self._liquidity_chart = liquidity_chart_use_case
        self._candles = candles_use_case
        self._price_history = price_history_use_case
        self._current_price = current_price_use_case
        self._optimal_range = optimal_range_use_case

    def list_pools(self) -> list[UnifiedPool]:
        return self._list_pools.execute().pools

    def list_pools_report(self) -> ListPoolsOutput:
        return self._list_pools.execute()

    def get_liquidity(self, pool_address: str) -> list[LiquidityTick]:
        return self._liquidity.execute(GetLiquidityInput(pool_address=pool_address)).ticks

    def get_liquidity_chart(self, command: GetLiquidityChartInput) -> GetLiquidityChartOutput:
        return self._liquidity_chart.execute(command)

    def get_candles(self, token0: str, token1: str, interval_minutes: int, limit: int) -> list[PricePoint]:
        series = self._candles.execute(
            GetCandlesInput(token0=token0, token1=token1, interval_minutes=interval_minutes, limit=limit)
        )
        return series.points

    def get_price_history_analysis(
        self,
        token0: str,
        token1: str,
        interval_minutes: int,
        limit: int,
    ) -> PriceHistoryResult:
        return self._price_history.execute(
            GetPriceHistoryInput(token0=token0, token1=token1, interval_minutes=interval_minutes, limit=limit)
        )

    def get_current_price(self, token0: str, token1: str) -> PricePoint:
        return self._current_price.execute(GetCurrentPriceInput(token0=token0, token1=token1))

    def get_optimal_range(
        self,
        token0: str,
        token1: str,
        *,
        tick_spacing: int | None = None,
        token0_decimals: int = 18,
        token1_decimals: int = 18,
    ) -> TickRange:
        return self._optimal_range.execute(
            GetOptimalRangeInput(
                token0=token0,
                token1=token1,
                tick_spacing=tick_spacing,
                token0_decimals=token0_decimals,
                token1_decimals=token1_decimals,
            )
        )
