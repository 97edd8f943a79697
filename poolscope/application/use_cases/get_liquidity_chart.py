from __future__ import annotations

from poolscope.application.dto.liquidity import (
    GetLiquidityChartInput,
    GetLiquidityChartOutput,
    GetLiquidityInput,
)
from poolscope.application.use_cases.get_liquidity import GetLiquidityUseCase
from poolscope.domain.exceptions import InvalidInputError, NoDataAvailableError
from poolscope.domain.services.liquidity_chart import (
    build_active_liquidity,
    liquidity_histogram,
    top_liquidity,
)


class GetLiquidityChartUseCase:
    def __init__(self, *, liquidity_use_case: GetLiquidityUseCase):
        self._liquidity_use_case = liquidity_use_case

    def execute(self, command: GetLiquidityChartInput) -> GetLiquidityChartOutput:
        if command.transform not in ("active", "top", "histogram"):
            raise InvalidInputError(f"Unknown transform type: {command.transform}")
        if command.price_field not in ("price0", "price1"):
            raise InvalidInputError("price_field must be one of: price0, price1.")
        if command.num_bins < 1 or command.top_n < 1:
            raise InvalidInputError("num_bins and top_n must be >= 1.")

        liquidity = self._liquidity_use_case.execute(GetLiquidityInput(pool_address=command.pool_address))
        points = build_active_liquidity(
            ticks=liquidity.ticks,
            token0_decimals=command.token0_decimals,
            token1_decimals=command.token1_decimals,
            price_field=command.price_field,
        )
        if not points:
            raise NoDataAvailableError("Pool has no initialized liquidity.")

        if command.transform == "top":
            points = top_liquidity(points, command.top_n)
        elif command.transform == "histogram":
            points = liquidity_histogram(points, command.num_bins)

        return GetLiquidityChartOutput(venue=liquidity.venue, status="success", active_liquidity=points)
