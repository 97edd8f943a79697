from __future__ import annotations

import pytest

from poolscope.application.dto.liquidity import GetOptimalRangeInput
from poolscope.application.use_cases.get_candles import GetCandlesUseCase
from poolscope.application.use_cases.get_optimal_range import GetOptimalRangeUseCase
from poolscope.domain.entities.price_history import CandleSeries, PricePoint
from poolscope.domain.exceptions import InvalidInputError, NoDataAvailableError
from poolscope.domain.services.tick_math import optimal_tick_range


class FakeCandleVenue:
    name = "Sailor"

    def __init__(self, points: list[PricePoint]):
        self._points = points
        self.calls: list[tuple[int, int]] = []

    def fetch_candles(self, *, token0: str, token1: str, interval_minutes: int, limit: int) -> CandleSeries:
        _ = (token0, token1)
        self.calls.append((interval_minutes, limit))
        return CandleSeries(points=self._points)


def _points() -> list[PricePoint]:
    return [
        PricePoint(timestamp=1, open=1.0, high=1.02, low=0.98, close=1.0),
        PricePoint(timestamp=2, open=1.0, high=1.08, low=0.99, close=1.05),
        PricePoint(timestamp=3, open=1.05, high=1.06, low=0.95, close=0.97),
    ]


def _use_case(venue: FakeCandleVenue, *, default_tick_spacing: int = 60) -> GetOptimalRangeUseCase:
    return GetOptimalRangeUseCase(
        candles_use_case=GetCandlesUseCase(price_venue=venue),
        default_tick_spacing=default_tick_spacing,
    )


def test_range_spans_window_low_and_high():
    venue = FakeCandleVenue(_points())

    result = _use_case(venue).execute(GetOptimalRangeInput(token0="SEI", token1="USDC"))

    assert result == optimal_tick_range(min_price=0.95, max_price=1.08, tick_spacing=60)
    assert result.lower_tick % 60 == 0
    assert result.upper_tick % 60 == 0
    assert venue.calls == [(15, 30)]


def test_explicit_tick_spacing_overrides_default():
    venue = FakeCandleVenue(_points())

    result = _use_case(venue).execute(GetOptimalRangeInput(token0="SEI", token1="USDC", tick_spacing=200))

    assert result.tick_spacing == 200
    assert result.lower_tick % 200 == 0
    assert result.upper_tick > result.lower_tick


def test_non_positive_spacing_is_rejected_before_fetch():
    venue = FakeCandleVenue(_points())

    with pytest.raises(InvalidInputError):
        _use_case(venue).execute(GetOptimalRangeInput(token0="SEI", token1="USDC", tick_spacing=0))

    assert venue.calls == []


def test_no_candles_is_no_data():
    with pytest.raises(NoDataAvailableError):
        _use_case(FakeCandleVenue([])).execute(GetOptimalRangeInput(token0="SEI", token1="USDC"))
