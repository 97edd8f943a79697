from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
import logging

from poolscope.application.dto.pools import ListPoolsOutput
from poolscope.application.ports.market_data_port import MarketDataPort
from poolscope.domain.entities.pool import UnifiedPool
from poolscope.domain.exceptions import (
    AggregationPartialFailureError,
    DomainError,
    UpstreamFailureError,
)


logger = logging.getLogger(__name__)


class ListPoolsUseCase:
    def __init__(self, *, venues: list[MarketDataPort], max_workers: int = 4):
        self._venues = venues
        self._max_workers = max(1, max_workers)

    def execute(self) -> ListPoolsOutput:
        if not self._venues:
            return ListPoolsOutput(pools=[])

        workers = min(self._max_workers, len(self._venues))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="list-pools") as executor:
            futures = [executor.submit(venue.list_pools) for venue in self._venues]

            pools: list[UnifiedPool] = []
            failures: list[DomainError] = []
            for venue, future in zip(self._venues, futures):
                try:
                    venue_pools = future.result()
                except DomainError as exc:
                    logger.warning("list_pools: venue_failed venue=%s error=%s", venue.name, exc)
                    failures.append(exc)
                    continue
                except Exception as exc:  # noqa: BLE001
                    logger.exception("list_pools: venue_crashed venue=%s", venue.name)
                    failures.append(UpstreamFailureError(venue.name, "list_pools", repr(exc)))
                    continue
                logger.info("list_pools: venue_ok venue=%s pools=%s", venue.name, len(venue_pools))
                pools.extend(venue_pools)

        if not failures:
            return ListPoolsOutput(pools=pools)

        return ListPoolsOutput(pools=pools, partial_failure=AggregationPartialFailureError(failures))
