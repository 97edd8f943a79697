from __future__ import annotations

from dataclasses import dataclass

from poolscope.domain.entities.pool import UnifiedPool
from poolscope.domain.exceptions import AggregationPartialFailureError


@dataclass(frozen=True)
class ListPoolsOutput:
    pools: list[UnifiedPool]
    partial_failure: AggregationPartialFailureError | None = None
