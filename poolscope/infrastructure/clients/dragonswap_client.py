from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any

from poolscope.domain.entities.liquidity import LiquidityTick
from poolscope.domain.entities.pool import PoolProtocol, UnifiedPool
from poolscope.domain.entities.price_history import CandleSeries
from poolscope.domain.exceptions import CapabilityUnsupportedError, UpstreamFailureError
from poolscope.domain.services.pool_metrics import filter_active_pools
from poolscope.infrastructure.clients.http_json_client import HttpJsonClient, HttpJsonClientError
from poolscope.infrastructure.mappers import dragonswap_mapper
from poolscope.infrastructure.schemas.dragonswap import (
    DragonSwapPoolsPayload,
    DragonSwapTicksPayload,
)


logger = logging.getLogger(__name__)

TICKS_PATH = "graph/factory/ticks"


@dataclass(frozen=True)
class DragonSwapClientSettings:
    api_base: str
    min_activity_usd: float


class DragonSwapClient:
    """DragonSwap venue: V3 pool listing, graph ticks and pool ownership lookups."""

    name = PoolProtocol.DRAGONSWAP.value

    def __init__(self, settings: DragonSwapClientSettings, http: HttpJsonClient):
        self._settings = settings
        self._http = http

    def fetch_candles(
        self,
        *,
        token0: str,
        token1: str,
        interval_minutes: int,
        limit: int,
    ) -> CandleSeries:
        raise CapabilityUnsupportedError(self.name, "fetch_candles")

    def detect_ownership(self, *, pool_address: str) -> bool:
        url = f"{self._api_base()}/pools/{pool_address}"
        try:
            status = self._http.get_status(url)
        except HttpJsonClientError as exc:
            raise UpstreamFailureError(self.name, "detect_ownership", str(exc)) from exc

        if 200 <= status < 300:
            return True
        if 400 <= status < 500:
            logger.info("dragonswap_client: pool_not_owned pool=%s status=%s", pool_address, status)
            return False
        raise UpstreamFailureError(self.name, "detect_ownership", f"HTTP {status} for {url}")

    def list_pools(self) -> list[UnifiedPool]:
        payload = self._get("list_pools", f"{self._api_base()}/pools")
        try:
            pools = dragonswap_mapper.map_pools_payload(DragonSwapPoolsPayload.model_validate(payload))
        except ValueError as exc:
            raise UpstreamFailureError(self.name, "list_pools", str(exc)) from exc

        active = filter_active_pools(pools, self._settings.min_activity_usd)
        logger.info(
            "dragonswap_client: listed_pools mapped=%s active=%s floor=%s",
            len(pools),
            len(active),
            self._settings.min_activity_usd,
        )
        return active

    def fetch_liquidity(self, *, pool_address: str) -> list[LiquidityTick]:
        payload = self._get(
            "fetch_liquidity",
            f"{self._api_base()}/{TICKS_PATH}",
            params={"pool_address": pool_address, "skip": 0},
        )
        try:
            parsed = DragonSwapTicksPayload.model_validate(payload)
        except ValueError as exc:
            raise UpstreamFailureError(self.name, "fetch_liquidity", str(exc)) from exc
        return dragonswap_mapper.map_ticks_payload(parsed)

    def _api_base(self) -> str:
        return self._settings.api_base.rstrip("/")

    def _get(self, operation: str, url: str, params: dict[str, Any] | None = None) -> Any:
        try:
            return self._http.get_json(url, params=params)
        except HttpJsonClientError as exc:
            raise UpstreamFailureError(self.name, operation, str(exc)) from exc
