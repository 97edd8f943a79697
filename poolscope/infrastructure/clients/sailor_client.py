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
from poolscope.infrastructure.mappers import sailor_mapper
from poolscope.infrastructure.schemas.sailor import (
    SailorActiveLiquidityPayload,
    SailorPoolListPayload,
)


logger = logging.getLogger(__name__)


SYMBOL_ALIASES = {
    "eth": "weth",
    "btc": "wbtc",
}

KLINE_PATH = "sailor_kline_api/smart_kline"
POOL_LIST_PATH = "sailor_poolapi/getPoolList"
ACTIVE_LIQUIDITY_PATH = "sailor_poolapi/getActiveLiquidity"


def normalize_symbol(symbol: str) -> str:
    key = symbol.strip().lower()
    return SYMBOL_ALIASES.get(key, key)


@dataclass(frozen=True)
class SailorClientSettings:
    api_base: str
    min_activity_usd: float


class SailorClient:
    """Sailor venue: klines, pool listing and active tick liquidity.

    Sailor exposes no per-pool lookup, so it cannot answer ownership questions.
    """

    name = PoolProtocol.SAILOR.value

    def __init__(self, settings: SailorClientSettings, http: HttpJsonClient):
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
        url = f"{self._api_base()}/{KLINE_PATH}/{normalize_symbol(token0)}/{normalize_symbol(token1)}"
        payload = self._get(
            "fetch_candles",
            url,
            params={"interval": interval_minutes, "limit": limit},
        )
        try:
            series = sailor_mapper.map_kline_payload(payload)
        except ValueError as exc:
            raise UpstreamFailureError(self.name, "fetch_candles", str(exc)) from exc

        logger.info(
            "sailor_client: fetched_candles pair=%s/%s interval=%s limit=%s points=%s",
            token0,
            token1,
            interval_minutes,
            limit,
            len(series.points),
        )
        return series

    def list_pools(self) -> list[UnifiedPool]:
        payload = self._get("list_pools", f"{self._api_base()}/{POOL_LIST_PATH}")
        try:
            pools = sailor_mapper.map_pools_payload(SailorPoolListPayload.model_validate(payload))
        except ValueError as exc:
            raise UpstreamFailureError(self.name, "list_pools", str(exc)) from exc

        active = filter_active_pools(pools, self._settings.min_activity_usd)
        logger.info(
            "sailor_client: listed_pools mapped=%s active=%s floor=%s",
            len(pools),
            len(active),
            self._settings.min_activity_usd,
        )
        return active

    def fetch_liquidity(self, *, pool_address: str) -> list[LiquidityTick]:
        payload = self._get(
            "fetch_liquidity",
            f"{self._api_base()}/{ACTIVE_LIQUIDITY_PATH}",
            params={"address": pool_address},
        )
        try:
            parsed = SailorActiveLiquidityPayload.model_validate(payload)
        except ValueError as exc:
            raise UpstreamFailureError(self.name, "fetch_liquidity", str(exc)) from exc
        return sailor_mapper.map_active_liquidity_payload(parsed)

    def detect_ownership(self, *, pool_address: str) -> bool:
        raise CapabilityUnsupportedError(self.name, "detect_ownership")

    def _api_base(self) -> str:
        return self._settings.api_base.rstrip("/")

    def _get(self, operation: str, url: str, params: dict[str, Any] | None = None) -> Any:
        try:
            return self._http.get_json(url, params=params)
        except HttpJsonClientError as exc:
            raise UpstreamFailureError(self.name, operation, str(exc)) from exc
