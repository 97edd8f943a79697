from __future__ import annotations

import httpx
import pytest

from poolscope.domain.exceptions import CapabilityUnsupportedError, UpstreamFailureError
from poolscope.infrastructure.clients.dragonswap_client import (
    DragonSwapClient,
    DragonSwapClientSettings,
)
from poolscope.infrastructure.clients.http_json_client import HttpJsonClient, HttpJsonClientError
from poolscope.infrastructure.clients.sailor_client import (
    SailorClient,
    SailorClientSettings,
    normalize_symbol,
)


SAILOR_API = "https://sailor.test"
DRAGONSWAP_API = "https://dragonswap.test/api/v1"


def _http(handler) -> HttpJsonClient:
    return HttpJsonClient(timeout_seconds=5, transport=httpx.MockTransport(handler))


def _sailor(handler) -> SailorClient:
    return SailorClient(
        SailorClientSettings(api_base=SAILOR_API + "/", min_activity_usd=1000),
        _http(handler),
    )


def _dragonswap(handler) -> DragonSwapClient:
    return DragonSwapClient(
        DragonSwapClientSettings(api_base=DRAGONSWAP_API, min_activity_usd=1000),
        _http(handler),
    )


class TestHttpJsonClient:
    def test_returns_decoded_json(self):
        client = _http(lambda request: httpx.Response(200, json={"ok": True}))

        assert client.get_json("https://x.test/a") == {"ok": True}

    def test_status_error_keeps_status_code(self):
        client = _http(lambda request: httpx.Response(503, text="down"))

        with pytest.raises(HttpJsonClientError) as exc_info:
            client.get_json("https://x.test/a")

        assert exc_info.value.status_code == 503

    def test_invalid_json_is_wrapped(self):
        client = _http(lambda request: httpx.Response(200, text="<html>"))

        with pytest.raises(HttpJsonClientError) as exc_info:
            client.get_json("https://x.test/a")

        assert exc_info.value.status_code is None

    def test_transport_error_is_wrapped(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(HttpJsonClientError):
            _http(handler).get_json("https://x.test/a")

    def test_get_status_does_not_raise_on_error_status(self):
        client = _http(lambda request: httpx.Response(404, json={"error": "missing"}))

        assert client.get_status("https://x.test/a") == 404

    def test_get_status_wraps_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(HttpJsonClientError):
            _http(handler).get_status("https://x.test/a")


def test_normalize_symbol_applies_aliases():
    assert normalize_symbol(" ETH ") == "weth"
    assert normalize_symbol("BTC") == "wbtc"
    assert normalize_symbol("SEI") == "sei"


class TestSailorClient:
    def test_fetch_candles_builds_kline_url(self):
        seen: list[httpx.Request] = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"success": True, "data": [[1700000000, 1, 2, 0.5, 1.5, 10]]})

        series = _sailor(handler).fetch_candles(token0="ETH", token1="USDC", interval_minutes=15, limit=30)

        assert len(series.points) == 1
        request = seen[0]
        assert request.url.path == "/sailor_kline_api/smart_kline/weth/usdc"
        assert request.url.params["interval"] == "15"
        assert request.url.params["limit"] == "30"

    def test_fetch_candles_rejects_unexpected_shape(self):
        client = _sailor(lambda request: httpx.Response(200, json={"error": "rate limited"}))

        with pytest.raises(UpstreamFailureError) as exc_info:
            client.fetch_candles(token0="SEI", token1="USDC", interval_minutes=60, limit=10)

        assert exc_info.value.venue == "Sailor"
        assert exc_info.value.operation == "fetch_candles"

    def test_list_pools_applies_activity_floor(self):
        tokens = {
            "token0": {"id": "0x1", "symbol": "WSEI", "decimals": "18"},
            "token1": {"id": "0x2", "symbol": "USDC", "decimals": "6"},
        }
        payload = {
            "status": "success",
            "poolStats": [
                {"id": "0xbig", "feeTier": "3000", "tvl": 50000, "day": {"volume": 9000}, **tokens},
                {"id": "0xtiny", "feeTier": "3000", "tvl": 10, "day": {"volume": 9000}, **tokens},
                {"id": "0xedge", "feeTier": "3000", "tvl": 1000, "day": {"volume": 9000}, **tokens},
            ],
        }

        def handler(request):
            assert request.url.path == "/sailor_poolapi/getPoolList"
            return httpx.Response(200, json=payload)

        pools = _sailor(handler).list_pools()

        assert [pool.id for pool in pools] == ["0xbig"]

    def test_list_pools_survives_a_pool_with_null_token(self):
        payload = {
            "poolStats": [
                {
                    "id": "p1",
                    "tvl": 50000,
                    "day": {"volume": 9000},
                    "token0": {"id": "0x1", "symbol": "A"},
                    "token1": {"id": "0x2", "symbol": "B"},
                },
                {"id": "p2", "tvl": 50000, "day": {"volume": 9000}, "token0": None, "token1": {"id": "0x2"}},
                {"id": "p3", "tvl": 50000, "token0": {"id": None}, "token1": {"id": "0x2"}},
            ]
        }
        client = _sailor(lambda request: httpx.Response(200, json=payload))

        assert [pool.id for pool in client.list_pools()] == ["p1"]

    def test_fetch_liquidity_queries_active_liquidity(self):
        def handler(request):
            assert request.url.path == "/sailor_poolapi/getActiveLiquidity"
            assert request.url.params["address"] == "0xpool"
            return httpx.Response(
                200,
                json={"status": "success", "active_liquidity": [{"tick": 0, "price": "1.0", "liquidity": "5"}]},
            )

        ticks = _sailor(handler).fetch_liquidity(pool_address="0xpool")

        assert ticks[0].liquidity_net == "5"
        assert ticks[0].price0 == "1.0"

    def test_fetch_liquidity_wraps_schema_failure(self):
        client = _sailor(lambda request: httpx.Response(200, json={"active_liquidity": [{"tick": "x"}]}))

        with pytest.raises(UpstreamFailureError) as exc_info:
            client.fetch_liquidity(pool_address="0xpool")

        assert exc_info.value.operation == "fetch_liquidity"

    def test_detect_ownership_is_unsupported(self):
        def handler(request):
            raise AssertionError("no request expected")

        with pytest.raises(CapabilityUnsupportedError) as exc_info:
            _sailor(handler).detect_ownership(pool_address="0xpool")

        assert exc_info.value.venue == "Sailor"


class TestDragonSwapClient:
    def test_candles_are_unsupported(self):
        client = _dragonswap(lambda request: httpx.Response(200, json={}))

        with pytest.raises(CapabilityUnsupportedError) as exc_info:
            client.fetch_candles(token0="SEI", token1="USDC", interval_minutes=60, limit=10)

        assert exc_info.value.venue == "DragonSwap"

    def test_detect_ownership_true_when_pool_lookup_succeeds(self):
        def handler(request):
            assert request.url.path == "/api/v1/pools/0xds"
            return httpx.Response(200, json={"pool_address": "0xds"})

        assert _dragonswap(handler).detect_ownership(pool_address="0xds") is True

    def test_detect_ownership_false_on_client_error(self):
        client = _dragonswap(lambda request: httpx.Response(404, json={"error": "not found"}))

        assert client.detect_ownership(pool_address="0xother") is False

    def test_detect_ownership_raises_on_server_error(self):
        client = _dragonswap(lambda request: httpx.Response(500))

        with pytest.raises(UpstreamFailureError) as exc_info:
            client.detect_ownership(pool_address="0xds")

        assert exc_info.value.operation == "detect_ownership"

    def test_detect_ownership_raises_on_transport_error(self):
        def handler(request):
            raise httpx.ConnectTimeout("slow", request=request)

        with pytest.raises(UpstreamFailureError):
            _dragonswap(handler).detect_ownership(pool_address="0xds")

    def test_list_pools_maps_and_filters(self):
        payload = {
            "status": "ok",
            "tokens": [
                {"address": "0x1", "symbol": "WSEI", "decimals": 18},
                {"address": "0x2", "symbol": "USDC", "decimals": 6},
            ],
            "pools": [
                {
                    "pool_address": "0xds",
                    "token0_address": "0x1",
                    "token1_address": "0x2",
                    "type": "V3_POOL",
                    "liquidity": 80000,
                    "daily_volume": 12000,
                    "fee_tier": 3000,
                    "apr": 21.5,
                },
                {
                    "pool_address": "0xempty",
                    "token0_address": "0x1",
                    "token1_address": "0x2",
                    "type": "V3_POOL",
                },
            ],
        }

        def handler(request):
            assert request.url.path == "/api/v1/pools"
            return httpx.Response(200, json=payload)

        pools = _dragonswap(handler).list_pools()

        assert [pool.id for pool in pools] == ["0xds"]
        assert pools[0].apr == 21.5

    def test_list_pools_wraps_transport_failure(self):
        client = _dragonswap(lambda request: httpx.Response(502))

        with pytest.raises(UpstreamFailureError) as exc_info:
            client.list_pools()

        assert exc_info.value.operation == "list_pools"

    def test_list_pools_wraps_schema_failure(self):
        client = _dragonswap(lambda request: httpx.Response(200, json={"pools": "not-a-list"}))

        with pytest.raises(UpstreamFailureError):
            client.list_pools()

    def test_fetch_liquidity_queries_graph_ticks(self):
        def handler(request):
            assert request.url.path == "/api/v1/graph/factory/ticks"
            assert request.url.params["pool_address"] == "0xds"
            assert request.url.params["skip"] == "0"
            return httpx.Response(200, json={"data": {"ticks": [{"tickIdx": "60", "liquidityNet": "7"}]}})

        ticks = _dragonswap(handler).fetch_liquidity(pool_address="0xds")

        assert [tick.tick_idx for tick in ticks] == [60]
        assert ticks[0].liquidity_net == "7"
