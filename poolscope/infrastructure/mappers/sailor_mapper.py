from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any

from poolscope.domain.entities.liquidity import LiquidityTick
from poolscope.domain.entities.pool import PoolProtocol, Token, UnifiedPool
from poolscope.domain.entities.price_history import CandleSeries, PoolMeta, PricePoint
from poolscope.domain.services.pool_metrics import (
    estimate_apr,
    fee_fraction,
    normalize_fee_tier,
    parse_optional_float,
)
from poolscope.infrastructure.mappers.rows import validate_rows
from poolscope.infrastructure.schemas.sailor import (
    SailorActiveLiquidityPayload,
    SailorKlineMeta,
    SailorPoolListPayload,
    SailorPoolRow,
    SailorTokenRow,
)


logger = logging.getLogger(__name__)

MILLISECONDS_THRESHOLD = 10**12


def _timestamp_seconds(value: Any) -> int | None:
    parsed = parse_optional_float(value)
    if parsed is None or parsed < 0:
        return None
    if parsed >= MILLISECONDS_THRESHOLD:
        parsed = parsed / 1000
    return int(parsed)


def map_kline_row(row: Any) -> PricePoint | None:
    if isinstance(row, (list, tuple)):
        if len(row) < 5:
            return None
        raw_ts, raw_open, raw_high, raw_low, raw_close = row[:5]
        raw_volume = row[5] if len(row) > 5 else None
    elif isinstance(row, Mapping):
        raw_ts = row.get("timestamp")
        raw_open = row.get("open")
        raw_high = row.get("high")
        raw_low = row.get("low")
        raw_close = row.get("close")
        raw_volume = row.get("volume")
    else:
        return None

    timestamp = _timestamp_seconds(raw_ts)
    values = [parse_optional_float(item) for item in (raw_open, raw_high, raw_low, raw_close)]
    if timestamp is None or any(item is None for item in values):
        return None
    open_, high, low, close = values
    return PricePoint(
        timestamp=timestamp,
        open=open_,
        high=high,
        low=low,
        close=close,
        volume=parse_optional_float(raw_volume),
    )


def map_kline_payload(payload: Any) -> CandleSeries:
    meta_raw: Any = None
    if isinstance(payload, list):
        rows = payload
    elif isinstance(payload, Mapping) and isinstance(payload.get("data"), list):
        rows = payload["data"]
        meta_raw = payload.get("meta")
    else:
        preview = str(payload)[:200]
        raise ValueError(f"Unexpected kline response format: {preview}")

    points: list[PricePoint] = []
    for index, row in enumerate(rows):
        point = map_kline_row(row)
        if point is None:
            logger.warning("sailor_mapper: skipped_kline_row index=%s row=%s", index, row)
            continue
        points.append(point)
    points.sort(key=lambda item: item.timestamp)

    pool_meta = None
    if isinstance(meta_raw, Mapping):
        meta = SailorKlineMeta.model_validate(meta_raw)
        pool_meta = PoolMeta(
            pool_id=meta.pool_id,
            tvl=meta.tvl,
            fee_tier=normalize_fee_tier(meta.fee_tier),
        )
    return CandleSeries(points=points, pool_meta=pool_meta)


def _map_token(row: SailorTokenRow) -> Token:
    return Token(
        address=row.id,
        symbol=row.symbol,
        name=row.name,
        decimals=row.decimals,
        verified=row.verified,
    )


def map_pool_row(row: SailorPoolRow) -> UnifiedPool | None:
    if row.token0 is None or row.token1 is None:
        return None

    fee_tier = normalize_fee_tier(row.fee_tier)
    return UnifiedPool(
        id=row.id,
        protocol=PoolProtocol.SAILOR,
        token0=_map_token(row.token0),
        token1=_map_token(row.token1),
        tvl=row.tvl,
        daily_volume=row.day.volume,
        apr=estimate_apr(
            daily_volume=row.day.volume,
            fee=fee_fraction(fee_tier),
            tvl=row.tvl,
            boost_apr=row.boost_apr,
        ),
        fee_tier=fee_tier,
    )


def map_pools_payload(payload: SailorPoolListPayload) -> list[UnifiedPool]:
    """Sailor embeds both tokens in each pool row and reports no APR of its own."""
    pools: list[UnifiedPool] = []
    for row in validate_rows(SailorPoolRow, payload.pool_stats, source="sailor_mapper"):
        pool = map_pool_row(row)
        if pool is None:
            logger.warning("sailor_mapper: dropped_pool_missing_token pool=%s", row.id)
            continue
        pools.append(pool)
    return pools


def map_active_liquidity_payload(payload: SailorActiveLiquidityPayload) -> list[LiquidityTick]:
    # The venue quotes a single price per tick; price1 is not reported.
    return [
        LiquidityTick(
            tick_idx=row.tick,
            liquidity_net=row.liquidity,
            price0=row.price,
            price1="0",
        )
        for row in payload.active_liquidity
    ]
