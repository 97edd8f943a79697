from __future__ import annotations

import logging

from poolscope.domain.entities.liquidity import LiquidityTick
from poolscope.domain.entities.pool import PoolProtocol, Token, UnifiedPool
from poolscope.domain.services.pool_metrics import normalize_fee_tier
from poolscope.infrastructure.mappers.rows import validate_rows
from poolscope.infrastructure.schemas.dragonswap import (
    DragonSwapPoolRow,
    DragonSwapPoolsPayload,
    DragonSwapTicksPayload,
    DragonSwapTokenRow,
)


logger = logging.getLogger(__name__)

V3_POOL_TYPE = "V3_POOL"


def _map_token(row: DragonSwapTokenRow) -> Token:
    return Token(
        address=row.address,
        symbol=row.symbol,
        name=row.name,
        decimals=row.decimals,
        verified=row.verified,
    )


def map_pools_payload(payload: DragonSwapPoolsPayload) -> list[UnifiedPool]:
    """Join the flat V3 pool list with the token directory.

    Pools with a leg missing from the directory are dropped. APR is the
    venue's own figure; TVL is the reported pool liquidity in USD.
    """
    directory = {
        row.address.lower(): _map_token(row)
        for row in validate_rows(DragonSwapTokenRow, payload.tokens, source="dragonswap_mapper")
    }

    pools: list[UnifiedPool] = []
    skipped_type = 0
    dropped = 0
    for row in validate_rows(DragonSwapPoolRow, payload.pools, source="dragonswap_mapper"):
        if row.pool_type != V3_POOL_TYPE:
            skipped_type += 1
            continue
        token0 = directory.get((row.token0_address or "").lower())
        token1 = directory.get((row.token1_address or "").lower())
        if token0 is None or token1 is None:
            dropped += 1
            logger.warning(
                "dragonswap_mapper: dropped_pool_unknown_token pool=%s token0=%s token1=%s",
                row.pool_address,
                row.token0_address,
                row.token1_address,
            )
            continue
        pools.append(
            UnifiedPool(
                id=row.pool_address,
                protocol=PoolProtocol.DRAGONSWAP,
                token0=token0,
                token1=token1,
                tvl=row.liquidity,
                daily_volume=row.daily_volume,
                apr=row.apr,
                fee_tier=normalize_fee_tier(row.fee_tier),
            )
        )

    logger.info(
        "dragonswap_mapper: pools_mapped kept=%s dropped=%s non_v3=%s",
        len(pools),
        dropped,
        skipped_type,
    )
    return pools


def map_ticks_payload(payload: DragonSwapTicksPayload) -> list[LiquidityTick]:
    return [
        LiquidityTick(
            tick_idx=row.tick_idx,
            liquidity_net=row.liquidity_net,
            price0=row.price0,
            price1=row.price1,
        )
        for row in payload.data.ticks
    ]
