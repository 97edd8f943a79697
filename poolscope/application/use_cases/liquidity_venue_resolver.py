from __future__ import annotations

import logging

from poolscope.application.ports.market_data_port import MarketDataPort
from poolscope.domain.exceptions import InvalidInputError


logger = logging.getLogger(__name__)


def resolve_liquidity_venue(
    *,
    primary: MarketDataPort,
    secondary: MarketDataPort,
    pool_address: str,
) -> MarketDataPort:
    """Pick the single venue that serves liquidity for ``pool_address``.

    Ownership on the primary venue is authoritative. Ownership lookup errors
    propagate since the fallback decision cannot be trusted without an answer.
    """
    if not pool_address:
        raise InvalidInputError("pool_address is required.")

    if primary.detect_ownership(pool_address=pool_address):
        logger.info("liquidity_venue_resolver: owner venue=%s pool=%s", primary.name, pool_address)
        return primary

    logger.info(
        "liquidity_venue_resolver: fallback venue=%s primary=%s pool=%s",
        secondary.name,
        primary.name,
        pool_address,
    )
    return secondary
