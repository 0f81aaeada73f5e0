"""Position source factory - one cached source per broker env."""

from __future__ import annotations

from app.broker.base import AbstractPositionSource
from app.schemas.common import BrokerEnv


_source_cache: dict[BrokerEnv, AbstractPositionSource] = {}


async def get_position_source(env: BrokerEnv | None = None) -> AbstractPositionSource:
    """Get or create the position source for the given env (live/demo)."""
    from app.config import settings
    if env is None:
        env = settings.t212_env

    if env not in _source_cache:
        from app.broker.trading212 import endpoints as ep
        from app.broker.trading212.broker import Trading212Broker
        from app.broker.trading212.client import Trading212Client
        client = Trading212Client(
            base_url=ep.BASE_URLS[env],
            api_key=settings.t212_api_key,
            api_secret=settings.t212_api_secret,
            timeout=settings.http_timeout,
        )
        source = Trading212Broker(client)
        await source.connect()
        _source_cache[env] = source

    return _source_cache[env]


async def close_all_sources():
    for source in _source_cache.values():
        await source.disconnect()
    _source_cache.clear()
