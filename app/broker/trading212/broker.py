from __future__ import annotations

import logging

from app.broker.base import AbstractPositionSource, Position
from app.broker.trading212 import endpoints as ep
from app.broker.trading212.client import Trading212Client
from app.broker.trading212.models import parse_position

logger = logging.getLogger(__name__)


class Trading212Broker(AbstractPositionSource):
    """Trading 212 계좌의 보유 포지션 조회."""

    def __init__(self, client: Trading212Client):
        self._client = client

    async def connect(self) -> None:
        await self._client.open()
        logger.info("Trading212 client ready (%s)", self._client.base_url)

    async def disconnect(self) -> None:
        await self._client.close()

    async def get_positions(self) -> list[Position]:
        data = await self._client.get(ep.POSITIONS_PATH)
        return [parse_position(item) for item in data]
