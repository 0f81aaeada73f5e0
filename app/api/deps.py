from __future__ import annotations

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.broker.base import AbstractPositionSource
from app.broker.factory import get_position_source
from app.database import get_session
from app.services.kv_store import KeyValueStore
from app.services.snapshot_store import SnapshotStore


async def position_source() -> AbstractPositionSource:
    return await get_position_source()


async def snapshot_store(session: AsyncSession = Depends(get_session)) -> SnapshotStore:
    return SnapshotStore(KeyValueStore(session))
