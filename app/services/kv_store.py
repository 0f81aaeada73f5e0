"""KV 영속화 서비스. 키 하나당 put 한 번 = 커밋 한 번 (키 단위 원자성)."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.kv_entry import KVEntry


class KeyValueStore:

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, key: str) -> str | None:
        result = await self.session.execute(select(KVEntry.value).where(KVEntry.key == key))
        return result.scalar_one_or_none()

    async def put(self, key: str, value: str) -> None:
        """값 저장 (있으면 덮어쓰기, 없으면 생성)."""
        entry = await self.session.get(KVEntry, key)
        if entry is None:
            entry = KVEntry(key=key, value=value)
            self.session.add(entry)
        else:
            entry.value = value
        await self.session.commit()
