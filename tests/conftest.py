"""테스트 공통 설정: 인메모리 SQLite 세션, 스냅샷 저장소, 포지션 팩토리."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.broker.base import Position
from app.database import init_db
from app.services.kv_store import KeyValueStore
from app.services.snapshot_store import SnapshotStore


@pytest.fixture
async def session():
    """각 테스트마다 독립적인 인메모리 DB 세션 제공."""
    engine = create_async_engine("sqlite+aiosqlite://", echo=False)

    await init_db(engine)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as sess:
        yield sess

    await engine.dispose()


@pytest.fixture
def kv(session: AsyncSession) -> KeyValueStore:
    return KeyValueStore(session)


@pytest.fixture
def store(kv: KeyValueStore) -> SnapshotStore:
    return SnapshotStore(kv)


def make_position(
    isin: str = "GB1",
    ticker: str = "AAA_EQ",
    current_price: float = 11.0,
    current_value: float = 110.0,
    quantity: float | None = 10.0,
) -> Position:
    return Position(
        ticker=ticker,
        isin=isin,
        name=f"{ticker} plc",
        instrument_currency="GBX",
        current_price=current_price,
        current_value=current_value,
        wallet_currency="GBP",
        quantity=quantity,
    )


def mock_source(positions: list[Position]):
    """get_positions가 고정 목록을 반환하는 mock 소스."""
    source = AsyncMock()
    source.get_positions.return_value = positions
    return source
