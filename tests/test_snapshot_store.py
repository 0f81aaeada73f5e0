"""SnapshotStore 테스트: 인덱스 정렬/중복제거/상한, 손상 복구, 스냅샷 읽기/쓰기."""

from __future__ import annotations

import json
from datetime import date, datetime, timedelta, timezone

import pytest

from app.schemas.snapshot import CloseSnapshot, SnapshotPosition
from app.services.snapshot_store import INDEX_CAP, INDEX_KEY, snapshot_key


def _days(n: int, start: date = date(2023, 1, 1)) -> list[str]:
    return [(start + timedelta(days=i)).isoformat() for i in range(n)]


async def test_read_index_absent(store):
    assert await store.read_index() == []


@pytest.mark.parametrize("raw", ["{not json", '{"a": 1}', '["2024-01-01", 3]', '"2024-01-01"'])
async def test_malformed_index_is_empty(store, kv, raw):
    await kv.put(INDEX_KEY, raw)
    assert await store.read_index() == []


async def test_write_index_dedupes_and_sorts(store, kv):
    written = await store.write_index(["2024-01-03", "2024-01-01", "2024-01-03", "2024-01-02"])
    assert written == ["2024-01-01", "2024-01-02", "2024-01-03"]
    assert json.loads(await kv.get(INDEX_KEY)) == written
    assert await store.read_index() == written


async def test_write_index_keeps_most_recent(store):
    days = _days(INDEX_CAP + 20)
    await store.write_index(list(reversed(days)))
    index = await store.read_index()
    assert len(index) == INDEX_CAP
    assert index == days[-INDEX_CAP:]


async def test_append_to_index(store):
    for day in ["2024-01-05", "2024-01-02", "2024-01-05", "2024-01-03"]:
        await store.append_to_index(day)
    assert await store.read_index() == ["2024-01-02", "2024-01-03", "2024-01-05"]


async def test_append_beyond_cap_drops_oldest(store):
    days = _days(INDEX_CAP)
    await store.write_index(days)
    await store.append_to_index("2030-01-01")
    index = await store.read_index()
    assert len(index) == INDEX_CAP
    assert index[-1] == "2030-01-01"
    assert days[0] not in index
    assert index == sorted(set(index))


async def test_append_recovers_from_malformed_index(store, kv):
    await kv.put(INDEX_KEY, "garbage")
    await store.append_to_index("2024-01-02")
    assert await store.read_index() == ["2024-01-02"]


async def test_snapshot_roundtrip(store, kv):
    snapshot = CloseSnapshot(
        captured_at=datetime(2024, 1, 15, 18, 5, tzinfo=timezone.utc),
        trading_day="2024-01-15",
        positions=[SnapshotPosition(
            ticker="AAA_EQ", isin="GB1", name="AAA plc",
            instrument_currency="GBX", wallet_currency="GBP",
            quantity=None, close_price=0.0, close_value=100.0,
        )],
    )
    assert await store.read_snapshot("2024-01-15") is None
    assert not await store.has_snapshot("2024-01-15")

    await store.write_snapshot("2024-01-15", snapshot)

    assert await store.has_snapshot("2024-01-15")
    assert await kv.get(snapshot_key("2024-01-15")) is not None
    loaded = await store.read_snapshot("2024-01-15")
    assert loaded == snapshot
    assert loaded.positions[0].quantity is None


@pytest.mark.parametrize("trading_day", ["index", "2024-1-5", "../2024-01-15", ""])
async def test_non_date_keys_are_not_snapshots(store, trading_day):
    await store.write_index(["2024-01-15"])

    assert await store.read_snapshot(trading_day) is None
    assert not await store.has_snapshot(trading_day)
