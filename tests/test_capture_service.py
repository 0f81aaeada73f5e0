"""CaptureService 테스트: 18시 게이트, 멱등성, 오류 전파, 어제 시드."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from app.exceptions import SourceUnavailable
from app.schemas.common import CaptureOutcome
from app.services.capture_service import CaptureService
from app.services.snapshot_store import snapshot_key

from tests.conftest import make_position, mock_source

UTC = timezone.utc
AT_18 = datetime(2024, 1, 15, 18, 5, tzinfo=UTC)  # GMT → London 18:05


@pytest.mark.asyncio
@pytest.mark.parametrize("hour", [17, 19])
async def test_outside_capture_hour_skips(store, hour):
    source = mock_source([make_position()])
    svc = CaptureService(store, source)

    result = await svc.capture_if_needed(datetime(2024, 1, 15, hour, 5, tzinfo=UTC))

    assert result.outcome == CaptureOutcome.SKIPPED
    assert str(hour) in result.reason
    source.get_positions.assert_not_called()
    assert await store.read_index() == []


@pytest.mark.asyncio
async def test_hour_gate_uses_london_time_in_summer(store):
    svc = CaptureService(store, mock_source([make_position()]))
    # 18:05 UTC = 19:05 BST
    result = await svc.capture_if_needed(datetime(2024, 7, 1, 18, 5, tzinfo=UTC))
    assert result.outcome == CaptureOutcome.SKIPPED

    result = await svc.capture_if_needed(datetime(2024, 7, 1, 17, 5, tzinfo=UTC))
    assert result.stored
    assert result.trading_day == "2024-07-01"


@pytest.mark.asyncio
async def test_stores_snapshot_and_index(store):
    positions = [make_position("GB1", "AAA_EQ", 11.0, 110.0), make_position("US2", "BBB_US_EQ", 5.0, 0.0, quantity=0)]
    svc = CaptureService(store, mock_source(positions))

    result = await svc.capture_if_needed(AT_18)

    assert result.outcome == CaptureOutcome.STORED
    assert result.trading_day == "2024-01-15"
    assert await store.read_index() == ["2024-01-15"]

    snapshot = await store.read_snapshot("2024-01-15")
    assert snapshot.trading_day == "2024-01-15"
    assert snapshot.captured_at == AT_18
    assert [p.isin for p in snapshot.positions] == ["GB1", "US2"]
    assert snapshot.positions[0].close_price == 11.0
    assert snapshot.positions[0].close_value == 110.0
    assert snapshot.positions[1].quantity == 0


@pytest.mark.asyncio
async def test_second_capture_same_day_is_idempotent(store, kv):
    svc = CaptureService(store, mock_source([make_position(current_value=110.0)]))
    await svc.capture_if_needed(AT_18)
    before = await kv.get(snapshot_key("2024-01-15"))

    svc.source = mock_source([make_position(current_value=999.0)])
    result = await svc.capture_if_needed(AT_18.replace(minute=45))

    assert result.outcome == CaptureOutcome.SKIPPED
    assert "already exists" in result.reason
    svc.source.get_positions.assert_not_called()
    assert await kv.get(snapshot_key("2024-01-15")) == before
    assert await store.read_index() == ["2024-01-15"]


@pytest.mark.asyncio
async def test_source_error_propagates_without_persisting(store):
    source = mock_source([])
    source.get_positions.side_effect = SourceUnavailable(503, "maintenance", "/api/v0/equity/positions")
    svc = CaptureService(store, source)

    with pytest.raises(SourceUnavailable) as exc_info:
        await svc.capture_if_needed(AT_18)

    assert exc_info.value.status_code == 503
    assert not await store.has_snapshot("2024-01-15")
    assert await store.read_index() == []


@pytest.mark.asyncio
async def test_seed_writes_yesterday_with_current_prices(store):
    now = datetime(2024, 1, 16, 10, 0, tzinfo=UTC)
    svc = CaptureService(store, mock_source([make_position(current_price=12.0, current_value=120.0)]))

    result = await svc.seed_yesterday(now)

    assert result.seeded
    assert result.trading_day == "2024-01-15"
    snapshot = await store.read_snapshot("2024-01-15")
    assert snapshot.trading_day == "2024-01-15"
    assert snapshot.captured_at == now
    assert snapshot.positions[0].close_value == 120.0
    assert await store.read_index() == ["2024-01-15"]


@pytest.mark.asyncio
async def test_seed_never_overwrites(store, kv):
    now = datetime(2024, 1, 16, 10, 0, tzinfo=UTC)
    svc = CaptureService(store, mock_source([make_position(current_value=120.0)]))
    await svc.seed_yesterday(now)
    before = await kv.get(snapshot_key("2024-01-15"))

    svc.source = mock_source([make_position(current_value=500.0)])
    result = await svc.seed_yesterday(now)

    assert not result.seeded
    assert "Not overwriting" in result.message
    svc.source.get_positions.assert_not_called()
    assert await kv.get(snapshot_key("2024-01-15")) == before


@pytest.mark.asyncio
@pytest.mark.parametrize("hour", [17, 19])
async def test_hour_gate_applies_even_when_snapshot_exists(store, kv, hour):
    await CaptureService(store, mock_source([make_position()])).capture_if_needed(AT_18)
    before = await kv.get(snapshot_key("2024-01-15"))

    source = mock_source([make_position(current_value=999.0)])
    result = await CaptureService(store, source).capture_if_needed(datetime(2024, 1, 15, hour, 5, tzinfo=UTC))

    assert result.outcome == CaptureOutcome.SKIPPED
    assert f"London hour is {hour}" in result.reason
    source.get_positions.assert_not_called()
    assert await kv.get(snapshot_key("2024-01-15")) == before
