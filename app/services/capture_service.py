"""일별 종가 스냅샷 캡처 (스케줄) 및 어제 기준선 수동 시드."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta

from app.broker.base import AbstractPositionSource
from app.clock import civil_date, hour_of_day
from app.schemas.common import CaptureOutcome
from app.services.snapshot_builder import build_snapshot
from app.services.snapshot_store import SnapshotStore

logger = logging.getLogger(__name__)

CAPTURE_HOUR = 18  # London 18:xx


@dataclass
class CaptureResult:
    outcome: CaptureOutcome
    reason: str
    trading_day: str | None = None

    @property
    def stored(self) -> bool:
        return self.outcome == CaptureOutcome.STORED


@dataclass
class SeedResult:
    seeded: bool
    trading_day: str
    message: str


class CaptureService:

    def __init__(self, store: SnapshotStore, source: AbstractPositionSource):
        self.store = store
        self.source = source

    async def capture_if_needed(self, scheduled_time: datetime) -> CaptureResult:
        """18시 게이트 → 당일 존재 여부 게이트 → 조회/저장. 예외는 그대로 전파."""
        hour = hour_of_day(scheduled_time)
        if hour != CAPTURE_HOUR:
            return CaptureResult(
                CaptureOutcome.SKIPPED, f"Skip: London hour is {hour}, not {CAPTURE_HOUR}",
            )

        today = civil_date(scheduled_time)
        if await self.store.has_snapshot(today):
            return CaptureResult(
                CaptureOutcome.SKIPPED, f"Skip: snapshot already exists for {today}", today,
            )

        positions = await self.source.get_positions()
        snapshot = build_snapshot(positions, scheduled_time)
        await self.store.write_snapshot(today, snapshot)
        await self.store.append_to_index(today)

        logger.info("Stored close snapshot for %s (%d positions)", today, len(positions))
        return CaptureResult(CaptureOutcome.STORED, f"Stored snapshot for {today}", today)

    async def seed_yesterday(self, now: datetime) -> SeedResult:
        """현재 시세로 '어제' 스냅샷을 만들어 즉시 기준선을 확보한다.

        실제 종가가 아니라 현재가를 어제 종가로 기록하는 근사치다.
        해당 날짜에 스냅샷이 이미 있으면 덮어쓰지 않는다.
        """
        yesterday = civil_date(now - timedelta(hours=24))
        if await self.store.has_snapshot(yesterday):
            return SeedResult(
                False, yesterday, f"Snapshot already exists for {yesterday}. Not overwriting.",
            )

        positions = await self.source.get_positions()
        snapshot = build_snapshot(positions, now).model_copy(update={"trading_day": yesterday})
        await self.store.write_snapshot(yesterday, snapshot)
        await self.store.append_to_index(yesterday)

        logger.warning("Seeded baseline snapshot under %s using current prices", yesterday)
        return SeedResult(True, yesterday, f"Seeded baseline snapshot under {yesterday}.")
