from __future__ import annotations

import asyncio
import logging

from apscheduler.schedulers.asyncio import AsyncIOScheduler

from app.config import settings
from app.services.capture_service import CaptureResult

logger = logging.getLogger(__name__)


async def _capture(scheduled_time) -> CaptureResult:
    from app.broker.factory import get_position_source
    from app.database import async_session
    from app.services.capture_service import CaptureService
    from app.services.kv_store import KeyValueStore
    from app.services.snapshot_store import SnapshotStore
    source = await get_position_source()
    async with async_session() as session:
        svc = CaptureService(SnapshotStore(KeyValueStore(session)), source)
        return await svc.capture_if_needed(scheduled_time)


async def capture_close_snapshot():
    """London 18시 종가 스냅샷 캡처: 게이트는 CaptureService가 판단."""
    from app.clock import utc_now
    # 캡처를 별도 태스크로 띄우고 완료까지 기다림 (예외는 스케줄러로 전파)
    task = asyncio.create_task(_capture(utc_now()))
    result = await task
    logger.info("[snapshot] %s", result.reason)


def register_jobs(scheduler: AsyncIOScheduler):
    # UTC 17,18시 → GMT/BST 어느 쪽이든 London 18시가 한 번 포함됨
    scheduler.add_job(
        capture_close_snapshot,
        "cron",
        day_of_week=settings.capture_cron_days,
        hour=settings.capture_cron_hour,
        minute=settings.capture_cron_minute,
        id="close_snapshot",
        replace_existing=True,
    )

    logger.info("Registered scheduled jobs")
