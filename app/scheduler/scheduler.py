"""종가 캡처 트리거. cron은 UTC로 등록하고 London 시각 판단은 CaptureService에 맡긴다."""

from __future__ import annotations

import logging

from apscheduler.schedulers.asyncio import AsyncIOScheduler

logger = logging.getLogger(__name__)

_scheduler: AsyncIOScheduler | None = None


def get_scheduler() -> AsyncIOScheduler:
    global _scheduler
    if _scheduler is None:
        _scheduler = AsyncIOScheduler(timezone="UTC")
    return _scheduler


def start_scheduler() -> AsyncIOScheduler:
    scheduler = get_scheduler()
    from app.scheduler.jobs import register_jobs
    register_jobs(scheduler)
    scheduler.start()
    job = scheduler.get_job("close_snapshot")
    logger.info("Scheduler started (next close capture: %s)", job.next_run_time if job else None)
    return scheduler


def shutdown_scheduler() -> None:
    global _scheduler
    if _scheduler is not None and _scheduler.running:
        _scheduler.shutdown(wait=False)
        logger.info("Scheduler stopped")
    _scheduler = None
