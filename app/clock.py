"""London 기준 거래일 시계.

스냅샷 키(거래일)와 18시 캡처 게이트는 모두 Europe/London 시각으로 판단한다.
서머타임(BST/GMT) 전환은 zoneinfo가 처리한다.
"""

from __future__ import annotations

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

SNAPSHOT_TZ = ZoneInfo("Europe/London")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(instant: datetime) -> datetime:
    """naive datetime은 UTC로 간주한다."""
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def civil_date(instant: datetime) -> str:
    """instant의 London 날짜 (YYYY-MM-DD)."""
    return as_utc(instant).astimezone(SNAPSHOT_TZ).strftime("%Y-%m-%d")


def hour_of_day(instant: datetime) -> int:
    """instant의 London 시각 (0-23)."""
    return as_utc(instant).astimezone(SNAPSHOT_TZ).hour
