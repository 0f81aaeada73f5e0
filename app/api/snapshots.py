from __future__ import annotations

from fastapi import APIRouter, Depends

from app.api.deps import position_source, snapshot_store
from app.broker.base import AbstractPositionSource
from app.clock import utc_now
from app.exceptions import MissingParameter, SnapshotNotFound
from app.schemas.snapshot import CaptureResponse, CloseSnapshot, SeedResponse, SnapshotIndexResponse
from app.services.capture_service import CaptureService
from app.services.snapshot_store import SnapshotStore

router = APIRouter(tags=["snapshots"])


@router.get(
    "/close/index",
    response_model=SnapshotIndexResponse,
    summary="스냅샷 거래일 목록",
    description="종가 스냅샷이 저장된 London 거래일 목록을 오름차순으로 반환합니다 (최근 500개).",
)
async def close_index(store: SnapshotStore = Depends(snapshot_store)):
    return SnapshotIndexResponse(index=await store.read_index())


@router.get(
    "/close/by-date",
    response_model=CloseSnapshot,
    summary="거래일별 스냅샷 조회",
    description="?date=YYYY-MM-DD 거래일의 종가 스냅샷을 반환합니다. "
                "date 누락 시 400, 스냅샷이 없으면 404.",
)
async def close_by_date(
    date: str | None = None,
    store: SnapshotStore = Depends(snapshot_store),
):
    if not date:
        raise MissingParameter("date", "YYYY-MM-DD")
    snapshot = await store.read_snapshot(date)
    if snapshot is None:
        raise SnapshotNotFound(date)
    return snapshot


@router.post(
    "/close/capture",
    response_model=CaptureResponse,
    summary="종가 스냅샷 캡처 (수동 트리거)",
    description="스케줄러와 동일한 규칙으로 캡처를 시도합니다. London 18시가 아니거나 "
                "당일 스냅샷이 이미 있으면 SKIPPED를 반환합니다.",
)
async def capture_now(
    store: SnapshotStore = Depends(snapshot_store),
    source: AbstractPositionSource = Depends(position_source),
):
    result = await CaptureService(store, source).capture_if_needed(utc_now())
    return CaptureResponse(
        outcome=result.outcome.value,
        stored=result.stored,
        reason=result.reason,
        trading_day=result.trading_day,
    )


@router.api_route(
    "/admin/seed-yesterday",
    methods=["GET", "POST"],
    response_model=SeedResponse,
    summary="어제 기준선 시드",
    description="현재 시세로 '어제'(지금 - 24시간, London) 스냅샷을 저장해 즉시 대시보드 비교가 "
                "가능하게 합니다. 실제 종가가 아닌 근사치이며, 이미 존재하면 덮어쓰지 않습니다.",
)
async def seed_yesterday(
    store: SnapshotStore = Depends(snapshot_store),
    source: AbstractPositionSource = Depends(position_source),
):
    result = await CaptureService(store, source).seed_yesterday(utc_now())
    return SeedResponse(seeded=result.seeded, trading_day=result.trading_day, message=result.message)
