from __future__ import annotations

from fastapi import APIRouter, Depends

from app.api.deps import position_source, snapshot_store
from app.broker.base import AbstractPositionSource
from app.clock import utc_now
from app.schemas.dashboard import DashboardResponse
from app.services.dashboard_service import DashboardService
from app.services.snapshot_store import SnapshotStore

router = APIRouter(tags=["dashboard"])


@router.get(
    "/dashboard",
    response_model=DashboardResponse,
    summary="일간 손익 대시보드",
    description="실시간 포지션을 직전 거래일 종가 스냅샷과 ISIN 기준으로 비교합니다. "
                "기준선이 없는 종목의 변화 필드는 null이며 합계에는 0으로 반영됩니다.",
)
async def dashboard(
    store: SnapshotStore = Depends(snapshot_store),
    source: AbstractPositionSource = Depends(position_source),
):
    return await DashboardService(store, source).build(utc_now())
