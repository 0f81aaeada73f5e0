from __future__ import annotations

from fastapi import APIRouter, Depends

from app.api.deps import position_source
from app.broker.base import AbstractPositionSource
from app.clock import utc_now
from app.schemas.dashboard import LivePosition, LivePositionsResponse

router = APIRouter(tags=["positions"])


@router.get(
    "/live-positions",
    response_model=LivePositionsResponse,
    summary="실시간 보유 포지션 조회",
    description="Trading 212에서 현재 보유 포지션을 그대로 조회합니다. 저장하지 않습니다.",
)
async def live_positions(
    source: AbstractPositionSource = Depends(position_source),
):
    positions = await source.get_positions()
    return LivePositionsResponse(
        as_of=utc_now(),
        positions=[LivePosition.model_validate(p) for p in positions],
    )
