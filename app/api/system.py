from __future__ import annotations

from fastapi import APIRouter

from app.clock import utc_now
from app.config import settings

router = APIRouter(tags=["system"])


@router.get(
    "/health",
    summary="헬스 체크",
    description="서버 구동 상태, 현재 시각(UTC), 브로커 모드(live/demo)를 반환합니다.",
)
async def health():
    return {
        "status": "ok",
        "time": utc_now().isoformat(),
        "env": settings.t212_env.value,
        "version": "0.1.0",
    }
