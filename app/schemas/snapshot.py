from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class SnapshotPosition(BaseModel):
    ticker: str = Field(..., description="종목 티커")
    isin: str = Field(..., description="ISIN (대시보드 조인 키)")
    name: str = Field(..., description="종목명")
    instrument_currency: str = Field(..., description="종목 호가 통화")
    wallet_currency: str = Field(..., description="계좌(지갑) 통화")
    quantity: float | None = Field(None, description="보유 수량 (브로커 응답 그대로)")
    close_price: float = Field(..., description="캡처 시점 현재가")
    close_value: float = Field(..., description="캡처 시점 평가금액 (지갑 통화)")


class CloseSnapshot(BaseModel):
    """거래일 하나의 종가 스냅샷."""
    captured_at: datetime = Field(..., description="캡처 시각 (UTC)")
    trading_day: str = Field(..., description="London 기준 거래일 (YYYY-MM-DD)")
    positions: list[SnapshotPosition] = Field(default_factory=list, description="종목별 종가")


class SnapshotIndexResponse(BaseModel):
    index: list[str] = Field(..., description="스냅샷이 존재하는 거래일 목록 (오름차순)")


class CaptureResponse(BaseModel):
    outcome: str = Field(..., description="STORED / SKIPPED")
    stored: bool = Field(..., description="이번 호출에서 저장했는지 여부")
    reason: str = Field(..., description="결과 사유")
    trading_day: str | None = Field(None, description="대상 거래일")


class SeedResponse(BaseModel):
    ok: bool = True
    seeded: bool = Field(..., description="새 스냅샷을 저장했는지 여부")
    trading_day: str = Field(..., description="어제(London) 거래일 키")
    message: str
