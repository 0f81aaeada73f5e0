from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class DashboardRow(BaseModel):
    name: str = Field(..., description="종목명")
    ticker: str = Field(..., description="종목 티커")
    isin: str = Field(..., description="ISIN")
    instrument_currency: str = Field(..., description="종목 호가 통화")
    wallet_currency: str = Field(..., description="계좌(지갑) 통화")
    quantity: float | None = Field(None, description="보유 수량")

    prev_close_price: float | None = Field(None, description="기준선 종가 (없으면 null)")
    current_price: float = Field(..., description="현재가")
    price_change: float | None = Field(None, description="현재가 - 기준선 종가")
    price_change_pct: float | None = Field(None, description="가격 변화율 (%), 기준선 종가가 0이면 null")

    prev_close_value: float | None = Field(None, description="기준선 평가금액 (지갑 통화)")
    current_value: float = Field(..., description="현재 평가금액 (지갑 통화)")
    value_change: float | None = Field(None, description="현재 평가금액 - 기준선 평가금액")
    value_change_pct: float | None = Field(None, description="평가금액 변화율 (%), 기준선이 0이면 null")


class DashboardResponse(BaseModel):
    """실시간 포지션 vs 직전 거래일 종가 비교."""
    as_of: datetime = Field(..., description="조회 시각 (UTC)")
    today: str = Field(..., description="London 기준 오늘 날짜")
    baseline_date: str | None = Field(None, description="비교 기준 거래일 (없으면 null)")
    baseline_captured_at: datetime | None = Field(None, description="기준 스냅샷 캡처 시각")
    total_value_change: float = Field(0.0, description="종목별 평가금액 변화 합계 (기준선 없는 종목은 0)")
    rows: list[DashboardRow] = Field(default_factory=list, description="평가금액 내림차순")


class LivePosition(BaseModel):
    ticker: str
    isin: str
    name: str
    instrument_currency: str
    wallet_currency: str
    quantity: float | None = None
    current_price: float
    current_value: float
    average_price_paid: float | None = None
    total_cost: float | None = None
    unrealized_pnl: float | None = None
    fx_impact: float | None = None

    model_config = {"from_attributes": True}


class LivePositionsResponse(BaseModel):
    as_of: datetime
    positions: list[LivePosition]
