from __future__ import annotations

from datetime import datetime

from app.broker.base import Position
from app.clock import as_utc, civil_date
from app.schemas.snapshot import CloseSnapshot, SnapshotPosition


def build_snapshot(positions: list[Position], captured_at: datetime) -> CloseSnapshot:
    """현재 포지션을 종가 스냅샷으로 변환 (현재가 = 종가, 평가금액 = 종가 평가금액)."""
    return CloseSnapshot(
        captured_at=as_utc(captured_at),
        trading_day=civil_date(captured_at),
        positions=[
            SnapshotPosition(
                ticker=p.ticker,
                isin=p.isin,
                name=p.name,
                instrument_currency=p.instrument_currency,
                wallet_currency=p.wallet_currency,
                quantity=p.quantity,
                close_price=p.current_price,
                close_value=p.current_value,
            )
            for p in positions
        ],
    )
