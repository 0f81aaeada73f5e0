"""실시간 포지션과 직전 거래일 스냅샷을 ISIN으로 조인해 일간 손익을 계산."""

from __future__ import annotations

import logging
from datetime import datetime

from app.broker.base import AbstractPositionSource, Position
from app.clock import as_utc, civil_date
from app.schemas.dashboard import DashboardResponse, DashboardRow
from app.schemas.snapshot import CloseSnapshot
from app.services.baseline import select_baseline
from app.services.snapshot_store import SnapshotStore

logger = logging.getLogger(__name__)


def _change(current: float, previous: float | None) -> tuple[float | None, float | None]:
    """(변화량, 변화율%): 기준값이 없으면 둘 다 None, 기준값이 0이면 변화율만 None."""
    if previous is None:
        return None, None
    diff = current - previous
    pct = None if previous == 0 else diff / previous * 100
    return diff, pct


def aggregate(
    live: list[Position],
    baseline: CloseSnapshot | None,
) -> tuple[list[DashboardRow], float]:
    # 티커는 재사용/중복될 수 있어 ISIN으로 조인
    by_isin = {p.isin: p for p in baseline.positions} if baseline else {}

    rows = []
    for pos in live:
        prev = by_isin.get(pos.isin)
        prev_price = prev.close_price if prev else None
        prev_value = prev.close_value if prev else None
        price_change, price_change_pct = _change(pos.current_price, prev_price)
        value_change, value_change_pct = _change(pos.current_value, prev_value)

        rows.append(DashboardRow(
            name=pos.name,
            ticker=pos.ticker,
            isin=pos.isin,
            instrument_currency=pos.instrument_currency,
            wallet_currency=pos.wallet_currency,
            quantity=pos.quantity,
            prev_close_price=prev_price,
            current_price=pos.current_price,
            price_change=price_change,
            price_change_pct=price_change_pct,
            prev_close_value=prev_value,
            current_value=pos.current_value,
            value_change=value_change,
            value_change_pct=value_change_pct,
        ))

    rows.sort(key=lambda r: r.current_value, reverse=True)
    total_value_change = sum((r.value_change or 0.0 for r in rows), 0.0)
    return rows, total_value_change


class DashboardService:

    def __init__(self, store: SnapshotStore, source: AbstractPositionSource):
        self.store = store
        self.source = source

    async def build(self, now: datetime) -> DashboardResponse:
        today = civil_date(now)
        index = await self.store.read_index()
        baseline_date = select_baseline(index, today)

        live = await self.source.get_positions()

        baseline = None
        if baseline_date:
            baseline = await self.store.read_snapshot(baseline_date)
            if baseline is None:
                logger.warning("인덱스에 %s 가 있으나 스냅샷이 없음", baseline_date)

        rows, total_value_change = aggregate(live, baseline)
        return DashboardResponse(
            as_of=as_utc(now),
            today=today,
            baseline_date=baseline_date,
            baseline_captured_at=baseline.captured_at if baseline else None,
            total_value_change=total_value_change,
            rows=rows,
        )
