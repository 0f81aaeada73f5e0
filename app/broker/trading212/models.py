"""Trading 212 응답 → Position 변환."""

from __future__ import annotations

from typing import Any

from app.broker.base import Position


def _opt_float(value: Any) -> float | None:
    return None if value is None else float(value)


def parse_position(raw: dict[str, Any]) -> Position:
    """/equity/positions 항목 하나를 Position으로 변환.

    instrument / walletImpact / currentPrice 가 없으면 KeyError를 그대로 던진다
    (예상치 못한 응답 형식). quantity 는 없거나 0이어도 그대로 둔다.
    """
    instrument = raw["instrument"]
    wallet = raw["walletImpact"]
    return Position(
        ticker=instrument.get("ticker", ""),
        isin=instrument.get("isin", ""),
        name=instrument.get("name", ""),
        instrument_currency=instrument.get("currency", ""),
        current_price=float(raw["currentPrice"]),
        current_value=float(wallet["currentValue"]),
        wallet_currency=wallet.get("currency", ""),
        quantity=_opt_float(raw.get("quantity")),
        average_price_paid=_opt_float(raw.get("averagePricePaid")),
        total_cost=_opt_float(wallet.get("totalCost")),
        unrealized_pnl=_opt_float(wallet.get("unrealizedProfitLoss")),
        fx_impact=_opt_float(wallet.get("fxImpact")),
    )
