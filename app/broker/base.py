from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class Position:
    """브로커에서 실시간으로 조회한 보유 포지션 (저장하지 않음)."""
    ticker: str
    isin: str
    name: str
    instrument_currency: str
    current_price: float
    current_value: float
    wallet_currency: str
    quantity: float | None = None
    average_price_paid: float | None = None
    total_cost: float | None = None
    unrealized_pnl: float | None = None
    fx_impact: float | None = None


class AbstractPositionSource(ABC):
    """Position source abstraction (live / demo account)."""

    @abstractmethod
    async def connect(self) -> None:
        """Initialize connection."""

    @abstractmethod
    async def disconnect(self) -> None:
        """Clean up resources."""

    @abstractmethod
    async def get_positions(self) -> list[Position]:
        """Fetch all open positions."""
