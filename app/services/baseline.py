from __future__ import annotations


def select_baseline(index: list[str], today: str) -> str | None:
    """오름차순 인덱스에서 today 보다 엄격히 이전인 가장 최근 거래일."""
    for trading_day in reversed(index):
        if trading_day < today:
            return trading_day
    return None
