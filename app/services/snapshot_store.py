"""일별 종가 스냅샷과 거래일 인덱스 저장소.

키 구성:
    close:index         거래일 목록 JSON 배열 (중복 제거, 오름차순, 최근 500개)
    close:YYYY-MM-DD    CloseSnapshot JSON

인덱스와 스냅샷은 서로 다른 키라 한 번에 갱신되지 않는다. 인덱스에 날짜를 추가하는
쪽은 반드시 직전에 해당 스냅샷을 저장했거나 이미 존재함을 확인했어야 한다.
"""

from __future__ import annotations

import json
import logging
import re

from app.exceptions import MalformedPersistedState
from app.schemas.snapshot import CloseSnapshot
from app.services.kv_store import KeyValueStore

logger = logging.getLogger(__name__)

INDEX_KEY = "close:index"
INDEX_CAP = 500

_TRADING_DAY_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


def is_trading_day(value: str) -> bool:
    return bool(_TRADING_DAY_RE.fullmatch(value))


def snapshot_key(trading_day: str) -> str:
    return f"close:{trading_day}"


def _decode_index(raw: str) -> list[str]:
    try:
        data = json.loads(raw)
    except ValueError as e:
        raise MalformedPersistedState(f"index is not valid JSON: {e}") from e
    if not isinstance(data, list) or not all(isinstance(d, str) for d in data):
        raise MalformedPersistedState("index is not a list of date strings")
    return data


class SnapshotStore:

    def __init__(self, kv: KeyValueStore):
        self.kv = kv

    async def read_index(self) -> list[str]:
        """저장된 인덱스. 없거나 손상된 경우 빈 목록."""
        raw = await self.kv.get(INDEX_KEY)
        if not raw:
            return []
        try:
            return _decode_index(raw)
        except MalformedPersistedState as e:
            logger.warning("스냅샷 인덱스 손상, 빈 인덱스로 처리: %s", e)
            return []

    async def write_index(self, keys: list[str]) -> list[str]:
        # YYYY-MM-DD 고정 폭이라 문자열 정렬 = 날짜 정렬
        capped = sorted(set(keys))[-INDEX_CAP:]
        await self.kv.put(INDEX_KEY, json.dumps(capped))
        return capped

    async def append_to_index(self, trading_day: str) -> list[str]:
        # read-modify-write, 동시 호출 간 격리되지 않음
        index = await self.read_index()
        index.append(trading_day)
        return await self.write_index(index)

    async def has_snapshot(self, trading_day: str) -> bool:
        if not is_trading_day(trading_day):
            return False
        return bool(await self.kv.get(snapshot_key(trading_day)))

    async def read_snapshot(self, trading_day: str) -> CloseSnapshot | None:
        # YYYY-MM-DD 이외의 키 (예: "index")는 스냅샷이 아님
        if not is_trading_day(trading_day):
            return None
        raw = await self.kv.get(snapshot_key(trading_day))
        if not raw:
            return None
        return CloseSnapshot.model_validate_json(raw)

    async def write_snapshot(self, trading_day: str, snapshot: CloseSnapshot) -> None:
        await self.kv.put(snapshot_key(trading_day), snapshot.model_dump_json())
