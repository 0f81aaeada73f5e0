"""도메인 예외. API 레이어에서 HTTP 상태 코드로 변환된다 (app.main 참고)."""

from __future__ import annotations


class TrackerError(Exception):
    """모든 도메인 예외의 기반 클래스."""


class SourceUnavailable(TrackerError):
    """브로커 API가 2xx 이외의 응답을 반환함."""

    def __init__(self, status_code: int, body: str, path: str = ""):
        self.status_code = status_code
        self.body = body
        self.path = path
        super().__init__(f"Trading212 {path or 'request'} failed ({status_code}): {body}")


class MalformedPersistedState(TrackerError):
    """저장된 값을 해석할 수 없음. 인덱스의 경우 빈 목록으로 복구된다."""


class SnapshotNotFound(TrackerError):
    def __init__(self, trading_day: str):
        self.trading_day = trading_day
        super().__init__(f"No snapshot for {trading_day}")


class MissingParameter(TrackerError):
    def __init__(self, name: str, hint: str = ""):
        self.name = name
        super().__init__(f"Missing ?{name}={hint}" if hint else f"Missing ?{name}")
