from __future__ import annotations

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings

from app.schemas.common import BrokerEnv

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Trading 212 API (HTTP Basic: key:secret)
    t212_api_key: str = ""
    t212_api_secret: str = ""
    t212_env: BrokerEnv = BrokerEnv.LIVE
    http_timeout: float = 30.0

    # Database (key-value 테이블 하나만 사용)
    database_url: str = "sqlite+aiosqlite:///./snapshots.db"

    # Scheduler: UTC 기준 cron. 18시 London 게이트는 CaptureService가 판단
    scheduler_enabled: bool = True
    capture_cron_hour: str = "17,18"
    capture_cron_minute: int = 5
    capture_cron_days: str = "mon-fri"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    @field_validator("t212_env", mode="before")
    @classmethod
    def _normalize_env(cls, value):
        """대소문자 무시, 알 수 없는 값은 live로 대체."""
        if isinstance(value, BrokerEnv):
            return value
        mode = str(value or "live").strip().lower()
        if mode not in {e.value for e in BrokerEnv}:
            logger.warning("알 수 없는 T212_ENV=%r, live로 대체", value)
            return BrokerEnv.LIVE
        return BrokerEnv(mode)

    def has_credentials(self) -> bool:
        return bool(self.t212_api_key and self.t212_api_secret)


settings = Settings()
