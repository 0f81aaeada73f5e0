from __future__ import annotations

from enum import Enum


class BrokerEnv(str, Enum):
    LIVE = "live"
    DEMO = "demo"


class CaptureOutcome(str, Enum):
    STORED = "STORED"
    SKIPPED = "SKIPPED"
