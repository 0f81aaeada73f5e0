from app.models.kv_entry import KVEntry
from app.models.base import Base

__all__ = [
    "Base",
    "KVEntry",
]
