from .record_store import Record, RecordStore
from .user_repository import UserRepository

__all__ = [
    "Record",
    "RecordStore",
    "UserRepository",
]
