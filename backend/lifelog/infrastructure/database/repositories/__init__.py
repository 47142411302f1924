from .record_store import SQLAlchemyRecordStore
from .user_repository import SQLAlchemyUserRepository

__all__ = [
    "SQLAlchemyRecordStore",
    "SQLAlchemyUserRepository",
]
