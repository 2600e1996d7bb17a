# backend/storage/provider.py
from config import settings
from database import SessionLocal
from storage.memory import MemoryStore
from storage.sql import SqlStore

_memory_store = None


def memory_store() -> MemoryStore:
    global _memory_store
    if _memory_store is None:
        _memory_store = MemoryStore()
    return _memory_store


# FastAPI dependency yielding the configured store for one request
def get_store():
    if settings.STORAGE_BACKEND == "memory":
        yield memory_store()
        return

    db = SessionLocal()
    try:
        yield SqlStore(db)
    finally:
        db.close()
