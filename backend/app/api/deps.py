import os

from fastapi import Depends

from ..db.session import SessionLocal, ensure_tables
from ..repositories.event_repository import MemoryEventRepository, SqlAlchemyEventRepository
from ..services.event_service import EventService
from ..services.conflict_service import ConflictService

EVENT_STORAGE = os.getenv("EVENT_STORAGE", "sql").lower()

# shared across requests; only used when EVENT_STORAGE=memory
memory_repository = MemoryEventRepository()


def get_event_repository():
    if EVENT_STORAGE == "memory":
        yield memory_repository
        return
    ensure_tables()
    db = SessionLocal()
    try:
        yield SqlAlchemyEventRepository(db)
    finally:
        db.close()


def get_event_service(repo=Depends(get_event_repository)) -> EventService:
    return EventService(repo)


def get_conflict_service(repo=Depends(get_event_repository)) -> ConflictService:
    return ConflictService(repo)
