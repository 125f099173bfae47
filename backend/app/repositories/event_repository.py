from __future__ import annotations
from typing import Protocol, List, Optional, Dict, Any
from types import SimpleNamespace
import threading

from sqlalchemy.orm import Session

from ..db import models


class EventRepository(Protocol):
    def get_all_events(self) -> List[Any]: ...
    def get_event(self, event_id: int) -> Optional[Any]: ...
    def get_events_by_date_range(self, start_date: str, end_date: str) -> List[Any]: ...
    def get_recurring_events(self) -> List[Any]: ...
    def create_event(self, data: Dict[str, Any]) -> Any: ...
    def update_event(self, event_id: int, data: Dict[str, Any]) -> Optional[Any]: ...
    def delete_event(self, event_id: int) -> bool: ...


EVENT_COLUMNS = (
    "title",
    "description",
    "date",
    "time",
    "category",
    "recurrence",
    "recurrence_config",
    "original_event_id",
)
DEFAULTS = {"category": "personal", "recurrence": "none"}


def _columns(data: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in data.items() if k in EVENT_COLUMNS}


class SqlAlchemyEventRepository:
    """SQLAlchemy-backed storage bound to one request session."""

    def __init__(self, db: Session):
        self.db = db

    def _ordered(self):
        return self.db.query(models.Event).order_by(models.Event.date, models.Event.time, models.Event.id)

    def get_all_events(self) -> List[models.Event]:
        return self._ordered().all()

    def get_event(self, event_id: int) -> Optional[models.Event]:
        return self.db.get(models.Event, event_id)

    def get_events_by_date_range(self, start_date: str, end_date: str) -> List[models.Event]:
        # ISO dates order lexically, so string bounds are enough
        q = self._ordered()
        q = q.filter(models.Event.date >= start_date)
        q = q.filter(models.Event.date <= end_date)
        return q.all()

    def get_recurring_events(self) -> List[models.Event]:
        return self._ordered().filter(models.Event.recurrence != "none").all()

    def create_event(self, data: Dict[str, Any]) -> models.Event:
        event = models.Event(**{**DEFAULTS, **_columns(data)})
        self.db.add(event)
        self.db.commit()
        self.db.refresh(event)
        return event

    def update_event(self, event_id: int, data: Dict[str, Any]) -> Optional[models.Event]:
        event = self.get_event(event_id)
        if not event:
            return None
        for key, value in _columns(data).items():
            setattr(event, key, value)
        self.db.commit()
        self.db.refresh(event)
        return event

    def delete_event(self, event_id: int) -> bool:
        event = self.get_event(event_id)
        if not event:
            return False
        self.db.delete(event)
        self.db.commit()
        return True


class MemoryEventRepository:
    """Process-local storage for development and tests.

    Ids are sequential from 1 and never reused.
    """

    def __init__(self):
        self._rows: Dict[int, Dict[str, Any]] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    @staticmethod
    def _row(record: Dict[str, Any]) -> SimpleNamespace:
        return SimpleNamespace(**record)

    def _sorted(self, records) -> List[SimpleNamespace]:
        ordered = sorted(records, key=lambda r: (r["date"], r["time"], r["id"]))
        return [self._row(r) for r in ordered]

    def get_all_events(self) -> List[SimpleNamespace]:
        return self._sorted(self._rows.values())

    def get_event(self, event_id: int) -> Optional[SimpleNamespace]:
        record = self._rows.get(event_id)
        return self._row(record) if record else None

    def get_events_by_date_range(self, start_date: str, end_date: str) -> List[SimpleNamespace]:
        return self._sorted(r for r in self._rows.values() if start_date <= r["date"] <= end_date)

    def get_recurring_events(self) -> List[SimpleNamespace]:
        return self._sorted(r for r in self._rows.values() if r["recurrence"] != "none")

    def create_event(self, data: Dict[str, Any]) -> SimpleNamespace:
        with self._lock:
            record = {column: None for column in EVENT_COLUMNS}
            record.update(DEFAULTS)
            record.update(_columns(data))
            record["id"] = self._next_id
            self._next_id += 1
            self._rows[record["id"]] = record
        return self._row(record)

    def update_event(self, event_id: int, data: Dict[str, Any]) -> Optional[SimpleNamespace]:
        with self._lock:
            record = self._rows.get(event_id)
            if record is None:
                return None
            record.update(_columns(data))
        return self._row(record)

    def delete_event(self, event_id: int) -> bool:
        with self._lock:
            return self._rows.pop(event_id, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._rows.clear()
            self._next_id = 1
