from __future__ import annotations

from typing import Any, Iterable, List, Optional

from ..repositories.event_repository import EventRepository


def _field(item: Any, name: str) -> Any:
    if isinstance(item, dict):
        return item.get(name)
    return getattr(item, name, None)


def find_conflicts(candidate: Any, events: Iterable[Any], exclude_id: Optional[int] = None) -> List[Any]:
    """
    Return the events sharing the candidate's exact ``date`` and ``time``.

    Args:
        candidate: Event payload (dict, schema or ORM row) being submitted
        events: Events to compare against
        exclude_id: Id of the event being edited, never reported against itself

    Returns:
        The conflicting events, in input order
    """
    date, time = _field(candidate, "date"), _field(candidate, "time")
    conflicts = []
    for event in events:
        if exclude_id is not None and _field(event, "id") == exclude_id:
            continue
        if _field(event, "date") == date and _field(event, "time") == time:
            conflicts.append(event)
    return conflicts


class ConflictService:
    """Conflict lookup against the authoritative store rather than a client's copy."""

    def __init__(self, repository: EventRepository):
        self.repo = repository

    def detect_conflicts(self, candidate: Any, exclude_id: Optional[int] = None) -> List[Any]:
        date = _field(candidate, "date")
        same_day = self.repo.get_events_by_date_range(date, date)
        return find_conflicts(candidate, same_day, exclude_id=exclude_id)
