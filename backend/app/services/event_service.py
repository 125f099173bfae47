import logging
from typing import Any, Dict, List

from ..repositories.event_repository import EventRepository

logger = logging.getLogger(__name__)

class EventNotFound(Exception):
    pass

class EventService:
    def __init__(self, repository: EventRepository):
        self.repo = repository

    def list_events(self) -> List[Any]:
        return self.repo.get_all_events()

    def list_events_in_range(self, start_date: str, end_date: str) -> List[Any]:
        return self.repo.get_events_by_date_range(start_date, end_date)

    def list_recurring_events(self) -> List[Any]:
        return self.repo.get_recurring_events()

    def get_event(self, event_id: int) -> Any:
        event = self.repo.get_event(event_id)
        if not event:
            raise EventNotFound()
        return event

    def create_event(self, data: Dict[str, Any]) -> Any:
        event = self.repo.create_event(data)
        logger.info("Created event %s on %s %s", event.id, event.date, event.time)
        return event

    def update_event(self, event_id: int, changes: Dict[str, Any]) -> Any:
        event = self.repo.update_event(event_id, changes)
        if not event:
            raise EventNotFound()
        logger.info("Updated event %s (%s)", event_id, ", ".join(sorted(changes)) or "no fields")
        return event

    def delete_event(self, event_id: int) -> None:
        if not self.repo.delete_event(event_id):
            raise EventNotFound()
        logger.info("Deleted event %s", event_id)
