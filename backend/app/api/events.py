import logging
from contextlib import contextmanager
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response

from .deps import get_conflict_service, get_event_service
from ..domain.schemas import EventCreate, EventOut, EventUpdate
from ..errors import BaseAppException, InternalServerError, NotFoundError, ValidationAppError
from ..services.conflict_service import ConflictService
from ..services.event_service import EventNotFound, EventService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/events", tags=["events"])


@contextmanager
def storage_errors(message: str):
    """Map storage failures to a generic 500; not-found becomes 404."""
    try:
        yield
    except EventNotFound:
        raise NotFoundError("EVENT_NOT_FOUND", "Event not found")
    except BaseAppException:
        raise
    except Exception:
        logger.exception(message)
        raise InternalServerError(message)


def _out(event) -> EventOut:
    return EventOut.model_validate(event)


@router.get("", response_model=List[EventOut])
def list_events(service: EventService = Depends(get_event_service)):
    with storage_errors("Failed to fetch events"):
        return [_out(e) for e in service.list_events()]


@router.get("/range", response_model=List[EventOut])
def list_events_in_range(
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    service: EventService = Depends(get_event_service),
):
    if not start_date or not end_date:
        raise ValidationAppError("DATE_RANGE_REQUIRED", "startDate and endDate are required")
    with storage_errors("Failed to fetch events"):
        return [_out(e) for e in service.list_events_in_range(start_date, end_date)]


@router.get("/recurring", response_model=List[EventOut])
def list_recurring_events(service: EventService = Depends(get_event_service)):
    with storage_errors("Failed to fetch recurring events"):
        return [_out(e) for e in service.list_recurring_events()]


@router.get("/conflicts", response_model=List[EventOut])
def list_conflicts(
    date: Optional[str] = Query(None),
    time: Optional[str] = Query(None),
    exclude_id: Optional[int] = Query(None, alias="excludeId"),
    service: ConflictService = Depends(get_conflict_service),
):
    if not date or not time:
        raise ValidationAppError("CONFLICT_QUERY_REQUIRED", "date and time are required")
    with storage_errors("Failed to check conflicts"):
        candidate = {"date": date, "time": time}
        return [_out(e) for e in service.detect_conflicts(candidate, exclude_id=exclude_id)]


@router.get("/{event_id}", response_model=EventOut)
def get_event(event_id: int, service: EventService = Depends(get_event_service)):
    with storage_errors("Failed to fetch event"):
        return _out(service.get_event(event_id))


@router.post("", response_model=EventOut, status_code=201)
def create_event(body: EventCreate, service: EventService = Depends(get_event_service)):
    with storage_errors("Failed to create event"):
        return _out(service.create_event(body.model_dump()))


@router.put("/{event_id}", response_model=EventOut)
def update_event(event_id: int, body: EventUpdate, service: EventService = Depends(get_event_service)):
    with storage_errors("Failed to update event"):
        return _out(service.update_event(event_id, body.changes()))


@router.delete("/{event_id}", status_code=204)
def delete_event(event_id: int, service: EventService = Depends(get_event_service)):
    with storage_errors("Failed to delete event"):
        service.delete_event(event_id)
    return Response(status_code=204)
