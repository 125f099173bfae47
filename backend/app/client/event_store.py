"""Client-side event store.

Mirrors what the calendar UI needs from the API: the cached event list,
create/update/delete with user notifications, and a best-effort conflict
check against whatever list is currently loaded. Any httpx client works;
tests hand in FastAPI's TestClient.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, List, Optional

import httpx

from ..services.conflict_service import find_conflicts
from ..services.recurrence_service import expand_recurrence

logger = logging.getLogger(__name__)

EVENTS_KEY = "/api/events"

Notifier = Callable[[str, str, Optional[str]], None]


class ApiError(Exception):
    def __init__(self, status_code: int, detail: Any):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"{status_code}: {detail}")


class QueryCache:
    """Keyed response cache with explicit invalidation."""

    def __init__(self):
        self._entries: Dict[str, Any] = {}

    def get(self, key: str) -> Any:
        return self._entries.get(key)

    def set(self, key: str, value: Any) -> None:
        self._entries[key] = value

    def invalidate(self, key: str) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: str) -> bool:
        return key in self._entries


# one cache per process, like the UI session it stands in for
query_cache = QueryCache()


def log_notifier(title: str, description: str, variant: Optional[str] = None) -> None:
    level = logging.WARNING if variant == "destructive" else logging.INFO
    logger.log(level, "%s: %s", title, description)


def filter_events(events: Iterable[Dict[str, Any]], query: str = "", categories: Optional[Iterable[str]] = None) -> List[Dict[str, Any]]:
    """Case-insensitive search over title and description, limited to the given categories."""
    needle = (query or "").lower()
    allowed = set(categories) if categories is not None else None
    result = []
    for event in events:
        haystacks = [event.get("title") or "", event.get("description") or ""]
        if needle and not any(needle in h.lower() for h in haystacks):
            continue
        if allowed is not None and event.get("category") not in allowed:
            continue
        result.append(event)
    return result


class EventStore:
    def __init__(self, http: httpx.Client, cache: Optional[QueryCache] = None, notify: Optional[Notifier] = None):
        self.http = http
        self.cache = cache if cache is not None else query_cache
        self.notify = notify or log_notifier
        self.is_creating = False
        self.is_updating = False
        self.is_deleting = False

    def _request(self, method: str, url: str, json: Any = None) -> httpx.Response:
        response = self.http.request(method, url, json=json)
        if response.status_code >= 400:
            try:
                body = response.json()
            except ValueError:
                body = response.text
            detail = body.get("detail", body) if isinstance(body, dict) else body
            raise ApiError(response.status_code, detail)
        return response

    @property
    def events(self) -> List[Dict[str, Any]]:
        """Cached event list, fetched from the server when not loaded yet."""
        if EVENTS_KEY not in self.cache:
            return self.refresh()
        return self.cache.get(EVENTS_KEY)

    def refresh(self) -> List[Dict[str, Any]]:
        events = self._request("GET", EVENTS_KEY).json()
        self.cache.set(EVENTS_KEY, events)
        return events

    def _mutate(self, flag: str, action: str, call: Callable[[], Any]) -> Any:
        setattr(self, flag, True)
        try:
            result = call()
        except (ApiError, httpx.HTTPError):
            logger.exception("Failed to %s event", action)
            self.notify("Error", f"Failed to {action} event. Please try again.", "destructive")
            raise
        finally:
            setattr(self, flag, False)
        self.cache.invalidate(EVENTS_KEY)
        self.notify("Success", f"Event {action}d successfully!", None)
        return result

    def create_event(self, payload: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Create the event and every recurrence instance, one request each.

        Stops at the first failure; instances already created stay.
        """
        created = []
        for instance in expand_recurrence(payload):
            response = self._mutate("is_creating", "create", lambda: self._request("POST", EVENTS_KEY, instance))
            created.append(response.json())
        return created

    def update_event(self, event_id: int, **changes: Any) -> Dict[str, Any]:
        response = self._mutate("is_updating", "update", lambda: self._request("PUT", f"{EVENTS_KEY}/{event_id}", changes))
        return response.json()

    def delete_event(self, event_id: int) -> None:
        self._mutate("is_deleting", "delete", lambda: self._request("DELETE", f"{EVENTS_KEY}/{event_id}"))

    def check_conflicts(self, payload: Dict[str, Any], exclude_id: Optional[int] = None) -> List[Dict[str, Any]]:
        """Compare against the loaded list only; an unloaded store reports nothing."""
        loaded = self.cache.get(EVENTS_KEY)
        if not loaded:
            return []
        return find_conflicts(payload, loaded, exclude_id=exclude_id)
