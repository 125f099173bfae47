import pytest
from unittest.mock import Mock

from app.services.event_service import EventService, EventNotFound
from app.repositories.event_repository import MemoryEventRepository


def make_data(**overrides):
    data = {"title": "Dentist", "date": "2025-05-02", "time": "14:00"}
    data.update(overrides)
    return data


def test_create_event_assigns_sequential_ids_and_defaults():
    service = EventService(MemoryEventRepository())

    first = service.create_event(make_data())
    second = service.create_event(make_data(title="Gym"))

    assert (first.id, second.id) == (1, 2)
    assert first.category == "personal"
    assert first.recurrence == "none"
    assert first.description is None


def test_get_event_success():
    repo = Mock()
    event = Mock(id=3)
    repo.get_event.return_value = event
    service = EventService(repo)

    assert service.get_event(3) is event
    repo.get_event.assert_called_once_with(3)


def test_get_event_not_found():
    repo = Mock()
    repo.get_event.return_value = None
    service = EventService(repo)

    with pytest.raises(EventNotFound):
        service.get_event(99)


def test_update_event_applies_only_given_fields():
    service = EventService(MemoryEventRepository())
    created = service.create_event(make_data(description="Checkup"))

    updated = service.update_event(created.id, {"time": "15:30"})

    assert updated.time == "15:30"
    assert updated.title == "Dentist"
    assert updated.description == "Checkup"
    assert updated.id == created.id


def test_update_event_cannot_change_id():
    service = EventService(MemoryEventRepository())
    created = service.create_event(make_data())

    updated = service.update_event(created.id, {"id": 42, "title": "Renamed"})

    assert updated.id == created.id
    with pytest.raises(EventNotFound):
        service.get_event(42)


def test_update_missing_event_raises():
    service = EventService(MemoryEventRepository())
    with pytest.raises(EventNotFound):
        service.update_event(1, {"title": "x"})


def test_delete_event():
    service = EventService(MemoryEventRepository())
    created = service.create_event(make_data())

    service.delete_event(created.id)

    with pytest.raises(EventNotFound):
        service.get_event(created.id)
    with pytest.raises(EventNotFound):
        service.delete_event(created.id)


def test_deleting_source_keeps_generated_instances():
    service = EventService(MemoryEventRepository())
    source = service.create_event(make_data(recurrence="daily"))
    instance = service.create_event(make_data(date="2025-05-03", recurrence="daily", original_event_id=source.id))

    service.delete_event(source.id)

    assert service.get_event(instance.id).original_event_id == source.id
