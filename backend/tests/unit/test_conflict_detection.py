from types import SimpleNamespace

from app.services.conflict_service import ConflictService, find_conflicts


def make_event(event_id, date="2025-03-10", time="09:00", title="Test Event"):
    """Helper to create a stored-looking event"""
    return SimpleNamespace(id=event_id, title=title, date=date, time=time, category="personal", recurrence="none")


class FakeEventRepository:
    def __init__(self, events=None):
        self.events = list(events or [])
        self.range_calls = []

    def get_events_by_date_range(self, start_date, end_date):
        self.range_calls.append((start_date, end_date))
        return [e for e in self.events if start_date <= e.date <= end_date]


def test_same_date_and_time_conflicts_both_ways():
    a = make_event(1)
    b = make_event(2)
    assert find_conflicts(a, [b]) == [b]
    assert find_conflicts(b, [a]) == [a]


def test_different_time_or_date_is_not_a_conflict():
    candidate = {"date": "2025-03-10", "time": "09:00"}
    events = [make_event(1, time="09:01"), make_event(2, date="2025-03-11")]
    assert find_conflicts(candidate, events) == []


def test_comparison_is_exact_string_equality():
    candidate = {"date": "2025-03-10", "time": "9:00"}
    assert find_conflicts(candidate, [make_event(1, time="09:00")]) == []


def test_excluded_id_never_conflicts_with_itself():
    existing = make_event(5)
    other = make_event(6)
    candidate = {"date": existing.date, "time": existing.time}
    assert find_conflicts(candidate, [existing, other], exclude_id=5) == [other]


def test_multiple_conflicts_keep_input_order():
    events = [make_event(3), make_event(1, time="10:00"), make_event(2)]
    conflicts = find_conflicts({"date": "2025-03-10", "time": "09:00"}, events)
    assert [e.id for e in conflicts] == [3, 2]


def test_dict_events_are_supported():
    events = [{"id": 1, "date": "2025-03-10", "time": "09:00"}]
    assert find_conflicts({"date": "2025-03-10", "time": "09:00"}, events) == events


def test_service_reads_only_the_candidate_day():
    repo = FakeEventRepository([make_event(1), make_event(2, date="2025-03-11")])
    service = ConflictService(repository=repo)

    conflicts = service.detect_conflicts({"date": "2025-03-10", "time": "09:00"})

    assert [e.id for e in conflicts] == [1]
    assert repo.range_calls == [("2025-03-10", "2025-03-10")]


def test_service_excludes_edited_event():
    repo = FakeEventRepository([make_event(1)])
    service = ConflictService(repository=repo)
    assert service.detect_conflicts(make_event(1), exclude_id=1) == []
