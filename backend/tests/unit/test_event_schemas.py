import pytest
from pydantic import ValidationError

from app.domain.schemas import EventCreate, EventUpdate, RecurrenceConfig
from app.domain.enums import RecurrencePeriod


def test_create_defaults():
    event = EventCreate(title="Lunch", date="2025-04-01", time="12:30")
    assert event.category == "personal"
    assert event.recurrence == "none"
    assert event.model_dump(by_alias=True)["recurrenceConfig"] is None


def test_create_accepts_camel_case_names():
    event = EventCreate.model_validate(
        {"title": "Run", "date": "2025-04-01", "time": "06:00", "recurrence": "custom",
         "recurrenceConfig": '{"interval": 2, "period": "days"}', "originalEventId": 4}
    )
    assert event.recurrence_config == '{"interval": 2, "period": "days"}'
    assert event.original_event_id == 4


@pytest.mark.parametrize("field,value", [
    ("title", ""),
    ("date", "2025-02-30"),
    ("date", "04/01/2025"),
    ("time", "24:00"),
    ("time", "9:00"),
    ("category", "holiday"),
    ("recurrence", "yearly"),
])
def test_create_rejects_bad_fields(field, value):
    data = {"title": "Run", "date": "2025-04-01", "time": "06:00"}
    data[field] = value
    with pytest.raises(ValidationError):
        EventCreate.model_validate(data)


def test_create_requires_title():
    with pytest.raises(ValidationError) as exc_info:
        EventCreate.model_validate({"date": "2025-04-01", "time": "06:00"})
    assert exc_info.value.errors()[0]["loc"] == ("title",)


def test_create_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        EventCreate.model_validate({"title": "Run", "date": "2025-04-01", "time": "06:00", "color": "red"})


def test_update_reports_only_sent_fields():
    update = EventUpdate.model_validate({"time": "07:15", "description": None})
    assert update.changes() == {"time": "07:15", "description": None}


def test_update_rejects_null_for_required_column():
    with pytest.raises(ValidationError):
        EventUpdate.model_validate({"title": None})


def test_recurrence_config_parsing():
    config = RecurrenceConfig.parse('{"interval": 2, "period": "weeks"}')
    assert (config.interval, config.unit) == (2, RecurrencePeriod.WEEKS)

    assert RecurrenceConfig.parse(None).unit == RecurrencePeriod.DAYS
    assert RecurrenceConfig.parse('{"period": "months"}').interval == 1
    assert RecurrenceConfig.parse("5").interval == 1
    assert RecurrenceConfig.parse('{"interval": -3}').interval == 1

    with pytest.raises(ValueError):
        RecurrenceConfig.parse("{oops")
