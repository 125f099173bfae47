"""Event payload schemas shared by the API layer and the client store.

Wire names are camelCase (``recurrenceConfig``, ``originalEventId``); the
Python attributes are snake_case. Dates and times stay plain strings, no
timezone information is attached to either.
"""
from __future__ import annotations

from datetime import date as date_type
from typing import Annotated, Any, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, ValidationError, field_validator

from .enums import EventCategory, Recurrence, RecurrencePeriod

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"
TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"

_NON_NULLABLE = ("title", "date", "time", "category", "recurrence")


def _check_calendar_date(value: str) -> str:
    try:
        date_type.fromisoformat(value)
    except ValueError:
        raise ValueError("date must be a valid calendar date (YYYY-MM-DD)")
    return value


CalendarDate = Annotated[str, Field(pattern=DATE_PATTERN), AfterValidator(_check_calendar_date)]
ClockTime = Annotated[str, Field(pattern=TIME_PATTERN)]


class EventCreate(BaseModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    date: CalendarDate
    time: ClockTime
    category: EventCategory = Field(default=EventCategory.PERSONAL.value)
    recurrence: Recurrence = Field(default=Recurrence.NONE.value)
    recurrence_config: Optional[str] = Field(None, alias="recurrenceConfig")
    original_event_id: Optional[int] = Field(None, alias="originalEventId")

    model_config = ConfigDict(populate_by_name=True, extra="forbid", use_enum_values=True)


class EventUpdate(BaseModel):
    """Partial update: every field optional, only the sent ones are applied."""

    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    date: Optional[CalendarDate] = None
    time: Optional[ClockTime] = None
    category: Optional[EventCategory] = None
    recurrence: Optional[Recurrence] = None
    recurrence_config: Optional[str] = Field(None, alias="recurrenceConfig")
    original_event_id: Optional[int] = Field(None, alias="originalEventId")

    model_config = ConfigDict(populate_by_name=True, extra="forbid", use_enum_values=True)

    # defaults are not validated, so this only fires for an explicit null
    @field_validator(*_NON_NULLABLE)
    @classmethod
    def _reject_null(cls, value):
        if value is None:
            raise ValueError("field may be omitted but not null")
        return value

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class EventOut(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    date: str
    time: str
    category: str
    recurrence: str
    recurrence_config: Optional[str] = Field(None, alias="recurrenceConfig")
    original_event_id: Optional[int] = Field(None, alias="originalEventId")

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class RecurrenceConfig(BaseModel):
    """Parsed form of the ``recurrenceConfig`` text column."""

    interval: int = 1
    period: Any = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("interval", mode="before")
    @classmethod
    def _default_interval(cls, value):
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            return 1
        return value

    @property
    def unit(self) -> RecurrencePeriod:
        try:
            return RecurrencePeriod(self.period)
        except ValueError:
            return RecurrencePeriod.DAYS

    @classmethod
    def parse(cls, raw: Optional[str]) -> "RecurrenceConfig":
        """Parse the JSON text; raises ``ValueError`` when it is not JSON at all."""
        if raw is None:
            return cls()
        try:
            return cls.model_validate_json(raw)
        except ValidationError as exc:
            if any(err["type"] == "json_invalid" for err in exc.errors()):
                raise ValueError(f"malformed recurrence config: {raw!r}") from exc
            # valid JSON of the wrong shape, e.g. a bare number
            return cls()
