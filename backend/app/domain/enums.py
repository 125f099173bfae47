"""Domain enumerations for strong typing & validation."""
from enum import Enum

class EventCategory(str, Enum):
    PERSONAL = "personal"
    WORK = "work"
    OTHER = "other"

class Recurrence(str, Enum):
    NONE = "none"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    CUSTOM = "custom"

class RecurrencePeriod(str, Enum):
    DAYS = "days"
    WEEKS = "weeks"
    MONTHS = "months"
