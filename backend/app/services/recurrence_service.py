"""Write-time recurrence expansion.

A submitted event with a recurrence rule becomes a list of independent
payloads, one per occurrence inside a 12 month horizon. Nothing links the
instances to a rule afterwards: each one is created as an ordinary row.
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, Mapping, Optional

from dateutil.relativedelta import relativedelta

from ..domain.enums import Recurrence, RecurrencePeriod
from ..domain.schemas import RecurrenceConfig

logger = logging.getLogger(__name__)

HORIZON_MONTHS = 12
DATE_FORMAT = "%Y-%m-%d"

_FIXED_STEPS = {
    Recurrence.DAILY.value: relativedelta(days=1),
    Recurrence.WEEKLY.value: relativedelta(weeks=1),
    Recurrence.MONTHLY.value: relativedelta(months=1),
}


def _custom_step(raw_config: Optional[str]) -> relativedelta:
    try:
        config = RecurrenceConfig.parse(raw_config)
    except ValueError:
        logger.debug("Unparseable recurrence config %r, stepping one day", raw_config)
        return relativedelta(days=1)
    unit = config.unit
    if unit is RecurrencePeriod.WEEKS:
        return relativedelta(weeks=config.interval)
    if unit is RecurrencePeriod.MONTHS:
        return relativedelta(months=config.interval)
    return relativedelta(days=config.interval)


def next_step(recurrence: Any, raw_config: Optional[str] = None) -> Optional[relativedelta]:
    """Return the step between two occurrences, or None when the rule is unknown."""
    value = getattr(recurrence, "value", recurrence)
    if value in _FIXED_STEPS:
        return _FIXED_STEPS[value]
    if value == Recurrence.CUSTOM.value:
        return _custom_step(raw_config)
    return None


def expand_recurrence(payload: Mapping[str, Any]) -> List[Dict[str, Any]]:
    """Expand one event payload into every occurrence up to the horizon.

    The input comes back unchanged as the first element. Each following
    instance is a copy with only ``date`` replaced, so ``originalEventId``
    is inherited from the input when it has one. An occurrence falling exactly on the
    horizon is kept. Month steps clamp to the last day of shorter months
    and accumulate, so Jan 31 monthly yields Feb 28, Mar 28, ...
    """
    original = dict(payload)
    recurrence = getattr(original.get("recurrence"), "value", original.get("recurrence"))
    if recurrence in (None, Recurrence.NONE.value):
        return [original]

    try:
        base = date.fromisoformat(original["date"])
    except (KeyError, TypeError, ValueError):
        # no usable start date: submit as-is and let validation reject it
        logger.debug("Cannot expand %s recurrence without a valid date: %r", recurrence, original.get("date"))
        return [original]
    try:
        horizon = base + relativedelta(months=HORIZON_MONTHS)
    except ValueError:
        horizon = date.max
    instances: List[Dict[str, Any]] = [original]

    current = base
    while current <= horizon:
        if current > base:
            instance = dict(original)
            instance["date"] = current.strftime(DATE_FORMAT)
            instances.append(instance)
        # custom configs are re-read every iteration; a bad one only costs a day
        step = next_step(recurrence, original.get("recurrenceConfig"))
        if step is None:
            break
        try:
            current = current + step
        except (OverflowError, ValueError):
            # stepped past the last representable date
            break

    logger.debug("Expanded %s recurrence from %s into %d instances", recurrence, base, len(instances))
    return instances
