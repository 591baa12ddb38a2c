import logging
from datetime import date, datetime, time
from typing import Callable, Mapping, Optional

from timeoff.fields import HONEYPOT_FIELD, REQUIRED_FIELDS, ErrorKind, ValidationResult

logger = logging.getLogger(__name__)

BLOCKED_MESSAGE = "Submission blocked."
MISSING_MESSAGE = "Please complete all required fields."
DATE_ORDER_MESSAGE = "End Date cannot be earlier than Start Date"
TIME_ORDER_MESSAGE = "End Time cannot be earlier than Start Time when dates are the same"


def _parse_date(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.debug(f"Unparseable date {value!r}, skipping order check")
        return None


def _parse_time(value: Optional[str]) -> Optional[time]:
    if not value:
        return None
    try:
        parsed = time.fromisoformat(value)
    except ValueError:
        logger.debug(f"Unparseable time {value!r}, skipping order check")
        return None
    # Form times are local wall-clock values; offsets are not a valid input
    if parsed.tzinfo is not None:
        logger.debug(f"Time {value!r} carries a UTC offset, skipping order check")
        return None
    # Seconds are fixed at zero, whatever the input carried
    return parsed.replace(second=0, microsecond=0)


def check_honeypot(fields: Mapping[str, Optional[str]]) -> ValidationResult:
    if fields.get(HONEYPOT_FIELD):
        return ValidationResult.invalid(ErrorKind.SPAM_BLOCKED, BLOCKED_MESSAGE)
    return ValidationResult.ok()


def check_required(fields: Mapping[str, Optional[str]]) -> ValidationResult:
    for field in REQUIRED_FIELDS:
        if not fields.get(field):
            return ValidationResult.invalid(ErrorKind.MISSING_FIELD, MISSING_MESSAGE, field=field)
    return ValidationResult.ok()


def check_date_order(fields: Mapping[str, Optional[str]]) -> ValidationResult:
    start = _parse_date(fields.get("startDate"))
    end = _parse_date(fields.get("endDate"))
    if start and end and end < start:
        return ValidationResult.invalid(ErrorKind.BAD_DATE_ORDER, DATE_ORDER_MESSAGE)
    return ValidationResult.ok()


def check_time_order(fields: Mapping[str, Optional[str]]) -> ValidationResult:
    """Compare start/end times, but only for same-day requests."""
    start_date = fields.get("startDate")
    end_date = fields.get("endDate")
    if not start_date or not end_date or start_date != end_date:
        return ValidationResult.ok()

    day = _parse_date(start_date)
    start_time = _parse_time(fields.get("startTime"))
    end_time = _parse_time(fields.get("endTime"))
    if day is None or start_time is None or end_time is None:
        return ValidationResult.ok()

    if datetime.combine(day, end_time) < datetime.combine(day, start_time):
        return ValidationResult.invalid(ErrorKind.BAD_TIME_ORDER, TIME_ORDER_MESSAGE)
    return ValidationResult.ok()


# Evaluated in order; the first failure wins
CHECKS: tuple[Callable[[Mapping[str, Optional[str]]], ValidationResult], ...] = (
    check_honeypot,
    check_required,
    check_date_order,
    check_time_order,
)


def validate_fields(fields: Mapping[str, Optional[str]]) -> ValidationResult:
    for check in CHECKS:
        result = check(fields)
        if not result.valid:
            logger.info(f"Validation failed ({result.kind.value}): {result.message}")
            return result
    return ValidationResult.ok()
