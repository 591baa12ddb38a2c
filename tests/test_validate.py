import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from timeoff import validate
from timeoff.fields import REQUIRED_FIELDS, ErrorKind


def _fields(**overrides):
    fields = {
        "name": "A",
        "email": "a@b.com",
        "startDate": "2024-05-01",
        "startTime": "09:00",
        "endDate": "2024-05-03",
        "endTime": "17:00",
        "absenceType": "PTO",
        "reason": "trip",
        "website": "",
        "formSecret": "abc123",
    }
    fields.update(overrides)
    return fields


def test_complete_fields_are_valid():
    assert validate.validate_fields(_fields()).valid


def test_each_missing_required_field_is_reported_by_name():
    for field in REQUIRED_FIELDS:
        result = validate.validate_fields(_fields(**{field: ""}))
        assert not result.valid
        assert result.kind == ErrorKind.MISSING_FIELD
        assert result.field == field
        assert result.message == "Please complete all required fields."


def test_first_missing_field_wins_in_fixed_order():
    result = validate.validate_fields(_fields(reason="", email="", endTime=""))
    assert result.field == "email"


def test_absent_field_counts_as_missing():
    fields = _fields()
    del fields["absenceType"]
    result = validate.validate_fields(fields)
    assert result.field == "absenceType"


def test_honeypot_blocks_before_required_check():
    result = validate.validate_fields(_fields(website="http://spam.example", name=""))
    assert result.kind == ErrorKind.SPAM_BLOCKED
    assert result.message == "Submission blocked."


def test_end_date_before_start_date_ignores_times():
    result = validate.validate_fields(
        _fields(startDate="2024-05-02", startTime="09:00", endDate="2024-05-01", endTime="10:00")
    )
    assert result.kind == ErrorKind.BAD_DATE_ORDER
    assert result.message == "End Date cannot be earlier than Start Date"


def test_same_day_end_time_before_start_time():
    result = validate.validate_fields(
        _fields(startDate="2024-05-01", startTime="13:00", endDate="2024-05-01", endTime="09:30")
    )
    assert result.kind == ErrorKind.BAD_TIME_ORDER
    assert result.message == "End Time cannot be earlier than Start Time when dates are the same"


def test_same_day_equal_times_are_allowed():
    result = validate.validate_fields(
        _fields(startDate="2024-05-01", startTime="09:00", endDate="2024-05-01", endTime="09:00")
    )
    assert result.valid


def test_time_order_not_checked_across_days():
    result = validate.validate_fields(
        _fields(startDate="2024-05-01", startTime="17:00", endDate="2024-05-02", endTime="08:00")
    )
    assert result.valid


def test_seconds_are_ignored_in_time_comparison():
    result = validate.check_time_order(
        _fields(startDate="2024-05-01", startTime="09:00:45", endDate="2024-05-01", endTime="09:00:10")
    )
    assert result.valid


def test_unparseable_dates_skip_order_checks():
    assert validate.check_date_order(_fields(startDate="someday", endDate="2024-01-01")).valid
    assert validate.check_time_order(
        _fields(startDate="2024-05-01", endDate="2024-05-01", startTime="noon", endTime="09:00")
    ).valid


def test_times_with_utc_offset_skip_order_check():
    fields = _fields(startDate="2024-05-01", endDate="2024-05-01", startTime="09:00+05:00", endTime="10:00")
    assert validate.check_time_order(fields).valid
    assert validate.validate_fields(fields).valid

    both = _fields(startDate="2024-05-01", endDate="2024-05-01", startTime="11:00Z", endTime="10:00+01:00")
    assert validate.check_time_order(both).valid
