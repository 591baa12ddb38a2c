from enum import Enum
from typing import Optional

from pydantic import BaseModel

# Order matters: the first empty field gets focus
REQUIRED_FIELDS = (
    "name",
    "email",
    "startDate",
    "startTime",
    "endDate",
    "endTime",
    "absenceType",
    "reason",
)
HONEYPOT_FIELD = "website"
SECRET_FIELD = "formSecret"
ALL_FIELDS = REQUIRED_FIELDS + (HONEYPOT_FIELD, SECRET_FIELD)


class ErrorKind(str, Enum):
    SPAM_BLOCKED = "spam_blocked"
    MISSING_FIELD = "missing_field"
    BAD_DATE_ORDER = "bad_date_order"
    BAD_TIME_ORDER = "bad_time_order"
    NOT_CONFIGURED = "not_configured"
    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    BAD_RESPONSE = "bad_response"
    APPLICATION = "application"


class StatusStyle(str, Enum):
    NONE = ""
    SUCCESS = "success"
    ERROR = "error"


class ValidationResult(BaseModel):
    valid: bool = True
    message: Optional[str] = None
    kind: Optional[ErrorKind] = None
    field: Optional[str] = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls()

    @classmethod
    def invalid(cls, kind: ErrorKind, message: str, field: str = None) -> "ValidationResult":
        return cls(valid=False, message=message, kind=kind, field=field)


class SubmissionOutcome(BaseModel):
    """Terminal result of one submission attempt.

    ``success`` outcomes may carry the status text that was shown; failures
    always carry a human readable ``message`` and the ``kind`` of error.
    """

    success: bool
    message: Optional[str] = None
    kind: Optional[ErrorKind] = None
    status_code: Optional[int] = None

    @classmethod
    def succeeded(cls, message: str = None) -> "SubmissionOutcome":
        return cls(success=True, message=message)

    @classmethod
    def failed(cls, kind: ErrorKind, message: str, status_code: int = None) -> "SubmissionOutcome":
        return cls(success=False, message=message, kind=kind, status_code=status_code)

    @classmethod
    def rejected(cls, result: ValidationResult) -> "SubmissionOutcome":
        return cls.failed(result.kind, result.message)
