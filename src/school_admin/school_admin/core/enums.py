from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Daily attendance status stored in `attendance_records.status`."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    LEAVE = "leave"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class GuardianRelation(str, Enum):
    FATHER = "father"
    MOTHER = "mother"
    GUARDIAN = "guardian"
    OTHER = "other"


class InvoiceStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    CANCELLED = "cancelled"


class ResultKind(str, Enum):
    """Outcome of a form action (see core.results.ActionResult)."""

    OK = "ok"
    CONFIG_ERROR = "config_error"
    QUERY_ERROR = "query_error"
    VALIDATION_ERROR = "validation_error"
