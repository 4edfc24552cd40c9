from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..academics.model import SchoolClass, Section
from ..core.enums import AttendanceStatus
from ..students.model import RosterEntry


@dataclass(frozen=True)
class AttendanceRecord:
    """One stored row of `attendance_records`.

    `status` stays a plain string: rows written by other tools may carry
    values outside AttendanceStatus and the aggregator has to cope.
    """

    student_id: int
    attendance_date: date
    status: str


@dataclass(frozen=True)
class AttendanceMark:
    student_id: int
    status: AttendanceStatus


@dataclass(frozen=True)
class AttendanceSummary:
    present: int = 0
    absent: int = 0
    late: int = 0
    leave: int = 0
    marked: int = 0
    percent: Optional[float] = None


@dataclass(frozen=True)
class ClassSelection:
    """Class/section filter shared by the attendance pages."""

    classes: tuple[SchoolClass, ...] = ()
    sections: tuple[Section, ...] = ()
    class_id: Optional[int] = None
    section_id: Optional[int] = None
    class_name: Optional[str] = None
    section_name: Optional[str] = None


@dataclass(frozen=True)
class MarkingRow:
    student: RosterEntry
    status: AttendanceStatus


@dataclass(frozen=True)
class MarkingSheet:
    attendance_date: date
    selection: ClassSelection
    rows: tuple[MarkingRow, ...] = ()


@dataclass(frozen=True)
class AbsenteeRow:
    student: RosterEntry
    status: AttendanceStatus


@dataclass(frozen=True)
class AbsenteeList:
    attendance_date: date
    selection: ClassSelection
    rows: tuple[AbsenteeRow, ...] = ()


@dataclass(frozen=True)
class MonthlyReportRow:
    student: RosterEntry
    summary: AttendanceSummary


@dataclass(frozen=True)
class MonthlyReport:
    month: str
    start: date
    end: date
    days_in_month: int
    selection: ClassSelection
    rows: tuple[MonthlyReportRow, ...] = ()
