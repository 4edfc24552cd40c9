from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..academics.lookups import class_name, section_name, sections_for_class
from ..academics.repository import AcademicsRepository
from ..common.datetime_utils import ISO_DATE_RE, parse_iso_date, parse_month
from ..core.constants import DEFAULT_MARK_STATUS
from ..core.enums import AttendanceStatus
from ..core.exceptions import DomainError, ValidationError
from ..core.results import ActionResult
from ..students.model import RosterEntry
from ..students.repository import StudentRepository
from .aggregator import summarize_attendance
from .model import (
    AbsenteeList,
    AbsenteeRow,
    AttendanceMark,
    AttendanceSummary,
    ClassSelection,
    MarkingRow,
    MarkingSheet,
    MonthlyReport,
    MonthlyReportRow,
)
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

ABSENTEE_STATUSES = (AttendanceStatus.ABSENT.value, AttendanceStatus.LEAVE.value)


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        academics: AcademicsRepository,
    ):
        self._attendance = attendance
        self._students = students
        self._academics = academics

    def _selection(self, class_id: Optional[int], section_id: Optional[int]) -> ClassSelection:
        classes = tuple(self._academics.list_classes())
        sections = tuple(self._academics.list_sections())
        return ClassSelection(
            classes=classes,
            sections=tuple(sections_for_class(sections, class_id)),
            class_id=class_id,
            section_id=section_id,
            class_name=class_name(classes, class_id),
            section_name=section_name(sections, section_id),
        )

    def _roster(self, selection: ClassSelection) -> Sequence[RosterEntry]:
        if selection.class_id is None:
            return []
        return self._students.list_roster(class_id=selection.class_id, section_id=selection.section_id)

    def summarize(self, student_ids: Sequence[int], *, start: date, end: date) -> dict[int, AttendanceSummary]:
        """Aggregate stored rows for [start, end] into per-student counts."""

        if end < start:
            raise ValidationError("End date must not be before start date.")
        records = self._attendance.list_range(start=start, end=end, student_ids=student_ids) if student_ids else []
        return summarize_attendance(student_ids, records)

    def load_marking_sheet(
        self,
        *,
        attendance_date: date,
        class_id: Optional[int] = None,
        section_id: Optional[int] = None,
    ) -> MarkingSheet:
        selection = self._selection(class_id, section_id)
        roster = self._roster(selection)

        existing: dict[int, str] = {}
        if roster:
            records = self._attendance.list_for_date(
                attendance_date=attendance_date,
                student_ids=[s.student_id for s in roster],
            )
            existing = {r.student_id: r.status for r in records}

        rows = []
        for s in roster:
            try:
                status = AttendanceStatus(existing.get(s.student_id, DEFAULT_MARK_STATUS))
            except ValueError:
                status = AttendanceStatus(DEFAULT_MARK_STATUS)
            rows.append(MarkingRow(student=s, status=status))

        return MarkingSheet(attendance_date=attendance_date, selection=selection, rows=tuple(rows))

    def save_attendance(self, *, date_text: str, records: Sequence[tuple[int, str]]) -> ActionResult:
        """Upsert one status per student for a day.

        Validation failures come back as a result, never as an exception.
        """

        if not ISO_DATE_RE.match(date_text or ""):
            return ActionResult.invalid("Invalid date format. Use YYYY-MM-DD.")
        if not records:
            return ActionResult.invalid("No attendance records to save.")

        try:
            attendance_date = parse_iso_date(date_text)
            marks = []
            for student_id, status in records:
                try:
                    marks.append(AttendanceMark(student_id=int(student_id), status=AttendanceStatus(status)))
                except ValueError:
                    raise ValidationError(f"Invalid attendance status: {status!r}")
            saved = self._attendance.upsert_many(attendance_date=attendance_date, marks=marks)
        except DomainError as e:
            logger.warning("Saving attendance for %s failed: %s", date_text, e)
            return ActionResult.from_error(e)

        logger.info("Saved %s attendance rows for %s", saved, date_text)
        return ActionResult.success(payload=saved, message="Saved.")

    def load_absentees(
        self,
        *,
        attendance_date: date,
        class_id: Optional[int] = None,
        section_id: Optional[int] = None,
    ) -> AbsenteeList:
        selection = self._selection(class_id, section_id)
        roster = self._roster(selection)

        rows: list[AbsenteeRow] = []
        if roster:
            records = self._attendance.list_for_date(
                attendance_date=attendance_date,
                student_ids=[s.student_id for s in roster],
                statuses=ABSENTEE_STATUSES,
            )
            status_by_id = {r.student_id: r.status for r in records if r.status in ABSENTEE_STATUSES}
            rows = [
                AbsenteeRow(student=s, status=AttendanceStatus(status_by_id[s.student_id]))
                for s in roster
                if s.student_id in status_by_id
            ]

        return AbsenteeList(attendance_date=attendance_date, selection=selection, rows=tuple(rows))

    def build_monthly_report(
        self,
        *,
        month: str,
        class_id: Optional[int] = None,
        section_id: Optional[int] = None,
    ) -> MonthlyReport:
        month_range = parse_month(month)
        selection = self._selection(class_id, section_id)
        roster = self._roster(selection)

        summaries = self.summarize(
            [s.student_id for s in roster],
            start=month_range.start,
            end=month_range.end,
        )
        rows = tuple(MonthlyReportRow(student=s, summary=summaries[s.student_id]) for s in roster)

        return MonthlyReport(
            month=month,
            start=month_range.start,
            end=month_range.end,
            days_in_month=month_range.days_in_month,
            selection=selection,
            rows=rows,
        )
