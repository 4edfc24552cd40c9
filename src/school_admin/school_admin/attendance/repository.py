from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceMark, AttendanceRecord


class AttendanceRepository(Protocol):
    def list_for_date(
        self,
        *,
        attendance_date: date,
        student_ids: Sequence[int],
        statuses: Optional[Sequence[str]] = None,
    ) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_range(self, *, start: date, end: date, student_ids: Sequence[int]) -> Sequence[AttendanceRecord]:
        """Rows with start <= date <= end for the given students."""

        raise NotImplementedError

    def upsert_many(self, *, attendance_date: date, marks: Sequence[AttendanceMark]) -> int:
        """Insert-or-update keyed by (student_id, attendance_date); latest write wins."""

        raise NotImplementedError
