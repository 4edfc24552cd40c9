from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, placeholders
from .model import AttendanceMark, AttendanceRecord
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @staticmethod
    def _to_record(r) -> AttendanceRecord:
        return AttendanceRecord(
            student_id=int(r["student_id"]),
            attendance_date=r["attendance_date"],
            status=str(r["status"]),
        )

    def list_for_date(
        self,
        *,
        attendance_date: date,
        student_ids: Sequence[int],
        statuses: Optional[Sequence[str]] = None,
    ) -> Sequence[AttendanceRecord]:
        if not student_ids:
            return []

        clauses = ["attendance_date=%s", f"student_id IN ({placeholders(student_ids)})"]
        params: list[object] = [attendance_date, *[int(i) for i in student_ids]]
        if statuses:
            clauses.append(f"status IN ({placeholders(statuses)})")
            params.extend(statuses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT student_id, attendance_date, status
                FROM attendance_records
                WHERE {' AND '.join(clauses)}
                """,
                tuple(params),
            )
            return [self._to_record(r) for r in fetchall(cur)]

    def list_range(self, *, start: date, end: date, student_ids: Sequence[int]) -> Sequence[AttendanceRecord]:
        if not student_ids:
            return []

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT student_id, attendance_date, status
                FROM attendance_records
                WHERE attendance_date BETWEEN %s AND %s
                  AND student_id IN ({placeholders(student_ids)})
                ORDER BY attendance_date ASC
                """,
                (start, end, *[int(i) for i in student_ids]),
            )
            return [self._to_record(r) for r in fetchall(cur)]

    def upsert_many(self, *, attendance_date: date, marks: Sequence[AttendanceMark]) -> int:
        if not marks:
            return 0

        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                """
                INSERT INTO attendance_records(student_id, attendance_date, status)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE status=VALUES(status)
                """,
                [(int(m.student_id), attendance_date, m.status.value) for m in marks],
            )
            return len(marks)
