from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Sequence

from ..core.enums import InvoiceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .repository import DashboardRepository


class MySQLDashboardRepository(DashboardRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def count_students(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total FROM students")
            row = fetchone(cur)
            return int(row["total"]) if row else 0

    def list_statuses_on(self, day: date) -> Sequence[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT status FROM attendance_records WHERE attendance_date = %s",
                (day,),
            )
            return [r["status"] for r in fetchall(cur)]

    def list_pending_invoice_amounts(self) -> Sequence[Decimal]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT amount FROM fee_invoices WHERE status = %s",
                (InvoiceStatus.PENDING.value,),
            )
            return [Decimal(r["amount"] or 0) for r in fetchall(cur)]

    def count_events_between(self, start: datetime, end: datetime) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT COUNT(*) AS total
                FROM events
                WHERE start_at >= %s AND start_at <= %s
                """,
                (start, end),
            )
            row = fetchone(cur)
            return int(row["total"]) if row else 0
