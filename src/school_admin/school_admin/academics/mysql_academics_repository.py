from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import SchoolClass, Section
from .repository import AcademicsRepository


class MySQLAcademicsRepository(AcademicsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_classes(self) -> Sequence[SchoolClass]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT class_id, name, sort_order
                FROM classes
                ORDER BY sort_order ASC, class_id ASC
                """
            )
            return [
                SchoolClass(
                    class_id=int(r["class_id"]),
                    name=r["name"],
                    sort_order=int(r.get("sort_order") or 0),
                )
                for r in fetchall(cur)
            ]

    def list_sections(self) -> Sequence[Section]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT section_id, class_id, name
                FROM sections
                ORDER BY class_id ASC, name ASC
                """
            )
            return [
                Section(
                    section_id=int(r["section_id"]),
                    class_id=int(r["class_id"]),
                    name=r["name"],
                )
                for r in fetchall(cur)
            ]
