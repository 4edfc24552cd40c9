from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Guardian, GuardianFormData, RosterEntry, Student, StudentFormData, StudentListRow
from .repository import StudentRepository


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def search(self, *, query: str, limit: int) -> Sequence[StudentListRow]:
        clauses: list[str] = []
        params: list[object] = []

        if query:
            pattern = f"%{query}%"
            clauses.append("(s.admission_no LIKE %s OR s.first_name LIKE %s OR s.last_name LIKE %s)")
            params.extend([pattern, pattern, pattern])

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
        params.append(int(limit))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT s.student_id, s.admission_no, s.first_name, s.last_name,
                       c.name AS class_name, sec.name AS section_name
                FROM students s
                LEFT JOIN classes c ON c.class_id = s.class_id
                LEFT JOIN sections sec ON sec.section_id = s.section_id
                {where}
                ORDER BY s.created_at DESC, s.student_id DESC
                LIMIT %s
                """,
                tuple(params),
            )
            return [
                StudentListRow(
                    student_id=int(r["student_id"]),
                    admission_no=r.get("admission_no"),
                    first_name=r.get("first_name"),
                    last_name=r.get("last_name"),
                    class_name=r.get("class_name"),
                    section_name=r.get("section_name"),
                )
                for r in fetchall(cur)
            ]

    def get_by_id(self, student_id: int) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT s.student_id, s.admission_no, s.first_name, s.last_name, s.gender, s.dob,
                       s.address, s.phone, s.email, s.status, s.created_at,
                       c.name AS class_name, sec.name AS section_name
                FROM students s
                LEFT JOIN classes c ON c.class_id = s.class_id
                LEFT JOIN sections sec ON sec.section_id = s.section_id
                WHERE s.student_id=%s
                """,
                (int(student_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return Student(
                student_id=int(r["student_id"]),
                admission_no=r.get("admission_no"),
                first_name=r.get("first_name"),
                last_name=r.get("last_name"),
                gender=r.get("gender"),
                dob=r.get("dob"),
                address=r.get("address"),
                phone=r.get("phone"),
                email=r.get("email"),
                status=r.get("status"),
                created_at=r.get("created_at"),
                class_name=r.get("class_name"),
                section_name=r.get("section_name"),
            )

    def list_guardians(self, student_id: int) -> Sequence[Guardian]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT guardian_id, student_id, name, relation, phone, email, occupation, address, is_primary
                FROM guardians
                WHERE student_id=%s
                ORDER BY is_primary DESC, guardian_id ASC
                """,
                (int(student_id),),
            )
            return [
                Guardian(
                    guardian_id=int(r["guardian_id"]),
                    student_id=int(r["student_id"]),
                    name=r["name"],
                    relation=r["relation"],
                    phone=r.get("phone"),
                    email=r.get("email"),
                    occupation=r.get("occupation"),
                    address=r.get("address"),
                    is_primary=bool(r.get("is_primary")),
                )
                for r in fetchall(cur)
            ]

    def list_roster(self, *, class_id: int, section_id: Optional[int] = None) -> Sequence[RosterEntry]:
        clauses = ["class_id=%s"]
        params: list[object] = [int(class_id)]
        if section_id is not None:
            clauses.append("section_id=%s")
            params.append(int(section_id))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT student_id, admission_no, first_name, last_name
                FROM students
                WHERE {' AND '.join(clauses)}
                ORDER BY created_at ASC, student_id ASC
                """,
                tuple(params),
            )
            return [
                RosterEntry(
                    student_id=int(r["student_id"]),
                    admission_no=r.get("admission_no"),
                    first_name=r.get("first_name"),
                    last_name=r.get("last_name"),
                )
                for r in fetchall(cur)
            ]

    def create_student(self, data: StudentFormData) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO students(admission_no, first_name, last_name, gender, dob,
                                     class_id, section_id, address, phone, email)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    data.admission_no or None,
                    data.first_name,
                    data.last_name or None,
                    data.gender or None,
                    data.dob or None,
                    data.class_id,
                    data.section_id,
                    data.address or None,
                    data.phone or None,
                    data.email or None,
                ),
            )
            return int(cur.lastrowid)

    def create_guardians(self, *, student_id: int, guardians: Sequence[GuardianFormData]) -> int:
        if not guardians:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                """
                INSERT INTO guardians(student_id, name, relation, phone, email, occupation, address, is_primary)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                [
                    (
                        int(student_id),
                        g.name,
                        g.relation,
                        g.phone or None,
                        g.email or None,
                        g.occupation or None,
                        g.address or None,
                        1 if g.is_primary else 0,
                    )
                    for g in guardians
                ],
            )
            return cur.rowcount
