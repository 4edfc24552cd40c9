from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .academics.mysql_academics_repository import MySQLAcademicsRepository
from .academics.repository import AcademicsRepository
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .dashboard.mysql_dashboard_repository import MySQLDashboardRepository
from .dashboard.repository import DashboardRepository
from .dashboard.service import DashboardService
from .database.connection import DatabaseConnection
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.service import StudentService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    academics_repo: AcademicsRepository
    students_repo: StudentRepository
    attendance_repo: AttendanceRepository
    dashboard_repo: DashboardRepository

    student_service: StudentService
    attendance_service: AttendanceService
    dashboard_service: DashboardService


def wire_container(
    *,
    academics_repo: AcademicsRepository,
    students_repo: StudentRepository,
    attendance_repo: AttendanceRepository,
    dashboard_repo: DashboardRepository,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Build services on top of the given repositories."""

    return Container(
        conn=conn,
        academics_repo=academics_repo,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        dashboard_repo=dashboard_repo,
        student_service=StudentService(students_repo, academics_repo),
        attendance_service=AttendanceService(attendance_repo, students_repo, academics_repo),
        dashboard_service=DashboardService(dashboard_repo),
    )


def build_container(*, database_url: Optional[str], database_key: Optional[str]) -> Container:
    conn = DatabaseConnection.get_instance(database_url, database_key)

    return wire_container(
        conn=conn,
        academics_repo=MySQLAcademicsRepository(conn),
        students_repo=MySQLStudentRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        dashboard_repo=MySQLDashboardRepository(conn),
    )
