from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.display import full_name


@dataclass(frozen=True)
class GuardianFormData:
    name: str
    relation: str = "guardian"
    phone: Optional[str] = None
    email: Optional[str] = None
    occupation: Optional[str] = None
    address: Optional[str] = None
    is_primary: bool = False


@dataclass(frozen=True)
class StudentFormData:
    """Input shape shared by the admission form and the CSV importer."""

    first_name: str
    admission_no: Optional[str] = None
    last_name: Optional[str] = None
    gender: Optional[str] = None
    dob: Optional[str] = None
    class_id: Optional[int] = None
    section_id: Optional[int] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    guardians: tuple[GuardianFormData, ...] = ()


@dataclass(frozen=True)
class RosterEntry:
    """Minimal student row used by attendance pages."""

    student_id: int
    admission_no: Optional[str]
    first_name: Optional[str]
    last_name: Optional[str]

    @property
    def name(self) -> str:
        return full_name(self.first_name, self.last_name)


@dataclass(frozen=True)
class StudentListRow:
    student_id: int
    admission_no: Optional[str]
    first_name: Optional[str]
    last_name: Optional[str]
    class_name: Optional[str]
    section_name: Optional[str]

    @property
    def name(self) -> str:
        return full_name(self.first_name, self.last_name)


@dataclass(frozen=True)
class Student:
    student_id: int
    admission_no: Optional[str]
    first_name: Optional[str]
    last_name: Optional[str]
    gender: Optional[str]
    dob: Optional[date]
    address: Optional[str]
    phone: Optional[str]
    email: Optional[str]
    status: Optional[str]
    created_at: Optional[datetime]
    class_name: Optional[str] = None
    section_name: Optional[str] = None

    @property
    def name(self) -> str:
        return full_name(self.first_name, self.last_name)


@dataclass(frozen=True)
class Guardian:
    guardian_id: int
    student_id: int
    name: str
    relation: str
    phone: Optional[str] = None
    email: Optional[str] = None
    occupation: Optional[str] = None
    address: Optional[str] = None
    is_primary: bool = False


@dataclass(frozen=True)
class StudentProfile:
    student: Student
    guardians: tuple[Guardian, ...] = ()


@dataclass(frozen=True)
class ImportResult:
    """Outcome of one submitted CSV row."""

    success: bool
    error: Optional[str] = None
    admission_no: Optional[str] = None


@dataclass(frozen=True)
class ImportReport:
    results: tuple[ImportResult, ...]

    @property
    def succeeded(self) -> int:
        return sum(1 for r in self.results if r.success)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if not r.success)

    @property
    def failures(self) -> list[ImportResult]:
        return [r for r in self.results if not r.success]
