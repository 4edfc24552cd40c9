from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Guardian, GuardianFormData, RosterEntry, Student, StudentFormData, StudentListRow


class StudentRepository(Protocol):
    """Repository interface for students and their guardians.

    Note: services depend on this interface, never on a concrete database.
    """

    def search(self, *, query: str, limit: int) -> Sequence[StudentListRow]:
        raise NotImplementedError

    def get_by_id(self, student_id: int) -> Optional[Student]:
        raise NotImplementedError

    def list_guardians(self, student_id: int) -> Sequence[Guardian]:
        raise NotImplementedError

    def list_roster(self, *, class_id: int, section_id: Optional[int] = None) -> Sequence[RosterEntry]:
        raise NotImplementedError

    def create_student(self, data: StudentFormData) -> int:
        raise NotImplementedError

    def create_guardians(self, *, student_id: int, guardians: Sequence[GuardianFormData]) -> int:
        raise NotImplementedError
