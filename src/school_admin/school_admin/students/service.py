from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..academics.lookups import ClassSectionLookup
from ..academics.model import SchoolClass, Section
from ..academics.repository import AcademicsRepository
from ..common.validators import require_non_empty
from ..core.constants import IMPORT_PREVIEW_ROWS, STUDENT_LIST_LIMIT
from ..core.exceptions import DomainError, QueryError, ValidationError
from ..core.results import ActionResult
from .csv_import import CsvRow, iter_students, parse_csv
from .model import ImportReport, ImportResult, StudentFormData, StudentListRow, StudentProfile
from .repository import StudentRepository

logger = logging.getLogger(__name__)


class StudentService:
    """Use cases: list/search, admission, profile and bulk import."""

    def __init__(self, students: StudentRepository, academics: AcademicsRepository):
        self._students = students
        self._academics = academics

    def search(self, query: str = "", *, limit: int = STUDENT_LIST_LIMIT) -> Sequence[StudentListRow]:
        return self._students.search(query=(query or "").strip(), limit=limit)

    def get_profile(self, student_id: int) -> Optional[StudentProfile]:
        student = self._students.get_by_id(student_id)
        if not student:
            return None
        guardians = self._students.list_guardians(student_id)
        return StudentProfile(student=student, guardians=tuple(guardians))

    def _insert(self, data: StudentFormData) -> int:
        student_id = self._students.create_student(data)

        if data.guardians:
            try:
                self._students.create_guardians(student_id=student_id, guardians=data.guardians)
            except QueryError as e:
                # Student row is already committed; the guardian is an afterthought relation.
                logger.warning("Guardian insert failed for student_id=%s: %s", student_id, e)

        return student_id

    def create_student(self, data: StudentFormData) -> ActionResult:
        """Admission form action. Payload is the new student id."""

        try:
            require_non_empty(data.first_name, "First name")
            student_id = self._insert(data)
        except DomainError as e:
            logger.info("Student admission rejected: %s", e)
            return ActionResult.from_error(e)

        logger.info("Created student_id=%s admission_no=%s", student_id, data.admission_no)
        return ActionResult.success(payload=student_id)

    def bulk_import(self, students: Sequence[StudentFormData]) -> list[ImportResult]:
        """Create students one at a time; one failure never stops the batch."""

        results: list[ImportResult] = []
        for data in students:
            try:
                self._insert(data)
            except DomainError as e:
                logger.info("Import row failed (admission_no=%s): %s", data.admission_no, e)
                results.append(ImportResult(success=False, error=str(e), admission_no=data.admission_no))
                continue
            except Exception as e:
                logger.exception("Unexpected error importing admission_no=%s", data.admission_no)
                results.append(
                    ImportResult(success=False, error=str(e) or "Unknown error", admission_no=data.admission_no)
                )
                continue

            results.append(ImportResult(success=True, admission_no=data.admission_no))

        return results

    def form_options(self) -> tuple[Sequence[SchoolClass], Sequence[Section]]:
        return self._academics.list_classes(), self._academics.list_sections()

    def load_lookup(self) -> ClassSectionLookup:
        return ClassSectionLookup.from_rows(self._academics.list_classes(), self._academics.list_sections())

    @staticmethod
    def preview_csv(text: str, *, limit: int = IMPORT_PREVIEW_ROWS) -> list[CsvRow]:
        return parse_csv(text)[:limit]

    def import_csv(self, text: str) -> ActionResult:
        """Parse, map and import an uploaded file. Payload is an ImportReport."""

        try:
            lookup = self.load_lookup()
            students = list(iter_students(parse_csv(text), lookup))
            if not students:
                raise ValidationError("No valid student data found in CSV.")
        except DomainError as e:
            return ActionResult.from_error(e)

        report = ImportReport(results=tuple(self.bulk_import(students)))
        logger.info("CSV import finished: %s succeeded, %s failed", report.succeeded, report.failed)
        return ActionResult.success(payload=report)
