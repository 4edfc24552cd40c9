"""CSV bulk-import parsing and column mapping.

The format is deliberately simple: comma-delimited, one record per line,
surrounding quotes stripped. Embedded commas and escaped quotes are not
supported, so the stdlib csv reader is not used here.
"""
from __future__ import annotations

import re
from typing import Iterable, Iterator, Mapping, Optional

from ..academics.lookups import ClassSectionLookup
from .model import GuardianFormData, StudentFormData

_EDGE_QUOTES = re.compile(r'^"|"$')

CsvRow = dict[str, str]


def parse_csv(text: str) -> list[CsvRow]:
    """Split uploaded text into header -> value dicts.

    Data rows whose field count differs from the header are dropped.
    """

    lines = [line for line in text.split("\n") if line.strip()]
    if not lines:
        return []

    headers = [h.strip().lower().replace('"', "") for h in lines[0].split(",")]
    rows: list[CsvRow] = []

    for line in lines[1:]:
        values = [_EDGE_QUOTES.sub("", v.strip()) for v in line.split(",")]
        if len(values) != len(headers):
            continue
        rows.append({header: values[idx] or "" for idx, header in enumerate(headers)})

    return rows


def _first(row: Mapping[str, str], *keys: str) -> str:
    for key in keys:
        value = row.get(key)
        if value:
            return value
    return ""


def map_row_to_student(row: Mapping[str, str], lookup: ClassSectionLookup) -> Optional[StudentFormData]:
    """Project one parsed row onto the admission form shape.

    Returns None when no first name can be resolved; such rows are skipped.
    """

    name_parts = (row.get("name") or "").split(" ")
    first_name = _first(row, "first_name", "firstname") or name_parts[0]
    if not first_name.strip():
        return None

    last_name = _first(row, "last_name", "lastname") or " ".join(name_parts[1:])

    class_id = lookup.class_id_for(_first(row, "class", "class_name"))
    section_id = lookup.section_id_for(class_id, _first(row, "section", "section_name"))

    guardians: tuple[GuardianFormData, ...] = ()
    if row.get("guardian_name"):
        guardians = (
            GuardianFormData(
                name=row["guardian_name"],
                relation=(row.get("guardian_relation") or "").lower() or "guardian",
                phone=row.get("guardian_phone") or None,
                email=row.get("guardian_email") or None,
                occupation=row.get("guardian_occupation") or None,
                address=row.get("guardian_address") or None,
                is_primary=True,
            ),
        )

    return StudentFormData(
        admission_no=_first(row, "admission_no", "admission_number") or None,
        first_name=first_name.strip(),
        last_name=last_name.strip() or None,
        gender=(row.get("gender") or "").lower() or None,
        dob=_first(row, "dob", "date_of_birth", "birthdate") or None,
        class_id=class_id,
        section_id=section_id,
        address=row.get("address") or None,
        phone=_first(row, "phone", "phone_number") or None,
        email=row.get("email") or None,
        guardians=guardians,
    )


def iter_students(rows: Iterable[Mapping[str, str]], lookup: ClassSectionLookup) -> Iterator[StudentFormData]:
    for row in rows:
        student = map_row_to_student(row, lookup)
        if student is not None:
            yield student
