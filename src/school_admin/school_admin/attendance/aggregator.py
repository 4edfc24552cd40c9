"""Per-student attendance counts over a date range."""
from __future__ import annotations

import logging
import math
from typing import Iterable, Optional, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, AttendanceSummary

logger = logging.getLogger(__name__)

_COUNTED = {s.value for s in AttendanceStatus}


def attendance_percent(attended: int, marked: int) -> Optional[float]:
    """round(attended / marked * 1000) / 10, rounding halves up.

    None when nothing was marked: "no data" must never read as 0%.
    """

    if marked <= 0:
        return None
    return math.floor(attended / marked * 1000 + 0.5) / 10


def summarize_attendance(
    student_ids: Sequence[int],
    records: Iterable[AttendanceRecord],
) -> dict[int, AttendanceSummary]:
    """Count statuses per requested student in a single pass.

    Every requested student gets an entry, even with no rows. Rows for other
    students are ignored. Rows with an unrecognised status count toward
    nothing, so present + absent + late + leave == marked always holds.
    """

    tallies: dict[int, dict[str, int]] = {
        sid: {"present": 0, "absent": 0, "late": 0, "leave": 0} for sid in student_ids
    }

    for r in records:
        tally = tallies.get(r.student_id)
        if tally is None:
            continue
        if r.status not in _COUNTED:
            logger.warning(
                "Ignoring unknown attendance status %r for student_id=%s on %s",
                r.status,
                r.student_id,
                r.attendance_date,
            )
            continue
        tally[r.status] += 1

    out: dict[int, AttendanceSummary] = {}
    for sid, t in tallies.items():
        marked = t["present"] + t["absent"] + t["late"] + t["leave"]
        out[sid] = AttendanceSummary(
            present=t["present"],
            absent=t["absent"],
            late=t["late"],
            leave=t["leave"],
            marked=marked,
            percent=attendance_percent(t["present"] + t["late"], marked),
        )
    return out
