from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from datetime import date, datetime

from ..core.exceptions import ValidationError

ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
ISO_MONTH_RE = re.compile(r"^\d{4}-\d{2}$")


@dataclass(frozen=True)
class MonthRange:
    start: date
    end: date
    days_in_month: int


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    value = (value or "").strip()
    if not ISO_DATE_RE.match(value):
        raise ValidationError("Invalid date format. Use YYYY-MM-DD.")
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError("Invalid date format. Use YYYY-MM-DD.")


def parse_month(value: str) -> MonthRange:
    """Parse YYYY-MM into the first/last day of that month."""
    value = (value or "").strip()
    if not ISO_MONTH_RE.match(value):
        raise ValidationError("Invalid month format. Use YYYY-MM.")
    year, month = (int(x) for x in value.split("-"))
    try:
        days = calendar.monthrange(year, month)[1]
        start, end = date(year, month, 1), date(year, month, days)
    except ValueError:
        raise ValidationError("Invalid month format. Use YYYY-MM.")
    return MonthRange(start=start, end=end, days_in_month=days)


def month_key(d: date) -> str:
    return d.strftime("%Y-%m")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def today_local() -> date:
    return now_local().date()
