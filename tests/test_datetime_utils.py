from __future__ import annotations

from datetime import date

import pytest

from src.school_admin.school_admin.common.datetime_utils import month_key, parse_iso_date, parse_month
from src.school_admin.school_admin.common.display import format_percent, full_name
from src.school_admin.school_admin.core.exceptions import ValidationError


def test_parse_iso_date():
    assert parse_iso_date(" 2024-02-29 ") == date(2024, 2, 29)


@pytest.mark.parametrize("value", ["2024-2-1", "01/02/2024", "", "2023-02-29"])
def test_parse_iso_date_rejects(value):
    with pytest.raises(ValidationError, match="Use YYYY-MM-DD"):
        parse_iso_date(value)


def test_parse_month_range():
    r = parse_month("2023-02")

    assert (r.start, r.end, r.days_in_month) == (date(2023, 2, 1), date(2023, 2, 28), 28)


@pytest.mark.parametrize("value", ["2024-00", "2024-13", "2024", "24-01", "0000-05"])
def test_parse_month_rejects(value):
    with pytest.raises(ValidationError):
        parse_month(value)


def test_month_key():
    assert month_key(date(2024, 7, 3)) == "2024-07"


def test_display_helpers():
    assert format_percent(None) == "—"
    assert format_percent(66.7) == "66.7%"
    assert format_percent(100.0) == "100%"
    assert full_name(None, None) == "—"
    assert full_name("Asha", None) == "Asha"
