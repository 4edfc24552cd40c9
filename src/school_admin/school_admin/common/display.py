from __future__ import annotations

from decimal import Decimal
from typing import Optional

from ..core.constants import EMPTY_CELL


def full_name(first_name: Optional[str], last_name: Optional[str]) -> str:
    return " ".join(p for p in (first_name, last_name) if p) or EMPTY_CELL


def or_dash(value) -> str:
    if value is None or value == "":
        return EMPTY_CELL
    return str(value)


def format_percent(value: Optional[float]) -> str:
    if value is None:
        return EMPTY_CELL
    return f"{value:g}%"


def format_money(value: Optional[Decimal]) -> str:
    if value is None:
        return EMPTY_CELL
    return f"Rs.{value:.2f}"
