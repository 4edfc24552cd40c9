from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class DashboardStats:
    total_students: int = 0
    today_percent: Optional[float] = None
    pending_fees: Decimal = Decimal("0")
    upcoming_events: int = 0
