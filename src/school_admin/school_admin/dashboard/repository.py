from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Protocol, Sequence


class DashboardRepository(Protocol):
    def count_students(self) -> int:
        raise NotImplementedError

    def list_statuses_on(self, day: date) -> Sequence[str]:
        raise NotImplementedError

    def list_pending_invoice_amounts(self) -> Sequence[Decimal]:
        raise NotImplementedError

    def count_events_between(self, start: datetime, end: datetime) -> int:
        raise NotImplementedError
