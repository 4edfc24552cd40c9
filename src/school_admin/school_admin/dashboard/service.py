from __future__ import annotations

import logging
from datetime import timedelta
from decimal import Decimal

from ..attendance.aggregator import attendance_percent
from ..common.datetime_utils import now_local
from ..core.constants import UPCOMING_EVENTS_DAYS
from ..core.enums import AttendanceStatus
from .model import DashboardStats
from .repository import DashboardRepository

logger = logging.getLogger(__name__)


class DashboardService:
    """Headline numbers for the landing page."""

    def __init__(self, repo: DashboardRepository):
        self._repo = repo

    def build(self) -> DashboardStats:
        now = now_local()

        statuses = self._repo.list_statuses_on(now.date())
        present = sum(1 for s in statuses if s == AttendanceStatus.PRESENT.value)
        # Only plain "present" counts here; late arrivals are not in today's figure.
        today_percent = attendance_percent(present, len(statuses))

        pending = sum(self._repo.list_pending_invoice_amounts(), Decimal("0"))
        events = self._repo.count_events_between(now, now + timedelta(days=UPCOMING_EVENTS_DAYS))

        stats = DashboardStats(
            total_students=self._repo.count_students(),
            today_percent=today_percent,
            pending_fees=pending,
            upcoming_events=events,
        )
        logger.debug("Dashboard stats: %s", stats)
        return stats
