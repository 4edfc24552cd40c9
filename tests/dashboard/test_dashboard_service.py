from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from src.school_admin.school_admin.common.display import format_money
from src.school_admin.school_admin.dashboard import service as dashboard_service
from src.school_admin.school_admin.dashboard.service import DashboardService

from tests.fakes import InMemoryDashboard

NOW = datetime(2026, 3, 10, 9, 30, 0)


def _svc(monkeypatch, repo):
    monkeypatch.setattr(dashboard_service, "now_local", lambda: NOW)
    return DashboardService(repo)


def test_today_percent_counts_only_present(monkeypatch):
    repo = InMemoryDashboard(
        students=12,
        statuses={date(2026, 3, 10): ["present", "present", "late", "absent"]},
    )

    stats = _svc(monkeypatch, repo).build()

    assert stats.total_students == 12
    assert stats.today_percent == 50.0


def test_nothing_marked_today(monkeypatch):
    repo = InMemoryDashboard(statuses={date(2026, 3, 9): ["present"]})

    stats = _svc(monkeypatch, repo).build()

    assert stats.today_percent is None


def test_pending_fees_are_summed(monkeypatch):
    repo = InMemoryDashboard(pending=[Decimal("1500.50"), Decimal("250")])

    stats = _svc(monkeypatch, repo).build()

    assert stats.pending_fees == Decimal("1750.50")
    assert format_money(stats.pending_fees) == "Rs.1750.50"


def test_events_within_next_week(monkeypatch):
    repo = InMemoryDashboard(
        events=[
            datetime(2026, 3, 9, 10, 0),
            datetime(2026, 3, 11, 10, 0),
            datetime(2026, 3, 17, 9, 0),
            datetime(2026, 3, 18, 10, 0),
        ]
    )

    stats = _svc(monkeypatch, repo).build()

    assert stats.upcoming_events == 2
