from __future__ import annotations

from flask import Flask, render_template

from ..common.web import page_notice
from ..container import Container
from ..core.exceptions import DomainError
from .model import DashboardStats


def register(app: Flask, container: Container) -> None:
    @app.route("/", methods=["GET"], endpoint="index")
    @app.route("/dashboard", methods=["GET"], endpoint="dashboard")
    def dashboard():
        notice = None
        try:
            stats = container.dashboard_service.build()
        except DomainError as e:
            notice = page_notice(e, page="dashboard")
            stats = DashboardStats()

        return render_template("dashboard.html", stats=stats, notice=notice, active_page="dashboard")
