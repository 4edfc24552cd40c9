from __future__ import annotations

import pytest

from src.school_admin.school_admin.academics.model import SchoolClass, Section
from src.school_admin.school_admin.container import wire_container

from tests.fakes import InMemoryAcademics, InMemoryAttendance, InMemoryDashboard, InMemoryStudents


@pytest.fixture
def academics():
    return InMemoryAcademics(
        classes=[
            SchoolClass(class_id=1, name="Class 1", sort_order=3),
            SchoolClass(class_id=2, name="Class 2", sort_order=4),
        ],
        sections=[
            Section(section_id=10, class_id=1, name="A"),
            Section(section_id=11, class_id=1, name="B"),
            Section(section_id=20, class_id=2, name="A"),
        ],
    )


@pytest.fixture
def students_repo(academics):
    return InMemoryStudents(academics)


@pytest.fixture
def attendance_repo():
    return InMemoryAttendance()


@pytest.fixture
def dashboard_repo():
    return InMemoryDashboard()


@pytest.fixture
def container(academics, students_repo, attendance_repo, dashboard_repo):
    return wire_container(
        academics_repo=academics,
        students_repo=students_repo,
        attendance_repo=attendance_repo,
        dashboard_repo=dashboard_repo,
    )


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.school_admin.school_admin.main import create_app

    flask_app = create_app(container)
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()
