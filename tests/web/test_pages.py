from __future__ import annotations

import io
from datetime import date

import pytest

from src.school_admin.school_admin.container import wire_container
from src.school_admin.school_admin.core.exceptions import ConfigurationError, QueryError
from src.school_admin.school_admin.main import create_app
from src.school_admin.school_admin.students.model import StudentFormData

from tests.fakes import BrokenRepo


def _broken_app(monkeypatch, error):
    monkeypatch.setenv("APP_ENV", "testing")
    broken = BrokenRepo(error)
    container = wire_container(
        academics_repo=broken,
        students_repo=broken,
        attendance_repo=broken,
        dashboard_repo=broken,
    )
    return create_app(container).test_client()


def test_dashboard_renders(client, dashboard_repo):
    dashboard_repo.students = 3

    resp = client.get("/")

    assert resp.status_code == 200
    assert b"Total students" in resp.data
    assert b"Rs.0.00" in resp.data


@pytest.mark.parametrize("path", ["/academics", "/fees", "/staff", "/reports", "/settings", "/communication"])
def test_placeholder_sections(client, path):
    resp = client.get(path)

    assert resp.status_code == 200
    assert b"coming next" in resp.data


@pytest.mark.parametrize(
    "path",
    ["/dashboard", "/students", "/attendance", "/attendance/reports", "/attendance/absentees", "/students/new"],
)
def test_missing_configuration_blocks_pages(monkeypatch, path):
    client = _broken_app(monkeypatch, ConfigurationError("Missing/invalid env vars."))

    resp = client.get(path)

    assert resp.status_code == 200
    assert b"Setup required" in resp.data


def test_query_error_is_inline_warning(monkeypatch):
    client = _broken_app(monkeypatch, QueryError("Table 'students' doesn't exist"))

    resp = client.get("/students")

    assert resp.status_code == 200
    assert b"Setup required" not in resp.data
    assert b"doesn&#39;t exist" in resp.data
    assert b"No students found." in resp.data


def test_students_list_and_search(client, students_repo):
    students_repo.create_student(StudentFormData(first_name="Asha", admission_no="A-1", class_id=1))
    students_repo.create_student(StudentFormData(first_name="Ravi", admission_no="B-1"))

    resp = client.get("/students?q=asha")

    assert b"Asha" in resp.data
    assert b"Ravi" not in resp.data


def test_create_student_redirects_to_profile(client, students_repo):
    resp = client.post(
        "/students/new",
        data={
            "first_name": "Asha",
            "last_name": "Rao",
            "class_id": "1",
            "section_id": "10",
            "guardian_0_name": "Latha Rao",
            "guardian_0_relation": "mother",
            "guardian_1_name": "",
        },
    )

    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/students/1")
    guardians = students_repo.guardians[1]
    assert [(g.name, g.is_primary) for g in guardians] == [("Latha Rao", True)]

    profile = client.get("/students/1")
    assert b"Asha Rao" in profile.data
    assert b"Latha Rao" in profile.data


def test_create_student_without_first_name(client, students_repo):
    resp = client.post("/students/new", data={"first_name": ""})

    assert resp.status_code == 200
    assert b"First name is required" in resp.data
    assert students_repo.created == {}


def test_unknown_student(client):
    resp = client.get("/students/42")

    assert b"Student not found." in resp.data


def test_csv_import(client, students_repo):
    payload = "\ufefffirst_name,last_name,class\nAsha,Rao,Class 1\nRavi,Kumar,Class 2\n".encode("utf-8")

    resp = client.post(
        "/students/import",
        data={"file": (io.BytesIO(payload), "students.csv")},
        content_type="multipart/form-data",
    )

    assert resp.status_code == 200
    assert b"2 succeeded, 0 failed." in resp.data
    assert [d.class_id for d in students_repo.created.values()] == [1, 2]


def test_save_attendance_form(client, students_repo, attendance_repo):
    students_repo.create_student(StudentFormData(first_name="Asha", class_id=1))
    students_repo.create_student(StudentFormData(first_name="Ravi", class_id=1))

    resp = client.post(
        "/attendance",
        data={"date": "2024-02-01", "class_id": "1", "status_1": "present", "status_2": "leave"},
    )

    assert resp.status_code == 302
    assert attendance_repo.rows == {(1, date(2024, 2, 1)): "present", (2, date(2024, 2, 1)): "leave"}

    page = client.get("/attendance/absentees?date=2024-02-01&class_id=1")
    assert b"Ravi" in page.data
    assert b"Asha" not in page.data


def test_save_attendance_bad_date(client, attendance_repo):
    resp = client.post("/attendance", data={"date": "2024/02/01", "status_1": "present"}, follow_redirects=True)

    assert b"Invalid date format. Use YYYY-MM-DD." in resp.data
    assert attendance_repo.rows == {}


def test_marking_page_lists_class(client, students_repo):
    students_repo.create_student(StudentFormData(first_name="Asha", admission_no="A-1", class_id=1))

    resp = client.get("/attendance?date=2024-02-01&class_id=1")

    assert resp.status_code == 200
    assert b'name="status_1" value="present"' in resp.data


def test_report_csv_export(client, students_repo, attendance_repo):
    students_repo.create_student(StudentFormData(first_name="Asha", admission_no="A-1", class_id=1))
    attendance_repo.add(1, date(2024, 2, 1), "present")
    attendance_repo.add(1, date(2024, 2, 2), "late")
    attendance_repo.add(1, date(2024, 2, 3), "absent")

    resp = client.get("/attendance/reports.csv?month=2024-02&class_id=1")

    assert resp.status_code == 200
    assert resp.mimetype == "text/csv"
    assert "attendance_2024-02_Class_1.csv" in resp.headers["Content-Disposition"]
    lines = resp.data.decode("utf-8-sig").splitlines()
    assert lines[0] == "admission_no,name,present,late,leave,absent,marked,percent"
    assert lines[1] == "A-1,Asha,1,1,0,1,3,66.7%"


def test_report_page(client, students_repo):
    students_repo.create_student(StudentFormData(first_name="Asha", class_id=1))

    resp = client.get("/attendance/reports?month=2024-02&class_id=1")

    assert b"29 days" in resp.data
    assert "—".encode() in resp.data


def test_absentees_page(client, students_repo, attendance_repo):
    students_repo.create_student(StudentFormData(first_name="Asha", admission_no="A-1", class_id=1))
    students_repo.create_student(StudentFormData(first_name="Ravi", admission_no="A-2", class_id=1))
    students_repo.create_student(StudentFormData(first_name="Meera", admission_no="B-1", class_id=2))
    d = date(2024, 2, 1)
    attendance_repo.add(1, d, "present")
    attendance_repo.add(2, d, "absent")
    attendance_repo.add(3, d, "leave")

    resp = client.get("/attendance/absentees?date=2024-02-01&class_id=1")

    assert resp.status_code == 200
    assert b"Absentees for 2024-02-01" in resp.data
    assert b"Ravi" in resp.data
    assert b"Asha" not in resp.data
    assert b"Meera" not in resp.data


def test_absentees_page_without_class(client):
    resp = client.get("/attendance/absentees")

    assert resp.status_code == 200
    assert b"No absentees." in resp.data


@pytest.mark.parametrize("month", ["2024-13", "0000-05"])
def test_report_page_with_bad_month(client, students_repo, month):
    students_repo.create_student(StudentFormData(first_name="Asha", class_id=1))

    resp = client.get(f"/attendance/reports?month={month}&class_id=1")

    assert resp.status_code == 200
    assert b"Setup required" not in resp.data
    assert b"Invalid month format. Use YYYY-MM." in resp.data
    assert b"Asha" not in resp.data


@pytest.mark.parametrize("month", ["2024-13", "0000-05"])
def test_report_csv_with_bad_month(client, students_repo, month):
    students_repo.create_student(StudentFormData(first_name="Asha", class_id=1))

    resp = client.get(f"/attendance/reports.csv?month={month}&class_id=1")

    assert resp.status_code == 302
    assert "/attendance/reports" in resp.headers["Location"]
    assert ".csv" not in resp.headers["Location"]

    page = client.get(resp.headers["Location"])
    assert page.status_code == 200
    assert b"alert-danger" in page.data
    assert b"Invalid month format. Use YYYY-MM." in page.data
