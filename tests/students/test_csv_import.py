from __future__ import annotations

from src.school_admin.school_admin.academics.lookups import ClassSectionLookup
from src.school_admin.school_admin.academics.model import SchoolClass, Section
from src.school_admin.school_admin.students.csv_import import iter_students, map_row_to_student, parse_csv

LOOKUP = ClassSectionLookup.from_rows(
    [SchoolClass(class_id=1, name="Class 1"), SchoolClass(class_id=2, name="Class 2")],
    [Section(section_id=10, class_id=1, name="A"), Section(section_id=20, class_id=2, name="A")],
)


def test_parse_normalises_headers_and_strips_quotes():
    text = '"First_Name", Last_Name ,Class\n"Asha", Rao ,"Class 1"\n\n'

    rows = parse_csv(text)

    assert rows == [{"first_name": "Asha", "last_name": "Rao", "class": "Class 1"}]


def test_parse_drops_rows_with_wrong_field_count():
    text = "first_name,last_name\nAsha,Rao\nRavi\nMeera,Iyer,extra\n"

    assert [r["first_name"] for r in parse_csv(text)] == ["Asha"]


def test_parse_handles_crlf_line_endings():
    rows = parse_csv("first_name,last_name\r\nAsha,Rao\r\n")

    assert rows == [{"first_name": "Asha", "last_name": "Rao"}]


def test_parse_empty_text():
    assert parse_csv("") == []
    assert parse_csv("\n \n") == []


def test_aliases_are_recognised():
    row = {
        "firstname": "Asha",
        "lastname": "Rao",
        "admission_number": "A-7",
        "date_of_birth": "2015-06-01",
        "phone_number": "98450",
        "class_name": "class 2",
        "section_name": "a",
        "gender": "Female",
    }

    data = map_row_to_student(row, LOOKUP)

    assert data.first_name == "Asha"
    assert data.last_name == "Rao"
    assert data.admission_no == "A-7"
    assert data.dob == "2015-06-01"
    assert data.phone == "98450"
    assert (data.class_id, data.section_id) == (2, 20)
    assert data.gender == "female"


def test_name_column_is_split():
    data = map_row_to_student({"name": "Asha Devi Rao"}, LOOKUP)

    assert data.first_name == "Asha"
    assert data.last_name == "Devi Rao"


def test_row_without_first_name_is_excluded():
    rows = [{"first_name": "Asha"}, {"last_name": "Rao", "admission_no": "X-1"}, {"name": ""}]

    students = list(iter_students(rows, LOOKUP))

    assert [s.first_name for s in students] == ["Asha"]


def test_unknown_class_leaves_class_unset():
    data = map_row_to_student({"first_name": "Asha", "class": "Class 9", "section": "A"}, LOOKUP)

    assert data is not None
    assert data.class_id is None
    assert data.section_id is None


def test_section_resolved_within_its_class():
    data = map_row_to_student({"first_name": "Asha", "class": "Class 1", "section": "B"}, LOOKUP)

    assert data.class_id == 1
    assert data.section_id is None


def test_guardian_columns_become_primary_guardian():
    row = {
        "first_name": "Asha",
        "guardian_name": "Latha Rao",
        "guardian_relation": "Mother",
        "guardian_phone": "90000",
    }

    data = map_row_to_student(row, LOOKUP)

    assert len(data.guardians) == 1
    g = data.guardians[0]
    assert (g.name, g.relation, g.phone, g.is_primary) == ("Latha Rao", "mother", "90000", True)


def test_no_guardian_without_guardian_name():
    data = map_row_to_student({"first_name": "Asha", "guardian_phone": "90000"}, LOOKUP)

    assert data.guardians == ()
