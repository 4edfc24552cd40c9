from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.validators import blank_to_none, parse_optional_id
from ..common.web import page_notice
from ..container import Container
from ..core.enums import Gender, GuardianRelation
from ..core.exceptions import DomainError
from .model import GuardianFormData, StudentFormData

GUARDIAN_SLOTS = 2


def _guardians_from_form(form) -> tuple[GuardianFormData, ...]:
    guardians = []
    for i in range(GUARDIAN_SLOTS):
        name = blank_to_none(form.get(f"guardian_{i}_name"))
        if not name:
            continue
        guardians.append(
            GuardianFormData(
                name=name,
                relation=blank_to_none(form.get(f"guardian_{i}_relation")) or GuardianRelation.GUARDIAN.value,
                phone=blank_to_none(form.get(f"guardian_{i}_phone")),
                email=blank_to_none(form.get(f"guardian_{i}_email")),
                occupation=blank_to_none(form.get(f"guardian_{i}_occupation")),
                address=blank_to_none(form.get(f"guardian_{i}_address")),
                is_primary=i == 0,
            )
        )
    return tuple(guardians)


def _student_from_form(form) -> StudentFormData:
    return StudentFormData(
        first_name=(form.get("first_name") or "").strip(),
        admission_no=blank_to_none(form.get("admission_no")),
        last_name=blank_to_none(form.get("last_name")),
        gender=blank_to_none(form.get("gender")),
        dob=blank_to_none(form.get("dob")),
        class_id=parse_optional_id(form.get("class_id")),
        section_id=parse_optional_id(form.get("section_id")),
        address=blank_to_none(form.get("address")),
        phone=blank_to_none(form.get("phone")),
        email=blank_to_none(form.get("email")),
        guardians=_guardians_from_form(form),
    )


def register(app: Flask, container: Container) -> None:
    @app.route("/students", methods=["GET"], endpoint="students")
    def students():
        q = (request.args.get("q") or "").strip()
        notice = None
        try:
            rows = container.student_service.search(q)
        except DomainError as e:
            notice = page_notice(e, page="students")
            rows = []

        return render_template("students/list.html", students=rows, q=q, notice=notice, active_page="students")

    @app.route("/students/new", methods=["GET", "POST"], endpoint="new_student")
    def new_student():
        notice = None
        if request.method == "POST":
            result = container.student_service.create_student(_student_from_form(request.form))
            if result.ok:
                flash("Student created.", "success")
                return redirect(url_for("student_profile", student_id=result.payload))
            if result.blocking:
                notice = result
            else:
                flash(result.message or "Could not create student.", "danger")

        classes, sections = [], []
        try:
            classes, sections = container.student_service.form_options()
        except DomainError as e:
            notice = notice or page_notice(e, page="new_student")

        return render_template(
            "students/new.html",
            form=request.form,
            classes=classes,
            sections=sections,
            genders=list(Gender),
            relations=list(GuardianRelation),
            guardian_slots=range(GUARDIAN_SLOTS),
            notice=notice,
            active_page="students",
        )

    @app.route("/students/<int:student_id>", methods=["GET"], endpoint="student_profile")
    def student_profile(student_id: int):
        notice = None
        try:
            profile = container.student_service.get_profile(student_id)
        except DomainError as e:
            notice = page_notice(e, page="student_profile")
            profile = None

        return render_template(
            "students/profile.html",
            profile=profile,
            notice=notice,
            active_page="students",
        )

    @app.route("/students/import", methods=["GET", "POST"], endpoint="import_students")
    def import_students():
        notice = None
        preview = []
        report = None

        if request.method == "POST":
            upload = request.files.get("file")
            if upload is None or not upload.filename:
                flash("Choose a CSV file to import.", "warning")
                return redirect(url_for("import_students"))

            try:
                text = upload.read().decode("utf-8-sig")
            except UnicodeDecodeError:
                flash("The file must be UTF-8 encoded CSV.", "danger")
                return redirect(url_for("import_students"))

            preview = container.student_service.preview_csv(text)
            result = container.student_service.import_csv(text)
            if result.ok:
                report = result.payload
                category = "warning" if report.failed else "success"
                flash(f"Imported {report.succeeded} students, {report.failed} failed.", category)
            elif result.blocking:
                notice = result
            else:
                flash(result.message or "Import failed.", "danger")

        return render_template(
            "students/import.html",
            preview=preview,
            report=report,
            notice=notice,
            active_page="students",
        )
