from __future__ import annotations

import csv
import io

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.datetime_utils import month_key, parse_month, today_local
from ..common.display import format_percent
from ..common.validators import parse_optional_id
from ..common.web import date_arg, page_notice
from ..container import Container
from ..core.enums import AttendanceStatus
from ..core.exceptions import DomainError
from ..core.results import ActionResult
from .model import AbsenteeList, ClassSelection, MarkingSheet, MonthlyReport

REPORT_CSV_FIELDS = [
    "admission_no",
    "name",
    "present",
    "late",
    "leave",
    "absent",
    "marked",
    "percent",
]


def register(app: Flask, container: Container) -> None:
    def _selection_args():
        return (
            parse_optional_id(request.args.get("class_id")),
            parse_optional_id(request.args.get("section_id")),
        )

    def _empty_selection(class_id, section_id) -> ClassSelection:
        return ClassSelection(class_id=class_id, section_id=section_id)

    @app.route("/attendance", methods=["GET"], endpoint="attendance")
    def attendance():
        attendance_date = date_arg(request.args.get("date"))
        class_id, section_id = _selection_args()

        notice = None
        try:
            sheet = container.attendance_service.load_marking_sheet(
                attendance_date=attendance_date,
                class_id=class_id,
                section_id=section_id,
            )
        except DomainError as e:
            notice = page_notice(e, page="attendance")
            sheet = MarkingSheet(attendance_date=attendance_date, selection=_empty_selection(class_id, section_id))

        return render_template(
            "attendance/marking.html",
            sheet=sheet,
            statuses=list(AttendanceStatus),
            notice=notice,
            active_page="attendance",
        )

    @app.route("/attendance", methods=["POST"], endpoint="save_attendance")
    def save_attendance():
        date_text = (request.form.get("date") or "").strip()
        records = []
        for key, value in request.form.items():
            if not key.startswith("status_"):
                continue
            student_id = parse_optional_id(key[len("status_"):])
            if student_id is not None:
                records.append((student_id, value))

        result: ActionResult = container.attendance_service.save_attendance(date_text=date_text, records=records)
        if result.ok:
            flash(f"Attendance saved for {len(records)} students.", "success")
        else:
            flash(result.message or "Could not save attendance.", "danger")

        params = {"date": date_text or None}
        for name in ("class_id", "section_id"):
            if request.form.get(name):
                params[name] = request.form.get(name)
        return redirect(url_for("attendance", **{k: v for k, v in params.items() if v}))

    @app.route("/attendance/absentees", methods=["GET"], endpoint="absentees")
    def absentees():
        attendance_date = date_arg(request.args.get("date"))
        class_id, section_id = _selection_args()

        notice = None
        try:
            data = container.attendance_service.load_absentees(
                attendance_date=attendance_date,
                class_id=class_id,
                section_id=section_id,
            )
        except DomainError as e:
            notice = page_notice(e, page="absentees")
            data = AbsenteeList(attendance_date=attendance_date, selection=_empty_selection(class_id, section_id))

        return render_template("attendance/absentees.html", data=data, notice=notice, active_page="attendance")

    def _load_report():
        month = (request.args.get("month") or "").strip() or month_key(today_local())
        class_id, section_id = _selection_args()
        return container.attendance_service.build_monthly_report(
            month=month,
            class_id=class_id,
            section_id=section_id,
        )

    @app.route("/attendance/reports", methods=["GET"], endpoint="attendance_report")
    def attendance_report():
        notice = None
        try:
            report = _load_report()
        except DomainError as e:
            notice = page_notice(e, page="attendance_report")
            month = month_key(today_local())
            current = parse_month(month)
            class_id, section_id = _selection_args()
            report = MonthlyReport(
                month=month,
                start=current.start,
                end=current.end,
                days_in_month=current.days_in_month,
                selection=_empty_selection(class_id, section_id),
            )

        return render_template("attendance/report.html", report=report, notice=notice, active_page="attendance")

    def _write_report_csv(*, report: MonthlyReport, filename: str):
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=REPORT_CSV_FIELDS)
        writer.writeheader()
        for row in report.rows:
            s = row.summary
            writer.writerow(
                {
                    "admission_no": row.student.admission_no or "",
                    "name": row.student.name,
                    "present": s.present,
                    "late": s.late,
                    "leave": s.leave,
                    "absent": s.absent,
                    "marked": s.marked,
                    "percent": format_percent(s.percent),
                }
            )

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/attendance/reports.csv", methods=["GET"], endpoint="attendance_report_csv")
    def attendance_report_csv():
        try:
            report = _load_report()
        except DomainError as e:
            result = page_notice(e, page="attendance_report_csv")
            flash(result.message or "Could not build the report.", "danger")
            return redirect(url_for("attendance_report", **request.args))

        parts = ["attendance", report.month]
        if report.selection.class_name:
            parts.append(report.selection.class_name.replace(" ", "_"))
        if report.selection.section_name:
            parts.append(report.selection.section_name.replace(" ", "_"))
        return _write_report_csv(report=report, filename="_".join(parts) + ".csv")
