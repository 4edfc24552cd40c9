from __future__ import annotations

from flask import Flask, abort, render_template

from ..container import Container

# endpoint -> (title, what the section will hold)
PLACEHOLDER_SECTIONS = {
    "academics": ("Academics", "Classes, sections, subjects and timetables are coming next."),
    "fees": ("Fees", "Fee structures, invoices and payment collection are coming next."),
    "staff": ("Staff", "Staff records and assignments are coming next."),
    "reports": ("Reports", "School-wide reports and exports are coming next."),
    "settings": ("Settings", "School profile and academic year settings are coming next."),
    "communication": ("Communication", "Announcements and guardian messaging are coming next."),
}

NAV_ITEMS = [
    ("dashboard", "Dashboard"),
    ("students", "Students"),
    ("attendance", "Attendance"),
    *((endpoint, title) for endpoint, (title, _) in PLACEHOLDER_SECTIONS.items()),
]


def register(app: Flask, container: Container) -> None:
    app.jinja_env.globals["nav_items"] = NAV_ITEMS

    def placeholder(section: str):
        if section not in PLACEHOLDER_SECTIONS:
            abort(404)
        title, description = PLACEHOLDER_SECTIONS[section]
        return render_template(
            "placeholder.html",
            title=title,
            description=description,
            active_page=section,
        )

    for section in PLACEHOLDER_SECTIONS:
        app.add_url_rule(
            f"/{section}",
            endpoint=section,
            view_func=lambda section=section: placeholder(section),
            methods=["GET"],
        )
