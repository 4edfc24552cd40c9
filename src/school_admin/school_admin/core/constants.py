"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

STUDENT_LIST_LIMIT = 50
UPCOMING_EVENTS_DAYS = 7
IMPORT_PREVIEW_ROWS = 5
DEFAULT_MARK_STATUS = "present"
EMPTY_CELL = "—"
