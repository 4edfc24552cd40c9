"""School administration package.

Organized by feature modules (students, attendance, dashboard, ...) with a
thin Flask controller layer over service and repository layers.
"""
