"""
helpers.py - UI helper functions
Single responsibility: small formatting helpers used across UI.
"""
from app.config import COLOR_APPROVED, COLOR_PENDING, COLOR_REJECTED, COLOR_PRIMARY
from app.session import initials

__all__ = ["initials", "status_color", "status_label", "filter_color", "detail_rows"]


def status_color(status: str) -> str:
    if status == "approved":
        return COLOR_APPROVED
    if status == "rejected":
        return COLOR_REJECTED
    return COLOR_PENDING


def filter_color(token: str) -> str:
    return COLOR_PRIMARY if token == "all" else status_color(token)


def status_label(status: str) -> str:
    """'pending' -> 'Pending'."""
    status = str(getattr(status, "value", status))
    return status[:1].upper() + status[1:]


def detail_rows(request) -> list[tuple[str, str]]:
    return [
        ("Name", request["name"]),
        ("Register Number", request["register_number"]),
        ("DOB", request["dob"]),
        ("Department", request["department"]),
        ("Year", request["year"]),
        ("Section", request["section"]),
        ("Library Code", request["library_code"]),
        ("Reason", request["reason"]),
    ]
