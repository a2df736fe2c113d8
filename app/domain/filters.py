"""
filters.py - Filter DTOs
Single responsibility: carry filter inputs for request views.
"""
from dataclasses import dataclass

STATUS_FILTER_ALL = "all"
STATUS_FILTERS: tuple[str, ...] = (STATUS_FILTER_ALL, "pending", "approved", "rejected")


@dataclass
class RequestFilter:
    search_term: str = ""
    status: str = STATUS_FILTER_ALL
