"""
filter_service.py - Filter helpers
Single responsibility: build RequestFilter and derive filtered views.
"""
from collections.abc import Iterable

from app.domain.filters import STATUS_FILTER_ALL, STATUS_FILTERS, RequestFilter
from app.domain.models import RequestStatus, StudentRequest


def build_filter(search_term: str | None = "", status: str | None = STATUS_FILTER_ALL) -> RequestFilter:
    return RequestFilter(
        search_term=search_term or "",
        status=status or STATUS_FILTER_ALL,
    )


def matches(request: StudentRequest, filter: RequestFilter) -> bool:
    term = filter.search_term.lower()
    if term and term not in (request.name or "").lower():
        return False
    # Unrecognized tokens fall through to "all"
    if filter.status == STATUS_FILTER_ALL or filter.status not in STATUS_FILTERS:
        return True
    return request.status == filter.status


def filter_requests(requests: Iterable[StudentRequest], filter: RequestFilter) -> list[StudentRequest]:
    return [r for r in requests if matches(r, filter)]


def partition_by_status(requests: Iterable[StudentRequest]) -> dict[RequestStatus, list[StudentRequest]]:
    requests = list(requests)
    return {
        status: [r for r in requests if r.status == status]
        for status in RequestStatus
    }


def count_by_status(requests: Iterable[StudentRequest]) -> dict[RequestStatus, int]:
    return {status: len(items) for status, items in partition_by_status(requests).items()}
