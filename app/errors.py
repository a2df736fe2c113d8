"""
errors.py - Error taxonomy and reporting
Single responsibility: typed failures for the review workflow and the
collaborator that records them.
"""

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class ReviewError(Exception):
    """Base class for review workflow failures."""


class LoadError(ReviewError):
    def __init__(self, partition: str, message: str):
        super().__init__(f"Failed to load {partition} requests: {message}")
        self.partition = partition


class TransitionError(ReviewError):
    def __init__(self, request_id: str, status: str, status_code: int | None = None, message: str = ""):
        detail = message or (f"HTTP {status_code}" if status_code is not None else "request failed")
        super().__init__(f"Failed to mark request {request_id} as {status}: {detail}")
        self.request_id = request_id
        self.status = status
        self.status_code = status_code


class InvalidRecordError(ReviewError):
    def __init__(self, message: str, record_id: str | None = None):
        super().__init__(message)
        self.record_id = record_id


LOGIN_MESSAGES: dict[str, str] = {
    "missing_fields": "Please fill in all fields",
    "invalid_id": "Wrong ID",
    "unreachable": "Unable to verify faculty ID. Please try again.",
}


class LoginError(ReviewError):
    def __init__(self, reason: str):
        super().__init__(LOGIN_MESSAGES.get(reason, reason))
        self.reason = reason


class ErrorReporter(Protocol):
    def report(self, error: Exception, *, context: str) -> None: ...


class LoggingErrorReporter:
    """Default reporter: log and carry on."""

    def __init__(self, log: logging.Logger | None = None):
        self.log = log or logger

    def report(self, error: Exception, *, context: str) -> None:
        self.log.error("%s: %s", context, error, exc_info=error)
