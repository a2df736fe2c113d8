"""
request_store.py - Request store client
Single responsibility: mirror remote request state in memory and mediate
status transitions.

Failures of the remote service never propagate out of this module: they are
handed to the error reporter and the in-memory collection is left as it was.
"""

import asyncio
import logging
from collections.abc import Callable
from enum import Enum

import httpx

from app.domain.models import TRANSITION_TARGETS, RequestStatus, StudentRequest
from app.errors import (
    ErrorReporter,
    InvalidRecordError,
    LoadError,
    LoggingErrorReporter,
    TransitionError,
)
from app.remote.repositories import requests as request_repo

logger = logging.getLogger(__name__)

# Merge order of the three partitions; later partitions win on duplicate ids
LOAD_ORDER: tuple[RequestStatus, ...] = (
    RequestStatus.PENDING,
    RequestStatus.APPROVED,
    RequestStatus.REJECTED,
)


class TransitionOutcome(str, Enum):
    APPLIED = "applied"
    FAILED = "failed"
    SKIPPED = "skipped"


def merge_partitions(partitions: dict[RequestStatus, list]) -> list[StudentRequest]:
    """Tag and concatenate raw partition records into one collection.

    Invalid records are skipped with a warning. An id seen twice keeps only
    the record merged last.
    """
    merged: dict[str, StudentRequest] = {}
    for status in LOAD_ORDER:
        for record in partitions.get(status, []):
            try:
                req = StudentRequest.from_api(record, status)
            except InvalidRecordError as exc:
                logger.warning("Skipping %s record: %s", status.value, exc)
                continue
            previous = merged.pop(req.id, None)
            if previous is not None:
                logger.warning(
                    "Request %s appears as both %s and %s; keeping %s",
                    req.id,
                    previous.status.value,
                    status.value,
                    status.value,
                )
            merged[req.id] = req
    return list(merged.values())


class RequestStore:
    def __init__(
        self,
        client: httpx.AsyncClient,
        reporter: ErrorReporter | None = None,
        on_change: Callable[[], None] | None = None,
    ):
        self.client = client
        self.reporter = reporter or LoggingErrorReporter(logger)
        # Called whenever the collection or the processing set changes
        self.on_change = on_change
        self._requests: list[StudentRequest] = []
        self._processing: set[str] = set()
        self.loaded = False

    def _changed(self) -> None:
        # Listener errors are logged, never raised into load() or transition()
        if not self.on_change:
            return
        try:
            self.on_change()
        except Exception:
            logger.exception("Change listener failed")

    @property
    def requests(self) -> tuple[StudentRequest, ...]:
        return tuple(self._requests)

    @property
    def processing(self) -> frozenset[str]:
        return frozenset(self._processing)

    def get(self, request_id: str) -> StudentRequest | None:
        return next((r for r in self._requests if r.id == request_id), None)

    def is_processing(self, request_id: str) -> bool:
        return request_id in self._processing

    async def load(self) -> bool:
        """Replace the collection with a fresh copy of all three partitions.

        Returns False (and keeps the previous collection) if any partition
        could not be fetched.
        """
        try:
            results = await asyncio.gather(
                *(request_repo.list_partition(self.client, status) for status in LOAD_ORDER)
            )
        except LoadError as exc:
            self.reporter.report(exc, context="Error fetching requests")
            return False

        collection = merge_partitions(dict(zip(LOAD_ORDER, results)))
        self._requests = collection
        self.loaded = True
        logger.info("Loaded %d requests", len(collection))
        self._changed()
        return True

    async def transition(self, request_id: str, new_status: RequestStatus | str) -> TransitionOutcome:
        """Move a request to approved/rejected on the server.

        On success the request is dropped from the collection; it comes back
        under its new status on the next load().
        """
        status = RequestStatus(new_status)
        if status not in TRANSITION_TARGETS:
            raise ValueError(f"Cannot transition a request to {status.value}")

        if request_id in self._processing:
            logger.debug("Request %s is already being processed", request_id)
            return TransitionOutcome.SKIPPED

        self._processing.add(request_id)
        try:
            self._changed()
            await request_repo.update_status(self.client, request_id, status)
        except TransitionError as exc:
            self.reporter.report(exc, context="Error updating request status")
            outcome = TransitionOutcome.FAILED
        else:
            self._requests = [r for r in self._requests if r.id != request_id]
            logger.info("Request %s marked as %s", request_id, status.value)
            outcome = TransitionOutcome.APPLIED
        finally:
            self._processing.discard(request_id)

        self._changed()
        return outcome
