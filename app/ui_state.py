"""
ui_state.py - Review view model
Filter state plus the callbacks the dashboard wires to its controls.
"""
from collections.abc import Callable

from app.domain.filters import RequestFilter
from app.domain.models import RequestStatus, StudentRequest
from app.services import filter_service
from app.services.request_store import RequestStore, TransitionOutcome
from app.session import SessionContext

NOTIFY_TITLES: dict[RequestStatus, str] = {
    RequestStatus.APPROVED: "Request Approved",
    RequestStatus.REJECTED: "Request Rejected",
}


class ReviewViewModel:
    def __init__(
        self,
        store: RequestStore,
        session: SessionContext,
        on_change: Callable[[], None] | None = None,
        notify: Callable[[str, str], None] | None = None,
    ):
        self.store = store
        self.session = session
        self.on_change = on_change
        self.notify = notify
        self.filter: RequestFilter = filter_service.build_filter()
        self.current_tab: str = RequestStatus.PENDING.value
        # Chain any listener the store already had
        self._store_listener = store.on_change
        store.on_change = self._changed

    def _changed(self) -> None:
        if self._store_listener:
            self._store_listener()
        if self.on_change:
            self.on_change()

    # --- filter state ---

    @property
    def search_term(self) -> str:
        return self.filter.search_term

    @property
    def status_filter(self) -> str:
        return self.filter.status

    def set_search_term(self, term: str | None) -> None:
        self.filter = filter_service.build_filter(term, self.filter.status)

    def set_status_filter(self, status: str | None) -> None:
        self.filter = filter_service.build_filter(self.filter.search_term, status)

    # --- derivations ---

    def filtered_requests(self) -> list[StudentRequest]:
        return filter_service.filter_requests(self.store.requests, self.filter)

    def partition_by_status(
        self, filtered: list[StudentRequest] | None = None
    ) -> dict[RequestStatus, list[StudentRequest]]:
        if filtered is None:
            filtered = self.filtered_requests()
        return filter_service.partition_by_status(filtered)

    def counts(self) -> dict[RequestStatus, int]:
        return filter_service.count_by_status(self.filtered_requests())

    def is_processing(self, request_id: str) -> bool:
        return self.store.is_processing(request_id)

    @property
    def teacher_display_name(self) -> str:
        return self.session.display_name

    # --- actions ---

    async def refresh(self) -> bool:
        return await self.store.load()

    async def approve(self, request_id: str) -> TransitionOutcome:
        return await self._transition(request_id, RequestStatus.APPROVED)

    async def reject(self, request_id: str) -> TransitionOutcome:
        return await self._transition(request_id, RequestStatus.REJECTED)

    async def _transition(self, request_id: str, status: RequestStatus) -> TransitionOutcome:
        outcome = await self.store.transition(request_id, status)
        if outcome is TransitionOutcome.APPLIED and self.notify:
            self.notify(
                NOTIFY_TITLES[status],
                f"Student ID card request has been {status.value}.",
            )
        return outcome
