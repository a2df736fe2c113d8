import asyncio

import httpx
import pytest

from app.domain.models import RequestStatus
from app.services.request_store import RequestStore, TransitionOutcome
from app.session import SessionContext
from app.ui_state import ReviewViewModel

from conftest import record


@pytest.fixture
def session():
    s = SessionContext()
    s.start("Meena Raj", "FAC001")
    return s


@pytest.fixture
def notifications():
    return []


@pytest.fixture
def vm(client, reporter, session, notifications):
    store = RequestStore(client, reporter=reporter)
    return ReviewViewModel(
        store,
        session,
        notify=lambda title, description: notifications.append((title, description)),
    )


def seed(api):
    api.set_json("GET", "/api/pending", [record("1", "Asha"), record("4", "Deepak")])
    api.set_json("GET", "/api/acchistoryids", [record("2", "Bala")])
    api.set_json("GET", "/api/rejhistoryids", [record("3", "asha K")])


@pytest.mark.asyncio
async def test_search_scenario(api, vm):
    seed(api)
    await vm.refresh()

    vm.set_search_term("asha")
    vm.set_status_filter("all")

    assert [r.id for r in vm.filtered_requests()] == ["1", "3"]


@pytest.mark.asyncio
async def test_defaults_show_everything(api, vm):
    seed(api)
    await vm.refresh()
    assert vm.search_term == ""
    assert vm.status_filter == "all"
    assert [r.id for r in vm.filtered_requests()] == ["1", "4", "2", "3"]


@pytest.mark.asyncio
async def test_partition_and_counts_follow_filters(api, vm):
    seed(api)
    await vm.refresh()
    vm.set_search_term("a")

    parts = vm.partition_by_status()
    assert [r.id for r in parts[RequestStatus.PENDING]] == ["1", "4"]
    assert [r.id for r in parts[RequestStatus.APPROVED]] == ["2"]
    assert [r.id for r in parts[RequestStatus.REJECTED]] == ["3"]

    vm.set_status_filter("pending")
    assert vm.counts() == {
        RequestStatus.PENDING: 2,
        RequestStatus.APPROVED: 0,
        RequestStatus.REJECTED: 0,
    }


@pytest.mark.asyncio
async def test_partition_accepts_precomputed_sequence(api, vm):
    seed(api)
    await vm.refresh()
    filtered = vm.filtered_requests()[:1]
    parts = vm.partition_by_status(filtered)
    assert [r.id for r in parts[RequestStatus.PENDING]] == ["1"]
    assert parts[RequestStatus.APPROVED] == []


@pytest.mark.asyncio
async def test_set_search_term_none_matches_all(api, vm):
    seed(api)
    await vm.refresh()
    vm.set_search_term(None)
    assert len(vm.filtered_requests()) == 4


@pytest.mark.asyncio
async def test_approve_removes_request_and_notifies(api, vm, notifications):
    seed(api)
    await vm.refresh()
    api.set_json("PATCH", "/api/requests/1/status", {"ok": True})

    outcome = await vm.approve("1")

    assert outcome is TransitionOutcome.APPLIED
    assert "1" not in [r.id for r in vm.filtered_requests()]
    assert notifications == [
        ("Request Approved", "Student ID card request has been approved."),
    ]


@pytest.mark.asyncio
async def test_reject_notifies_with_rejected_wording(api, vm, notifications):
    seed(api)
    await vm.refresh()
    api.set_json("PATCH", "/api/requests/4/status", {"ok": True})

    await vm.reject("4")

    assert notifications == [
        ("Request Rejected", "Student ID card request has been rejected."),
    ]
    assert [r.id for r in vm.partition_by_status()[RequestStatus.PENDING]] == ["1"]


@pytest.mark.asyncio
async def test_failed_transition_is_silent_for_the_user(api, vm, reporter, notifications):
    seed(api)
    await vm.refresh()
    api.set_json("PATCH", "/api/requests/1/status", {}, status_code=503)

    outcome = await vm.approve("1")

    assert outcome is TransitionOutcome.FAILED
    assert notifications == []
    assert len(reporter.errors) == 1
    assert [r.id for r in vm.partition_by_status()[RequestStatus.PENDING]] == ["1", "4"]
    assert not vm.is_processing("1")


@pytest.mark.asyncio
async def test_failed_refresh_keeps_previous_view(api, vm, reporter):
    seed(api)
    await vm.refresh()
    api.set_text("GET", "/api/pending", "not json")

    assert await vm.refresh() is False

    assert len(vm.filtered_requests()) == 4
    assert len(reporter.errors) == 1


@pytest.mark.asyncio
async def test_on_change_fires_for_store_updates(api, vm):
    seed(api)
    changes = []
    vm.on_change = lambda: changes.append(vm.is_processing("1"))
    await vm.refresh()
    api.set_json("PATCH", "/api/requests/1/status", {"ok": True})

    await vm.approve("1")

    # load, processing started, processing settled
    assert changes == [False, True, False]


def test_teacher_display_name(vm):
    assert vm.teacher_display_name == "Dr. Meena Raj"


@pytest.mark.asyncio
async def test_store_listener_is_kept_when_wrapped(api, client, reporter, session):
    seed(api)
    store_changes, vm_changes = [], []
    store = RequestStore(client, reporter=reporter, on_change=lambda: store_changes.append(1))
    vm = ReviewViewModel(store, session, on_change=lambda: vm_changes.append(1))

    await vm.refresh()

    assert store_changes == [1]
    assert vm_changes == [1]


@pytest.mark.asyncio
async def test_double_approve_sends_one_patch(reporter, session, notifications):
    release = asyncio.Event()
    patches = []

    async def handler(request: httpx.Request) -> httpx.Response:
        if request.method == "PATCH":
            patches.append(request.url.path)
            await release.wait()
            return httpx.Response(200, json={"ok": True})
        if request.url.path == "/api/pending":
            return httpx.Response(200, json=[record("1", "Asha")])
        return httpx.Response(200, json=[])

    async with httpx.AsyncClient(
        base_url="https://review.test", transport=httpx.MockTransport(handler)
    ) as client:
        vm = ReviewViewModel(
            RequestStore(client, reporter=reporter),
            session,
            notify=lambda title, description: notifications.append(title),
        )
        await vm.refresh()

        first = asyncio.create_task(vm.approve("1"))
        await asyncio.sleep(0)
        assert vm.is_processing("1")

        assert await vm.approve("1") is TransitionOutcome.SKIPPED

        release.set()
        assert await first is TransitionOutcome.APPLIED

    assert patches == ["/api/requests/1/status"]
    assert notifications == ["Request Approved"]
    assert not vm.is_processing("1")
