"""Shared fixtures: a fake review API served through httpx.MockTransport."""

from __future__ import annotations

import json
from collections.abc import Callable

import httpx
import pytest
import pytest_asyncio

from app.domain.models import RequestStatus, StudentRequest


class FakeReviewApi:
    """In-memory stand-in for the remote request service.

    Each path maps to a response (or an exception to raise). Every request
    seen is recorded so tests can assert on network traffic.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Callable[[], httpx.Response] | Exception] = {}
        self.calls: list[httpx.Request] = []

    def set(self, method: str, path: str, response: Callable[[], httpx.Response] | Exception) -> None:
        self.routes[(method, path)] = response

    def set_json(self, method: str, path: str, payload, status_code: int = 200) -> None:
        self.set(method, path, lambda: httpx.Response(status_code, json=payload))

    def set_text(self, method: str, path: str, text: str, status_code: int = 200) -> None:
        self.set(method, path, lambda: httpx.Response(status_code, text=text))

    def calls_to(self, method: str, path: str) -> list[httpx.Request]:
        return [c for c in self.calls if c.method == method and c.url.path == path]

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        result = self.routes.get((request.method, request.url.path))
        if result is None:
            return httpx.Response(404, json={"error": "not found"})
        if isinstance(result, Exception):
            raise result
        return result()


@pytest.fixture
def api() -> FakeReviewApi:
    fake = FakeReviewApi()
    fake.set_json("GET", "/api/pending", [])
    fake.set_json("GET", "/api/acchistoryids", [])
    fake.set_json("GET", "/api/rejhistoryids", [])
    return fake


@pytest_asyncio.fixture
async def client(api: FakeReviewApi):
    async with httpx.AsyncClient(
        base_url="https://review.test", transport=httpx.MockTransport(api.handler)
    ) as c:
        yield c


class RecordingReporter:
    def __init__(self) -> None:
        self.errors: list[tuple[Exception, str]] = []

    def report(self, error: Exception, *, context: str) -> None:
        self.errors.append((error, context))


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


def record(request_id: str, name: str, **extra) -> dict:
    data = {
        "_id": request_id,
        "registerNumber": f"REG{request_id}",
        "name": name,
        "dob": "2004-01-01",
        "department": "CSE",
        "year": "III",
        "section": "A",
        "libraryCode": f"LIB{request_id}",
        "reason": "Lost card",
        "photoUrl": f"https://photos.test/{request_id}.jpg",
    }
    data.update(extra)
    return data


def make_request(request_id: str, name: str, status: str) -> StudentRequest:
    return StudentRequest.from_api(record(request_id, name), RequestStatus(status))


def body_of(request: httpx.Request) -> dict:
    return json.loads(request.content)
