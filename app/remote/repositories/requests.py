"""
requests.py - Request repository
Single responsibility: remote reads and status writes for ID card requests.
"""

from urllib.parse import quote

import httpx

from app.config import (
    APPROVED_HISTORY_PATH,
    PENDING_PATH,
    REJECTED_HISTORY_PATH,
    STATUS_PATH_TEMPLATE,
)
from app.domain.models import RequestStatus
from app.errors import LoadError, TransitionError

PARTITION_PATHS: dict[RequestStatus, str] = {
    RequestStatus.PENDING: PENDING_PATH,
    RequestStatus.APPROVED: APPROVED_HISTORY_PATH,
    RequestStatus.REJECTED: REJECTED_HISTORY_PATH,
}


async def list_partition(client: httpx.AsyncClient, status: RequestStatus) -> list:
    """Fetch the raw records of one status partition."""
    partition = status.value
    try:
        resp = await client.get(PARTITION_PATHS[status])
        resp.raise_for_status()
        data = resp.json()
    except httpx.HTTPError as exc:
        raise LoadError(partition, str(exc)) from exc
    except ValueError as exc:
        raise LoadError(partition, f"invalid JSON ({exc})") from exc
    if not isinstance(data, list):
        raise LoadError(partition, f"expected a JSON array, got {type(data).__name__}")
    return data


async def update_status(client: httpx.AsyncClient, request_id: str, status: RequestStatus) -> None:
    path = STATUS_PATH_TEMPLATE.format(request_id=quote(request_id, safe=""))
    try:
        resp = await client.patch(path, json={"status": status.value})
    except httpx.HTTPError as exc:
        raise TransitionError(request_id, status.value, message=str(exc)) from exc
    if not resp.is_success:
        raise TransitionError(request_id, status.value, status_code=resp.status_code)
