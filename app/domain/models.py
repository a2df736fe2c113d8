"""
models.py - Domain models
Single responsibility: typed containers for ID card requests.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any

from app.errors import InvalidRecordError


class RequestStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


# Statuses a pending request may be moved to
TRANSITION_TARGETS: frozenset[RequestStatus] = frozenset(
    {RequestStatus.APPROVED, RequestStatus.REJECTED}
)

# wire key -> attribute
_FIELD_MAP: dict[str, str] = {
    "registerNumber": "register_number",
    "dob": "dob",
    "department": "department",
    "year": "year",
    "section": "section",
    "libraryCode": "library_code",
    "reason": "reason",
    "photoUrl": "photo_url",
}


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float, bool)):
        return str(value)
    raise TypeError(f"unsupported value type: {type(value).__name__}")


@dataclass(frozen=True)
class StudentRequest:
    id: str
    name: str
    status: RequestStatus
    register_number: str = ""
    dob: str = ""
    department: str = ""
    year: str = ""
    section: str = ""
    library_code: str = ""
    reason: str = ""
    photo_url: str = ""

    def __getitem__(self, key):
        return getattr(self, key)

    @classmethod
    def from_api(cls, record: Any, status: RequestStatus) -> "StudentRequest":
        """Coerce one JSON record into a request tagged with ``status``.

        The server's own ``status`` key, if any, is ignored: the partition a
        record was fetched from decides its status.
        """
        if not isinstance(record, dict):
            raise InvalidRecordError(f"expected an object, got {type(record).__name__}")

        raw_id = record.get("_id")
        try:
            request_id = _as_text(raw_id).strip()
        except TypeError:
            request_id = ""
        if not request_id:
            raise InvalidRecordError("record has no _id")

        try:
            name = _as_text(record.get("name")).strip()
        except TypeError:
            name = ""
        if not name:
            raise InvalidRecordError(f"record {request_id} has no name", record_id=request_id)

        fields: dict[str, str] = {}
        for wire_key, attr in _FIELD_MAP.items():
            try:
                fields[attr] = _as_text(record.get(wire_key))
            except TypeError as exc:
                raise InvalidRecordError(
                    f"record {request_id} field {wire_key}: {exc}", record_id=request_id
                ) from exc

        return cls(id=request_id, name=name, status=RequestStatus(status), **fields)
