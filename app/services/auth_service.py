"""
auth_service.py - Login service layer
Single responsibility: validate login input and open/close the session.
"""
import logging

import httpx

from app.errors import LoginError
from app.remote.repositories import faculty as faculty_repo
from app.session import SessionContext

logger = logging.getLogger(__name__)


async def login(client: httpx.AsyncClient, session: SessionContext, name: str, faculty_id: str) -> None:
    name = (name or "").strip()
    faculty_id = (faculty_id or "").strip()
    if not name or not faculty_id:
        raise LoginError("missing_fields")

    try:
        valid = await faculty_repo.is_valid_faculty(client, faculty_id)
    except (httpx.HTTPError, ValueError) as exc:
        logger.error("Error checking faculty ID %s: %s", faculty_id, exc)
        raise LoginError("unreachable") from exc

    if not valid:
        raise LoginError("invalid_id")

    session.start(name, faculty_id)
    logger.info("Faculty %s signed in", faculty_id)


def logout(session: SessionContext) -> None:
    logger.info("Faculty %s signed out", session.faculty_id)
    session.end()
