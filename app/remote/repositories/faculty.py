"""
faculty.py - Faculty repository
Single responsibility: faculty id lookups.
"""

from urllib.parse import quote

import httpx

from app.config import CHECK_FACULTY_PATH_TEMPLATE


async def is_valid_faculty(client: httpx.AsyncClient, faculty_id: str) -> bool:
    path = CHECK_FACULTY_PATH_TEMPLATE.format(faculty_id=quote(faculty_id, safe=""))
    resp = await client.get(path)
    data = resp.json()
    return isinstance(data, dict) and bool(data.get("valid"))
