"""
Course business logic: trim, validate, shape responses.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from core.db import Database

from . import repository

logger = logging.getLogger(__name__)


def _to_course(row: dict) -> dict:
    return {
        "id": int(row["id"]),
        "code": str(row["code"]),
        "title": str(row["title"]),
    }


def _clean_code_and_title(code: str | None, title: str | None) -> tuple[str, str]:
    code = (code or "").strip()
    title = (title or "").strip()
    if not code or not title:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="code and title are required",
        )
    return code, title


async def list_courses(database: Database) -> dict:
    items = [_to_course(row) for row in await repository.list_courses(database)]
    return {"count": len(items), "items": items}


async def create_course(database: Database, *, code: str | None, title: str | None) -> dict:
    code, title = _clean_code_and_title(code, title)
    row = await repository.insert_course(database, code=code, title=title)
    course = _to_course(row)
    logger.info("course_created id=%s code=%s", course["id"], course["code"])
    return course


async def update_course(
    database: Database,
    course_id: str,
    *,
    code: str | None,
    title: str | None,
) -> dict:
    code, title = _clean_code_and_title(code, title)
    row = await repository.update_course(database, course_id, code=code, title=title)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="course not found")
    course = _to_course(row)
    logger.info("course_updated id=%s code=%s", course["id"], course["code"])
    return course
