"""
Enrollment business logic.

Uniqueness policy: enrolling a student in a course they already take is a
no-op that answers like a fresh enrollment.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from core.db import Database

from . import repository

logger = logging.getLogger(__name__)


def _to_pair(row: dict) -> dict:
    return {"student_id": int(row["student_id"]), "course_id": int(row["course_id"])}


async def list_courses_for_student(database: Database, student_id: str) -> dict:
    # Unknown students simply have no courses; no existence check.
    rows = await repository.list_courses_for_student(database, student_id)
    items = [
        {"id": int(row["id"]), "code": str(row["code"]), "title": str(row["title"])}
        for row in rows
    ]
    return {"count": len(items), "items": items}


async def enroll(database: Database, student_id: str, *, course_id: int) -> dict:
    row = await repository.insert_enrollment(database, student_id, course_id=course_id)
    pair = _to_pair(row)
    event = "enrollment_added" if int(row["inserted"]) else "enrollment_exists"
    logger.info("%s student_id=%s course_id=%s", event, pair["student_id"], pair["course_id"])
    return pair


async def remove(database: Database, student_id: str, course_id: str) -> dict:
    rows = await repository.delete_enrollment(database, student_id, course_id)
    if not rows:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="enrollment not found")
    pair = _to_pair(rows[0])
    logger.info(
        "enrollment_removed student_id=%s course_id=%s rows=%s",
        pair["student_id"],
        pair["course_id"],
        len(rows),
    )
    return {**pair, "status": "removed"}
