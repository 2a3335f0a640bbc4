"""
Student business logic.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from core.db import Database

from . import repository

logger = logging.getLogger(__name__)


def _to_student(row: dict) -> dict:
    return {"id": int(row["id"]), "name": str(row["name"])}


def _clean_name(name: str | None) -> str:
    name = (name or "").strip()
    if not name:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="name is required")
    return name


async def list_students(database: Database) -> dict:
    return {"items": [_to_student(row) for row in await repository.list_students(database)]}


async def create_student(database: Database, *, name: str | None) -> dict:
    name = _clean_name(name)
    student = _to_student(await repository.insert_student(database, name=name))
    logger.info("student_created id=%s", student["id"])
    return student


async def update_student(database: Database, student_id: str, *, name: str | None) -> dict:
    # Blank names are rejected before any store round trip.
    name = _clean_name(name)
    row = await repository.update_student(database, student_id, name=name)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="student not found")
    student = _to_student(row)
    logger.info("student_updated id=%s", student["id"])
    return student
