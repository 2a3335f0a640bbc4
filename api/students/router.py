"""
Student API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core.db import Database, get_database

from . import schemas, service

router = APIRouter()


@router.get("/students", response_model=schemas.StudentListResponse)
async def list_students(database: Database = Depends(get_database)) -> dict:
    return await service.list_students(database)


@router.post("/students", response_model=schemas.StudentResponse)
async def create_student(
    request: schemas.StudentBody,
    database: Database = Depends(get_database),
) -> dict:
    return await service.create_student(database, name=request.name)


@router.put("/students/{student_id}", response_model=schemas.StudentResponse)
async def update_student(
    student_id: str,
    request: schemas.StudentBody,
    database: Database = Depends(get_database),
) -> dict:
    return await service.update_student(database, student_id, name=request.name)
