"""
Course API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core.db import Database, get_database

from . import schemas, service

router = APIRouter()


@router.get("/courses", response_model=schemas.CourseListResponse)
async def list_courses(database: Database = Depends(get_database)) -> dict:
    return await service.list_courses(database)


@router.post("/courses", response_model=schemas.CourseResponse)
async def create_course(
    request: schemas.CourseBody,
    database: Database = Depends(get_database),
) -> dict:
    # Answers 200, not 201.
    return await service.create_course(database, code=request.code, title=request.title)


@router.put("/courses/{course_id}", response_model=schemas.CourseResponse)
async def update_course(
    course_id: str,
    request: schemas.CourseBody,
    database: Database = Depends(get_database),
) -> dict:
    return await service.update_course(
        database,
        course_id,
        code=request.code,
        title=request.title,
    )
