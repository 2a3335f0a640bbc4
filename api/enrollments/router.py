"""
Enrollment API endpoints (a student's courses).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from core.db import Database, get_database

from . import schemas, service

router = APIRouter()


@router.get("/students/{student_id}/courses", response_model=schemas.StudentCoursesResponse)
async def list_student_courses(
    student_id: str,
    database: Database = Depends(get_database),
) -> dict:
    return await service.list_courses_for_student(database, student_id)


@router.post("/students/{student_id}/courses", response_model=schemas.EnrollmentResponse)
async def add_course_for_student(
    student_id: str,
    request: schemas.EnrollRequest,
    database: Database = Depends(get_database),
) -> dict:
    return await service.enroll(database, student_id, course_id=request.course_id)


@router.delete(
    "/students/{student_id}/courses/{course_id}",
    response_model=schemas.RemovedEnrollmentResponse,
)
async def remove_course_for_student(
    student_id: str,
    course_id: str,
    database: Database = Depends(get_database),
) -> dict:
    return await service.remove(database, student_id, course_id)
