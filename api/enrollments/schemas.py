"""
Pydantic schemas for enrollment endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, StrictInt

from courses.schemas import CourseListResponse


class EnrollRequest(BaseModel):
    # `true`, "1" and 1.0 are rejected rather than coerced to 1.
    course_id: StrictInt


class EnrollmentResponse(BaseModel):
    student_id: int
    course_id: int


class RemovedEnrollmentResponse(EnrollmentResponse):
    status: str = "removed"


class StudentCoursesResponse(CourseListResponse):
    """
    Same `{count, items}` shape as the course listing.
    """
