"""
Pydantic schemas for course endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel


class CourseBody(BaseModel):
    # Blank and missing values are rejected by the service after trimming.
    code: str | None = None
    title: str | None = None


class CourseResponse(BaseModel):
    id: int
    code: str
    title: str


class CourseListResponse(BaseModel):
    count: int
    items: list[CourseResponse]
