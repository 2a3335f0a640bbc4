"""
Pydantic schemas for student endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel


class StudentBody(BaseModel):
    name: str | None = None


class StudentResponse(BaseModel):
    id: int
    name: str


class StudentListResponse(BaseModel):
    items: list[StudentResponse]
