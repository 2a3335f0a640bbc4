"""
Course persistence (raw SQL).

Path ids arrive as raw strings and are cast by Postgres, so a non-numeric id
is a store error rather than a validation error.
"""

from __future__ import annotations

from core.db import Database

LIST_COURSES_SQL = """
SELECT id, code, title
FROM courses
ORDER BY code ASC
"""

INSERT_COURSE_SQL = """
INSERT INTO courses (code, title)
VALUES ($1, $2)
RETURNING id, code, title
"""

UPDATE_COURSE_SQL = """
UPDATE courses
SET code = $1,
    title = $2
WHERE id = $3::text::integer
RETURNING id, code, title
"""


async def list_courses(database: Database) -> list[dict]:
    return await database.fetch_all(LIST_COURSES_SQL)


async def insert_course(database: Database, *, code: str, title: str) -> dict:
    row = await database.fetch_one(INSERT_COURSE_SQL, code, title)
    if row is None:
        raise RuntimeError("Failed to insert course.")
    return row


async def update_course(database: Database, course_id: str, *, code: str, title: str) -> dict | None:
    return await database.fetch_one(UPDATE_COURSE_SQL, code, title, course_id)
