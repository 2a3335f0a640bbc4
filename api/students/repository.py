"""
Student persistence (raw SQL).
"""

from __future__ import annotations

from core.db import Database

LIST_STUDENTS_SQL = """
SELECT id, name
FROM students
ORDER BY name ASC
"""

INSERT_STUDENT_SQL = """
INSERT INTO students (name)
VALUES ($1)
RETURNING id, name
"""

UPDATE_STUDENT_SQL = """
UPDATE students
SET name = $1
WHERE id = $2::text::integer
RETURNING id, name
"""


async def list_students(database: Database) -> list[dict]:
    return await database.fetch_all(LIST_STUDENTS_SQL)


async def insert_student(database: Database, *, name: str) -> dict:
    row = await database.fetch_one(INSERT_STUDENT_SQL, name)
    if row is None:
        raise RuntimeError("Failed to insert student.")
    return row


async def update_student(database: Database, student_id: str, *, name: str) -> dict | None:
    return await database.fetch_one(UPDATE_STUDENT_SQL, name, student_id)
