"""
Enrollment persistence (raw SQL).

Referential integrity (student/course must exist) is left to the store's
foreign keys; nothing here checks it up front.
"""

from __future__ import annotations

from core.db import Database

LIST_COURSES_FOR_STUDENT_SQL = """
SELECT c.id, c.code, c.title
FROM enrollments e
JOIN courses c ON c.id = e.course_id
WHERE e.student_id = $1::text::integer
ORDER BY c.code ASC
"""

# Single statement: inserts only when the pair is not already enrolled, and
# always answers one row with the ids as the store cast them.
INSERT_ENROLLMENT_SQL = """
WITH inserted AS (
    INSERT INTO enrollments (student_id, course_id)
    SELECT $1::text::integer, $2::integer
    WHERE NOT EXISTS (
        SELECT 1
        FROM enrollments
        WHERE student_id = $1::text::integer
          AND course_id = $2::integer
    )
    RETURNING student_id
)
SELECT $1::text::integer AS student_id,
       $2::integer AS course_id,
       count(*) AS inserted
FROM inserted
"""

DELETE_ENROLLMENT_SQL = """
DELETE FROM enrollments
WHERE student_id = $1::text::integer
  AND course_id = $2::text::integer
RETURNING student_id, course_id
"""


async def list_courses_for_student(database: Database, student_id: str) -> list[dict]:
    return await database.fetch_all(LIST_COURSES_FOR_STUDENT_SQL, student_id)


async def insert_enrollment(database: Database, student_id: str, *, course_id: int) -> dict:
    """
    Returns `{student_id, course_id, inserted}`; `inserted` is 0 when the
    student was already enrolled.
    """
    row = await database.fetch_one(INSERT_ENROLLMENT_SQL, student_id, course_id)
    if row is None:
        raise RuntimeError("Failed to insert enrollment.")
    return row


async def delete_enrollment(database: Database, student_id: str, course_id: str) -> list[dict]:
    return await database.fetch_all(DELETE_ENROLLMENT_SQL, student_id, course_id)
