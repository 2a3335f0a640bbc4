"""Shared fixtures: in-memory store + FastAPI test client.

The in-memory store answers the repositories' SQL statements by identity,
so route tests exercise routers, services and repositories end to end
without a Postgres server.
"""

import itertools

import pytest
from httpx import ASGITransport, AsyncClient

from core.db import StoreError, get_database
from core.settings import Settings
from courses import repository as courses_repository
from enrollments import repository as enrollments_repository
from main import create_app
from students import repository as students_repository


def _as_integer(value) -> int:
    """Mimic Postgres `$n::text::integer`."""
    try:
        return int(str(value).strip())
    except ValueError:
        raise StoreError(f'invalid input syntax for type integer: "{value}"') from None


class InMemoryDatabase:
    """Stand-in for core.db.Database backed by plain dicts."""

    def __init__(self):
        self.courses: dict[int, dict] = {}
        self.students: dict[int, dict] = {}
        self.enrollments: list[tuple[int, int]] = []
        self.statements: list[tuple[str, tuple]] = []
        self.fail_with: str | None = None
        self._course_ids = itertools.count(1)
        self._student_ids = itertools.count(1)
        self._handlers = {
            courses_repository.LIST_COURSES_SQL: self._list_courses,
            courses_repository.INSERT_COURSE_SQL: self._insert_course,
            courses_repository.UPDATE_COURSE_SQL: self._update_course,
            students_repository.LIST_STUDENTS_SQL: self._list_students,
            students_repository.INSERT_STUDENT_SQL: self._insert_student,
            students_repository.UPDATE_STUDENT_SQL: self._update_student,
            enrollments_repository.LIST_COURSES_FOR_STUDENT_SQL: self._list_courses_for_student,
            enrollments_repository.INSERT_ENROLLMENT_SQL: self._insert_enrollment,
            enrollments_repository.DELETE_ENROLLMENT_SQL: self._delete_enrollment,
        }

    # Database interface

    async def fetch_one(self, sql, *args):
        rows = self._run(sql, args)
        return rows[0] if rows else None

    async def fetch_all(self, sql, *args):
        return self._run(sql, args)

    def _run(self, sql, args):
        self.statements.append((sql, args))
        if self.fail_with is not None:
            raise StoreError(self.fail_with)
        return [dict(row) for row in self._handlers[sql](*args)]

    # Seeding helpers

    def add_course(self, code, title):
        course_id = next(self._course_ids)
        self.courses[course_id] = {"id": course_id, "code": code, "title": title}
        return course_id

    def add_student(self, name):
        student_id = next(self._student_ids)
        self.students[student_id] = {"id": student_id, "name": name}
        return student_id

    # Statement handlers

    def _list_courses(self):
        return sorted(self.courses.values(), key=lambda c: c["code"])

    def _insert_course(self, code, title):
        return [self.courses[self.add_course(code, title)]]

    def _update_course(self, code, title, course_id):
        course = self.courses.get(_as_integer(course_id))
        if course is None:
            return []
        course.update(code=code, title=title)
        return [course]

    def _list_students(self):
        return sorted(self.students.values(), key=lambda s: s["name"])

    def _insert_student(self, name):
        return [self.students[self.add_student(name)]]

    def _update_student(self, name, student_id):
        student = self.students.get(_as_integer(student_id))
        if student is None:
            return []
        student["name"] = name
        return [student]

    def _list_courses_for_student(self, student_id):
        student_id = _as_integer(student_id)
        courses = [self.courses[c] for (s, c) in self.enrollments if s == student_id]
        return sorted(courses, key=lambda c: c["code"])

    def _insert_enrollment(self, student_id, course_id):
        pair = (_as_integer(student_id), course_id)
        row = {"student_id": pair[0], "course_id": pair[1], "inserted": 0}
        if pair in self.enrollments:
            return [row]
        if pair[0] not in self.students:
            raise StoreError(
                'insert or update on table "enrollments" violates foreign key '
                'constraint "enrollments_student_id_fkey"'
            )
        if pair[1] not in self.courses:
            raise StoreError(
                'insert or update on table "enrollments" violates foreign key '
                'constraint "enrollments_course_id_fkey"'
            )
        self.enrollments.append(pair)
        return [{**row, "inserted": 1}]

    def _delete_enrollment(self, student_id, course_id):
        pair = (_as_integer(student_id), _as_integer(course_id))
        removed = [p for p in self.enrollments if p == pair]
        self.enrollments = [p for p in self.enrollments if p != pair]
        return [{"student_id": s, "course_id": c} for (s, c) in removed]


@pytest.fixture
def database():
    return InMemoryDatabase()


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def app(settings, database):
    application = create_app(settings)
    application.dependency_overrides[get_database] = lambda: database
    return application


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
