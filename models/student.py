# models/student.py

"""
Represents a student and the courses they have been graded in.

Each `Student` exclusively owns an `OrderedList[Course]`. Courses are kept in the order
they were added, and that order is what printing reproduces.

Includes functionality for:
- Deep cloning, including every owned course
- Destroying the student together with every owned course
- Looking up a course by name and computing the average grade

Notes:
- The id is unique within a `Roster`; the name is not required to be.
- Course name uniqueness is enforced by the `Roster` through `has_course()`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from core.exceptions import UseAfterFreeError
from core.ordered_list import OrderedList
from models.course import Course


@dataclass(frozen=True)
class StudentRecord:
    """
    Read-only copy of a `Student`, handed out by the `Roster` in place of the owned record.

    `courses` holds `(course name, grade)` pairs in insertion order.
    """

    name: str
    id: int
    courses: tuple[tuple[str, int], ...]

    def has_course(self, name: str) -> bool:
        return any(course_name == name for course_name, _ in self.courses)


class Student:

    def __init__(self, name: str, id: int):
        self._name: str | None = Student.validate_name_input(name)
        self._id: int = Student.validate_id_input(id)
        self._courses: OrderedList[Course] = OrderedList.create()
        self._released: bool = False

    # === properties ===

    @property
    def id(self) -> int:
        self._require_live()
        return self._id

    @property
    def name(self) -> str:
        self._require_live()
        return self._name

    @property
    def courses(self) -> OrderedList[Course]:
        self._require_live()
        return self._courses

    @property
    def is_released(self) -> bool:
        return self._released

    @property
    def average(self) -> float:
        courses = self.courses
        if courses.size == 0:
            return 0.0
        return sum(course.grade for course in courses) / courses.size

    # === ownership ===

    def clone(self) -> Student:
        """
        Returns an independent deep copy of this student and all of their courses.

        Raises:
            MemoryError: If the copy or any of its courses cannot be allocated.

        Notes:
            - A partially built copy is destroyed before the error propagates.
        """
        self._require_live()
        copy = type(self)(self._name, self._id)

        try:
            courses = self._courses.clone()

        except Exception:
            copy.destroy()
            raise

        copy._courses.destroy()
        copy._courses = courses
        return copy

    def destroy(self) -> None:
        self._require_live()
        try:
            self._courses.destroy()
        finally:
            self._name = None
            self._released = True

    def snapshot(self) -> StudentRecord:
        return StudentRecord(self.name, self.id, tuple(self.grade_pairs()))

    # === data accessors ===

    def find_course(self, name: str) -> Course | None:
        return self.courses.find(lambda course: course.name == name)

    def has_course(self, name: str) -> bool:
        return self.find_course(name) is not None

    def grade_pairs(self) -> list[tuple[str, int]]:
        return [(course.name, course.grade) for course in self.courses]

    # === dunder methods ===

    def __repr__(self) -> str:
        if self._released:
            return "Student(<released>)"
        return f"Student({self._name}, {self._id}, {self._courses.size} courses)"

    def __str__(self) -> str:
        return f"STUDENT: name: {self.name}, id: {self.id}"

    # === data validators ===

    def _require_live(self) -> None:
        if self._released:
            raise UseAfterFreeError("Student")

    @staticmethod
    def validate_name_input(name: Any) -> str:
        if not isinstance(name, str) or not name:
            raise ValueError("Student name must be a non-empty string.")
        return name

    @staticmethod
    def validate_id_input(id: Any) -> int:
        if isinstance(id, bool) or not isinstance(id, int):
            raise ValueError("Student id must be an integer.")
        return id
