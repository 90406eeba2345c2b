# models/course.py

"""
Represents a single graded course held by a `Student`.

A `Course` is an immutable value: a non-empty name and an integer grade from 0 to 100.
Copies are made with `clone()` and storage is released with `destroy()`, which is how
`OrderedList` takes and releases ownership of courses.

Notes:
- Name uniqueness is enforced per student by the `Roster`, not here.
- Validation is handled through `validate_name_input()` and `validate_grade_input()`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from core.config import GRADE_MAX, GRADE_MIN
from core.exceptions import UseAfterFreeError


@dataclass(frozen=True)
class CourseRecord:
    """Read-only copy of a `Course`, safe to hand to callers outside the roster."""

    name: str
    grade: int


class Course:

    def __init__(self, name: str, grade: int):
        self._name: str | None = Course.validate_name_input(name)
        self._grade: int = Course.validate_grade_input(grade)
        self._released: bool = False

    # === properties ===

    @property
    def name(self) -> str:
        self._require_live()
        return self._name

    @property
    def grade(self) -> int:
        self._require_live()
        return self._grade

    @property
    def is_released(self) -> bool:
        return self._released

    # === ownership ===

    def clone(self) -> Course:
        self._require_live()
        return type(self)(self._name, self._grade)

    def destroy(self) -> None:
        self._require_live()
        self._name = None
        self._released = True

    def snapshot(self) -> CourseRecord:
        return CourseRecord(self.name, self.grade)

    # === dunder methods ===

    def __repr__(self) -> str:
        if self._released:
            return "Course(<released>)"
        return f"Course({self._name}, {self._grade})"

    def __str__(self) -> str:
        return f"{self.name} {self.grade}"

    # === data validators ===

    def _require_live(self) -> None:
        if self._released:
            raise UseAfterFreeError("Course")

    @staticmethod
    def validate_name_input(name: Any) -> str:
        if not isinstance(name, str) or not name:
            raise ValueError("Course name must be a non-empty string.")
        return name

    @staticmethod
    def validate_grade_input(grade: Any) -> int:
        """
        Validates input for a `Course` grade.

        Args:
            grade (Any): The input value to validate.

        Returns:
            The grade, unchanged.

        Raises:
            ValueError: If the input is not an int, or is outside 0 to 100 inclusive.

        Notes:
            - `bool` is rejected even though it subclasses `int`.
        """
        if isinstance(grade, bool) or not isinstance(grade, int):
            raise ValueError("Grade must be an integer.")

        if grade < GRADE_MIN or grade > GRADE_MAX:
            raise ValueError(f"Grade must be between {GRADE_MIN} and {GRADE_MAX}.")

        return grade
