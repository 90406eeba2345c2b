# core/formatters.py

# all pure text utilities
# must never import from models!

from collections.abc import Iterable

# === record formatters ===


def format_grade_pairs(courses: Iterable[tuple[str, int]]) -> str:
    return ", ".join(f"{name} {grade}" for name, grade in courses)


def format_student_record(
    name: str, id: int, courses: Iterable[tuple[str, int]]
) -> str:
    """
    Renders one student as `NAME ID: C1 G1, C2 G2`.

    A student with no courses renders as `NAME ID:` with nothing after the colon.
    """
    grades = format_grade_pairs(courses)

    return f"{name} {id}: {grades}" if grades else f"{name} {id}:"
