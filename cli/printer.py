# cli/printer.py

"""
Default printing collaborator for the `Roster`.

A printer is any callable accepting a student's name, id, and ordered
`(course name, grade)` pairs. The `Roster` decides what is printed and in which
order; the printer only decides how.
"""

from collections.abc import Callable
from typing import TextIO

import core.formatters as formatters

StudentPrinter = Callable[[str, int, list[tuple[str, int]]], None]


def print_student_record(
    name: str, id: int, courses: list[tuple[str, int]], file: TextIO | None = None
) -> None:
    print(formatters.format_student_record(name, id, courses), file=file)
