# models/roster.py

"""
The Roster model is the central data object of the program and the owner of every record.

A `Roster` owns an `OrderedList[Student]`, and each `Student` owns an `OrderedList[Course]`.
Records are only ever appended. Appending stores a clone, so every operation that builds a
temporary `Student` or `Course` destroys that temporary once the list holds its own copy.

Provides functions for adding students and grades, computing a student's average, and
printing students in insertion order through a pluggable printer.
All public manipulators and accessors return a structured `Response`; exceptions raised by
the model layer are translated into `ErrorCode` values and never reach the caller.

Lookups are linear scans by id or course name. Rosters are expected to be small.
"""

from __future__ import annotations

from cli.printer import StudentPrinter, print_student_record
from core.config import get_logger
from core.exceptions import UseAfterFreeError
from core.ordered_list import OrderedList
from core.response import ErrorCode, Response
from models.course import Course
from models.student import Student, StudentRecord

logger = get_logger(__name__)


class Roster:

    def __init__(self, printer: StudentPrinter | None = None):
        self._students: OrderedList[Student] = OrderedList.create()
        self._printer: StudentPrinter = printer or print_student_record

    # === properties ===

    # these raise UseAfterFreeError on a destroyed roster; use `is_released` to check first

    @property
    def students(self) -> tuple[StudentRecord, ...]:
        return tuple(student.snapshot() for student in self._students)

    @property
    def size(self) -> int:
        return self._students.size

    @property
    def is_released(self) -> bool:
        return self._students.is_released

    # === public classmethods ===

    @classmethod
    def create(cls, printer: StudentPrinter | None = None) -> Response:
        """
        Creates and returns a new, empty `Roster` instance.

        Args:
            printer (StudentPrinter | None): Receives each printed student's name, id, and
                ordered `(course, grade)` pairs. Defaults to `print_student_record()`.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the `Roster` object was created successfully.
                    - False if storage could not be allocated.
                - error (ErrorCode | str | None):
                    - `ErrorCode.ALLOCATION_ERROR` if MemoryError raised.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "roster" (Roster): The newly created `Roster` object.
        """
        try:
            roster = cls(printer)

        except MemoryError as e:
            return Response.fail(
                detail=f"Failed to allocate roster: {e}",
                error=ErrorCode.ALLOCATION_ERROR,
                status_code=500,
            )

        except Exception as e:
            logger.error("Unexpected error creating roster: %s", e)
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            logger.debug("Roster created.")
            return Response.succeed(
                data={
                    "roster": roster,
                },
            )

    # === lifecycle ===

    def destroy(self) -> Response:
        """
        Destroys every `Student` (and through them every `Course`) owned by the roster.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if every student was destroyed, or the roster was already destroyed.
                    - False if any student failed to destroy.
                - error (ErrorCode | str | None):
                    - `ErrorCode.USE_AFTER_FREE` if a student had already been destroyed.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - data (dict | None):
                    - Always None, this method does not return any payload.

        Notes:
            - The roster is released even on failure, and every other student is still destroyed.
            - Calling this again on a destroyed roster does nothing.
            - Every other method fails with `ErrorCode.USE_AFTER_FREE` afterwards.
        """
        if self._students.is_released:
            return Response.succeed(detail="Roster was already destroyed.")

        count = self._students.size
        try:
            self._students.destroy()

        except UseAfterFreeError as e:
            return self._fail("destroy", f"{e}", ErrorCode.USE_AFTER_FREE)

        except Exception as e:
            logger.error("Unexpected error destroying roster: %s", e)
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            logger.debug("Roster destroyed with %d students.", count)
            return Response.succeed(detail="Roster successfully destroyed.")

    def clone(self) -> Response:
        """
        Returns an independent deep copy of the roster, sharing only the printer.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if every student and course was copied.
                    - False if the roster was destroyed or storage could not be allocated.
                - error (ErrorCode | str | None):
                    - `ErrorCode.USE_AFTER_FREE` if the roster was destroyed.
                    - `ErrorCode.ALLOCATION_ERROR` if MemoryError raised.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "roster" (Roster): The copy.

        Notes:
            - On failure no partial copy survives.
        """
        try:
            copy = type(self)(self._printer)
            try:
                students = self._students.clone()
            except Exception:
                copy.destroy()
                raise

            copy._students.destroy()
            copy._students = students

        except UseAfterFreeError as e:
            return self._fail("clone", f"{e}", ErrorCode.USE_AFTER_FREE)

        except MemoryError as e:
            return self._fail(
                "clone", f"Failed to allocate copy: {e}", ErrorCode.ALLOCATION_ERROR, 500
            )

        except Exception as e:
            logger.error("Unexpected error cloning roster: %s", e)
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            return Response.succeed(
                data={
                    "roster": copy,
                },
            )

    # === data accessors ===

    def find_student_by_id(self, student_id: int) -> Response:
        """
        Looks up a `Student` by id.

        Args:
            student_id (int): The id to search for.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if a matching student exists.
                    - False if no student matches or the roster was destroyed.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_ARGUMENT` if `student_id` is not an int.
                    - `ErrorCode.NOT_FOUND` if no student has `student_id`.
                    - `ErrorCode.USE_AFTER_FREE` if the roster was destroyed.
                - status_code (int | None):
                    - 200 on success
                    - 404 if no student matches
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (StudentRecord): A read-only copy of the matching student.
        """
        try:
            student = self._search_student_id(student_id)

        except ValueError as e:
            return self._fail(
                "find_student_by_id", f"Invalid argument: {e}", ErrorCode.INVALID_ARGUMENT
            )

        except UseAfterFreeError as e:
            return self._fail("find_student_by_id", f"{e}", ErrorCode.USE_AFTER_FREE)

        if student is None:
            return self._student_not_found("find_student_by_id", student_id)

        return Response.succeed(
            data={
                "record": student.snapshot(),
            },
        )

    def calc_avg(self, student_id: int) -> Response:
        """
        Computes the arithmetic mean of a student's course grades.

        Args:
            student_id (int): The id of the student.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the student exists, whether or not they have any courses.
                    - False if no student matches or the roster was destroyed.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_ARGUMENT` if `student_id` is not an int.
                    - `ErrorCode.NOT_FOUND` if no student has `student_id`.
                    - `ErrorCode.USE_AFTER_FREE` if the roster was destroyed.
                - status_code (int | None):
                    - 200 on success
                    - 404 if no student matches
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "average" (float): The mean grade, or 0.0 with no courses.
                        - "name" (str): The student's name.
                    - On failure:
                        - None

        Notes:
            - A student with no courses is not an error; the average is 0.0.
        """
        try:
            student = self._search_student_id(student_id)
            if student is None:
                return self._student_not_found("calc_avg", student_id)

            average = student.average
            name = student.name

        except ValueError as e:
            return self._fail("calc_avg", f"Invalid argument: {e}", ErrorCode.INVALID_ARGUMENT)

        except UseAfterFreeError as e:
            return self._fail("calc_avg", f"{e}", ErrorCode.USE_AFTER_FREE)

        except Exception as e:
            logger.error("Unexpected error computing average for %s: %s", student_id, e)
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            return Response.succeed(
                data={
                    "average": average,
                    "name": name,
                },
            )

    # === data manipulators ===

    def add_student(self, name: str, id: int) -> Response:
        """
        Adds a new `Student` with no courses to the end of the roster.

        Args:
            name (str): The student's name. Need not be unique.
            id (int): The student's id. Must be unique within the roster.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the student was added.
                    - False if the input is invalid, the id is taken, or the roster was destroyed.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_ARGUMENT` if the name is missing or empty, or the id is not an int.
                    - `ErrorCode.DUPLICATE_KEY` if a student with `id` already exists.
                    - `ErrorCode.ALLOCATION_ERROR` if MemoryError raised.
                    - `ErrorCode.USE_AFTER_FREE` if the roster was destroyed.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 409 if the id is taken
                    - 500 on allocation failure
                    - 400 for other failures
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (StudentRecord): A read-only copy of the stored student.

        Notes:
            - The roster stores a clone; the temporary built here is destroyed before returning.
            - On any failure the roster is unchanged.
        """
        try:
            Student.validate_name_input(name)
            Student.validate_id_input(id)

            if self._search_student_id(id) is not None:
                return self._fail(
                    "add_student",
                    f"A student with id {id} already exists.",
                    ErrorCode.DUPLICATE_KEY,
                    409,
                )

            student = Student(name, id)
            try:
                record = self._students.append(student).snapshot()
            finally:
                student.destroy()

        except ValueError as e:
            return self._fail("add_student", f"Invalid argument: {e}", ErrorCode.INVALID_ARGUMENT)

        except UseAfterFreeError as e:
            return self._fail("add_student", f"{e}", ErrorCode.USE_AFTER_FREE)

        except MemoryError as e:
            return self._fail(
                "add_student", f"Failed to allocate student: {e}", ErrorCode.ALLOCATION_ERROR, 500
            )

        except Exception as e:
            logger.error("Unexpected error adding student %s: %s", id, e)
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            logger.debug("Added student %s (%s).", id, name)
            return Response.succeed(
                detail="Student successfully added to the roster.",
                data={
                    "record": record,
                },
            )

    def add_grade(self, course_name: str, student_id: int, grade: int) -> Response:
        """
        Adds a graded `Course` to the end of a student's course list.

        Args:
            course_name (str): The course name. Must be unique for this student.
            student_id (int): The id of the student receiving the grade.
            grade (int): An integer from 0 to 100 inclusive.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the course was added.
                    - False if the input is invalid, the student is missing, the course already exists, or the roster was destroyed.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_ARGUMENT` if the course name is missing or empty, the grade is out of range, or `student_id` is not an int.
                    - `ErrorCode.NOT_FOUND` if no student has `student_id`.
                    - `ErrorCode.DUPLICATE_KEY` if the student already has `course_name`.
                    - `ErrorCode.ALLOCATION_ERROR` if MemoryError raised.
                    - `ErrorCode.USE_AFTER_FREE` if the roster was destroyed.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 404 if the student cannot be found
                    - 409 if the course name is taken
                    - 500 on allocation failure
                    - 400 for other failures
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (CourseRecord): A read-only copy of the stored course.

        Notes:
            - Input is validated before the student lookup, so an invalid grade for a missing student reports `INVALID_ARGUMENT`.
            - On any failure the student's course list is unchanged.
        """
        try:
            Course.validate_name_input(course_name)
            Course.validate_grade_input(grade)

            student = self._search_student_id(student_id)
            if student is None:
                return self._student_not_found("add_grade", student_id)

            if student.has_course(course_name):
                return self._fail(
                    "add_grade",
                    f"Student {student_id} already has a grade for {course_name}.",
                    ErrorCode.DUPLICATE_KEY,
                    409,
                )

            course = Course(course_name, grade)
            try:
                record = student.courses.append(course).snapshot()
            finally:
                course.destroy()

        except ValueError as e:
            return self._fail("add_grade", f"Invalid argument: {e}", ErrorCode.INVALID_ARGUMENT)

        except UseAfterFreeError as e:
            return self._fail("add_grade", f"{e}", ErrorCode.USE_AFTER_FREE)

        except MemoryError as e:
            return self._fail(
                "add_grade", f"Failed to allocate course: {e}", ErrorCode.ALLOCATION_ERROR, 500
            )

        except Exception as e:
            logger.error("Unexpected error adding grade for %s: %s", student_id, e)
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            logger.debug("Added %s %d for student %s.", course_name, grade, student_id)
            return Response.succeed(
                detail="Grade successfully added to the student.",
                data={
                    "record": record,
                },
            )

    # --- printing ---

    def print_student(self, student_id: int) -> Response:
        """
        Sends one student's name, id, and ordered course grades to the printer.

        Args:
            student_id (int): The id of the student to print.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the student was printed.
                    - False if no student matches or the roster was destroyed.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INVALID_ARGUMENT` if `student_id` is not an int.
                    - `ErrorCode.NOT_FOUND` if no student has `student_id`.
                    - `ErrorCode.USE_AFTER_FREE` if the roster was destroyed.
                    - `ErrorCode.INTERNAL_ERROR` if the printer raises.
                - status_code (int | None):
                    - 200 on success
                    - 404 if no student matches
                    - 400 for other failures
                - data (dict | None):
                    - Always None, this method does not return any payload.
        """
        try:
            student = self._search_student_id(student_id)

        except ValueError as e:
            return self._fail("print_student", f"Invalid argument: {e}", ErrorCode.INVALID_ARGUMENT)

        except UseAfterFreeError as e:
            return self._fail("print_student", f"{e}", ErrorCode.USE_AFTER_FREE)

        if student is None:
            return self._student_not_found("print_student", student_id)

        try:
            self._print(student)

        except Exception as e:
            logger.error("Unexpected error printing student %s: %s", student_id, e)
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            return Response.succeed()

    def print_all(self) -> Response:
        """
        Sends every student to the printer, one call per student, in insertion order.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True on any live roster, including an empty one.
                    - False if the roster was destroyed or the printer raises.
                - error (ErrorCode | str | None):
                    - `ErrorCode.USE_AFTER_FREE` if the roster was destroyed.
                    - `ErrorCode.INTERNAL_ERROR` if the printer raises.
                - data (dict | None):
                    - Always None, this method does not return any payload.
        """
        try:
            for student in self._students:
                self._print(student)

        except UseAfterFreeError as e:
            return self._fail("print_all", f"{e}", ErrorCode.USE_AFTER_FREE)

        except Exception as e:
            logger.error("Unexpected error printing roster: %s", e)
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            return Response.succeed()

    # === helper methods ===

    def _search_student_id(self, student_id: int) -> Student | None:
        # reject True and 1.0, which would otherwise compare equal to id 1
        Student.validate_id_input(student_id)
        return self._students.find(lambda student: student.id == student_id)

    def _print(self, student: Student) -> None:
        self._printer(student.name, student.id, student.grade_pairs())

    def _student_not_found(self, operation: str, student_id: int) -> Response:
        return self._fail(
            operation,
            f"No student with id {student_id} could be found.",
            ErrorCode.NOT_FOUND,
            404,
        )

    def _fail(
        self,
        operation: str,
        detail: str,
        error: ErrorCode,
        status_code: int = 400,
    ) -> Response:
        logger.info("%s failed (%s): %s", operation, error.value, detail)
        return Response.fail(detail=detail, error=error, status_code=status_code)

    # === dunder methods ===

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        if self.is_released:
            return "Roster(<released>)"
        return f"Roster({self._students.size} students)"
