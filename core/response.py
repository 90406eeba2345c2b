# core/response.py

from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    # === Not Found ===
    NOT_FOUND = "NOT_FOUND"

    # === Constraint Violations ===
    # student id or course name already present
    DUPLICATE_KEY = "DUPLICATE_KEY"

    # === Validation Failures ===
    # empty name, out-of-range grade, wrong argument type
    INVALID_ARGUMENT = "INVALID_ARGUMENT"

    # === State Restrictions ===
    # the roster, student, or course was already destroyed
    USE_AFTER_FREE = "USE_AFTER_FREE"

    # === Internal Faults ===
    ALLOCATION_ERROR = "ALLOCATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class Response:
    """
    Standard Response object for Roster manipulator and lookup methods.

    Attributes:
        success (bool): Indicates whether the operation succeeded.
        detail (str | None): Optional human-readable explanation.
        error (ErrorCode | str | None): Optional machine-readable error identifier.
        status_code (int | None): Optional HTTP-style response code.
        data (dict): Optional payload, varies by operation.
    """

    def __init__(
        self,
        success: bool,
        detail: str | None = None,
        error: ErrorCode | str | None = None,
        status_code: int | None = None,
        data: dict | None = None,
    ):
        self._success = success
        self._detail = detail
        self._error = error
        self._status_code = status_code
        self._data = data or {}

    # === properties ===

    @property
    def success(self) -> bool:
        return self._success

    @property
    def detail(self) -> str | None:
        return self._detail

    @property
    def error(self) -> ErrorCode | str | None:
        return self._error

    @property
    def status_code(self) -> int | None:
        return self._status_code

    @property
    def data(self) -> dict:
        return self._data or {}

    # === public classmethods ===

    @classmethod
    def succeed(
        cls,
        detail: str | None = None,
        status_code: int | None = 200,
        data: dict | None = None,
    ) -> Response:
        return cls(
            success=True,
            detail=detail,
            error=None,
            status_code=status_code,
            data=data,
        )

    @classmethod
    def fail(
        cls,
        detail: str | None = None,
        error: ErrorCode | str | None = None,
        status_code: int | None = 400,
        data: dict | None = None,
    ) -> Response:
        return cls(
            success=False,
            detail=detail,
            error=error,
            status_code=status_code,
            data=data,
        )

    # === export ===

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "error": self.error.value if isinstance(self.error, Enum) else self.error,
            "detail": self.detail,
            "data": self.data,
            "status_code": self.status_code,
        }

    # === dunder methods ===

    def __bool__(self) -> bool:
        return self._success

    def __str__(self) -> str:
        if self.success:
            return f"Success: {self.detail or ''}"
        else:
            error_str = (
                self.error.value if isinstance(self.error, Enum) else self.error or ""
            )
            return f"Error: {error_str}"
