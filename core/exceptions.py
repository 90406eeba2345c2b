# core/exceptions.py

"""
Exceptions raised by the container and model layers.

Bad input is reported with the builtin `ValueError` and failed allocation with the
builtin `MemoryError`; only conditions without a builtin counterpart live here.
"""


class UseAfterFreeError(RuntimeError):
    """Raised when a destroyed list, course, student, or roster is accessed."""

    def __init__(self, kind: str):
        super().__init__(f"{kind} was accessed after it was destroyed.")
        self.kind = kind
