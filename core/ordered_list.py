# core/ordered_list.py

"""
A generic, insertion-ordered, doubly linked list of owned elements.

Elements implement the `Ownable` protocol: `clone()` returns an independent deep copy
and `destroy()` releases whatever the element owns. The list applies both as part of
its own contract:

- `append()` and `prepend()` store a clone, never the caller's object. The caller keeps
  its original and remains responsible for destroying it.
- `clone()` deep-copies every element in order; a failure partway destroys the copies
  made so far before the error propagates.
- `destroy()` is the only release path. It destroys every element exactly once and
  leaves the list unusable; later access raises `UseAfterFreeError`.

Traversal yields borrowed views. Holding on to a view past the owning list's
`destroy()` is the caller's error; the element itself will refuse access once released.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Generic, Protocol, TypeVar

from core.config import get_logger
from core.exceptions import UseAfterFreeError

logger = get_logger(__name__)


class Ownable(Protocol):
    def clone(self): ...

    def destroy(self) -> None: ...


T = TypeVar("T", bound=Ownable)


class _Node(Generic[T]):
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: T):
        self.value: T = value
        self.prev: _Node[T] | None = None
        self.next: _Node[T] | None = None


class OrderedList(Generic[T]):

    def __init__(self):
        self._head: _Node[T] | None = None
        self._tail: _Node[T] | None = None
        self._size: int = 0
        self._released: bool = False

    @classmethod
    def create(cls) -> OrderedList[T]:
        return cls()

    # === properties ===

    @property
    def size(self) -> int:
        self._require_live()
        return self._size

    @property
    def is_released(self) -> bool:
        return self._released

    @property
    def first(self) -> T | None:
        self._require_live()
        return self._head.value if self._head else None

    @property
    def last(self) -> T | None:
        self._require_live()
        return self._tail.value if self._tail else None

    # === data manipulators ===

    def append(self, element: T) -> T:
        """
        Links a clone of `element` at the tail of the list.

        Args:
            element (T): The caller-owned element to copy.

        Returns:
            The stored copy, as a borrowed view.

        Raises:
            MemoryError: If the node or the clone cannot be allocated.
            UseAfterFreeError: If the list was destroyed.

        Notes:
            - If cloning fails, the list is left exactly as it was.
        """
        node = self._make_node(element)

        if self._tail is None:
            self._head = node
        else:
            node.prev = self._tail
            self._tail.next = node

        self._tail = node
        self._size += 1
        return node.value

    def prepend(self, element: T) -> T:
        """Links a clone of `element` at the head of the list. See `append()`."""
        node = self._make_node(element)

        if self._head is None:
            self._tail = node
        else:
            node.next = self._head
            self._head.prev = node

        self._head = node
        self._size += 1
        return node.value

    def clone(self) -> OrderedList[T]:
        """
        Builds a new list holding a deep copy of every element, in the same order.

        Raises:
            MemoryError: If any element clone fails. Copies made before the failure
                are destroyed first.
            UseAfterFreeError: If the list was destroyed.
        """
        self._require_live()
        copy: OrderedList[T] = type(self)()

        try:
            for element in self:
                copy.append(element)

        except Exception:
            logger.debug("List clone failed after %d of %d elements.", copy._size, self._size)
            copy.destroy()
            raise

        return copy

    def destroy(self) -> None:
        """
        Destroys every element, head to tail, and releases the list.

        Raises:
            Exception: The first error raised by an element's `destroy()`.

        Notes:
            - An element that fails to destroy does not stop the rest; the list is
              released either way and the first error is raised once all are done.
            - Calling this on a released list does nothing.
        """
        if self._released:
            return

        node = self._head
        self._head = self._tail = None
        self._size = 0
        self._released = True

        errors: list[Exception] = []
        while node is not None:
            next_node = node.next
            try:
                node.value.destroy()
            except Exception as e:
                errors.append(e)
            finally:
                node.prev = node.next = None
            node = next_node

        if errors:
            logger.warning("%d elements failed to destroy.", len(errors))
            raise errors[0]

    # === data accessors ===

    def find(self, predicate: Callable[[T], bool]) -> T | None:
        """Returns the first element, head to tail, for which `predicate` is true."""
        for element in self:
            if predicate(element):
                return element
        return None

    # === helper methods ===

    def _require_live(self) -> None:
        if self._released:
            raise UseAfterFreeError("OrderedList")

    def _make_node(self, element: T) -> _Node[T]:
        self._require_live()
        return _Node(element.clone())

    # === dunder methods ===

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[T]:
        self._require_live()
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[T]:
        self._require_live()
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __repr__(self) -> str:
        if self._released:
            return "OrderedList(<released>)"
        return f"OrderedList({list(self)!r})"
