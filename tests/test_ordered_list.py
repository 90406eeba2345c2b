# tests/test_ordered_list.py

import pytest

from core.exceptions import UseAfterFreeError
from core.ordered_list import OrderedList
from models.course import Course


def make_list(*pairs):
    courses = OrderedList.create()
    for name, grade in pairs:
        course = Course(name, grade)
        courses.append(course)
        course.destroy()
    return courses


def test_new_list_is_empty():
    courses = OrderedList.create()

    assert courses.size == 0
    assert len(courses) == 0
    assert list(courses) == []
    assert courses.first is None
    assert courses.last is None


def test_append_stores_a_copy(sample_course):
    courses = OrderedList.create()

    stored = courses.append(sample_course)

    assert stored is not sample_course
    assert stored.name == "Math"
    assert stored.grade == 90

    # the caller still owns its original
    sample_course.destroy()
    assert courses.first.name == "Math"


def test_iteration_preserves_insertion_order():
    courses = make_list(("A", 1), ("B", 2), ("C", 3))

    assert [c.name for c in courses] == ["A", "B", "C"]
    # restartable
    assert [c.name for c in courses] == ["A", "B", "C"]
    assert [c.name for c in reversed(courses)] == ["C", "B", "A"]
    assert courses.first.name == "A"
    assert courses.last.name == "C"


def test_prepend_links_at_head():
    courses = make_list(("B", 2))
    course = Course("A", 1)
    courses.prepend(course)
    course.destroy()

    assert [c.name for c in courses] == ["A", "B"]
    assert [c.name for c in reversed(courses)] == ["B", "A"]
    assert courses.size == 2


def test_find_returns_first_match():
    courses = make_list(("A", 50), ("B", 60), ("C", 60))

    assert courses.find(lambda c: c.grade == 60).name == "B"
    assert courses.find(lambda c: c.grade == 99) is None


def test_failed_append_leaves_list_unchanged(failing_clone):
    courses = make_list(("A", 1))
    failing_clone(Course)

    course = Course("B", 2)
    with pytest.raises(MemoryError):
        courses.append(course)

    assert courses.size == 1
    assert [c.name for c in courses] == ["A"]
    assert [c.name for c in reversed(courses)] == ["A"]


def test_clone_is_deep_and_independent():
    original = make_list(("A", 1), ("B", 2))

    copy = original.clone()
    course = Course("C", 3)
    original.append(course)
    course.destroy()

    assert [c.name for c in copy] == ["A", "B"]
    assert [c.name for c in original] == ["A", "B", "C"]
    assert all(a is not b for a, b in zip(original, copy))

    original.destroy()
    assert [c.name for c in copy] == ["A", "B"]


def test_failed_clone_destroys_partial_copy(lifecycle_counter, failing_clone):
    original = make_list(("A", 1), ("B", 2), ("C", 3))
    created_before = lifecycle_counter.created["Course"]
    destroyed_before = lifecycle_counter.destroyed["Course"]
    failing_clone(Course, succeed_times=2)

    with pytest.raises(MemoryError):
        original.clone()

    assert lifecycle_counter.created["Course"] - created_before == 2
    assert lifecycle_counter.destroyed["Course"] - destroyed_before == 2
    assert original.size == 3


def test_destroy_releases_every_element_once(lifecycle_counter):
    courses = make_list(("A", 1), ("B", 2))
    views = list(courses)

    courses.destroy()
    courses.destroy()

    assert lifecycle_counter.balanced
    assert courses.is_released
    assert all(view.is_released for view in views)


def test_access_after_destroy_raises():
    courses = make_list(("A", 1))
    courses.destroy()

    with pytest.raises(UseAfterFreeError):
        courses.size
    with pytest.raises(UseAfterFreeError):
        list(courses)
    with pytest.raises(UseAfterFreeError):
        courses.append(Course("B", 2))
    with pytest.raises(UseAfterFreeError):
        courses.clone()

    assert repr(courses) == "OrderedList(<released>)"


def test_destroy_continues_past_failing_element(lifecycle_counter):
    courses = make_list(("A", 1), ("B", 2), ("C", 3))
    views = list(courses)
    views[1].destroy()

    with pytest.raises(UseAfterFreeError):
        courses.destroy()

    assert courses.is_released
    assert all(view.is_released for view in views)
    assert lifecycle_counter.balanced

    # already released, nothing left to raise
    courses.destroy()
