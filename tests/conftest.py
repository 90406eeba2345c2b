# tests/conftest.py

from collections import Counter

import pytest

from models.course import Course
from models.roster import Roster
from models.student import Student


class LifecycleCounter:
    """Counts constructions (including clones) and destructions per model class."""

    def __init__(self):
        self.created: Counter = Counter()
        self.destroyed: Counter = Counter()

    @property
    def balanced(self) -> bool:
        return self.created == self.destroyed

    @property
    def live(self) -> Counter:
        return self.created - self.destroyed


@pytest.fixture
def lifecycle_counter(monkeypatch):
    counter = LifecycleCounter()

    for cls in (Course, Student):
        original_init = cls.__init__
        original_destroy = cls.destroy

        def counting_init(self, *args, _init=original_init, _kind=cls.__name__, **kwargs):
            _init(self, *args, **kwargs)
            counter.created[_kind] += 1

        def counting_destroy(self, _destroy=original_destroy, _kind=cls.__name__):
            _destroy(self)
            counter.destroyed[_kind] += 1

        monkeypatch.setattr(cls, "__init__", counting_init)
        monkeypatch.setattr(cls, "destroy", counting_destroy)

    return counter


@pytest.fixture
def failing_clone(monkeypatch):
    """Makes `cls.clone()` raise MemoryError after `succeed_times` successful calls."""

    def install(cls, succeed_times=0):
        original_clone = cls.clone
        calls = {"count": 0}

        def clone(self):
            if calls["count"] >= succeed_times:
                raise MemoryError("simulated allocation failure")
            calls["count"] += 1
            return original_clone(self)

        monkeypatch.setattr(cls, "clone", clone)

    return install


@pytest.fixture
def printed():
    return []


@pytest.fixture
def sample_roster(printed):
    roster_response = Roster.create(
        printer=lambda name, id, courses: printed.append((name, id, courses))
    )
    return roster_response.data["roster"]


@pytest.fixture
def populated_roster(sample_roster):
    sample_roster.add_student("Alice", 1)
    sample_roster.add_student("Bob", 2)
    sample_roster.add_grade("Math", 1, 90)
    sample_roster.add_grade("Physics", 1, 100)
    sample_roster.add_grade("History", 2, 70)
    return sample_roster


@pytest.fixture
def sample_course():
    return Course("Math", 90)


@pytest.fixture
def sample_student():
    student = Student("Alice", 1)
    for name, grade in [("Math", 70), ("Physics", 80), ("Chemistry", 90)]:
        course = Course(name, grade)
        student.courses.append(course)
        course.destroy()
    return student
