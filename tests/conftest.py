import pytest

from student_records.config import Settings
from student_records.menu import StudentManager
from student_records.models import Student
from student_records.store import StudentStore


@pytest.fixture
def feed(monkeypatch):
    """Make input() echo its prompt and return the given lines, then hit EOF."""
    def _feed(*lines):
        it = iter(lines)

        def fake_input(prompt=""):
            print(prompt, end="")
            try:
                return next(it)
            except StopIteration:
                raise EOFError from None

        monkeypatch.setattr("builtins.input", fake_input)
    return _feed


@pytest.fixture
def store():
    return StudentStore()


@pytest.fixture
def manager(store):
    return StudentManager(store, Settings(show_loading=False))


@pytest.fixture
def alice():
    return Student(roll_no=1, name="Alice", email="alice@example.com", course="Physics", marks=92.5)
