import pytest
from pydantic import ValidationError

from student_records.models import Student, calculate_grade


@pytest.mark.parametrize("marks, grade", [
    (95, "A"), (80, "B"), (65, "C"), (45, "D"), (10, "F"),
    (90, "A"), (90.0, "A"), (75, "B"), (60, "C"), (40, "D"),
    (89.99, "B"), (39.9, "F"), (0, "F"), (100, "A"),
])
def test_calculate_grade(marks, grade):
    assert calculate_grade(marks) == grade


def test_missing_marks_grade_is_na():
    assert calculate_grade(None) == "N/A"
    s = Student(roll_no=3, name="Cara", email="c@x.org", course="Art")
    assert s.marks is None
    assert s.grade == "N/A"


def test_student_grade_property(alice):
    assert alice.grade == "A"


def test_student_is_frozen(alice):
    with pytest.raises(ValidationError):
        alice.name = "Bob"


@pytest.mark.parametrize("field", ["name", "email", "course"])
def test_student_rejects_blank_text(field):
    data = dict(roll_no=1, name="A", email="a@b.c", course="Math", marks=50)
    data[field] = "   "
    with pytest.raises(ValidationError):
        Student(**data)


@pytest.mark.parametrize("marks", [-1, 101, float("nan")])
def test_student_rejects_bad_marks(marks):
    with pytest.raises(ValidationError):
        Student(roll_no=1, name="A", email="a@b.c", course="Math", marks=marks)


def test_details_order(alice):
    assert [label for label, _ in alice.details()] == [
        "Roll No", "Name", "Email", "Course", "Marks", "Grade",
    ]
    assert dict(alice.details())["Marks"] == 92.5
