"""Menu-driven student records: add a student, look one up by roll number."""

from student_records.models import Student, calculate_grade
from student_records.store import StudentStore

__all__ = ["Student", "StudentStore", "calculate_grade"]
__version__ = "0.1.0"
