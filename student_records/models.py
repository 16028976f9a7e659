from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------- Grade ----------
def calculate_grade(marks: Optional[float]) -> str:
    if marks is None: return "N/A"
    if marks >= 90: return "A"
    elif marks >= 75: return "B"
    elif marks >= 60: return "C"
    elif marks >= 40: return "D"
    else: return "F"


# ---------- Student ----------
class Student(BaseModel):
    """One student record. Immutable once created; ``roll_no`` is the key."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    roll_no: int
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    course: str = Field(min_length=1)
    # always set by the add flow
    marks: Optional[float] = Field(default=None, ge=0, le=100, allow_inf_nan=False)

    @property
    def grade(self) -> str:
        return calculate_grade(self.marks)

    def details(self):
        return [
            ("Roll No", self.roll_no),
            ("Name", self.name),
            ("Email", self.email),
            ("Course", self.course),
            ("Marks", self.marks),
            ("Grade", self.grade),
        ]
