import logging
from typing import Iterator, List, Optional

from student_records.config import APP_NAME
from student_records.errors import DuplicateRollNoError
from student_records.models import Student

logger = logging.getLogger(APP_NAME)


class StudentStore:
    """In-memory student records, kept in the order they were added."""

    def __init__(self):
        self.students: List[Student] = []

    def add(self, student: Student) -> None:
        if self.exists(student.roll_no):
            logger.info("Rejected duplicate roll_no=%s", student.roll_no)
            raise DuplicateRollNoError(student.roll_no)
        self.students.append(student)
        logger.info("Added student roll_no=%s (%d on record)", student.roll_no, len(self.students))

    def find_by_roll(self, roll_no: int) -> Optional[Student]:
        for s in self.students:
            if s.roll_no == roll_no:
                return s
        return None

    def exists(self, roll_no: int) -> bool:
        return self.find_by_roll(roll_no) is not None

    def is_empty(self) -> bool:
        return not self.students

    def __contains__(self, roll_no) -> bool:
        return self.exists(roll_no)

    def __len__(self) -> int:
        return len(self.students)

    def __iter__(self) -> Iterator[Student]:
        return iter(self.students)
