"""Errors raised while reading and storing student records.

Everything here is recoverable: the menu prints the message and goes back to
the prompt. A missing student is not an error, ``StudentStore.find_by_roll``
just returns ``None``.
"""


class StudentRecordError(Exception):
    pass


# ---------- Input ----------
class InputError(StudentRecordError):
    pass


class EmptyInputError(InputError):
    def __init__(self, field):
        self.field = field
        super().__init__(f"{field} cannot be empty.")


class InvalidNumberFormatError(InputError):
    def __init__(self, field, raw):
        self.field = field
        self.raw = raw
        super().__init__(f"Invalid number format for {field}: {raw!r}")


class MarksOutOfRangeError(InputError):
    def __init__(self, marks):
        self.marks = marks
        super().__init__("Marks must be between 0 and 100.")


# ---------- Store ----------
class DuplicateRollNoError(StudentRecordError):
    def __init__(self, roll_no):
        self.roll_no = roll_no
        super().__init__("A student with this Roll No already exists.")
