"""Turn raw input lines into typed student fields.

Every reader trims the line first. The first bad field raises an
:class:`~student_records.errors.InputError` and the caller abandons the whole
operation, there is no per-field retry.
"""
import logging
import math
import re

from student_records.config import APP_NAME
from student_records.errors import EmptyInputError, InvalidNumberFormatError, MarksOutOfRangeError

logger = logging.getLogger(APP_NAME)

INT_RE = re.compile(r"^[+-]?\d+$", re.ASCII)
REAL_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$", re.ASCII)

# same bounds as a 32-bit signed int
MIN_ROLL_NO = -(2 ** 31)
MAX_ROLL_NO = 2 ** 31 - 1

MIN_MARKS = 0.0
MAX_MARKS = 100.0


def require(text, field):
    value = (text or "").strip()
    if not value:
        logger.debug("Empty value for %s", field)
        raise EmptyInputError(field)
    return value


# ---------- Parsers ----------
def parse_roll_no(text: str) -> int:
    value = require(text, "Roll No")
    # int() alone would also take "1_000" and full-width digits
    if not INT_RE.match(value):
        logger.debug("Bad Roll No %r", value)
        raise InvalidNumberFormatError("Roll No", value)
    roll = int(value)
    if roll < MIN_ROLL_NO or roll > MAX_ROLL_NO:
        logger.debug("Roll No outside 32-bit range: %s", value)
        raise InvalidNumberFormatError("Roll No", value)
    return roll


def parse_marks(text: str) -> float:
    value = require(text, "Marks")
    # float() alone would also take "1_0", "nan" and full-width digits
    if not REAL_RE.match(value):
        logger.debug("Bad Marks %r", value)
        raise InvalidNumberFormatError("Marks", value)
    marks = float(value)
    if not math.isfinite(marks):
        raise InvalidNumberFormatError("Marks", value)
    if marks < MIN_MARKS or marks > MAX_MARKS:
        logger.debug("Marks out of range: %s", marks)
        raise MarksOutOfRangeError(marks)
    return marks


# ---------- Prompted readers ----------
def read_text(prompt: str, field: str) -> str:
    return require(input(prompt), field)


def read_roll_no(prompt: str) -> int:
    return parse_roll_no(input(prompt))


def read_marks(prompt: str) -> float:
    return parse_marks(input(prompt))
