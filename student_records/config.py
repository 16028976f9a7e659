"""Settings for the student records console.

Values come from environment variables with sensible defaults, and the
command line can override them (see :mod:`student_records.__main__`).

- ``LOG_LEVEL``: diagnostics level, written to stderr so the menu on stdout
  stays readable. Defaults to ``WARNING``.
- ``STUDENT_LOADING_STEPS`` / ``STUDENT_LOADING_DELAY``: number of dots and
  seconds per dot shown while a student is being added.
"""
from __future__ import annotations

import os
import logging
from dataclasses import dataclass


APP_NAME = "student-records"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
DEFAULT_LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING").upper()

DEFAULT_LOADING_STEPS = 5
DEFAULT_LOADING_DELAY = 0.3


def _env_number(name: str, default, cast):
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = cast(raw)
    except ValueError:
        logging.getLogger(APP_NAME).warning("Ignoring %s=%r; using %s", name, raw, default)
        return default
    if value < 0:
        logging.getLogger(APP_NAME).warning("Ignoring negative %s=%r; using %s", name, raw, default)
        return default
    return value


@dataclass
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    loading_steps: int = DEFAULT_LOADING_STEPS
    loading_delay: float = DEFAULT_LOADING_DELAY
    show_loading: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            log_level=os.environ.get("LOG_LEVEL", "WARNING").upper(),
            loading_steps=_env_number("STUDENT_LOADING_STEPS", DEFAULT_LOADING_STEPS, int),
            loading_delay=_env_number("STUDENT_LOADING_DELAY", DEFAULT_LOADING_DELAY, float),
        )


def resolve_level(name: str) -> int:
    # the logging module also has non-level attributes such as BASIC_FORMAT
    level = getattr(logging, (name or "").upper(), None)
    if not isinstance(level, int):
        logging.getLogger(APP_NAME).warning("Unknown log level %r; using WARNING", name)
        return logging.WARNING
    return level


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> logging.Logger:
    logging.basicConfig(
        level=resolve_level(level),
        format=LOG_FORMAT,
    )
    return logging.getLogger(APP_NAME)
