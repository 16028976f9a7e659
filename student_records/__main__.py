#!/usr/bin/env python3
import argparse

from student_records.config import Settings, configure_logging
from student_records.menu import StudentManager, menu
from student_records.store import StudentStore


def build_settings(argv=None) -> Settings:
    parser = argparse.ArgumentParser(description="Student Records (add and look up students)")
    parser.add_argument("--no-loading", action="store_true", help="Skip the loading animation when adding")
    parser.add_argument("--log-level", help="Diagnostics level written to stderr (default: $LOG_LEVEL or WARNING)")
    args = parser.parse_args(argv)

    settings = Settings.from_env()
    if args.no_loading:
        settings.show_loading = False
    if args.log_level:
        settings.log_level = args.log_level.upper()
    return settings


def main(argv=None):
    settings = build_settings(argv)
    logger = configure_logging(settings.log_level)
    logger.info("Starting student records console")

    manager = StudentManager(StudentStore(), settings)
    try:
        menu(manager)
    except KeyboardInterrupt:
        print("\nInterrupted. Exiting.")
    logger.info("Stopped with %d student(s) on record", len(manager.store))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
