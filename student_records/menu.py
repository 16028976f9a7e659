"""The add/display flows and the menu loop around them.

Each flow owns its own error handling: bad input prints a message and the
flow returns to the menu. Only ``EOFError`` escapes a flow, and the loop
treats it as a request to exit.
"""
import logging

from student_records.config import APP_NAME, Settings
from student_records.errors import DuplicateRollNoError, InputError, InvalidNumberFormatError
from student_records.loader import show_loading
from student_records.models import Student
from student_records.store import StudentStore
from student_records.validation import read_marks, read_roll_no, read_text

logger = logging.getLogger(APP_NAME)

MENU_OPTIONS = (
    ("1", "Add Student"),
    ("2", "Display Student"),
    ("3", "Exit"),
)


# ---------- Manager ----------
class StudentManager:
    def __init__(self, store=None, settings=None):
        self.store = store if store is not None else StudentStore()
        self.settings = settings or Settings()

    def add_student(self):
        try:
            roll = read_roll_no("Enter Roll No (Integer): ")
            if self.store.exists(roll):
                logger.info("Roll No %s already on record; add aborted", roll)
                print("A student with this Roll No already exists.")
                return

            name = read_text("Enter Name: ", "Name")
            email = read_text("Enter Email: ", "Email")
            course = read_text("Enter Course: ", "Course")
            marks = read_marks("Enter Marks: ")

            if self.settings.show_loading:
                show_loading(self.settings.loading_steps, self.settings.loading_delay)

            self.store.add(Student(roll_no=roll, name=name, email=email, course=course, marks=marks))
            print("Student added successfully.")

        except InvalidNumberFormatError as e:
            logger.info("Add rejected: %s", e)
            print("Invalid number format. Enter valid integers/floats for roll and marks.")
        except InputError as e:
            logger.info("Add rejected: %s", e)
            print(f"Input Error: {e}")
        except DuplicateRollNoError as e:
            print(e)
        except EOFError:
            raise
        except Exception as e:
            logger.exception("Unexpected error while adding a student")
            print(f"Unexpected Error: {e}")
        finally:
            print("Input process completed.")

    def display_student(self):
        if self.store.is_empty():
            print("No student records available.")
            return

        try:
            roll = read_roll_no("Enter Roll No to display: ")
        except InvalidNumberFormatError:
            print("Invalid number format for Roll No.")
            return
        except InputError as e:
            print(e)
            return

        student = self.store.find_by_roll(roll)
        if student is None:
            logger.debug("Lookup miss for roll_no=%s", roll)
            print(f"Student with Roll No {roll} not found.")
            return

        for label, value in student.details():
            print(f"{label}: {value}")


# ---------- Menu ----------
def print_menu():
    print("\n--- Student Menu ---")
    for key, label in MENU_OPTIONS:
        print(f"{key}. {label}")


def menu(manager: StudentManager):
    """Run until the user picks Exit or input runs out."""
    actions = {
        "1": manager.add_student,
        "2": manager.display_student,
    }
    while True:
        print_menu()
        try:
            choice = input("Choose option (1-3): ").strip()
            if not choice:
                print("Please enter a choice.")
                continue

            if choice == "3":
                print("Exiting program. Goodbye!")
                break
            elif choice in actions:
                actions[choice]()
            else:
                print("Invalid option. Enter 1, 2 or 3.")
        except EOFError:
            print()
            logger.info("End of input; exiting")
            break
        except Exception as e:
            logger.exception("Unexpected error handling menu choice")
            print(f"Unexpected Error: {e}")
