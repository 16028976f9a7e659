import time

from student_records.config import DEFAULT_LOADING_DELAY, DEFAULT_LOADING_STEPS


def show_loading(steps=DEFAULT_LOADING_STEPS, delay=DEFAULT_LOADING_DELAY, sleep=time.sleep):
    """Print ``Loading`` and one dot per step. Purely cosmetic."""
    print("Loading", end="", flush=True)
    for _ in range(steps):
        sleep(delay)
        print(".", end="", flush=True)
    print()
