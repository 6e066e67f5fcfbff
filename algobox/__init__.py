"""Algorithm solutions and small data structures: arrays, bits, a booking
calendar, linked lists, maths, stack techniques, strings and containers."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "bits",
    "calendar",
    "linked",
    "maths",
    "stacks",
    "strings",
    "structures",
]