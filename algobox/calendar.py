"""A booking calendar that refuses overlapping half-open intervals."""

from __future__ import annotations

from bisect import bisect_left

__all__ = ["MyCalendar"]


class MyCalendar:
    """Holds booked ``[start, end)`` intervals, none overlapping."""

    def __init__(self) -> None:
        self._starts: list[int] = []
        self._ends: list[int] = []

    def book(self, start: int, end: int) -> bool:
        """Book ``[start, end)`` if it overlaps nothing booked; report whether it was booked."""
        index = bisect_left(self._starts, start)
        if index < len(self._starts) and self._starts[index] < end:
            return False
        if index > 0 and self._ends[index - 1] > start:
            return False
        if index < len(self._starts) and self._starts[index] == start:
            self._ends[index] = end
        else:
            self._starts.insert(index, start)
            self._ends.insert(index, end)
        return True