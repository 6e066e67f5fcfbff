"""Small container classes: spans, a bounded deque, queue, stack and min-stack."""

from __future__ import annotations

from collections import deque

__all__ = ["StockSpanner", "MyCircularDeque", "MyQueue", "MyStack", "MinStack"]


class StockSpanner:
    """Reports, for each new price, how many consecutive days it has been the highest."""

    def __init__(self) -> None:
        self._stack: list[tuple[int, int]] = []
        self._day = -1

    def next(self, price: int) -> int:
        """Record today's price and return its span."""
        self._day += 1
        while self._stack and self._stack[-1][0] <= price:
            self._stack.pop()
        previous = self._stack[-1][1] if self._stack else -1
        self._stack.append((price, self._day))
        return self._day - previous


class MyCircularDeque:
    """A double-ended queue holding at most ``k`` values."""

    def __init__(self, k: int) -> None:
        if k < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = k
        self._items: deque[int] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def insert_front(self, value: int) -> bool:
        """Add ``value`` at the front; False if the deque is full."""
        if self.is_full():
            return False
        self._items.appendleft(value)
        return True

    def insert_last(self, value: int) -> bool:
        """Add ``value`` at the rear; False if the deque is full."""
        if self.is_full():
            return False
        self._items.append(value)
        return True

    def delete_front(self) -> bool:
        """Remove the front value; False if the deque is empty."""
        if self.is_empty():
            return False
        self._items.popleft()
        return True

    def delete_last(self) -> bool:
        """Remove the rear value; False if the deque is empty."""
        if self.is_empty():
            return False
        self._items.pop()
        return True

    def get_front(self) -> int:
        """The front value, or -1 when empty."""
        return self._items[0] if self._items else -1

    def get_rear(self) -> int:
        """The rear value, or -1 when empty."""
        return self._items[-1] if self._items else -1

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._capacity


class MyQueue:
    """A first-in first-out queue kept as a stack whose top is the oldest value."""

    def __init__(self) -> None:
        self._stack: list[int] = []

    def push(self, x: int) -> None:
        """Append ``x`` at the back, moving the rest aside through a second stack."""
        spare: list[int] = []
        while self._stack:
            spare.append(self._stack.pop())
        self._stack.append(x)
        while spare:
            self._stack.append(spare.pop())

    def pop(self) -> int:
        """Remove and return the oldest value."""
        if not self._stack:
            raise IndexError("pop from empty queue")
        return self._stack.pop()

    def peek(self) -> int:
        """The oldest value, left in place."""
        if not self._stack:
            raise IndexError("peek at empty queue")
        return self._stack[-1]

    def empty(self) -> bool:
        return not self._stack


class MyStack:
    """A last-in first-out stack kept as a queue whose front is the newest value."""

    def __init__(self) -> None:
        self._queue: deque[int] = deque()

    def push(self, x: int) -> None:
        """Put ``x`` on top by queueing the older values behind it."""
        fresh: deque[int] = deque([x])
        while self._queue:
            fresh.append(self._queue.popleft())
        self._queue = fresh

    def pop(self) -> int:
        """Remove and return the newest value."""
        if not self._queue:
            raise IndexError("pop from empty stack")
        return self._queue.popleft()

    def top(self) -> int:
        """The newest value, left in place."""
        if not self._queue:
            raise IndexError("top of empty stack")
        return self._queue[0]

    def empty(self) -> bool:
        return not self._queue


class MinStack:
    """A stack that reports its minimum in constant time and space per entry."""

    def __init__(self) -> None:
        self._stack: list[int] = []
        self._min = 0

    def push(self, val: int) -> None:
        if not self._stack:
            self._min = val
            self._stack.append(val)
        elif val > self._min:
            self._stack.append(val)
        else:
            # Encodes the previous minimum so it can be restored on pop.
            self._stack.append(2 * val - self._min)
            self._min = val

    def pop(self) -> None:
        """Remove the top value; does nothing when empty."""
        if not self._stack:
            return
        stored = self._stack.pop()
        if stored < self._min:
            self._min = 2 * self._min - stored

    def top(self) -> int:
        """The top value, or -1 when empty."""
        if not self._stack:
            return -1
        stored = self._stack[-1]
        return stored if self._min < stored else self._min

    def get_min(self) -> int:
        """The smallest value on the stack."""
        if not self._stack:
            raise IndexError("minimum of empty stack")
        return self._min