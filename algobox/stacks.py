"""Stack-based problems: collisions, spans, expressions and brackets."""

from __future__ import annotations

import string
from typing import Sequence

__all__ = [
    "asteroid_collision",
    "sum_subarray_mins",
    "precedence",
    "infix_to_postfix",
    "largest_rectangle_area",
    "next_greater_element",
    "next_greater_elements",
    "is_valid",
]

MOD = 10**9 + 7

_OPERANDS = frozenset(string.ascii_letters + string.digits)
_PRECEDENCE = {"^": 3, "*": 2, "/": 2, "+": 1, "-": 1}
_CLOSERS = {")": "(", "}": "{", "]": "["}


def asteroid_collision(asteroids: Sequence[int]) -> list[int]:
    """Asteroids left after all collisions; positive moves right, negative left."""
    survivors: list[int] = []
    for rock in asteroids:
        if rock > 0:
            survivors.append(rock)
            continue
        size = abs(rock)
        while survivors and 0 < survivors[-1] < size:
            survivors.pop()
        if survivors and survivors[-1] == size:
            survivors.pop()
        elif not survivors or survivors[-1] < 0:
            survivors.append(rock)
    return survivors


def _next_smaller(arr: Sequence[int]) -> list[int]:
    """Index of the next strictly smaller element to the right, or ``len(arr)``."""
    n = len(arr)
    result = [n] * n
    stack: list[int] = []
    for i in reversed(range(n)):
        while stack and arr[stack[-1]] >= arr[i]:
            stack.pop()
        result[i] = stack[-1] if stack else n
        stack.append(i)
    return result


def _previous_smaller_or_equal(arr: Sequence[int]) -> list[int]:
    """Index of the previous element not greater than each, or -1."""
    result = [-1] * len(arr)
    stack: list[int] = []
    for i, value in enumerate(arr):
        while stack and arr[stack[-1]] > value:
            stack.pop()
        result[i] = stack[-1] if stack else -1
        stack.append(i)
    return result


def sum_subarray_mins(arr: Sequence[int]) -> int:
    """Sum of the minimum of every contiguous subarray, modulo 10**9 + 7."""
    following = _next_smaller(arr)
    preceding = _previous_smaller_or_equal(arr)
    total = 0
    for i, value in enumerate(arr):
        left = i - preceding[i]
        right = following[i] - i
        total = (total + (left * right * value) % MOD) % MOD
    return total


def precedence(op: str) -> int:
    """Binding strength of an arithmetic operator; -1 for anything else."""
    return _PRECEDENCE.get(op, -1)


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix form."""
    stack: list[str] = []
    output: list[str] = []
    for char in expression:
        if char in _OPERANDS:
            output.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ValueError(f"unmatched ')' in {expression!r}")
            stack.pop()
        else:
            rank = precedence(char)
            while stack and rank <= precedence(stack[-1]):
                output.append(stack.pop())
            stack.append(char)
    output.extend(reversed(stack))
    return "".join(output)


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Area of the largest rectangle that fits under a histogram."""
    stack: list[int] = []
    best = 0
    for i, height in enumerate(heights):
        while stack and heights[stack[-1]] > height:
            top = stack.pop()
            left = stack[-1] if stack else -1
            best = max(best, heights[top] * (i - left - 1))
        stack.append(i)
    n = len(heights)
    while stack:
        top = stack.pop()
        left = stack[-1] if stack else -1
        best = max(best, heights[top] * (n - left - 1))
    return best


def next_greater_element(nums1: Sequence[int], nums2: Sequence[int]) -> list[int]:
    """For each value of ``nums1``, the first greater value after it in ``nums2``, or -1.

    A next greater value of zero is reported as -1.
    """
    greater: dict[int, int] = {}
    stack: list[int] = []
    for number in nums2:
        while stack and stack[-1] < number:
            greater[stack.pop()] = number
        stack.append(number)
    return [greater.get(value) or -1 for value in nums1]


def next_greater_elements(nums: Sequence[int]) -> list[int]:
    """Next greater value of each element, searching circularly; -1 if none."""
    n = len(nums)
    result = [-1] * n
    stack: list[int] = []
    for i in range(2 * n - 1, -1, -1):
        value = nums[i % n]
        while stack and stack[-1] <= value:
            stack.pop()
        if i < n:
            result[i] = stack[-1] if stack else -1
        stack.append(value)
    return result


def is_valid(s: str) -> bool:
    """Tell whether the brackets of ``s`` open and close in matching pairs."""
    stack: list[str] = []
    for char in s:
        if char in "({[":
            stack.append(char)
            continue
        if not stack or (char in _CLOSERS and stack[-1] != _CLOSERS[char]):
            return False
        stack.pop()
    return not stack