"""Bit manipulation problems: division, XOR tricks, subsets and OR windows."""

from __future__ import annotations

from collections import Counter
from itertools import accumulate, groupby
from operator import xor
from typing import Iterator, Sequence

__all__ = [
    "divide",
    "longest_max_and_subarray",
    "minimum_subarray_length",
    "single_number_ii",
    "single_number_iii",
    "subsets",
    "xor_queries",
]

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)


def divide(dividend: int, divisor: int) -> int:
    """Integer quotient truncated toward zero, clamped to the signed 32-bit range.

    Uses only shifts, additions and subtractions.
    """
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    if dividend == divisor:
        return 1
    negative = (dividend <= 0 and divisor > 0) or (dividend >= 0 and divisor < 0)
    remaining, step = abs(dividend), abs(divisor)
    quotient = 0
    while remaining >= step:
        shift = 0
        while remaining >= step << (shift + 1):
            shift += 1
        quotient += 1 << shift
        remaining -= step << shift
    result = -quotient if negative else quotient
    return max(INT_MIN, min(INT_MAX, result))


def longest_max_and_subarray(nums: Sequence[int]) -> int:
    """Length of the longest run of the maximum value, the subarray with the largest AND."""
    if not nums:
        raise ValueError("nums must not be empty")
    top = max(nums)
    return max(sum(1 for _ in run) for value, run in groupby(nums) if value == top)


def _set_bits(number: int) -> Iterator[int]:
    position = 0
    while number:
        if number & 1:
            yield position
        number >>= 1
        position += 1


def minimum_subarray_length(nums: Sequence[int], k: int) -> int:
    """Length of the shortest subarray whose bitwise OR is at least ``k``, or -1."""
    if any(number < 0 for number in nums):
        raise ValueError("nums must hold non-negative integers")
    counts: Counter[int] = Counter()

    def window_value() -> int:
        return sum(1 << bit for bit, count in counts.items() if count > 0)

    best = None
    start = 0
    for end, number in enumerate(nums):
        counts.update(_set_bits(number))
        while start <= end and window_value() >= k:
            length = end - start + 1
            best = length if best is None else min(best, length)
            counts.subtract(_set_bits(nums[start]))
            start += 1
    return -1 if best is None else best


def single_number_ii(nums: Sequence[int]) -> int:
    """The value that occurs once where every other value occurs three times."""
    ones = twos = 0
    for number in nums:
        ones = (ones ^ number) & ~twos
        twos = (twos ^ number) & ~ones
    return ones


def single_number_iii(nums: Sequence[int]) -> list[int]:
    """The two values that occur once where every other value occurs twice.

    The value holding the lowest differing bit comes first.
    """
    combined = 0
    for number in nums:
        combined ^= number
    lowest = combined & -combined
    with_bit = without_bit = 0
    for number in nums:
        if number & lowest:
            with_bit ^= number
        else:
            without_bit ^= number
    return [with_bit, without_bit]


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Every subset of ``nums``, in the order of the bit masks that select them."""
    items = list(nums)
    return [
        [item for bit, item in enumerate(items) if mask >> bit & 1]
        for mask in range(1 << len(items))
    ]


def xor_queries(arr: Sequence[int], queries: Sequence[Sequence[int]]) -> list[int]:
    """XOR of ``arr[start..end]`` for each ``[start, end]`` query, both ends inclusive."""
    prefix = list(accumulate(arr, xor, initial=0))
    return [prefix[end + 1] ^ prefix[start] for start, end in queries]