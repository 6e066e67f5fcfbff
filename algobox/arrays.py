"""Array problems: sums, prefixes, ordering and searching."""

from __future__ import annotations

from collections import Counter
from functools import cmp_to_key
from typing import Sequence

__all__ = [
    "three_sum",
    "contains_nearby_duplicate",
    "divide_players",
    "longest_common_digit_prefix",
    "largest_number",
    "find_min_difference",
    "trap",
    "two_sum",
    "search_rotated",
    "top_k_frequent",
]

_MINUTES_PER_DAY = 24 * 60


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct triple of values that sums to zero, each in ascending order."""
    values = sorted(nums)
    n = len(values)
    triples: list[list[int]] = []
    for i, first in enumerate(values):
        if i and first == values[i - 1]:
            continue
        j, k = i + 1, n - 1
        while j < k:
            total = first + values[j] + values[k]
            if total < 0:
                j += 1
            elif total > 0:
                k -= 1
            else:
                triples.append([first, values[j], values[k]])
                j += 1
                k -= 1
                while j < k and values[j] == values[j - 1]:
                    j += 1
                while j < k and values[k] == values[k + 1]:
                    k -= 1
    return triples


def contains_nearby_duplicate(nums: Sequence[int], k: int) -> bool:
    """Tell whether two equal values sit at most ``k`` positions apart."""
    last_seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        if value in last_seen and abs(index - last_seen[value]) <= k:
            return True
        last_seen[value] = index
    return False


def divide_players(skill: Sequence[int]) -> int:
    """Pair players into teams of equal total skill and return the summed chemistry, or -1."""
    if not skill:
        raise ValueError("skill must not be empty")
    ordered = sorted(skill)
    team_skill = ordered[0] + ordered[-1]
    half = len(ordered) // 2
    chemistry = 0
    for low, high in zip(ordered[:half], reversed(ordered)):
        if low + high != team_skill:
            return -1
        chemistry += low * high
    return chemistry


def _prefixes(number: int):
    text = str(number)
    for end in range(1, len(text) + 1):
        yield text[:end]


def longest_common_digit_prefix(arr1: Sequence[int], arr2: Sequence[int]) -> int:
    """Length of the longest decimal prefix shared by a number of ``arr1`` and one of ``arr2``."""
    known = {prefix for number in arr1 for prefix in _prefixes(number)}
    return max(
        (len(prefix) for number in arr2 for prefix in _prefixes(number) if prefix in known),
        default=0,
    )


def _concat_order(a: str, b: str) -> int:
    if a + b > b + a:
        return -1
    if a + b < b + a:
        return 1
    return 0


def largest_number(nums: Sequence[int]) -> str:
    """Arrange the numbers so that their concatenation is the largest possible."""
    if not nums:
        raise ValueError("nums must not be empty")
    texts = sorted((str(number) for number in nums), key=cmp_to_key(_concat_order))
    if texts[0] == "0":
        return "0"
    return "".join(texts)


def find_min_difference(time_points: Sequence[str]) -> int:
    """Smallest difference in minutes between any two ``HH:MM`` clock times."""
    if not time_points:
        raise ValueError("time_points must not be empty")
    minutes = sorted(int(point[:2]) * 60 + int(point[3:]) for point in time_points)
    gaps = (later - earlier for earlier, later in zip(minutes, minutes[1:]))
    wrap_around = _MINUTES_PER_DAY - minutes[-1] + minutes[0]
    return min(wrap_around, *gaps) if len(minutes) > 1 else wrap_around


def trap(height: Sequence[int]) -> int:
    """Units of rain water held between the bars of an elevation map."""
    left, right = 0, len(height) - 1
    left_max = right_max = 0
    water = 0
    while left <= right:
        if height[left] <= height[right]:
            if height[left] >= left_max:
                left_max = height[left]
            else:
                water += left_max - height[left]
            left += 1
        else:
            if height[right] >= right_max:
                right_max = height[right]
            else:
                water += right_max - height[right]
            right -= 1
    return water


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Indices of two values adding up to ``target``; ``[-1, -1]`` if there are none."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        complement = target - value
        if complement in seen:
            return [seen[complement], index]
        seen[value] = index
    return [-1, -1]


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a rotated ascending sequence, or -1."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[low] <= nums[mid]:
            if nums[low] <= target <= nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        else:
            if nums[mid] <= target <= nums[high]:
                low = mid + 1
            else:
                high = mid - 1
    return -1


def top_k_frequent(nums: Sequence[int], k: int) -> list[int]:
    """The ``k`` most frequent values; ties go to the larger value first."""
    ranked = sorted(((count, value) for value, count in Counter(nums).items()), reverse=True)
    if k >= 0:
        ranked = ranked[:k]
    return [value for _, value in ranked]