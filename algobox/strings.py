"""String problems: reductions, prefixes, palindromes and encodings."""

from __future__ import annotations

from collections import Counter
from itertools import groupby, product
from typing import Iterable, Sequence

__all__ = [
    "min_length",
    "count_consistent_strings",
    "letter_combinations",
    "lexical_order",
    "longest_common_prefix",
    "shortest_palindrome",
    "compressed_string",
    "uncommon_from_sentences",
    "minimum_steps",
]

_KEYPAD = ("", "", "abc", "def", "ghi", "jkl", "mno", "pqrs", "tuv", "wxyz")
_REMOVABLE = {"B": "A", "D": "C"}


def min_length(s: str) -> int:
    """Length left after repeatedly removing every ``AB`` and ``CD`` substring."""
    stack: list[str] = []
    for char in s:
        if stack and _REMOVABLE.get(char) == stack[-1]:
            stack.pop()
        else:
            stack.append(char)
    return len(stack)


def count_consistent_strings(allowed: str, words: Iterable[str]) -> int:
    """Number of words made only of characters in ``allowed``."""
    permitted = set(allowed)
    return sum(1 for word in words if set(word) <= permitted)


def letter_combinations(digits: str) -> list[str]:
    """Every letter string a phone keypad digit sequence can spell."""
    if not digits:
        return []
    try:
        groups = [_KEYPAD[int(digit)] for digit in digits]
    except ValueError:
        raise ValueError(f"not a digit string: {digits!r}") from None
    return ["".join(letters) for letters in product(*groups)]


def lexical_order(n: int) -> list[int]:
    """The numbers 1 to ``n`` in dictionary order of their decimal text."""
    order: list[int] = []
    current = 1
    for _ in range(n):
        order.append(current)
        if current * 10 <= n:
            current *= 10
        else:
            while current % 10 == 9 or current >= n:
                current //= 10
            current += 1
    return order


def longest_common_prefix(words: Sequence[str]) -> str:
    """The longest prefix shared by all words."""
    if not words:
        raise ValueError("words must not be empty")
    ordered = sorted(words)
    first, last = ordered[0], ordered[-1]
    length = 0
    for a, b in zip(first, last):
        if a != b:
            break
        length += 1
    return first[:length]


def _prefix_function(text: str) -> list[int]:
    pi = [0] * len(text)
    k = 0
    for i in range(1, len(text)):
        while k and text[i] != text[k]:
            k = pi[k - 1]
        if text[i] == text[k]:
            k += 1
        pi[i] = k
    return pi


def shortest_palindrome(s: str) -> str:
    """The shortest palindrome formed by adding characters in front of ``s``."""
    reversed_s = s[::-1]
    overlap = _prefix_function(s + "#" + reversed_s)[-1]
    return reversed_s[: len(s) - overlap] + s


def compressed_string(word: str) -> str:
    """Run-length encode ``word`` as count-character pairs, runs capped at nine."""
    parts: list[str] = []
    for char, run in groupby(word):
        full, rest = divmod(sum(1 for _ in run), 9)
        parts.append(f"9{char}" * full)
        if rest:
            parts.append(f"{rest}{char}")
    return "".join(parts)


def uncommon_from_sentences(s1: str, s2: str) -> list[str]:
    """Words that occur exactly once across both space-separated sentences."""
    words = f"{s1} {s2}".split(" ")
    if words and words[-1] == "":
        words.pop()
    return [word for word, count in Counter(words).items() if count == 1]


def minimum_steps(s: str) -> int:
    """Adjacent swaps needed to move every ``1`` to the right of every ``0``."""
    swaps = 0
    ones = 0
    for char in s:
        if char == "0":
            swaps += ones
        else:
            ones += 1
    return swaps