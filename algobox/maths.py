"""Number routines: prime counting and fast exponentiation."""

from __future__ import annotations

import math

__all__ = ["count_primes", "my_pow"]


def count_primes(n: int) -> int:
    """Number of primes strictly below ``n``, by the sieve of Eratosthenes."""
    if n < 2:
        return 0
    composite = bytearray(n)
    count = 0
    limit = math.isqrt(n)
    for number in range(2, n):
        if composite[number]:
            continue
        count += 1
        if number <= limit:
            composite[number * number :: number] = b"\x01" * len(range(number * number, n, number))
    return count


def my_pow(x: float, n: int) -> float:
    """``x`` raised to the integer power ``n`` by repeated squaring."""
    negative = n < 0
    n = abs(n)
    result = 1.0
    while n > 0:
        if n % 2 == 1:
            result *= x
            n -= 1
        else:
            n //= 2
            x *= x
    if negative:
        if result == 0:
            return math.copysign(math.inf, result)
        result = 1.0 / result
    return result