"""Small integer routines: factorials, primes, digits, ugly numbers and friends."""

from __future__ import annotations

import math
import operator
from collections.abc import Callable, Iterable, Sequence

_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000
_SUPER_POW_MOD = 1337


def factorial(n: int) -> int:
    """n! for a non-negative integer."""
    if n < 0:
        raise ValueError("Factorial of negative number doesn't exist.")
    return math.prod(range(2, n + 1))


def is_prime(n: int) -> bool:
    """Trial division up to the square root."""
    if n < 2:
        return False
    return all(n % d for d in range(2, math.isqrt(n) + 1))


def reverse_number(n: int) -> int:
    """The digits of a non-negative integer in reverse order."""
    if n < 0:
        raise ValueError("only non-negative numbers can be reversed")
    reversed_value = 0
    while n > 0:
        n, digit = divmod(n, 10)
        reversed_value = reversed_value * 10 + digit
    return reversed_value


def digit_sum(n: int) -> int:
    """Sum of the decimal digits of a non-negative integer."""
    if n < 0:
        raise ValueError("digit sum needs a non-negative number")
    return sum(int(ch) for ch in str(n))


def add_without_plus(a: int, b: int) -> int:
    """Add two 32-bit signed integers with XOR and carries, wrapping on overflow."""
    a &= _INT32_MASK
    b &= _INT32_MASK
    while b:
        a, b = (a ^ b) & _INT32_MASK, ((a & b) << 1) & _INT32_MASK
    return a - (1 << 32) if a & _INT32_SIGN else a


def is_palindrome_number(x: int) -> bool:
    """Whether the decimal digits of ``x`` read the same both ways."""
    if x < 0 or (x % 10 == 0 and x != 0):
        return False
    reversed_half = 0
    while x > reversed_half:
        x, digit = divmod(x, 10)
        reversed_half = reversed_half * 10 + digit
    return x == reversed_half or x == reversed_half // 10


def nth_ugly_number(n: int) -> int:
    """The n-th positive number whose only prime factors are 2, 3 and 5."""
    if n < 1:
        raise ValueError("n must be at least 1")
    ugly = [1]
    i2 = i3 = i5 = 0
    while len(ugly) < n:
        next2, next3, next5 = ugly[i2] * 2, ugly[i3] * 3, ugly[i5] * 5
        nxt = min(next2, next3, next5)
        ugly.append(nxt)
        if nxt == next2:
            i2 += 1
        if nxt == next3:
            i3 += 1
        if nxt == next5:
            i5 += 1
    return ugly[n - 1]


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to a number given as a list of decimal digits, most significant first."""
    result = list(digits)
    for i in reversed(range(len(result))):
        if result[i] < 9:
            result[i] += 1
            return result
        result[i] = 0
    return [1, *result]


def super_pow(a: int, digits: Iterable[int]) -> int:
    """``a`` raised to the number spelled by ``digits``, modulo 1337."""
    result = 1
    for digit in digits:
        result = pow(result, 10, _SUPER_POW_MOD) * pow(a, digit, _SUPER_POW_MOD) % _SUPER_POW_MOD
    return result


def climb_stairs(n: int) -> int:
    """Ways to climb ``n`` steps taking one or two at a time."""
    if n <= 0:
        raise ValueError("Number of stairs must be a positive integer.")
    previous, current = 1, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def swap_arithmetic(a: int, b: int) -> tuple[int, int]:
    """Swap two integers using only addition and subtraction."""
    a = a + b
    b = a - b
    a = a - b
    return a, b


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_OPERATIONS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
}


def calculate(op: str, a: int, b: int) -> int:
    """Apply ``+``, ``-``, ``*`` or integer ``/`` (truncating toward zero)."""
    try:
        operation = _OPERATIONS[op]
    except KeyError:
        raise ValueError("Invalid operation.") from None
    if op == "/" and b == 0:
        raise ZeroDivisionError("Division by zero is not allowed.")
    return operation(a, b)