import math

import pytest

from algobox.numbers import (
    add_without_plus,
    calculate,
    climb_stairs,
    digit_sum,
    factorial,
    is_palindrome_number,
    is_prime,
    nth_ugly_number,
    plus_one,
    reverse_number,
    super_pow,
    swap_arithmetic,
)


@pytest.mark.parametrize("n", [0, 1])
def test_factorial_base_cases(n):
    assert factorial(n) == 1


@pytest.mark.parametrize("n", range(2, 25))
def test_factorial_recurrence(n):
    assert factorial(n) == n * factorial(n - 1)


def test_factorial_negative():
    with pytest.raises(ValueError, match="negative"):
        factorial(-3)


def test_is_prime_matches_trial_definition():
    for n in range(-5, 300):
        has_divisor = any(n % d == 0 for d in range(2, n))
        assert is_prime(n) == (n >= 2 and not has_divisor)


@pytest.mark.parametrize("n", [12345, 7, 987654321, 120003])
def test_reverse_number_round_trip(n):
    assert reverse_number(reverse_number(n)) == n
    assert str(reverse_number(n)) == str(n)[::-1]


def test_reverse_number_zero_and_trailing_zeros():
    assert reverse_number(0) == 0
    assert reverse_number(1200) == reverse_number(12)


def test_reverse_number_negative():
    with pytest.raises(ValueError):
        reverse_number(-12)


@pytest.mark.parametrize("n", [0, 1234, 99999, 10**18 + 7])
def test_digit_sum(n):
    assert digit_sum(n) == sum(map(int, str(n)))


def test_digit_sum_negative():
    with pytest.raises(ValueError):
        digit_sum(-1)


@pytest.mark.parametrize(
    "a,b", [(0, 0), (2, 3), (-1, 1), (-7, -9), (123456, -654321), (1 << 20, 1 << 20)]
)
def test_add_without_plus_in_range(a, b):
    assert add_without_plus(a, b) == a + b


def test_add_without_plus_wraps_like_int32():
    assert add_without_plus(2**31 - 1, 1) == -(2**31)


@pytest.mark.parametrize("x", list(range(0, 300)) + [12321, 123321, 1000021, 2147447412])
def test_is_palindrome_number(x):
    assert is_palindrome_number(x) == (str(x) == str(x)[::-1])


def test_negative_is_not_palindrome():
    assert is_palindrome_number(-121) is False


def _only_small_factors(n):
    for p in (2, 3, 5):
        while n % p == 0:
            n //= p
    return n == 1


def test_nth_ugly_number_sequence():
    assert nth_ugly_number(1) == 1
    sequence = [nth_ugly_number(i) for i in range(1, 60)]
    assert sequence == sorted(set(sequence))
    assert all(_only_small_factors(n) for n in sequence)
    expected = [n for n in range(1, sequence[-1] + 1) if _only_small_factors(n)]
    assert sequence == expected


def test_nth_ugly_number_rejects_zero():
    with pytest.raises(ValueError):
        nth_ugly_number(0)


@pytest.mark.parametrize("digits", [[0], [1, 2, 3], [4, 3, 2, 1], [9], [9, 9, 9], [1, 9, 9]])
def test_plus_one(digits):
    result = plus_one(digits)
    assert int("".join(map(str, result))) == int("".join(map(str, digits))) + 1
    assert all(0 <= d <= 9 for d in result)


def test_plus_one_does_not_modify_input():
    digits = [9, 9]
    plus_one(digits)
    assert digits == [9, 9]


@pytest.mark.parametrize(
    "a,digits", [(2, [3]), (2, [1, 0]), (1, [4, 3, 3, 8, 2]), (2147483647, [2, 0, 0]), (5, [0])]
)
def test_super_pow_matches_builtin(a, digits):
    exponent = int("".join(map(str, digits)))
    assert super_pow(a, digits) == pow(a, exponent, 1337)


def test_super_pow_empty_exponent():
    assert super_pow(10, []) == 1


def test_climb_stairs_base_cases():
    assert climb_stairs(1) == 1
    assert climb_stairs(2) == 2


@pytest.mark.parametrize("n", range(3, 40))
def test_climb_stairs_recurrence(n):
    assert climb_stairs(n) == climb_stairs(n - 1) + climb_stairs(n - 2)


def test_climb_stairs_rejects_non_positive():
    with pytest.raises(ValueError, match="positive"):
        climb_stairs(0)


@pytest.mark.parametrize("a,b", [(1, 2), (-5, 7), (0, 0), (10**12, -3)])
def test_swap_arithmetic(a, b):
    assert swap_arithmetic(a, b) == (b, a)


@pytest.mark.parametrize("a,b", [(7, 2), (-7, 2), (0, 5), (100, -3)])
def test_calculate_basic_ops(a, b):
    assert calculate("+", a, b) == a + b
    assert calculate("-", a, b) == a - b
    assert calculate("*", a, b) == a * b


@pytest.mark.parametrize("a,b", [(7, 2), (-7, 2), (7, -2), (-7, -2), (9, 3)])
def test_calculate_division_truncates(a, b):
    assert calculate("/", a, b) == math.trunc(a / b)


def test_calculate_division_toward_zero():
    assert calculate("/", -7, 2) == -3


def test_calculate_division_by_zero():
    with pytest.raises(ZeroDivisionError, match="not allowed"):
        calculate("/", 4, 0)


def test_calculate_invalid_operator():
    with pytest.raises(ValueError, match="Invalid operation"):
        calculate("%", 4, 2)