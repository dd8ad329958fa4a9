"""Digit manipulation, divisibility, primes, gcd and combinatorics on integers."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Sequence


def digits(n: int) -> list[int]:
    """Return the decimal digits of ``n`` from least to most significant.

    A value that is not positive has no digits.
    """
    result = []
    while n > 0:
        n, last = divmod(n, 10)
        result.append(last)
    return result


def count_digits(n: int) -> int:
    """Return the number of decimal digits of a positive ``n``; zero otherwise."""
    return len(digits(n))


def reverse_number(n: int) -> int:
    """Return ``n`` with its decimal digits reversed; zero when ``n`` is not positive."""
    result = 0
    for d in digits(n):
        result = result * 10 + d
    return result


def is_palindrome_number(n: int) -> bool:
    """Return True when the decimal digits of ``n`` read the same both ways."""
    return reverse_number(n) == n


def is_armstrong(n: int) -> bool:
    """Return True when ``n`` equals the sum of its digits each raised to the digit count."""
    if n < 1:
        raise ValueError(f"armstrong check needs a positive integer, got {n}")
    ds = digits(n)
    return sum(d ** len(ds) for d in ds) == n


def divisors(n: int) -> list[int]:
    """Return the positive divisors of ``n`` in ascending order."""
    if n < 1:
        raise ValueError(f"divisors need a positive integer, got {n}")
    small, large = [], []
    for i in range(1, math.isqrt(n) + 1):
        if n % i == 0:
            small.append(i)
            if n // i != i:
                large.append(n // i)
    return small + large[::-1]


def is_prime(n: int) -> bool:
    """Return True when ``n`` is a prime number."""
    if n < 2:
        return False
    return all(n % i for i in range(2, math.isqrt(n) + 1))


def prime_sum(n: int) -> int:
    """Return the sum of all primes not greater than ``n``."""
    return sum(i for i in range(2, n + 1) if is_prime(i))


def gcd_brute(a: int, b: int) -> int:
    """Greatest common divisor found by counting down from the smaller value."""
    if a < 1 or b < 1:
        raise ValueError(f"gcd_brute needs positive integers, got {a} and {b}")
    return next(i for i in range(min(a, b), 0, -1) if a % i == 0 and b % i == 0)


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean algorithm."""
    while b:
        a, b = b, a % b
    return a


def ncr(n: int, r: int) -> int:
    """Number of ways to choose ``r`` items from ``n``; zero when ``r`` exceeds ``n``."""
    if n < 0 or r < 0:
        raise ValueError(f"ncr needs non-negative arguments, got {n} and {r}")
    if r > n:
        return 0
    result = 1
    for i in range(r):
        result = result * (n - i) // (i + 1)
    return result


def factorial(n: int) -> int:
    """Return ``n!`` for a non-negative ``n``."""
    if n < 0:
        raise ValueError(f"factorial needs a non-negative integer, got {n}")
    return math.prod(range(2, n + 1))


def sum_of_cubes(n: int) -> int:
    """Return 1**3 + 2**3 + ... + n**3."""
    return sum(i**3 for i in range(1, n + 1))


def _run(command: str, values: list[int]) -> list[str]:
    if command == "sum":
        a, b = values
        return [f"The sum of {a} & {b} is: {a + b}"]
    if command == "gcd":
        return [f"The GCD is {gcd(*values)}"]
    if command == "ncr":
        return [f"The ans is : {ncr(*values)}"]
    if command == "prime":
        (n,) = values
        verdict = "It is a prime num" if is_prime(n) else "Not a prime num"
        return [verdict, f"Sum of all prime numbers from 0-{n} is: {prime_sum(n)}"]
    (n,) = values
    return [str(count_digits(n))]


def main(argv: Sequence[str] | None = None) -> int:
    """Evaluate one number-theory command and print its result."""
    parser = argparse.ArgumentParser(prog="dsakit-num", description="Small integer calculations.")
    commands = parser.add_subparsers(dest="command", required=True)
    for name, params in (
        ("sum", ("a", "b")),
        ("gcd", ("a", "b")),
        ("ncr", ("n", "r")),
        ("prime", ("n",)),
        ("digits", ("n",)),
    ):
        sub = commands.add_parser(name)
        for param in params:
            sub.add_argument(param, type=int)
    args = parser.parse_args(argv)
    values = [v for k, v in vars(args).items() if k != "command"]
    try:
        lines = _run(args.command, values)
    except ValueError as exc:
        parser.error(str(exc))
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())