"""Small integer helpers."""

from __future__ import annotations

import math


def is_digit(char: str) -> bool:
    """True when ``char`` is one ASCII digit."""
    return len(char) == 1 and "0" <= char <= "9"


def power(nb: int, p: int) -> int:
    """Return ``nb`` to the power ``p``; a negative power gives 0."""
    if p == 0:
        return 1
    if p < 0:
        return 0
    return nb**p


def square_root(nb: int) -> int:
    """Return the whole square root of ``nb``, or 0 if it has none."""
    if nb <= 0:
        return 0
    root = math.isqrt(nb)
    return root if root * root == nb else 0


def is_prime(nb: int) -> bool:
    """Screen ``nb`` by the small primes 2, 3 and 5 only."""
    if nb < 2:
        return False
    if nb in (2, 3, 5):
        return True
    return all(nb % divisor != 0 for divisor in (2, 3, 5))


def find_prime_sup(nb: int) -> int:
    """Return the smallest number from ``nb`` upward that passes ``is_prime``."""
    while not is_prime(nb):
        nb += 1
    return nb


def digit_count(nb: int) -> int:
    """Number of characters ``nb`` takes in decimal, minus sign included."""
    return len(str(abs(nb))) + (nb < 0)


def itoa(nb: int, width: int) -> str:
    """Write ``nb`` right-aligned in ``width`` characters, padded with zeros."""
    if nb < 0:
        raise ValueError("itoa takes a non-negative number")
    digits = str(nb)
    if len(digits) > width:
        raise ValueError(f"{nb} does not fit in {width} characters")
    return digits.rjust(width, "0")