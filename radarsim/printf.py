"""printf-style formatting with the library's own rules for numbers and widths."""

from __future__ import annotations

import math
import operator
import re
import sys
from dataclasses import dataclass
from fractions import Fraction
from typing import Any

from .mathutil import digit_count

_HEX = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_OCTAL = "01234567"
_DEFAULT_PRECISION = 6
_MASK32 = 0xFFFFFFFF
_MASK64 = 2**64 - 1

_DIRECTIVE = re.compile(
    r"(?P<text>[^%]+)"
    r"|(?P<percent>%%)"
    r"|%(?P<flags>[-+ 0#]*)(?P<width>\d*)(?P<rest>[^A-Za-z]*)(?P<conv>[A-Za-z])"
)
_LEADING_DIGITS = re.compile(r"\d*")

_NEEDS_ARG = frozenset("dicsueEgGnoxXfFp")


@dataclass(frozen=True)
class _Spec:
    left: bool
    width: int
    precision: int
    has_precision: bool
    conversion: str

    @classmethod
    def from_match(cls, match: re.Match[str]) -> _Spec:
        width_text = match["width"]
        precision, has_precision = _precision(width_text + match["rest"])
        return cls(
            left=match["flags"].startswith("-"),
            width=int(width_text or 0),
            precision=precision,
            has_precision=has_precision,
            conversion=match["conv"],
        )


def _precision(segment: str) -> tuple[int, bool]:
    """Find the precision among the characters before the conversion letter."""
    head = segment.split("%", 1)[0]
    dot = head.rfind(".")
    if dot < 0:
        return _DEFAULT_PRECISION, False
    digits = _LEADING_DIGITS.match(head, dot + 1).group()
    return int(digits or 0), True


def _require_finite(num: float) -> None:
    if not math.isfinite(num):
        raise ValueError(f"cannot format non-finite number {num!r}")


def _to_int32(value: Any) -> int:
    wrapped = operator.index(value) & _MASK32
    return wrapped - 2**32 if wrapped >= 2**31 else wrapped


def _to_uint32(value: Any) -> int:
    return operator.index(value) & _MASK32


def _count_digits(nb: int, base: int) -> int:
    count = 0
    while nb >= 1:
        nb //= base
        count += 1
    return count


def _address(value: Any) -> int:
    return value if isinstance(value, int) else id(value)


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c needs a single character")
        return value
    return chr(operator.index(value) & 0xFF)


def format_base(nb: int, digits: str) -> str:
    """Write ``nb`` using ``digits`` as the alphabet; zero gives an empty string."""
    base = len(digits)
    if base < 2:
        raise ValueError("a base needs at least two digits")
    nb = operator.index(nb)
    sign = "-" if nb < 0 else ""
    nb = abs(nb)
    out = []
    while nb:
        nb, remainder = divmod(nb, base)
        out.append(digits[remainder])
    return sign + "".join(reversed(out))


def format_float(nb: float, prec: int) -> str:
    """Write ``nb`` with ``prec`` fraction digits, rounding half up on the next digit."""
    _require_finite(nb)
    if prec < 0:
        raise ValueError("precision must not be negative")
    sign = "-" if nb < 0 else ""
    magnitude = abs(nb)
    whole = int(magnitude)
    if prec == 0:
        # With no fraction digits the integer part is always carried up.
        return f"{sign}{whole + 1}"
    scaled = (Fraction(magnitude) - whole) * 10**prec
    fraction = math.floor(scaled)
    if math.floor(scaled * 10) - fraction * 10 > 4:
        fraction += 1
    if fraction >= 10**prec:
        whole += 1
        fraction = 0
    return f"{sign}{whole}.{fraction:0{prec}d}"


def exponent(num: float, below_one: bool) -> int:
    """Count the steps by ten that bring ``|num|`` to between 1 and 10.

    Without ``below_one`` the count is of divisions while above 10; with it,
    of multiplications while below 1.
    """
    _require_finite(num)
    num = abs(num)
    steps = 0
    if below_one:
        if num == 0:
            raise ValueError("zero has no exponent")
        while num < 1:
            num *= 10
            steps += 1
    else:
        while num > 10:
            num /= 10
            steps += 1
    return steps


def _mantissa(num: float, below_one: bool) -> float:
    if below_one:
        while num < 1:
            num *= 10
    else:
        while num > 10:
            num /= 10
    return num


def format_sci(num: float, prec: int, flag: str) -> str:
    """Write ``num`` in scientific notation, ``flag`` being the exponent letter."""
    _require_finite(num)
    if num == 0:
        raise ValueError("zero has no scientific form")
    sign = "-" if num < 0 else ""
    magnitude = abs(num)
    below_one = magnitude < 1
    mantissa = format_float(_mantissa(magnitude, below_one), prec)
    power = exponent(num, below_one)
    return f"{sign}{mantissa}{flag}{'-' if below_one else '+'}{power:02d}"


def count_float(nb: float, prec: int) -> int:
    """Estimate the width of ``nb`` written with ``prec`` fraction digits."""
    _require_finite(nb)
    count = digit_count(int(nb)) + prec
    return count + 1 if prec > 0 else count


def count_sci(num: float, prec: int) -> int:
    """Estimate the width of ``num`` in scientific notation."""
    _require_finite(num)
    if num < 0:
        return count_sci(-num, prec) + 1
    exp_width = max(2, digit_count(exponent(num, False)))
    return count_float(_mantissa(num, False), prec) + 2 + exp_width


def _general(num: float, prec: int, flag: str) -> str:
    if count_sci(num, prec) < count_float(num, prec):
        return format_sci(num, prec, flag)
    return format_float(num, prec)


def _store_count(target: Any, written: int) -> None:
    try:
        target[0] = written
    except (TypeError, IndexError):
        raise TypeError("%n needs a mutable sequence with one slot") from None


def _render(spec: _Spec, arg: Any, written: int) -> str:
    prec = spec.precision
    match spec.conversion:
        case "d" | "i":
            return str(_to_int32(arg))
        case "s":
            text = str(arg)
            return text[:prec] if spec.has_precision else text
        case "e" | "E":
            return format_sci(float(arg), prec, spec.conversion)
        case "u":
            return str(_to_uint32(arg))
        case "g":
            return _general(float(arg), prec, "e")
        case "G":
            return _general(float(arg), prec, "E")
        case "n":
            _store_count(arg, written)
            return ""
        case "c":
            return _char(arg)
        case "o":
            return format_base(_to_int32(arg), _OCTAL)
        case "x":
            return format_base(_to_int32(arg), _HEX)
        case "X":
            return format_base(_to_int32(arg), _HEX_UPPER)
        case "f" | "F":
            return format_float(float(arg), prec)
        case "p":
            return "0x" + format_base(_address(arg), _HEX)
        case _:
            return ""


def _padding(spec: _Spec, arg: Any) -> int:
    width = spec.width
    if width == 0:
        return 0
    prec = spec.precision
    match spec.conversion:
        case "c":
            missing = width - 1
        case "d" | "i":
            missing = width - digit_count(_to_int32(arg))
        case "e" | "E":
            missing = width - count_sci(float(arg), prec)
        case "o":
            # Octal widths are measured in base nine, as the library does.
            missing = width - _count_digits(_to_int32(arg) & _MASK64, 9)
        case "x" | "X":
            missing = width - _count_digits(_to_int32(arg) & _MASK64, 16)
        case "p":
            missing = width - (_count_digits(_address(arg) & _MASK64, 16) + 2)
        case "s":
            missing = width - min(len(str(arg)), prec)
        case "u":
            missing = width - digit_count(_to_uint32(arg))
        case "f" | "F":
            missing = width - count_float(float(arg), prec)
        case _:
            missing = 0
    return max(0, missing)


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the text."""
    remaining = iter(args)
    parts: list[str] = []
    pos = 0
    while pos < len(fmt):
        match = _DIRECTIVE.match(fmt, pos)
        if match is None:
            raise ValueError(f"incomplete conversion at offset {pos}")
        pos = match.end()
        if match["text"] is not None:
            parts.append(match["text"])
            continue
        if match["percent"] is not None:
            parts.append("%")
            continue
        spec = _Spec.from_match(match)
        arg = None
        if spec.conversion in _NEEDS_ARG:
            try:
                arg = next(remaining)
            except StopIteration:
                raise TypeError("not enough arguments for format string") from None
        pad = " " * _padding(spec, arg)
        if not spec.left:
            parts.append(pad)
        parts.append(_render(spec, arg, sum(map(len, parts))))
        if spec.left:
            parts.append(pad)
    return "".join(parts)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    return len(text)