"""String helpers: number parsing, word splitting, comparison and case handling."""

from __future__ import annotations

import re
import string
from itertools import count, pairwise

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n"
_WORD = re.compile(r"[^ \t\n]+")

_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def _is_digit_char(char: str) -> bool:
    return "0" <= char <= "9"


def _is_upper_char(char: str) -> bool:
    return "A" <= char <= "Z"


def _is_lower_char(char: str) -> bool:
    return "a" <= char <= "z"


def _is_alpha_char(char: str) -> bool:
    return _is_upper_char(char) or _is_lower_char(char)


def get_number(text: str) -> int:
    """Read the first run of digits in ``text`` as an integer.

    Every ``-`` met before or within the scan flips the sign; other
    characters before the digits are skipped. A value outside the signed
    32-bit range yields 0.
    """
    value = 0
    sign = 1
    for char, following in pairwise(text + "\0"):
        if char == "-":
            sign = -sign
        if _is_digit_char(char):
            value = value * 10 + ord(char) - ord("0")
            if not _INT_MIN <= value * sign <= _INT_MAX:
                return 0
            if not _is_digit_char(following):
                break
    return value * sign


def split_words(text: str) -> list[str]:
    """Split ``text`` on spaces, tabs and newlines.

    Trailing whitespace leaves one empty word at the end of the list.
    """
    words = _WORD.findall(text)
    if text and text[-1] in _WHITESPACE:
        words.append("")
    return words


def compare(s1: str, s2: str) -> int:
    """Return -1, 0 or 1 as ``s1`` sorts before, equal to or after ``s2``."""
    return (s1 > s2) - (s1 < s2)


def compare_n(s1: str, s2: str, n: int) -> int:
    """Compare at least ``n`` characters, and on while both strings go on."""
    for index in count():
        c1 = s1[index] if index < len(s1) else ""
        c2 = s2[index] if index < len(s2) else ""
        if not c1 and not c2:
            return 0
        if index >= n and (not c1 or not c2):
            return 0
        if c1 != c2:
            return -1 if c1 < c2 else 1
    return 0


def _strip_dot(text: str) -> str:
    return text[1:] if text.startswith(".") else text


def compare_casefold(s1: str, s2: str) -> int:
    """Compare ignoring ASCII case and one leading dot on either side."""
    return compare(lowcase(_strip_dot(s1)), lowcase(_strip_dot(s2)))


def capitalize(text: str) -> str:
    """Capitalise the first letter of each word and lower the rest.

    A letter that follows a digit counts as inside a word.
    """
    chars = list(text)
    if chars and _is_lower_char(chars[0]):
        chars[0] = chars[0].upper()
    last = len(chars) - 1
    for i in range(len(chars)):
        char = chars[i]
        following = chars[i + 1] if i < last else ""
        if not _is_alpha_char(char):
            if _is_digit_char(char):
                if _is_upper_char(following):
                    chars[i + 1] = following.lower()
            elif _is_lower_char(following):
                chars[i + 1] = following.upper()
        if _is_upper_char(chars[i]):
            if i < last and _is_upper_char(chars[i + 1]):
                chars[i + 1] = chars[i + 1].lower()
            if i > 0 and _is_lower_char(chars[i - 1]):
                chars[i] = chars[i].lower()
    return "".join(chars)


def reverse(text: str) -> str:
    """Return ``text`` backwards."""
    return text[::-1]


def find(haystack: str, needle: str) -> str | None:
    """Return the part of ``haystack`` that starts at ``needle``, or None.

    An empty haystack, or one shorter than the needle, never matches; an
    empty needle matches at the start of any other haystack.
    """
    if not haystack or len(haystack) < len(needle):
        return None
    position = haystack.find(needle)
    if position < 0:
        return None
    return haystack[position:]


def is_alpha(text: str) -> bool:
    """True when every character is an ASCII letter."""
    return all(_is_alpha_char(char) for char in text)


def is_num(text: str) -> bool:
    """True when every character is an ASCII digit."""
    return all(_is_digit_char(char) for char in text)


def is_lower(text: str) -> bool:
    """True when every character is an ASCII lower-case letter."""
    return all(_is_lower_char(char) for char in text)


def is_upper(text: str) -> bool:
    """True when every character is an ASCII upper-case letter."""
    return all(_is_upper_char(char) for char in text)


def is_printable(text: str) -> bool:
    """True when every character is printable ASCII."""
    return all(32 <= ord(char) <= 126 for char in text)


def upcase(text: str) -> str:
    """Upper-case the ASCII letters of ``text``."""
    return text.translate(_TO_UPPER)


def lowcase(text: str) -> str:
    """Lower-case the ASCII letters of ``text``."""
    return text.translate(_TO_LOWER)