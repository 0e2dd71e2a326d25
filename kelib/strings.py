"""printf-style formatting, bounded copies and small string helpers."""

from __future__ import annotations

import re
import string
from collections.abc import Iterable
from itertools import zip_longest

_SPEC = re.compile(
    r"%(?P<flags>[-+ #0]*)"
    r"(?P<width>\*|\d+)?"
    r"(?P<prec>\.(?:\*|\d*))?"
    r"(?:hh|h|ll|l|L|q|j|z|t|I64|I32|I)?"
    r"(?P<conv>[diouxXeEfFgGcs%])"
)

_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _strip_length_modifiers(fmt: str) -> str:
    def repl(m: re.Match[str]) -> str:
        return "%" + m["flags"] + (m["width"] or "") + (m["prec"] or "") + m["conv"]

    return _SPEC.sub(repl, fmt)


def sprintf(fmt: str, *args: object) -> str:
    """Format like C printf; length modifiers such as l, ll and z are accepted."""
    try:
        return _strip_length_modifiers(fmt) % args
    except (TypeError, ValueError) as exc:
        raise ValueError(f"cannot format {fmt!r}: {exc}") from exc


def safe_sprintf(maxlength: int, fmt: str, *args: object) -> str:
    """Format into a buffer of maxlength, keeping at most maxlength - 1 characters."""
    if maxlength <= 0:
        return ""
    return sprintf(fmt, *args)[: maxlength - 1]


def safe_strcpy(maxlength: int, src: str) -> str:
    """Copy src into a buffer of maxlength, truncating to maxlength - 1 characters."""
    if maxlength <= 0:
        return ""
    return src[: maxlength - 1]


def safe_strcat(dest: str, maxlength: int, src: str) -> str:
    """Append src to dest so the result stays shorter than maxlength."""
    room = max(0, maxlength - 1 - len(dest))
    return dest + src[:room]


def safe_strcpy_n(maxlength: int, src: str, n: int) -> str:
    """Like safe_strcpy, copying at most n characters."""
    if maxlength <= 0 or n <= 0:
        return ""
    return src[: min(maxlength - 1, n)]


def str_case_cmp(a: str, b: str) -> int:
    """ASCII case-insensitive comparison: negative, zero or positive."""
    for ca, cb in zip_longest(a.translate(_TO_LOWER), b.translate(_TO_LOWER), fillvalue="\0"):
        if ca != cb:
            return ord(ca) - ord(cb)
    return 0


def split(s: str, sep: str) -> list[str]:
    """Split s on sep, so that join(split(s, sep), sep) == s; an empty s gives []."""
    if not sep:
        raise ValueError("separator must not be empty")
    return s.split(sep) if s else []


def join(pieces: Iterable[str], sep: str) -> str:
    """Concatenate pieces with sep between them; sep may be empty."""
    return sep.join(pieces)


def uppercase(s: str) -> str:
    """Upper-case ASCII letters only."""
    return s.translate(_TO_UPPER)


def lowercase(s: str) -> str:
    """Lower-case ASCII letters only."""
    return s.translate(_TO_LOWER)


def starts_with(first: str, other: str) -> bool:
    return first.startswith(other)


def ends_with(first: str, second: str) -> bool:
    return first.endswith(second)