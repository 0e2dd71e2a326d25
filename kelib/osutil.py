"""File-system queries, path formatting and system error messages."""

from __future__ import annotations

import os
import stat
import sys

from kelib.strings import safe_sprintf, safe_strcpy

_IS_WINDOWS = os.name == "nt"


def _stat(path: str | os.PathLike[str]) -> os.stat_result | None:
    try:
        return os.stat(path)
    except (OSError, ValueError):
        return None


def path_exists(path: str | os.PathLike[str]) -> bool:
    """True if anything exists at path."""
    return _stat(path) is not None


def is_file(path: str | os.PathLike[str]) -> bool:
    """True if path names a regular file."""
    st = _stat(path)
    return st is not None and stat.S_ISREG(st.st_mode)


def is_directory(path: str | os.PathLike[str]) -> bool:
    """True if path names a directory."""
    st = _stat(path)
    return st is not None and stat.S_ISDIR(st.st_mode)


def create_directory(path: str | os.PathLike[str], mode: int = 0o755) -> None:
    """Create a single directory; raises OSError if it cannot be made.

    The mode is ignored on Windows.
    """
    if _IS_WINDOWS:
        os.mkdir(path)
    else:
        os.mkdir(path, mode)


def format_path(maxlength: int, fmt: str, *args: object) -> str:
    """Format a path into a buffer of maxlength, using the platform's separator."""
    text = safe_sprintf(maxlength, fmt, *args)
    if _IS_WINDOWS:
        return text.replace("/", "\\")
    return text.replace("\\", "/")


def format_system_error_code(code: int, maxlength: int = 256) -> str:
    """The system's message for an error code, truncated to fit maxlength."""
    try:
        message = os.strerror(code)
    except (ValueError, OverflowError):
        return safe_sprintf(maxlength, "error code %08x", code & 0xFFFFFFFF)
    return safe_strcpy(maxlength, message)


def format_system_error(maxlength: int = 256) -> str:
    """The message for the OSError currently being handled, or for code 0 if none is."""
    exc = sys.exc_info()[1]
    code = 0
    if isinstance(exc, OSError):
        code = exc.errno or 0
    return format_system_error_code(code, maxlength)