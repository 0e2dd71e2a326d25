"""Bit arithmetic, float and sequence helpers, a priority queue, reference counting, and string, time and file-system utilities."""

__version__ = "0.1.0"

__all__ = [
    "bits",
    "floats",
    "mutex",
    "osutil",
    "priority_queue",
    "refcounting",
    "seq",
    "strings",
    "timeutil",
]