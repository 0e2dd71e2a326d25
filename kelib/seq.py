"""Helpers for mutating lists and deques in place."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, MutableSequence
from typing import TypeVar

T = TypeVar("T")


def move_extend(dest: MutableSequence[T], src: MutableSequence[T]) -> None:
    """Append every item of src to dest, leaving src empty."""
    dest.extend(src)
    src.clear()


def pop_back(seq: MutableSequence[T]) -> T:
    """Remove and return the last item."""
    if not seq:
        raise IndexError("pop_back from an empty sequence")
    return seq.pop()


def pop_front(dq: MutableSequence[T]) -> T:
    """Remove and return the first item."""
    if not dq:
        raise IndexError("pop_front from an empty sequence")
    if isinstance(dq, deque):
        return dq.popleft()
    return dq.pop(0)


def remove_at(seq: MutableSequence[T], at: int) -> None:
    """Delete the item at index at, which must be within the sequence."""
    if not 0 <= at < len(seq):
        raise IndexError(f"index {at} out of range for length {len(seq)}")
    del seq[at]


def insert_at(seq: MutableSequence[T], at: int, item: T) -> None:
    """Insert item before index at; at may equal the length to append."""
    if not 0 <= at <= len(seq):
        raise IndexError(f"index {at} out of range for length {len(seq)}")
    seq.insert(at, item)


def erase_if(seq: MutableSequence[T], pred: Callable[[T], bool]) -> int:
    """Remove every item for which pred is true, keeping order; return how many went."""
    kept = [item for item in seq if not pred(item)]
    removed = len(seq) - len(kept)
    seq.clear()
    seq.extend(kept)
    return removed