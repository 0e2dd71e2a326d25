"""Intrusive reference counting and owning smart references."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class IRefcounted(ABC):
    """Interface for objects that keep their own reference count."""

    @abstractmethod
    def add_ref(self) -> None:
        """Take one more reference."""

    @abstractmethod
    def release(self) -> None:
        """Drop one reference, destroying the object when none remain."""


class Refcounted(IRefcounted):
    """Reference-counted base whose count starts at zero.

    A newborn object must be handed to a RefPtr (or have add_ref() called)
    before release() may be used. When the last reference is dropped,
    destroy() is called; subclasses extend it and call the base version.
    """

    def __init__(self) -> None:
        self._refcount = 0
        self._destroyed = False

    @property
    def refcount(self) -> int:
        return self._refcount

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def add_ref(self) -> None:
        self._refcount += 1

    def release(self) -> None:
        if self._refcount <= 0:
            raise RuntimeError("release() called on an object holding no references")
        self._refcount -= 1
        if self._refcount == 0:
            self.destroy()

    def destroy(self) -> None:
        """Called once the last reference is released."""
        self._destroyed = True


class VirtualRefcounted(Refcounted):
    """Refcounted object that refuses new references once it is being destroyed."""

    def add_ref(self) -> None:
        if self.destroyed:
            raise RuntimeError("add_ref() called on a destroyed object")
        super().add_ref()


class AlreadyRefed:
    """Holds an object whose reference has already been taken, without taking another."""

    __slots__ = ("_thing",)

    def __init__(self, thing: Any = None) -> None:
        self._thing = thing

    def take(self) -> Any:
        """Hand the held reference over to the caller, leaving this empty."""
        thing, self._thing = self._thing, None
        return thing

    def __bool__(self) -> bool:
        return self._thing is not None

    def discard(self) -> None:
        """Release the held reference, if any."""
        thing = self.take()
        if thing is not None:
            thing.release()


def adopt_ref(thing: Any) -> AlreadyRefed:
    """Wrap an object that was add_ref()'d by hand so a RefPtr can adopt it."""
    return AlreadyRefed(thing)


class RefPtr:
    """Owning reference to a refcounted object.

    Accepts a plain object (a reference is taken), another RefPtr (the
    object is shared) or an AlreadyRefed (its reference is adopted). Used as
    a context manager, the reference is dropped on exit.
    """

    __slots__ = ("_thing",)

    def __init__(self, thing: Any = None) -> None:
        self._thing: Any = None
        self.assign(thing)

    def get(self) -> Any:
        return self._thing

    def take(self) -> AlreadyRefed:
        """Give up the reference without releasing it."""
        thing, self._thing = self._thing, None
        return AlreadyRefed(thing)

    def forget(self) -> AlreadyRefed:
        return self.take()

    def assign(self, thing: Any) -> RefPtr:
        """Point at a new object, releasing the previous one."""
        if isinstance(thing, AlreadyRefed):
            new = thing.take()
        else:
            new = thing.get() if isinstance(thing, RefPtr) else thing
            if new is not None:
                new.add_ref()
        old, self._thing = self._thing, new
        if old is not None:
            old.release()
        return self

    def reset(self) -> None:
        """Release the held object and become empty."""
        old, self._thing = self._thing, None
        if old is not None:
            old.release()

    def __bool__(self) -> bool:
        return self._thing is not None

    def __enter__(self) -> RefPtr:
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.reset()

    def __repr__(self) -> str:
        return f"RefPtr({self._thing!r})"