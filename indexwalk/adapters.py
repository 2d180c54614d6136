"""Adapters exposing plain Python iterables as traversable containers."""

from __future__ import annotations

from collections.abc import Iterable, Sized
from typing import Any, Callable

from indexwalk.errors import CapabilityMissing
from indexwalk.protocols import has_base_primitive
from indexwalk.traversal import IndexedTraversalMixin


class IterableContainer(IndexedTraversalMixin):
    """Wraps an iterable so that it implements ``each``.

    Each item is delivered as a single value. Tuples are not unpacked; use a
    container with its own ``each`` to deliver grouped values.
    """

    def __init__(self, iterable: Iterable[Any]) -> None:
        self._iterable = iterable

    def each(self, receiver: Callable[..., Any]) -> "IterableContainer":
        for item in self._iterable:
            receiver(item)
        return self

    def __len__(self) -> int:
        if not isinstance(self._iterable, Sized):
            raise TypeError(f"'{type(self._iterable).__name__}' has no len()")
        return len(self._iterable)

    def __repr__(self) -> str:
        return f"IterableContainer({self._iterable!r})"


def as_container(obj: Any) -> Any:
    """Return ``obj`` if it implements ``each``, else wrap it if iterable.

    Raises:
        CapabilityMissing: If ``obj`` is neither traversable nor iterable.
    """
    if has_base_primitive(obj):
        return obj
    if isinstance(obj, Iterable):
        return IterableContainer(obj)
    raise CapabilityMissing(obj)
