"""Global pytest configuration and shared container fixtures.

The containers below only implement ``each``; they know nothing about
positions and stand in for the concrete collections traversed in practice.
"""

from __future__ import annotations

from typing import Any, Callable, List

import pytest

from indexwalk.traversal import IndexedTraversalMixin


class Numerous(IndexedTraversalMixin):
    """Delivers its items one value at a time and counts ``each`` calls."""

    def __init__(self, *items: Any) -> None:
        self.items = list(items) if items else [2, 5, 3, 6, 1, 4]
        self.each_calls = 0

    def each(self, receiver: Callable[..., Any]) -> "Numerous":
        self.each_calls += 1
        for item in self.items:
            receiver(item)
        return self


class EachDefiner(IndexedTraversalMixin):
    """Defines ``each`` but never delivers anything."""

    def each(self, receiver: Callable[..., Any]) -> None:
        return None


class EachCounter(IndexedTraversalMixin):
    """Records the extra arguments passed to ``each``."""

    def __init__(self, *values: Any) -> None:
        self.values = values
        self.arguments_passed: List[Any] = []

    def each(self, receiver: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
        self.arguments_passed.append((args, kwargs))
        for value in self.values:
            receiver(value)


class YieldsMulti(IndexedTraversalMixin):
    """Delivers groups of values in a single step."""

    def each(self, receiver: Callable[..., Any]) -> None:
        receiver(1, 2)
        receiver(3, 4, 5)
        receiver(6, 7, 8, 9)


class YieldsNothing(IndexedTraversalMixin):
    """Delivers steps that carry no value at all."""

    def each(self, receiver: Callable[..., Any]) -> None:
        receiver()
        receiver()


class Naturals(IndexedTraversalMixin):
    """Never-ending sequence 0, 1, 2, ..."""

    def each(self, receiver: Callable[..., Any]) -> None:
        value = 0
        while True:
            receiver(value)
            value += 1


class Breaking(IndexedTraversalMixin):
    """Delivers ``good`` values, then fails."""

    def __init__(self, good: int) -> None:
        self.good = good

    def each(self, receiver: Callable[..., Any]) -> None:
        for value in range(self.good):
            receiver(value)
        raise RuntimeError("container changed during iteration")


@pytest.fixture
def numerous() -> Numerous:
    return Numerous()


@pytest.fixture
def make_numerous() -> Callable[..., Numerous]:
    return Numerous


@pytest.fixture
def each_definer() -> EachDefiner:
    return EachDefiner()


@pytest.fixture
def make_each_counter() -> Callable[..., EachCounter]:
    return EachCounter


@pytest.fixture
def yields_multi() -> YieldsMulti:
    return YieldsMulti()


@pytest.fixture
def yields_nothing() -> YieldsNothing:
    return YieldsNothing()


@pytest.fixture
def naturals() -> Naturals:
    return Naturals()


@pytest.fixture
def make_breaking() -> Callable[[int], Breaking]:
    return Breaking


class Counting(IndexedTraversalMixin):
    """Delivers 0..limit-1, counting deliveries and noting when ``each`` unwinds."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        self.delivered = 0
        self.unwound = False

    def each(self, receiver: Callable[..., Any]) -> None:
        try:
            for value in range(self.limit):
                self.delivered += 1
                receiver(value)
        finally:
            self.unwound = True


@pytest.fixture
def make_counting() -> Callable[[int], Counting]:
    return Counting
