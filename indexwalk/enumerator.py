"""Restartable lazy view over a traversal recipe."""

from __future__ import annotations

from contextlib import closing
from itertools import islice
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from greenlet import greenlet

from indexwalk.logging import get_logger
from indexwalk.protocols import Consumer, IndexedPair

logger = get_logger(__name__)

#: ``recipe(container, consumer, *args, **kwargs)`` drives a traversal and
#: returns the container.
Recipe = Callable[..., Any]


class Enumerator:
    """Lazy sequence of ``(element, position)`` pairs.

    An Enumerator keeps only the container, the recipe to run over it, and the
    arguments for the container's ``each``. It never caches results: every
    :meth:`to_list` call and every new iterator re-runs the recipe from
    position 0, so materializing twice over an unmutated container gives the
    same pairs.

    Iterators pull one delivery at a time. The push-based traversal runs in
    its own greenlet and is suspended after each pair, so an iterator over an
    infinite container still returns from ``next()``.

    Enumerators also implement ``each`` themselves, which makes them valid
    containers for another indexed traversal.
    """

    __slots__ = ("_container", "_recipe", "_args", "_kwargs")

    def __init__(
        self,
        container: Any,
        recipe: Recipe,
        args: Tuple[Any, ...] = (),
        kwargs: Optional[Dict[str, Any]] = None,
    ) -> None:
        self._container = container
        self._recipe = recipe
        self._args = tuple(args)
        self._kwargs = dict(kwargs or {})

    @property
    def container(self) -> Any:
        """The object this enumerator traverses."""
        return self._container

    @property
    def size(self) -> Optional[int]:
        """Number of pairs if the container knows its length, else None."""
        if isinstance(self._container, Enumerator):
            return self._container.size
        try:
            return len(self._container)
        except TypeError:
            return None

    def each(
        self, consumer: Optional[Consumer] = None, /, *args: Any, **kwargs: Any
    ) -> Any:
        """Run the recipe with ``consumer``.

        Args:
            consumer: Called as ``consumer(element, position)`` per element.
            *args: Appended to the positional arguments given at creation.
            **kwargs: Merged over the keyword arguments given at creation.

        Returns:
            The container when a consumer is given, otherwise this enumerator.
        """
        if consumer is None:
            return self
        return self._recipe(
            self._container,
            consumer,
            *self._args,
            *args,
            **{**self._kwargs, **kwargs},
        )

    def to_list(self) -> List[IndexedPair]:
        """Run the traversal to completion and return its pairs in order."""
        pairs: List[IndexedPair] = []
        self.each(lambda element, position: pairs.append((element, position)))
        return pairs

    def first(self, n: Optional[int] = None) -> Any:
        """Return the leading pair, or a list of the leading ``n`` pairs.

        Only as many deliveries as needed are pulled, so this also works on
        containers whose ``each`` never finishes.

        Args:
            n: Number of pairs to take. ``None`` returns a single pair (or
                ``None`` for an empty container) instead of a list.

        Raises:
            ValueError: If ``n`` is negative.
        """
        if n is not None and n < 0:
            raise ValueError(f"attempt to take negative size: {n}")

        with closing(iter(self)) as pairs:
            taken = list(islice(pairs, 1 if n is None else n))

        if n is None:
            return taken[0] if taken else None
        return taken

    def __iter__(self) -> Iterator[IndexedPair]:
        name = type(self._container).__name__

        def deliver(element: Any, position: int) -> None:
            producer.parent.switch((element, position))

        def produce() -> None:
            self.each(deliver)

        producer = greenlet(produce)
        pulled = 0
        try:
            while True:
                pair = producer.switch()
                if producer.dead:
                    logger.debug("Pull iteration over %s exhausted", name)
                    return
                pulled += 1
                yield pair
        finally:
            if producer:
                # Unwinds the suspended each() with GreenletExit
                producer.throw()
                logger.debug(
                    "Pull iteration over %s closed after %d pairs", name, pulled
                )

    def __repr__(self) -> str:
        return f"<Enumerator: {self._container!r}:each_with_index>"
