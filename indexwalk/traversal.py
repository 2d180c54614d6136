"""Indexed traversal over any container that implements ``each``.

:func:`traverse_indexed` pairs every element a container delivers with its
zero-based position. With a consumer it runs immediately and returns the
container; without one it returns an :class:`~indexwalk.enumerator.Enumerator`
that runs the same traversal on demand.
"""

from __future__ import annotations

from typing import Any, Optional

from indexwalk.config import TRAVERSAL_CONFIG
from indexwalk.enumerator import Enumerator
from indexwalk.logging import get_logger
from indexwalk.protocols import Consumer, pack_element, require_base_primitive

logger = get_logger(__name__)


def _each_with_index(
    container: Any, consumer: Consumer, /, *args: Any, **kwargs: Any
) -> Any:
    position = 0
    trace = TRAVERSAL_CONFIG.trace_deliveries
    name = type(container).__name__

    def receiver(*values: Any) -> None:
        nonlocal position
        element = pack_element(values)
        if trace:
            logger.debug("%s[%d] -> %r", name, position, element)
        consumer(element, position)
        position += 1

    logger.debug("Starting indexed traversal of %s", name)
    container.each(receiver, *args, **kwargs)
    logger.debug("Indexed traversal of %s delivered %d elements", name, position)
    return container


def traverse_indexed(
    container: Any,
    consumer: Optional[Consumer] = None,
    /,
    *args: Any,
    **kwargs: Any,
) -> Any:
    """Call ``consumer(element, position)`` for every element of ``container``.

    Elements delivered as a group of values arrive as one tuple, so the
    consumer always gets exactly two arguments with the position last.
    Exceptions from ``container.each`` or from the consumer propagate
    unchanged and end the traversal.

    Args:
        container: Object implementing ``each(receiver, *args, **kwargs)``.
        consumer: Per-element action. If None, nothing runs now and an
            Enumerator is returned instead.
        *args: Extra positional arguments forwarded to ``container.each``.
        **kwargs: Extra keyword arguments forwarded to ``container.each``.

    Returns:
        ``container`` itself in eager mode, an Enumerator in lazy mode.

    Raises:
        CapabilityMissing: If ``container`` has no callable ``each``.
        TypeError: If ``consumer`` is neither None nor callable.
    """
    require_base_primitive(container)

    if consumer is None:
        logger.debug("Deferring indexed traversal of %s", type(container).__name__)
        return Enumerator(container, _each_with_index, args, kwargs)

    if not callable(consumer):
        raise TypeError(f"consumer must be callable, got {type(consumer).__name__}")

    return _each_with_index(container, consumer, *args, **kwargs)


class IndexedTraversalMixin:
    """Adds :meth:`each_with_index` to classes that define ``each``."""

    def each_with_index(
        self, consumer: Optional[Consumer] = None, /, *args: Any, **kwargs: Any
    ) -> Any:
        """Indexed traversal of ``self``; see :func:`traverse_indexed`."""
        return traverse_indexed(self, consumer, *args, **kwargs)
