"""Container capability used by the indexed traversal.

A container takes part in indexed traversal by providing one method,
``each(receiver, *args, **kwargs)``, that calls ``receiver(*values)`` once per
step in a stable order and then returns. A step may deliver a single value or
a fixed-size group of values.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, Tuple, TypeAlias, runtime_checkable

from indexwalk.errors import CapabilityMissing

#: One step's worth of data: a single value, or a tuple for grouped steps.
Element: TypeAlias = Any

#: ``(element, position)`` as produced by the indexed traversal.
IndexedPair: TypeAlias = Tuple[Element, int]

#: Per-element action of the indexed traversal.
Consumer: TypeAlias = Callable[[Element, int], Any]


@runtime_checkable
class BasePrimitive(Protocol):
    """Protocol for containers that can enumerate their elements."""

    def each(self, receiver: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        """Call ``receiver`` once per element, in the container's order."""
        ...


def has_base_primitive(obj: Any) -> bool:
    """Return True if ``obj`` exposes a callable ``each``."""
    return callable(getattr(obj, "each", None))


def require_base_primitive(obj: Any) -> BasePrimitive:
    """Return ``obj`` unchanged if it can be traversed.

    Raises:
        CapabilityMissing: If ``obj`` has no callable ``each``.
    """
    if not has_base_primitive(obj):
        raise CapabilityMissing(obj)
    return obj


def pack_element(values: Tuple[Any, ...]) -> Element:
    """Collapse the values of one delivery into a single element.

    No values gives ``None``, one value is returned as is, and several values
    are kept together as a tuple.
    """
    if not values:
        return None
    if len(values) == 1:
        return values[0]
    return values
