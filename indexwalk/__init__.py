"""indexwalk: indexed traversal over anything that can enumerate itself.

Any object with an ``each(receiver)`` method can be traversed with positions:

    from indexwalk import traverse_indexed

    traverse_indexed(container, lambda element, i: print(i, element))

    pairs = traverse_indexed(container).to_list()  # [(element, 0), ...]

Primary API:
    traverse_indexed() - Eager or lazy indexed traversal
    Enumerator - Restartable lazy view returned in lazy mode
    IndexedTraversalMixin - Adds ``each_with_index`` to container classes
    IterableContainer, as_container() - Adapt plain iterables
"""

from __future__ import annotations

from indexwalk import logging
from indexwalk._version import __version__
from indexwalk.adapters import IterableContainer, as_container
from indexwalk.config import TRAVERSAL_CONFIG, TraversalConfig
from indexwalk.enumerator import Enumerator
from indexwalk.errors import CapabilityMissing, IndexWalkError
from indexwalk.protocols import BasePrimitive, has_base_primitive
from indexwalk.traversal import IndexedTraversalMixin, traverse_indexed

__all__ = [
    # Version
    "__version__",
    # Traversal (primary API)
    "traverse_indexed",
    "Enumerator",
    "IndexedTraversalMixin",
    # Capability
    "BasePrimitive",
    "has_base_primitive",
    # Adapters
    "IterableContainer",
    "as_container",
    # Configuration
    "TraversalConfig",
    "TRAVERSAL_CONFIG",
    # Errors
    "IndexWalkError",
    "CapabilityMissing",
    # Utilities
    "logging",
]
