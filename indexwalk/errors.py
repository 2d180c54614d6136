"""Exception types raised by indexwalk."""

from __future__ import annotations

from typing import Any


class IndexWalkError(Exception):
    """Base class for indexwalk errors."""


class CapabilityMissing(IndexWalkError, TypeError):
    """Raised when an object does not provide the ``each`` primitive.

    Attributes:
        obj: The object that was passed in place of a container.
    """

    def __init__(self, obj: Any) -> None:
        self.obj = obj
        super().__init__(
            f"'{type(obj).__name__}' object does not implement "
            "each(receiver) and cannot be traversed"
        )
