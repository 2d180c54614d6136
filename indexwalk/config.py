"""Configuration for indexed traversals."""

from dataclasses import dataclass


@dataclass
class TraversalConfig:
    """Runtime knobs read when a traversal starts."""

    # Log every (element, position) delivery at DEBUG level
    trace_deliveries: bool = False


# Global configuration instance
TRAVERSAL_CONFIG = TraversalConfig()
