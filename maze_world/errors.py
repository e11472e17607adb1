"""Exception hierarchy.

Only two conditions are failures: an invalid maze configuration and a
malformed came-from chain. Moving into a wall is a defined no-op and never
raises.
"""


class MazeError(Exception):
    """Base class for maze engine failures."""


class ConfigurationError(MazeError, ValueError):
    """Maze configuration rejected before any allocation (size or bias)."""


class CorruptionError(MazeError, RuntimeError):
    """Came-from chain is cyclic or broken; traversal bookkeeping is corrupt."""
