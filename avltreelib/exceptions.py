"""Exception hierarchy for AVLTreeLib.

Every failure raised by the library derives from TreeError, so callers can
catch the whole family at once or react to a specific kind. Preconditions
are checked before any structural change, so a raised error never leaves a
tree half-modified.
"""

from typing import Any, Optional


class TreeError(Exception):
    """Base class for all AVLTreeLib errors."""
    pass


class EmptyTreeError(TreeError):
    """Raised when an operation needing at least one node runs on an empty tree."""
    pass


class KeyNotFoundError(TreeError, LookupError):
    """Raised when a key required by an operation is not in the tree.

    Attributes:
        key: The key that was looked up
    """

    def __init__(self, key: Any, message: Optional[str] = None):
        self.key = key
        super().__init__(message or f"Key not found in tree: {key!r}")


class NoSuccessorError(KeyNotFoundError):
    """Raised when the key is present but is the largest key in the tree."""

    def __init__(self, key: Any):
        super().__init__(key, f"Successor does not exist for key: {key!r}")


class NoPredecessorError(KeyNotFoundError):
    """Raised when the key is present but is the smallest key in the tree."""

    def __init__(self, key: Any):
        super().__init__(key, f"Predecessor does not exist for key: {key!r}")


class MalformedConstructionError(TreeError, ValueError):
    """Raised when a breadth-first layout does not describe a valid tree.

    Attributes:
        index: Position in the layout where the problem was detected,
            or None when the problem concerns the tree as a whole
    """

    def __init__(self, message: str, index: Optional[int] = None):
        self.index = index
        if index is not None:
            message = f"{message} (layout position {index})"
        super().__init__(message)


class ConfigurationError(TreeError):
    """Raised when a TreeConfig cannot be turned into a working tree."""
    pass
