"""Exception types raised by ArborTreeLib.

Every error the library raises derives from TreeError, so callers can catch
the whole family at once. The argument and index errors also derive from the
matching builtin exceptions, which keeps ordinary ``except ValueError`` and
``except IndexError`` handlers working.
"""

from typing import Any, Optional


class TreeError(Exception):
    """Base class for all ArborTreeLib errors."""
    pass


class InvalidArgumentError(TreeError, ValueError):
    """Raised when an absent value or an unusable sequence is supplied."""
    pass


class IndexOutOfRangeError(TreeError, IndexError):
    """Raised when a child position does not exist on a node."""
    pass


class NodeOccupiedError(TreeError):
    """Raised when a binary child slot is already filled.

    The node that already occupies the slot is kept on the exception so
    callers can inspect or update it instead.
    """

    def __init__(self, message: str, node: Optional[Any] = None):
        """Create the error.

        Args:
            message: Human readable description
            node: The node already holding the requested slot
        """
        super().__init__(message)
        self.node = node

    def get_node(self) -> Optional[Any]:
        """Return the node occupying the requested slot."""
        return self.node


class ConfigurationError(TreeError):
    """Raised when a traversal configuration can't be executed."""
    pass
