"""Exception classes for Polish.

Provides standardized exceptions for error handling throughout Polish.
"""

from __future__ import annotations


class PolishError(Exception):
    """Base exception for all Polish errors.

    Subclass this for specific error categories.
    """

    pass


class RenderError(PolishError):
    """Error during expression rendering.

    Raised when the renderer meets a node type or literal payload outside
    the closed set it knows how to print. This means the tree was built
    incorrectly upstream.
    """

    def __init__(self, message: str, node: object = None) -> None:
        """Initialize render error.

        Args:
            message: Error description
            node: The offending node or value (optional)
        """
        self.node = node
        super().__init__(message)
