"""Errors raised while building, reading or rewriting syntax trees."""

from typing import Optional


class PyMdxError(Exception):
    """Base class for pymdx errors."""

    def __init__(self, message: str, node_type: Optional[str] = None):
        self.message = message
        self.node_type = node_type
        super().__init__(self._format())

    def _format(self) -> str:
        if self.node_type:
            return f"{self.message} (node: {self.node_type})"
        return self.message


class UnsupportedNodeError(PyMdxError):
    """Raised when a node kind is not valid in the position it occupies."""

    pass


class MalformedTreeError(PyMdxError):
    """Raised for unknown node kinds or fields that a kind does not define."""

    pass


class InvalidOptionError(PyMdxError, ValueError):
    """Raised on invalid rewrite configuration."""

    pass
