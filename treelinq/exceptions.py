"""Exceptions raised by TreeLinq.

Every error derives from TreeError and from the closest builtin exception,
so callers can catch either the library type or the usual Python one.
"""


class TreeError(Exception):
    """Base exception for all TreeLinq errors."""
    pass


class InvalidStateError(TreeError, RuntimeError):
    """Raised when an operation needs a parent or sibling that does not exist.

    Examples: asking the root whether it is a first child, removing the root
    from its parent, or moving past the last sibling.
    """
    pass


class NotFoundError(TreeError, LookupError):
    """Raised when a query that requires a match finds nothing."""
    pass


class MultipleMatchesError(TreeError, ValueError):
    """Raised when a query that requires exactly one match finds several."""
    pass


class TreeIndexError(TreeError, IndexError):
    """Raised when a child or generation index is out of bounds."""
    pass


class GenerationRangeError(TreeError, ValueError):
    """Raised when a generation depth does not exist in the tree."""
    pass


class UnsupportedError(TreeError, TypeError):
    """Raised when a value lacks a capability an operation requires."""
    pass
