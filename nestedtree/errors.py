"""Exceptions raised by nestedtree.

Lookups that miss, malformed shapes and empty inputs are never reported
through exceptions; they come back as ``None``, ``False`` or an empty
container. The classes below are reserved for calls the library cannot make
sense of at all.
"""


class NestedTreeError(Exception):
    """Base class for all nestedtree errors."""
    pass


class InvalidFieldNamesError(NestedTreeError, ValueError):
    """Raised when a field-name configuration cannot be used."""
    pass


class InvalidLookupError(NestedTreeError, ValueError):
    """Raised when a lookup target is not a single-key dict."""
    pass


class AggregationError(NestedTreeError, ValueError):
    """Raised when an aggregation names an unknown operation."""
    pass
