"""Exceptions raised by the search layer."""
from __future__ import annotations


class SearchError(Exception):
    """Base class for search failures."""
    pass


class StoreAccessError(SearchError):
    """Raised when the store cannot execute a search query."""
    pass


class ProjectionError(SearchError):
    """Raised when a result row does not fit the projected DTO."""
    pass


class InvalidPageRequestError(SearchError, ValueError):
    """Raised for a negative offset, non-positive page size or unknown sort property."""
    pass
