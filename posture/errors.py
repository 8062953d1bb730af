"""
Posture - Errors

Exception hierarchy shared by the search clients and the probes.
"""


class PostureError(Exception):
    """Base class for every error raised by this package."""


class SearchValidationError(PostureError):
    """A search request or identity is unusable; detected before any network call."""


class EmptyQueryError(SearchValidationError):
    """The search request carries no query text."""

    def __init__(self, message: str = "search query is empty"):
        super().__init__(message)


class IdentityError(SearchValidationError):
    """The repository identity is missing or incomplete."""


class NilInputError(PostureError):
    """A probe was handed no raw results."""

    def __init__(self, message: str = "nil raw results"):
        super().__init__(message)


class TransportError(PostureError):
    """The provider or the HTTP transport failed. Wraps the underlying cause."""
