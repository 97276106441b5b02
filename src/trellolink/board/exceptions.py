"""Custom exceptions for the Board Client."""


class BoardError(Exception):
    """Base exception for Board Client errors.

    API failures are never raised; they are returned as BoardFailure results.
    """


class ClientClosedError(BoardError):
    """Board Client used after it was closed."""
