"""Exceptions raised by access-control clients."""


class AccessControlError(Exception):
    """Base exception for access-control errors."""

    pass


class UpstreamRejectedError(AccessControlError):
    """Raised when the authorization service rejects a read or write.

    Covers authentication failures, validation errors and transient
    failures alike. Clients never retry before raising it.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class UpstreamNotFoundError(UpstreamRejectedError):
    """Raised when the addressed resource does not exist upstream."""

    pass
