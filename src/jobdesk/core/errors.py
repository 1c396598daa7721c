"""Error hierarchy shared by the API, the pipeline and the CLI.

Every error carries the HTTP status it maps to; the API turns any
:class:`JobdeskError` into ``{"error": message}`` with that status.
"""

from __future__ import annotations


class JobdeskError(Exception):
    """Base class for errors that are reported back to the caller."""

    status_code: int = 500

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class AuthenticationError(JobdeskError):
    """Missing, malformed or rejected bearer token."""

    status_code = 401


class ValidationError(JobdeskError):
    """The request body or uploaded file is not acceptable."""

    status_code = 400


class InsufficientCreditsError(JobdeskError):
    """The credit procedure refused to decrement the balance."""

    status_code = 402

    def __init__(self, message: str = "Insufficient credits"):
        super().__init__(message)


class NotFoundError(JobdeskError):
    status_code = 404


class CreditError(JobdeskError):
    """The credit procedure failed for a reason other than a low balance."""

    status_code = 500


class BackendError(JobdeskError):
    """A managed-database call returned a non-2xx response."""

    status_code = 500


class GenerationError(JobdeskError):
    """The completion API returned nothing usable."""

    status_code = 500
