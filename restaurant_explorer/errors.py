"""
Domain errors raised by the manager layer.

Each error carries the HTTP status it maps to, so the API layer can translate
them with a single exception handler instead of per-route try/except blocks.
"""


class ExplorerError(Exception):
    """Base class for business-rule failures."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ExplorerError):
    status_code = 404


class ConflictError(ExplorerError):
    status_code = 409


class OperationFailedError(ExplorerError):
    """The store refused a write (constraint violation, vanished row, ...)."""

    status_code = 400


class InvalidCredentialsError(ExplorerError):
    """Login rejected. Used by the login endpoint, not by the auth gate."""

    status_code = 401
