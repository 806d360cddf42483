"""
Application error types.

Store failures are not wrapped: SQLAlchemy errors propagate to the caller as-is.
"""


class ExpenseTrackerError(Exception):
    """Base class for application errors."""


class NotFoundError(ExpenseTrackerError):
    """A referenced record does not exist."""


class ExternalServiceError(ExpenseTrackerError):
    """
    The identity provider rejected a request or returned an unusable response.

    `code` is the short error code handed back to the browser on redirect
    (e.g. ``token_exchange_failed``).
    """

    def __init__(self, code: str, message: str = ""):
        super().__init__(message or code)
        self.code = code
