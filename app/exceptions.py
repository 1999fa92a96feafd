from typing import Any, Mapping, Optional


class ServiceValidationError(Exception):
    """Raised when a request payload is malformed or a precondition is not met.

    Attributes:
        message: human-readable message, returned to the client as-is
        details: optional mapping with extra context, logged by the handler
        code: optional machine-readable error code, logged by the handler
        http_status: status the error handler answers with (400)
    """

    http_status = 400

    def __init__(self, message: str = "Invalid request format", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def __str__(self) -> str:
        return self.message


class NotFoundError(Exception):
    """Raised when a requested resource was not found.

    Attributes are the same as ServiceValidationError. http_status is 404.
    """

    http_status = 404

    def __init__(self, message: str = "Not found", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def __str__(self) -> str:
        return self.message


class DatabaseError(Exception):
    """Raised when a query or statement fails at the store.

    The message is meant for logs; clients only ever see "Database error".
    http_status is 500.
    """

    http_status = 500
    public_message = "Database error"

    def __init__(self, message: str = "Database error", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def __str__(self) -> str:
        return self.message


class NotConnectedError(DatabaseError):
    """Raised when no live database connection is held."""

    def __init__(self, message: str = "Database not connected", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = "NOT_CONNECTED"):
        super().__init__(message, details, code)
