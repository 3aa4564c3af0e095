from typing import Any, Mapping, Optional


class NourishHubError(Exception):
    """Base class for errors raised by the service layer.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, validation info)
        code: machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_code = "ERROR"

    def __init__(self, message: str = "Error", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(NourishHubError):
    """Raised when input data is invalid or a precondition for a service call is not met."""

    http_status = 400
    default_code = "SERVICE_VALIDATION_ERROR"

    def __init__(self, message: str = "Invalid input", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message, details, code)


class NotFoundError(NourishHubError):
    """Raised when a requested resource was not found."""

    http_status = 404
    default_code = "NOT_FOUND"

    def __init__(self, message: str = "Not found", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message, details, code)


class StoreError(NourishHubError):
    """Raised when the database rejects or fails an operation.

    The message is generic; the underlying error is logged where it is caught.
    """

    http_status = 500
    default_code = "STORE_ERROR"

    def __init__(self, message: str = "Database operation failed", details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        super().__init__(message, details, code)
