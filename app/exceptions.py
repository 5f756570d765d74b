from typing import Any, Mapping, Optional


class CateringError(Exception):
    """Base class for errors raised by the service layer.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (offending identifiers, field values)
        code: optional machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_message = "Internal error"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
        code: Optional[str] = None,
    ):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.code:
            payload["code"] = self.code
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(CateringError):
    """Raised when input data is invalid or a precondition for a service call is not met.

    http_status is 400.
    """

    http_status = 400
    default_message = "Invalid input"


class NotFoundError(CateringError):
    """Raised when a client, cook or dish identifier does not resolve to a stored record.

    http_status is 404.
    """

    http_status = 404
    default_message = "Not found"
