"""Service-level failures, translated to HTTP responses by the API layer."""


class ServiceError(Exception):
    """Base class for failures raised by services."""

    message = "Server Error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class ValidationError(ServiceError):
    """Client-supplied data failed a rule; carries field-keyed messages."""

    message = "Validation failed."

    def __init__(self, errors: dict[str, list[str]], message: str | None = None):
        super().__init__(message)
        self.errors = errors

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationError":
        return cls({field: [message]})


class AuthenticationError(ServiceError):
    """Missing, malformed, expired or revoked credentials."""

    message = "Unauthenticated."


class NotFoundError(ServiceError):
    """The referenced resource does not exist."""

    message = "Not found"


class UnexpectedError(ServiceError):
    """Anything else. The original cause is logged, never returned."""
