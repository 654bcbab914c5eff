"""Exceptions raised by the Pug Video API client."""

from typing import Any


class PugClientError(Exception):
    """Base class for all client errors."""

    def __init__(self, message: str = "", response: Any = None) -> None:
        self.response = response
        super().__init__(message)

    @property
    def status_code(self) -> int | None:
        """HTTP status of the response that caused the error, if any."""
        if self.response is None:
            return None
        return getattr(self.response, "status_code", None)


class AuthenticationError(PugClientError):
    """Raised when authentication fails."""
    pass


class ResourceNotFound(PugClientError):
    """Raised when a resource cannot be found."""

    def __init__(self, resource_type: str, id: Any, response: Any = None) -> None:
        self.resource_type = resource_type
        self.id = id
        super().__init__(f"{resource_type} not found: {id}", response=response)


class ValidationError(PugClientError):
    """Raised when a write is rejected locally or by the API."""
    pass


class ResourceFrozenError(ValidationError):
    """Raised when attempting to modify a deleted resource."""

    def __init__(self, message: str = "Cannot modify frozen resource") -> None:
        super().__init__(message)


class NetworkError(PugClientError):
    """Raised when a request fails in transport or on the server."""
    pass


class OperationTimeoutError(PugClientError):
    """Raised when polling does not finish before its deadline."""
    pass


class FeatureNotSupportedError(PugClientError):
    """Raised when a feature is intentionally not supported by this client.

    Some API endpoints exist but are excluded from this client; this error
    names the feature and, optionally, why.
    """

    def __init__(self, feature: str, reason: str | None = None) -> None:
        self.feature = feature
        self.reason = reason
        message = f"{feature} is not supported by this client"
        if reason:
            message += f": {reason}"
        super().__init__(message)
