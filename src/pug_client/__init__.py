"""Python client for the Pug Video API."""

__version__ = "0.4.0"

from pug_client.client import PugClient  # noqa: E402
from pug_client.core.config import Settings, get_settings  # noqa: E402
from pug_client.core.exceptions import (  # noqa: E402
    AuthenticationError,
    FeatureNotSupportedError,
    NetworkError,
    OperationTimeoutError,
    PugClientError,
    ResourceFrozenError,
    ResourceNotFound,
    ValidationError,
)
from pug_client.core.logging import configure_logging  # noqa: E402

__all__ = [
    "__version__",
    "PugClient",
    "Settings",
    "get_settings",
    "configure_logging",
    "PugClientError",
    "AuthenticationError",
    "ResourceNotFound",
    "ValidationError",
    "ResourceFrozenError",
    "NetworkError",
    "OperationTimeoutError",
    "FeatureNotSupportedError",
]
