"""Core client utilities.

This module exports configuration, logging and the error taxonomy used
throughout the client.
"""

from pug_client.core.config import Settings, get_settings
from pug_client.core.exceptions import (
    AuthenticationError,
    FeatureNotSupportedError,
    NetworkError,
    OperationTimeoutError,
    PugClientError,
    ResourceFrozenError,
    ResourceNotFound,
    ValidationError,
)
from pug_client.core.logging import LoggingContext, configure_logging, get_logger

__all__ = [
    "Settings",
    "get_settings",
    "configure_logging",
    "get_logger",
    "LoggingContext",
    "PugClientError",
    "AuthenticationError",
    "ResourceNotFound",
    "ValidationError",
    "ResourceFrozenError",
    "NetworkError",
    "OperationTimeoutError",
    "FeatureNotSupportedError",
]
