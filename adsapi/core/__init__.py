"""
Core infrastructure: configuration, errors and logging.
"""

from .config import AdsApiConfig, get_config, reset_config
from .errors import (
    AdsApiError,
    ApiException,
    ConfigurationError,
    ErrorType,
    HttpError,
    InvalidTypeError,
    MissingPropertyError,
    OAuth2VerificationRequired,
    RetryConfig,
    UnknownTypeError,
    create_api_exception,
    map_exception,
    with_retry,
)
from .logging_config import JSONFormatter, SoapLoggingPlugin, sanitize_for_logging, setup_logging

__all__ = [
    "AdsApiConfig",
    "get_config",
    "reset_config",
    "AdsApiError",
    "ApiException",
    "ConfigurationError",
    "ErrorType",
    "HttpError",
    "InvalidTypeError",
    "MissingPropertyError",
    "OAuth2VerificationRequired",
    "RetryConfig",
    "UnknownTypeError",
    "create_api_exception",
    "map_exception",
    "with_retry",
    "JSONFormatter",
    "SoapLoggingPlugin",
    "sanitize_for_logging",
    "setup_logging",
]
