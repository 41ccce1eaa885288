"""
Error handling for the ads API client library.

This module provides:
- Structured exception hierarchy shared by the marshaller, transport and services
- Conversion of SOAP faults into ApiException with per-error property maps
- Retry logic with exponential backoff for recoverable failures
"""

import logging
import random
import time
from collections.abc import Callable
from datetime import datetime
from enum import Enum
from functools import wraps
from typing import Any, TypeVar

import requests
from lxml import etree
from zeep.exceptions import Fault, TransportError

from adsapi.utils.naming import snake_case

logger = logging.getLogger(__name__)

T = TypeVar("T")

XSI_TYPE = "{http://www.w3.org/2001/XMLSchema-instance}type"


class ErrorType(Enum):
    """Categorized error types for API operations."""

    AUTHENTICATION = "authentication_error"
    PERMISSION = "permission_error"
    VALIDATION = "validation_error"
    QUOTA_EXCEEDED = "quota_exceeded"
    NETWORK = "network_error"
    TIMEOUT = "timeout_error"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL_ERROR = "internal_error"
    CONFIGURATION = "configuration_error"
    API = "api_error"
    UNKNOWN = "unknown_error"


class AdsApiError(Exception):
    """Base exception for all library errors."""

    def __init__(
        self,
        message: str,
        error_type: ErrorType = ErrorType.UNKNOWN,
        details: dict[str, Any] | None = None,
        recoverable: bool = False,
    ):
        super().__init__(message)
        self.error_type = error_type
        self.details = details or {}
        self.recoverable = recoverable
        self.timestamp = datetime.now()

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/monitoring."""
        return {
            "error_type": self.error_type.value,
            "message": str(self),
            "details": self.details,
            "recoverable": self.recoverable,
            "timestamp": self.timestamp.isoformat(),
        }


class ConfigurationError(AdsApiError):
    """Raised for configuration issues (unknown API, version or service)."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorType.CONFIGURATION, details, recoverable=False)


class OAuth2VerificationRequired(AdsApiError):
    """Raised when OAuth2 credentials are missing or were rejected."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorType.AUTHENTICATION, details, recoverable=False)


class HttpError(AdsApiError):
    """Raised for HTTP-level failures talking to the SOAP endpoint."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
        error_type: ErrorType = ErrorType.NETWORK,
    ):
        super().__init__(message, error_type, details, recoverable=True)
        self.status_code = status_code


class InvalidTypeError(AdsApiError, TypeError):
    """Raised when a property map does not fit the expected SOAP type."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorType.VALIDATION, details, recoverable=False)


class UnknownTypeError(InvalidTypeError):
    """Raised when a type name is not present in the type registry."""

    def __init__(self, type_name: str):
        super().__init__(f"Unknown type '{type_name}'", {"type_name": type_name})
        self.type_name = type_name


class MissingPropertyError(AdsApiError, AttributeError):
    """Raised when setting a property the SOAP type does not define."""

    def __init__(self, property_name: str, object_class: str):
        super().__init__(
            f"Missing property '{property_name}' for object class '{object_class}'",
            ErrorType.VALIDATION,
            {"property": property_name, "object_class": object_class},
            recoverable=False,
        )
        self.property_name = property_name
        self.object_class = object_class


class ApiException(AdsApiError):
    """Raised when the remote API answers with a SOAP fault."""

    def __init__(
        self,
        message: str,
        errors: list[dict[str, Any]] | None = None,
        error_type: ErrorType = ErrorType.API,
        details: dict[str, Any] | None = None,
        fault_code: str | None = None,
    ):
        recoverable = error_type in (ErrorType.QUOTA_EXCEEDED, ErrorType.INTERNAL_ERROR)
        super().__init__(message, error_type, details, recoverable=recoverable)
        self.errors = errors or []
        self.fault_code = fault_code

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["errors"] = self.errors
        result["fault_code"] = self.fault_code
        return result


# Error xsi:type names reported by the APIs, mapped to our categories.
API_ERROR_CATEGORIES = {
    "AuthenticationError": ErrorType.AUTHENTICATION,
    "AuthorizationError": ErrorType.PERMISSION,
    "PermissionError": ErrorType.PERMISSION,
    "RateExceededError": ErrorType.QUOTA_EXCEEDED,
    "QuotaCheckError": ErrorType.QUOTA_EXCEEDED,
    "QuotaError": ErrorType.QUOTA_EXCEEDED,
    "InternalApiError": ErrorType.INTERNAL_ERROR,
    "ServerError": ErrorType.INTERNAL_ERROR,
    "DatabaseError": ErrorType.INTERNAL_ERROR,
    "EntityNotFound": ErrorType.RESOURCE_NOT_FOUND,
    "NotFoundError": ErrorType.RESOURCE_NOT_FOUND,
}


def _local_name(tag: str) -> str:
    return etree.QName(tag).localname


def _is_type_marker(name: str) -> bool:
    return name.endswith(".Type") or "_Type" in name


def _element_to_dict(element, use_snake_case_names: bool) -> dict[str, Any]:
    """Turn an error element of a fault detail into a property map."""
    result: dict[str, Any] = {}
    xsi_type = element.get(XSI_TYPE)
    if xsi_type:
        result["xsi_type"] = xsi_type.split(":")[-1]

    for child in element:
        if not isinstance(child.tag, str):
            continue
        name = _local_name(child.tag)
        if _is_type_marker(name):
            continue
        key = snake_case(name) if use_snake_case_names else name
        value = _element_to_dict(child, use_snake_case_names) if len(child) else child.text

        if key in result:
            if not isinstance(result[key], list):
                result[key] = [result[key]]
            result[key].append(value)
        else:
            result[key] = value

    return result


def _categorize(errors: list[dict[str, Any]]) -> ErrorType:
    for error in errors:
        category = API_ERROR_CATEGORIES.get(error.get("xsi_type", ""))
        if category:
            return category
    return ErrorType.API


def create_api_exception(fault: Exception, service: Any = None) -> ApiException:
    """
    Build an ApiException from a SOAP fault raised by the SOAP toolkit.

    Args:
        fault: zeep.exceptions.Fault (or anything with message/code/detail)
        service: the service wrapper that made the call, if any

    Returns:
        ApiException carrying one property map per reported error
    """
    use_snake_case_names = getattr(service, "use_snake_case_names", True)
    message = getattr(fault, "message", None) or str(fault)
    detail = getattr(fault, "detail", None)

    errors: list[dict[str, Any]] = []
    if detail is not None:
        for element in detail.iter():
            if isinstance(element.tag, str) and _local_name(element.tag) == "errors":
                errors.append(_element_to_dict(element, use_snake_case_names))

    details: dict[str, Any] = {"original_type": type(fault).__name__}
    if service is not None:
        details["service"] = str(getattr(service, "service", ""))
        details["version"] = str(getattr(service, "version", ""))

    return ApiException(
        message,
        errors=errors,
        error_type=_categorize(errors),
        details=details,
        fault_code=getattr(fault, "code", None),
    )


class RetryConfig:
    """Configuration for retry behavior."""

    def __init__(
        self,
        max_attempts: int = 3,
        initial_delay: float = 1.0,
        max_delay: float = 60.0,
        exponential_base: float = 2.0,
        jitter: bool = True,
    ):
        self.max_attempts = max_attempts
        self.initial_delay = initial_delay
        self.max_delay = max_delay
        self.exponential_base = exponential_base
        self.jitter = jitter


def map_exception(exception: Exception) -> AdsApiError:
    """
    Map transport-level exceptions to our structured error types.

    Args:
        exception: The original exception

    Returns:
        Appropriate AdsApiError subclass
    """
    if isinstance(exception, AdsApiError):
        return exception

    details = {"original_type": type(exception).__name__}

    if isinstance(exception, requests.exceptions.Timeout):
        return HttpError(f"Request timed out: {exception}", details=details, error_type=ErrorType.TIMEOUT)

    elif isinstance(exception, TransportError):
        status_code = getattr(exception, "status_code", None)
        if status_code in (401, 403):
            return OAuth2VerificationRequired(f"Request was not authorized: {exception}", details)
        return HttpError(f"HTTP error {status_code}: {exception}", status_code=status_code, details=details)

    elif isinstance(exception, requests.exceptions.RequestException):
        response = getattr(exception, "response", None)
        status_code = response.status_code if response is not None else None
        return HttpError(f"HTTP error: {exception}", status_code=status_code, details=details)

    else:
        return AdsApiError(f"Unexpected error: {exception}", ErrorType.UNKNOWN, details)


def with_retry(
    retry_config: RetryConfig | None = None,
    operation_name: str | None = None,
) -> Callable:
    """
    Decorator for adding retry logic to remote calls.

    Only errors flagged as recoverable are retried. Everything else is mapped
    with map_exception and raised immediately. SOAP faults are re-raised as is
    and not logged here.

    Args:
        retry_config: Configuration for retry behavior
        operation_name: Name of operation for logging

    Returns:
        Decorated function with retry logic
    """
    if retry_config is None:
        retry_config = RetryConfig()

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            op_name = operation_name or func.__name__

            for attempt in range(retry_config.max_attempts):
                try:
                    if attempt > 0:
                        logger.info(f"Retrying {op_name} (attempt {attempt + 1}/{retry_config.max_attempts})")

                    result = func(*args, **kwargs)

                    if attempt > 0:
                        logger.info(f"{op_name} succeeded after {attempt + 1} attempts")

                    return result

                except Fault:
                    # Reported by the service wrapper as ApiException
                    raise

                except Exception as e:
                    error = map_exception(e)
                    should_retry = error.recoverable and attempt < retry_config.max_attempts - 1

                    if not should_retry:
                        error_dict = error.to_dict()
                        # 'message' clashes with the LogRecord attribute
                        error_dict.pop("message", None)
                        logger.error(f"{op_name} failed with {error.error_type.value}: {error}", extra=error_dict)
                        if error is e or error.error_type is ErrorType.UNKNOWN:
                            raise
                        raise error from e

                    delay = min(
                        retry_config.initial_delay * (retry_config.exponential_base**attempt),
                        retry_config.max_delay,
                    )
                    if retry_config.jitter:
                        delay = delay * (0.5 + random.random())

                    logger.warning(
                        f"{op_name} failed with {error.error_type.value}: {error}. Retrying in {delay:.1f} seconds..."
                    )
                    time.sleep(delay)

            raise RuntimeError(f"{op_name} failed after {retry_config.max_attempts} attempts")

        return wrapper

    return decorator
