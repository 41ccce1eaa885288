"""Logging configuration for the library.

Supports two modes:
- JSON: single-line records for log aggregation
- Development: human-readable format

SOAP envelopes are logged at DEBUG level through a zeep plugin with secrets masked.
"""

import json
import logging
import re
from datetime import UTC, datetime
from typing import Any

from lxml import etree
from zeep import Plugin

soap_logger = logging.getLogger("adsapi.soap_xml")

# Standard LogRecord attributes that are never treated as extra fields
STANDARD_ATTRS = {
    "name",
    "msg",
    "args",
    "created",
    "filename",
    "funcName",
    "levelname",
    "levelno",
    "lineno",
    "module",
    "msecs",
    "pathname",
    "process",
    "processName",
    "relativeCreated",
    "stack_info",
    "exc_info",
    "exc_text",
    "thread",
    "threadName",
    "taskName",
    "message",
}

SENSITIVE_TAGS = ("developerToken", "password", "authToken")
SENSITIVE_KEYS = ("password", "token", "key", "secret", "auth", "authorization")


class JSONFormatter(logging.Formatter):
    """JSON log formatter.

    Outputs single-line JSON that log aggregators handle correctly.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        extra_fields = {k: v for k, v in record.__dict__.items() if k not in STANDARD_ATTRS}
        if extra_fields:
            log_entry["extra"] = extra_fields

        return json.dumps(log_entry, default=str)


def setup_logging(level: str = "INFO", json_format: bool = False) -> None:
    """Configure the ``adsapi`` logger hierarchy.

    Args:
        level: Log level name for the library loggers
        json_format: Emit JSON records instead of the plain text format
    """
    library_logger = logging.getLogger("adsapi")
    library_logger.setLevel(level.upper())

    for handler in library_logger.handlers[:]:
        library_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    library_logger.addHandler(handler)
    library_logger.propagate = False


def sanitize_for_logging(data: Any, max_length: int = 200) -> str:
    """
    Sanitize data for safe logging.

    Args:
        data: Data to sanitize
        max_length: Maximum string length

    Returns:
        Safe string representation
    """
    if isinstance(data, dict):
        safe_data = {k: v for k, v in data.items() if not any(s in str(k).lower() for s in SENSITIVE_KEYS)}
        data_str = str(safe_data)
    elif isinstance(data, list | tuple):
        if len(data) > 10:
            data_str = f"[{len(data)} items: {str(data[:3])}...{str(data[-2:])}]"
        else:
            data_str = str(data)
    else:
        data_str = str(data)

    if len(data_str) > max_length:
        data_str = data_str[: max_length - 3] + "..."

    return data_str


def mask_envelope(xml: str) -> str:
    """Replace the content of credential elements in a SOAP envelope."""
    for tag in SENSITIVE_TAGS:
        xml = re.sub(
            rf"(<(?:\w+:)?{tag}>)[^<]*(</(?:\w+:)?{tag}>)",
            r"\1***\2",
            xml,
        )
    return xml


class SoapLoggingPlugin(Plugin):
    """zeep plugin logging outgoing and incoming envelopes at DEBUG level."""

    def egress(self, envelope, http_headers, operation, binding_options):
        if soap_logger.isEnabledFor(logging.DEBUG):
            soap_logger.debug(
                f"Outgoing request for {operation.name}:\n{self._render(envelope)}",
                extra={"operation": operation.name},
            )
        return envelope, http_headers

    def ingress(self, envelope, http_headers, operation):
        if soap_logger.isEnabledFor(logging.DEBUG):
            soap_logger.debug(
                f"Incoming response for {operation.name}:\n{self._render(envelope)}",
                extra={"operation": operation.name},
            )
        return envelope, http_headers

    @staticmethod
    def _render(envelope) -> str:
        return mask_envelope(etree.tostring(envelope, pretty_print=True, encoding="unicode"))
