"""
SOAP transport built on zeep.

Handles the HTTP session, SOAP request headers, conversion between SoapObject
trees and zeep values, and retries of recoverable failures.
"""

import logging
from collections.abc import Callable
from typing import Any

from lxml import etree
from requests import Session
from requests.adapters import HTTPAdapter, Retry
from zeep import Client, Settings
from zeep.transports import Transport
from zeep.xsd import CompoundValue, Element

from adsapi.core.errors import RetryConfig, with_retry
from adsapi.core.logging_config import SoapLoggingPlugin, sanitize_for_logging

from .objects import SoapObject
from .registry import TypeRegistry
from .wsdl import build_registry, load_schema_document

logger = logging.getLogger(__name__)

RETRY_ON_STATUS = [500, 502, 503, 504]


class SoapTransport:
    """Sends requests for one service WSDL."""

    def __init__(
        self,
        wsdl_url: str,
        registry: TypeRegistry | None = None,
        headers: dict[str, Any] | None = None,
        header_element: str | None = None,
        http_headers: Callable[[], dict[str, str]] | None = None,
        timeout: int = 300,
        retry_config: RetryConfig | None = None,
        session: Session | None = None,
        client: Client | None = None,
    ):
        """Initialize the transport.

        Args:
            wsdl_url: URL or path of the service WSDL
            registry: type registry; built from the WSDL when omitted
            headers: values for the SOAP request header element
            header_element: local name of the SOAP header element (e.g. RequestHeader)
            http_headers: callable returning extra HTTP headers per request (OAuth2)
            timeout: HTTP timeout in seconds
            retry_config: retry behaviour for recoverable failures
            session: requests session to use instead of a pooled default
            client: pre-built zeep client (tests)
        """
        self.wsdl_url = wsdl_url
        self.headers = headers or {}
        self.header_element = header_element
        self.http_headers = http_headers
        self.retry_config = retry_config or RetryConfig()

        if client is None:
            self.session = session or self._create_session()
            client = Client(
                wsdl_url,
                transport=Transport(session=self.session, timeout=timeout),
                settings=Settings(strict=False, xml_huge_tree=True),
                plugins=[SoapLoggingPlugin()],
            )
        else:
            self.session = session or getattr(client.transport, "session", None)
        self.client = client

        if registry is None:
            registry = build_registry(client, load_schema_document(client, wsdl_url))
        self.registry = registry

    @staticmethod
    def _create_session() -> Session:
        session = Session()
        retry_strategy = Retry(total=3, backoff_factor=0.3, status_forcelist=RETRY_ON_STATUS)
        adapter = HTTPAdapter(max_retries=retry_strategy, pool_connections=10, pool_maxsize=10)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        return session

    def _soap_headers(self) -> list[Any]:
        if not self.header_element or not self.headers:
            return []
        for element in self.client.wsdl.types.elements:
            if isinstance(element, Element) and element.name == self.header_element:
                values = {k: v for k, v in self.headers.items() if v is not None}
                return [element(**values)]
        logger.warning(f"SOAP header element {self.header_element} not found in {self.wsdl_url}")
        return []

    def _refresh_http_headers(self) -> None:
        if self.http_headers is not None and self.session is not None:
            self.session.headers.update(self.http_headers())

    def to_zeep(self, value: Any) -> Any:
        """Convert a SoapObject tree into zeep values."""
        if isinstance(value, SoapObject):
            if value.is_simple:
                return value.value
            definition = self.registry.get(value.type_name)
            qname = f"{{{definition.namespace}}}{definition.name}" if definition.namespace else definition.name
            zeep_type = self.client.get_type(qname)
            return zeep_type(**{name: self.to_zeep(item) for name, item in value.properties()})
        elif isinstance(value, list | tuple):
            return [self.to_zeep(item) for item in value]
        return value

    def from_zeep(self, value: Any) -> Any:
        """Convert zeep values into SoapObject trees."""
        if isinstance(value, CompoundValue):
            type_name = getattr(value._xsd_type, "name", None)
            if type_name is None or type_name not in self.registry:
                return {name: self.from_zeep(item) for name, item in value.__values__.items() if item is not None}
            result = self.registry.new_object(type_name)
            for name, item in value.__values__.items():
                if item is not None and result.has_property(name):
                    result.set_property(name, self.from_zeep(item))
            return result
        elif isinstance(value, list | tuple):
            return [self.from_zeep(item) for item in value]
        return value

    def call(self, method: str, arguments: dict[str, Any]) -> Any:
        """Invoke a remote operation.

        Args:
            method: operation name
            arguments: request element values (SoapObjects or natives)

        Returns:
            The reply converted into SoapObjects

        Raises:
            zeep.exceptions.Fault: when the service answers with a SOAP fault
            HttpError: for transport failures that persist after retries
        """

        @with_retry(self.retry_config, operation_name=method)
        def _invoke():
            self._refresh_http_headers()
            operation = getattr(self.client.service, method)
            kwargs = {name: self.to_zeep(value) for name, value in arguments.items()}
            logger.debug(f"Calling {method} with {sanitize_for_logging(arguments)}")
            return operation(**kwargs, _soapheaders=self._soap_headers())

        return self.from_zeep(_invoke())

    def create_message(self, method: str, arguments: dict[str, Any]) -> str:
        """Render the request envelope for ``method`` without sending it."""
        kwargs = {name: self.to_zeep(value) for name, value in arguments.items()}
        envelope = self.client.create_message(
            self.client.service, method, **kwargs, _soapheaders=self._soap_headers()
        )
        return etree.tostring(envelope, pretty_print=True, encoding="unicode")
