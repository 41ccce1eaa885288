"""
Base class for generated service wrappers.

Generated wrappers only build request arguments; sending, reply conversion and
fault handling live here.
"""

import logging
import time
from typing import Any

from zeep.exceptions import Fault

from adsapi.core.errors import create_api_exception
from adsapi.soap.marshaller import ObjectConverter
from adsapi.soap.objects import SoapObject
from adsapi.soap.registry import TypeRegistry

logger = logging.getLogger(__name__)


class TypeFactory:
    """Creates typed objects of a service's schema: ``service.factory.Campaign(name="x")``."""

    def __init__(self, registry: TypeRegistry):
        self._registry = registry

    def __getattr__(self, name: str):
        if name.startswith("_"):
            raise AttributeError(name)
        registry = self._registry
        registry.get(name)

        def create(**values) -> SoapObject:
            return registry.new_object(name, **values)

        return create


class ServiceWrapper:
    """Shared SOAP execution helper for generated service classes."""

    API_NAME = ""
    VERSION = ""
    SERVICE = ""
    NAMESPACE = ""

    def __init__(self, transport, api=None, registry: TypeRegistry | None = None):
        """Create the wrapper.

        Args:
            transport: SoapTransport (or compatible) for this service
            api: the AdsApi object to which the wrapper belongs
            registry: type registry of the service (defaults to the transport's)
        """
        self._transport = transport
        self.api = api
        self.registry = registry if registry is not None else transport.registry
        self.version = self.VERSION
        self.service = self.SERVICE
        self.factory = TypeFactory(self.registry)

        use_snake_case_names = True
        if api is not None and getattr(api, "config", None) is not None:
            use_snake_case_names = api.config.read("service.use_snake_case_names", True)
        self._converter = ObjectConverter(self.registry, use_snake_case_names=use_snake_case_names)

    @property
    def use_snake_case_names(self) -> bool:
        return self._converter.use_snake_case_names

    def namespace(self) -> str:
        """Returns the namespace for this service."""
        return self.NAMESPACE

    def validate_object(self, obj: Any, type_name: str | None, is_array: bool = False) -> None:
        if is_array and isinstance(obj, list | tuple):
            for item in obj:
                self._converter.validate_object(item, type_name)
        else:
            self._converter.validate_object(obj, type_name)

    def convert_to_object(self, obj: Any, parent_type: str | None = None, property_name: str | None = None) -> Any:
        return self._converter.convert_to_object(obj, parent_type, property_name)

    def convert_from_object(self, obj: Any) -> Any:
        return self._converter.convert_from_object(obj)

    def execute_action(self, name: str, arguments: dict[str, Any]) -> Any:
        """Call a remote method and convert its reply into property maps.

        Raises:
            ApiException: if a SOAP fault occurs
        """
        start = time.time()
        try:
            reply = self._transport.call(name, arguments)
        except Fault as fault:
            logger.warning(f"{self.service}.{name} returned a SOAP fault: {fault}")
            raise create_api_exception(fault, self) from fault

        logger.info(
            f"{self.service}.{name} completed",
            extra={
                "service": self.service,
                "version": self.version,
                "method": name,
                "duration_ms": round((time.time() - start) * 1000, 1),
            },
        )

        reply = self.convert_from_object(reply)
        if isinstance(reply, dict) and "rval" in reply:
            reply = reply["rval"]
        return reply

    def get_soap_xml(self, name: str, arguments: dict[str, Any]) -> str:
        """Return the SOAP request envelope for a call without sending it."""
        return self._transport.create_message(name, arguments)
