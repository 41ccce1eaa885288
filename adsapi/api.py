"""
Library entry point.

AdsApi ties configuration, credentials and service wrappers together:

    api = AdsApi()
    campaign_service = api.service("CampaignService", "v201609")
    campaign_service.mutate([{"operator": "SET", "operand": {"id": 1, "status": "PAUSED"}}])
"""

import importlib
import logging
from typing import Any

from adsapi.api_config import ApiConfig, get_api_config
from adsapi.auth import AuthManager
from adsapi.build.generator import WrapperGenerator, load_wrapper_class
from adsapi.core.config import AdsApiConfig, get_config
from adsapi.core.errors import RetryConfig
from adsapi.extensions import default_extension_config
from adsapi.soap.transport import SoapTransport
from adsapi.soap.wsdl import describe_service

logger = logging.getLogger(__name__)


class AdsApi:
    """Access point to the services of one ads API."""

    def __init__(self, config: AdsApiConfig | None = None, api_config: ApiConfig | None = None):
        """Create the API object.

        Args:
            config: library configuration; the global configuration when omitted
            api_config: API description; derived from ``config.api`` when omitted
        """
        self.config = config or get_config()
        self.api_config = api_config or get_api_config(self.config.api)
        self.auth = AuthManager(self.config.oauth2, self.api_config.oauth2_scope)
        self.extension_config = default_extension_config(self.api_config)
        self._wrappers: dict[tuple[str, str], Any] = {}

    @property
    def default_version(self) -> str:
        return self.config.version or self.api_config.default_version

    def service(self, name: str, version: str | None = None):
        """Get the wrapper for a service, creating it on first use.

        Args:
            name: service name, e.g. ``CampaignService``
            version: API version; the configured default when omitted

        Raises:
            ConfigurationError: if the version or service is not supported
        """
        version = version or self.default_version
        self.api_config.check_service(version, name)

        key = (version, name)
        if key not in self._wrappers:
            self._wrappers[key] = self._create_wrapper(version, name)
        return self._wrappers[key]

    def create_transport(self, version: str, name: str) -> SoapTransport:
        service_config = self.config.service
        return SoapTransport(
            self.api_config.wsdl_url(version, name, service_config.environment),
            headers=self.api_config.soap_headers(self.config.headers),
            header_element=self.api_config.header_element,
            http_headers=self.auth.create_http_header,
            timeout=service_config.timeout,
            retry_config=RetryConfig(max_attempts=service_config.max_retries),
        )

    def _wrapper_class(self, version: str, name: str, transport: SoapTransport) -> type:
        module_name = self.api_config.module_name(version, name)
        class_name = self.api_config.interface_name(version, name)
        try:
            module = importlib.import_module(module_name)
            logger.debug(f"Using pre-generated wrapper {module_name}")
            return getattr(module, class_name)
        except ImportError:
            logger.debug(f"No pre-generated wrapper for {version} {name}, generating it")

        description = describe_service(transport.client, transport.registry, name, version)
        generator = WrapperGenerator(self.api_config, transport.registry, self.extension_config)
        source = generator.generate_wrapper_class(description)
        return load_wrapper_class(source, class_name, module_name)

    def _create_wrapper(self, version: str, name: str):
        logger.info(f"Creating {self.api_config.api_name} {version} {name}")
        transport = self.create_transport(version, name)
        wrapper_class = self._wrapper_class(version, name, transport)
        return wrapper_class(transport, self, transport.registry)
