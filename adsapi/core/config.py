"""Configuration management for the ads API client library.

Provides Pydantic-based configuration classes for type-safe, validated configuration
management using environment variables or a JSON configuration file.
"""

import json
import os
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CONFIG_FILE = Path.home() / "adsapi.json"


class OAuth2Config(BaseSettings):
    """OAuth2 credentials used to authorize SOAP requests."""

    client_id: str = Field(default="", description="OAuth2 Client ID from Google Cloud Console")
    client_secret: str = Field(default="", description="OAuth2 Client Secret from Google Cloud Console")
    refresh_token: str | None = Field(default=None, description="Refresh token obtained for the client")
    service_account_json: str | None = Field(default=None, description="Service account key as a JSON string")
    service_account_key_file: str | None = Field(default=None, description="Path to a service account key file")

    model_config = SettingsConfigDict(env_prefix="ADSAPI_OAUTH2_", case_sensitive=False)

    @field_validator("client_id")
    @classmethod
    def validate_client_id(cls, v):
        """Validate OAuth2 Client ID format (only if provided)."""
        if not v:
            return v  # Allow empty - service accounts don't need one
        if not v.endswith(".apps.googleusercontent.com"):
            raise ValueError("OAuth2 Client ID must end with '.apps.googleusercontent.com'")
        return v


class HeadersConfig(BaseSettings):
    """Values sent in the SOAP request header of every call."""

    developer_token: str | None = Field(default=None, description="AdWords developer token")
    client_customer_id: str | None = Field(default=None, description="AdWords customer ID to act on")
    user_agent: str = Field(default="adsapi", description="User agent / application name")
    network_code: str | None = Field(default=None, description="DFP network code")
    application_name: str | None = Field(default=None, description="DFP application name (defaults to user agent)")

    model_config = SettingsConfigDict(env_prefix="ADSAPI_HEADERS_", case_sensitive=False)


class ServiceConfig(BaseSettings):
    """Service invocation settings."""

    environment: str = Field(default="PRODUCTION", description="Target environment: PRODUCTION or SANDBOX")
    use_snake_case_names: bool = Field(
        default=True, description="Expose property names as snake_case instead of the WSDL camelCase names"
    )
    timeout: int = Field(default=300, description="HTTP timeout in seconds")
    max_retries: int = Field(default=3, description="Attempts for recoverable failures")

    model_config = SettingsConfigDict(env_prefix="ADSAPI_SERVICE_", case_sensitive=False)

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        v = v.upper()
        if v not in ("PRODUCTION", "SANDBOX"):
            raise ValueError("Environment must be PRODUCTION or SANDBOX")
        return v


class LibraryConfig(BaseSettings):
    """Library-wide settings."""

    log_level: str = Field(default="INFO", description="Log level for the adsapi loggers")
    json_logging: bool = Field(default=False, description="Emit single-line JSON log records")

    model_config = SettingsConfigDict(env_prefix="ADSAPI_LIBRARY_", case_sensitive=False)


class AdsApiConfig(BaseSettings):
    """Main library configuration."""

    api: str = Field(default="adwords", description="API to talk to: adwords or dfp")
    version: str | None = Field(default=None, description="Default API version (API default when empty)")

    oauth2: OAuth2Config = Field(default_factory=OAuth2Config)
    headers: HeadersConfig = Field(default_factory=HeadersConfig)
    service: ServiceConfig = Field(default_factory=ServiceConfig)
    library: LibraryConfig = Field(default_factory=LibraryConfig)

    model_config = SettingsConfigDict(env_prefix="ADSAPI_", case_sensitive=False)

    @classmethod
    def from_file(cls, path: str | Path) -> "AdsApiConfig":
        """Load configuration from a JSON file.

        Nested sections (oauth2, headers, service, library) may be partial;
        missing values fall back to environment variables and defaults.
        """
        with open(path) as fh:
            data = json.load(fh)

        sections = {
            "oauth2": OAuth2Config,
            "headers": HeadersConfig,
            "service": ServiceConfig,
            "library": LibraryConfig,
        }
        values: dict[str, Any] = {k: v for k, v in data.items() if k not in sections}
        for name, section_cls in sections.items():
            if name in data:
                values[name] = section_cls(**data[name])
        return cls(**values)

    def read(self, path: str, default: Any = None) -> Any:
        """Read a value by dotted path, e.g. ``service.use_snake_case_names``."""
        current: Any = self
        for part in path.split("."):
            if isinstance(current, dict):
                if part not in current:
                    return default
                current = current[part]
            elif hasattr(current, part):
                current = getattr(current, part)
            else:
                return default
        return current if current is not None else default


# Global configuration instance
_config: AdsApiConfig | None = None


def get_config() -> AdsApiConfig:
    """Get the global configuration instance.

    Reads the file named by ADSAPI_CONFIG_FILE, else ~/adsapi.json when it
    exists, else the environment alone.
    """
    global _config
    if _config is None:
        config_file = os.environ.get("ADSAPI_CONFIG_FILE")
        if config_file:
            _config = AdsApiConfig.from_file(config_file)
        elif DEFAULT_CONFIG_FILE.exists():
            _config = AdsApiConfig.from_file(DEFAULT_CONFIG_FILE)
        else:
            _config = AdsApiConfig()
    return _config


def reset_config() -> None:
    """Drop the cached global configuration."""
    global _config
    _config = None
