"""Unit tests for library configuration."""

import json

import pytest
from pydantic import ValidationError

from adsapi.core.config import (
    AdsApiConfig,
    OAuth2Config,
    ServiceConfig,
    get_config,
    reset_config,
)


def test_defaults():
    config = AdsApiConfig()

    assert config.api == "adwords"
    assert config.version is None
    assert config.service.environment == "PRODUCTION"
    assert config.service.use_snake_case_names is True
    assert config.service.timeout == 300
    assert config.headers.user_agent == "adsapi"
    assert config.library.log_level == "INFO"


def test_environment_variables(monkeypatch):
    monkeypatch.setenv("ADSAPI_API", "dfp")
    monkeypatch.setenv("ADSAPI_SERVICE_ENVIRONMENT", "sandbox")
    monkeypatch.setenv("ADSAPI_HEADERS_NETWORK_CODE", "1234")

    config = AdsApiConfig()

    assert config.api == "dfp"
    assert config.service.environment == "SANDBOX"
    assert config.headers.network_code == "1234"


def test_invalid_environment():
    with pytest.raises(ValidationError, match="PRODUCTION or SANDBOX"):
        ServiceConfig(environment="staging")


def test_client_id_format():
    OAuth2Config(client_id="")
    OAuth2Config(client_id="123.apps.googleusercontent.com")

    with pytest.raises(ValidationError, match="apps.googleusercontent.com"):
        OAuth2Config(client_id="not-a-client-id")


def test_from_file(tmp_path):
    path = tmp_path / "adsapi.json"
    path.write_text(
        json.dumps(
            {
                "api": "adwords",
                "version": "v201607",
                "headers": {"developer_token": "dev-token", "client_customer_id": "123-456-7890"},
                "service": {"use_snake_case_names": False},
            }
        )
    )

    config = AdsApiConfig.from_file(path)

    assert config.version == "v201607"
    assert config.headers.developer_token == "dev-token"
    assert config.headers.user_agent == "adsapi"
    assert config.service.use_snake_case_names is False
    assert config.service.environment == "PRODUCTION"


def test_read_dotted_paths():
    config = AdsApiConfig(service=ServiceConfig(use_snake_case_names=False))

    assert config.read("service.use_snake_case_names", True) is False
    assert config.read("service.timeout") == 300
    assert config.read("service.missing", "fallback") == "fallback"
    assert config.read("version", "v201609") == "v201609"


def test_get_config_reads_file_from_environment(monkeypatch, tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"api": "dfp"}))
    monkeypatch.setenv("ADSAPI_CONFIG_FILE", str(path))
    reset_config()

    config = get_config()

    assert config.api == "dfp"
    assert get_config() is config


def test_get_config_without_file():
    assert get_config().api == "adwords"
