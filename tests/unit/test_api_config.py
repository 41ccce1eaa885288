"""Unit tests for per-API configuration."""

import pytest

from adsapi.api_config import AdwordsApiConfig, ApiConfig, DfpApiConfig, get_api_config
from adsapi.core.config import HeadersConfig
from adsapi.core.errors import ConfigurationError


def test_get_api_config():
    assert isinstance(get_api_config("adwords"), AdwordsApiConfig)
    assert isinstance(get_api_config("DFP"), DfpApiConfig)

    with pytest.raises(ConfigurationError, match="Unknown API 'bing'"):
        get_api_config("bing")


def test_adwords_versions():
    config = AdwordsApiConfig()

    assert config.versions() == ["v201605", "v201607", "v201609"]
    assert config.latest_version() == config.default_version == "v201609"
    assert config.is_supported("v201609", "TrialService")
    assert not config.is_supported("v201605", "TrialService")


def test_adwords_wsdl_url_uses_service_group():
    config = AdwordsApiConfig()

    assert (
        config.wsdl_url("v201609", "CampaignService")
        == "https://adwords.google.com/api/adwords/cm/v201609/CampaignService?wsdl"
    )
    assert (
        config.wsdl_url("v201609", "ManagedCustomerService", "sandbox")
        == "https://adwords-sandbox.google.com/api/adwords/mcm/v201609/ManagedCustomerService?wsdl"
    )


def test_dfp_wsdl_url():
    assert (
        DfpApiConfig().wsdl_url("v201608", "OrderService")
        == "https://ads.google.com/apis/ads/publisher/v201608/OrderService?wsdl"
    )


def test_unsupported_version_and_service():
    config = AdwordsApiConfig()

    with pytest.raises(ConfigurationError, match="Version v200909 is not supported"):
        config.service_names("v200909")
    with pytest.raises(ConfigurationError, match="Service NoService is not available"):
        config.check_service("v201609", "NoService")


def test_unknown_environment():
    with pytest.raises(ConfigurationError, match="Unknown environment"):
        AdwordsApiConfig().endpoint("staging")


def test_module_and_interface_names():
    config = AdwordsApiConfig()

    assert config.module_name("v201609", "CampaignService") == "adsapi.generated.adwords.v201609.campaign_service"
    assert config.interface_name("v201609", "CampaignService") == "CampaignService"


def test_doc_link():
    assert (
        DfpApiConfig().doc_link("v201608", "OrderService", "createOrders")
        == "https://developers.google.com/doubleclick-publishers/docs/reference/v201608/OrderService#createOrders"
    )


def test_soap_headers():
    headers = HeadersConfig(developer_token="dev", client_customer_id="123-456-7890", network_code="99")

    assert AdwordsApiConfig().soap_headers(headers) == {
        "clientCustomerId": "123-456-7890",
        "developerToken": "dev",
        "userAgent": "adsapi",
    }
    assert DfpApiConfig().soap_headers(headers) == {"networkCode": "99", "applicationName": "adsapi"}


def test_api_config_base_is_abstract():
    with pytest.raises(TypeError):
        ApiConfig()
