"""
Per-API constants: versions, services, endpoints, SOAP headers and OAuth2 scopes.
"""

from abc import ABC, abstractmethod

from adsapi.core.errors import ConfigurationError
from adsapi.utils.naming import snake_case


class ApiConfig(ABC):
    """Base API description. Subclasses fill in the class attributes."""

    key: str = ""
    api_name: str = ""
    default_version: str = ""
    # version -> service name -> service group (URL path segment, may be empty)
    services: dict[str, dict[str, str]] = {}
    # environment -> base URL
    endpoints: dict[str, str] = {}
    header_element: str = "RequestHeader"
    oauth2_scope: str = ""
    docs_url: str | None = None

    def versions(self) -> list[str]:
        return sorted(self.services)

    def latest_version(self) -> str:
        return self.versions()[-1]

    def service_names(self, version: str) -> list[str]:
        self._check_version(version)
        return sorted(self.services[version])

    def is_supported(self, version: str, service: str) -> bool:
        return service in self.services.get(version, {})

    def _check_version(self, version: str) -> None:
        if version not in self.services:
            raise ConfigurationError(
                f"Version {version} is not supported by {self.api_name}",
                {"version": version, "supported": self.versions()},
            )

    def check_service(self, version: str, service: str) -> None:
        self._check_version(version)
        if not self.is_supported(version, service):
            raise ConfigurationError(
                f"Service {service} is not available for {self.api_name} {version}",
                {"version": version, "service": service},
            )

    def endpoint(self, environment: str) -> str:
        try:
            return self.endpoints[environment.upper()]
        except KeyError:
            raise ConfigurationError(f"Unknown environment {environment} for {self.api_name}") from None

    @abstractmethod
    def wsdl_url(self, version: str, service: str, environment: str = "PRODUCTION") -> str:
        pass

    def module_name(self, version: str, service: str) -> str:
        """Dotted module path of a pre-generated wrapper."""
        return f"adsapi.generated.{self.key}.{version}.{snake_case(service).lower()}"

    def interface_name(self, version: str, service: str) -> str:
        """Class name of the generated wrapper."""
        return service

    def doc_link(self, version: str, service: str, method: str) -> str | None:
        if not self.docs_url:
            return None
        return self.docs_url.format(version=version, service=service, method=method)

    @abstractmethod
    def soap_headers(self, headers_config) -> dict[str, str | None]:
        """Values for the SOAP request header element."""
        pass


_ADWORDS_V201609 = {
    "AccountLabelService": "mcm",
    "AdCustomizerFeedService": "cm",
    "AdGroupAdService": "cm",
    "AdGroupBidModifierService": "cm",
    "AdGroupCriterionService": "cm",
    "AdGroupExtensionSettingService": "cm",
    "AdGroupFeedService": "cm",
    "AdGroupService": "cm",
    "AdParamService": "cm",
    "AdwordsUserListService": "rm",
    "BatchJobService": "cm",
    "BiddingStrategyService": "cm",
    "BudgetOrderService": "billing",
    "BudgetService": "cm",
    "CampaignCriterionService": "cm",
    "CampaignExtensionSettingService": "cm",
    "CampaignFeedService": "cm",
    "CampaignService": "cm",
    "CampaignSharedSetService": "cm",
    "ConstantDataService": "cm",
    "ConversionTrackerService": "cm",
    "CustomerExtensionSettingService": "cm",
    "CustomerFeedService": "cm",
    "CustomerService": "mcm",
    "CustomerSyncService": "ch",
    "DataService": "cm",
    "DraftAsyncErrorService": "cm",
    "DraftService": "cm",
    "FeedItemService": "cm",
    "FeedMappingService": "cm",
    "FeedService": "cm",
    "LabelService": "cm",
    "LocationCriterionService": "cm",
    "ManagedCustomerService": "mcm",
    "MediaService": "cm",
    "OfflineConversionFeedService": "cm",
    "ReportDefinitionService": "cm",
    "SharedCriterionService": "cm",
    "SharedSetService": "cm",
    "TargetingIdeaService": "o",
    "TrafficEstimatorService": "o",
    "TrialAsyncErrorService": "cm",
    "TrialService": "cm",
}


class AdwordsApiConfig(ApiConfig):
    key = "adwords"
    api_name = "AdwordsApi"
    default_version = "v201609"
    services = {
        "v201605": {k: v for k, v in _ADWORDS_V201609.items() if k not in ("TrialService", "TrialAsyncErrorService")},
        "v201607": {k: v for k, v in _ADWORDS_V201609.items() if k not in ("TrialService", "TrialAsyncErrorService")},
        "v201609": dict(_ADWORDS_V201609),
    }
    endpoints = {
        "PRODUCTION": "https://adwords.google.com/api/adwords/",
        "SANDBOX": "https://adwords-sandbox.google.com/api/adwords/",
    }
    header_element = "RequestHeader"
    oauth2_scope = "https://www.googleapis.com/auth/adwords"
    docs_url = "https://developers.google.com/adwords/api/docs/reference/{version}/{service}#{method}"

    def wsdl_url(self, version: str, service: str, environment: str = "PRODUCTION") -> str:
        self.check_service(version, service)
        group = self.services[version][service]
        return f"{self.endpoint(environment)}{group}/{version}/{service}?wsdl"

    def soap_headers(self, headers_config) -> dict[str, str | None]:
        return {
            "clientCustomerId": headers_config.client_customer_id,
            "developerToken": headers_config.developer_token,
            "userAgent": headers_config.user_agent,
        }


_DFP_SERVICES = [
    "ActivityGroupService",
    "ActivityService",
    "AdExclusionRuleService",
    "AdRuleService",
    "AudienceSegmentService",
    "BaseRateService",
    "CompanyService",
    "ContactService",
    "ContentBundleService",
    "ContentService",
    "CreativeService",
    "CreativeSetService",
    "CreativeTemplateService",
    "CreativeWrapperService",
    "CustomFieldService",
    "CustomTargetingService",
    "ExchangeRateService",
    "ForecastService",
    "InventoryService",
    "LabelService",
    "LineItemCreativeAssociationService",
    "LineItemService",
    "LineItemTemplateService",
    "LiveStreamEventService",
    "MobileApplicationService",
    "NetworkService",
    "OrderService",
    "PackageService",
    "PlacementService",
    "PremiumRateService",
    "ProductPackageItemService",
    "ProductPackageService",
    "ProductService",
    "ProductTemplateService",
    "ProposalLineItemService",
    "ProposalService",
    "PublisherQueryLanguageService",
    "RateCardService",
    "ReconciliationLineItemReportService",
    "ReconciliationOrderReportService",
    "ReconciliationReportRowService",
    "ReconciliationReportService",
    "ReportService",
    "SuggestedAdUnitService",
    "TeamService",
    "UserService",
    "UserTeamAssociationService",
    "WorkflowRequestService",
]


class DfpApiConfig(ApiConfig):
    key = "dfp"
    api_name = "DfpApi"
    default_version = "v201608"
    services = {
        "v201605": {name: "" for name in _DFP_SERVICES},
        "v201608": {name: "" for name in _DFP_SERVICES},
    }
    endpoints = {
        "PRODUCTION": "https://ads.google.com/apis/ads/publisher/",
        "SANDBOX": "https://ads.google.com/apis/ads/publisher/",
    }
    header_element = "RequestHeader"
    oauth2_scope = "https://www.googleapis.com/auth/dfp"
    docs_url = "https://developers.google.com/doubleclick-publishers/docs/reference/{version}/{service}#{method}"

    def wsdl_url(self, version: str, service: str, environment: str = "PRODUCTION") -> str:
        self.check_service(version, service)
        return f"{self.endpoint(environment)}{version}/{service}?wsdl"

    def soap_headers(self, headers_config) -> dict[str, str | None]:
        return {
            "networkCode": headers_config.network_code,
            "applicationName": headers_config.application_name or headers_config.user_agent,
        }


API_CONFIGS: dict[str, type[ApiConfig]] = {
    "adwords": AdwordsApiConfig,
    "dfp": DfpApiConfig,
}


def get_api_config(name: str) -> ApiConfig:
    """Return the configuration for ``adwords`` or ``dfp``."""
    try:
        return API_CONFIGS[name.lower()]()
    except KeyError:
        raise ConfigurationError(f"Unknown API '{name}'", {"supported": sorted(API_CONFIGS)}) from None
