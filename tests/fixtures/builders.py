"""
Builders for type registries and service descriptions used across tests.

The campaign registry mirrors a trimmed-down AdWords CampaignService schema:
abstract Operation/ListReturnValue/Setting bases with concrete subtypes,
request/response wrappers and a paged ``get``.
"""

from adsapi.soap.registry import UNBOUNDED, ElementDefinition, TypeDefinition, TypeRegistry
from adsapi.soap.wsdl import MethodDescription, ServiceDescription

CM_NAMESPACE = "https://adwords.google.com/api/adwords/cm/v201609"


def element(name: str, type_name: str | None = None, max_occurs: int | str = 1) -> ElementDefinition:
    return ElementDefinition(name=name, type_name=type_name, min_occurs=0, max_occurs=max_occurs)


class RegistryBuilder:
    """Fluent builder for TypeRegistry instances."""

    def __init__(self, namespace: str = CM_NAMESPACE):
        self.namespace = namespace
        self.definitions: list[TypeDefinition] = []

    def simple(self, *names: str):
        for name in names:
            self.definitions.append(TypeDefinition(name=name, namespace=self.namespace, simple=True))
        return self

    def complex(
        self,
        name: str,
        *elements: ElementDefinition,
        base: str | None = None,
        abstract: bool = False,
    ):
        self.definitions.append(
            TypeDefinition(
                name=name,
                namespace=self.namespace,
                elements=list(elements),
                base=base,
                abstract=abstract,
            )
        )
        return self

    def build(self) -> TypeRegistry:
        return TypeRegistry(self.definitions)


def build_campaign_registry() -> TypeRegistry:
    """Registry with the CampaignService types used by most tests."""
    return (
        RegistryBuilder()
        .simple("string", "long", "int", "boolean", "CampaignStatus", "Operator")
        .complex("Money", element("microAmount", "long"))
        .complex("Budget", element("budgetId", "long"), element("name", "string"), element("amount", "Money"))
        .complex("Setting", element("Setting.Type", "string"), abstract=True)
        .complex("GeoTargetTypeSetting", element("positiveGeoTargetType", "string"), base="Setting")
        .complex(
            "Campaign",
            element("id", "long"),
            element("name", "string"),
            element("status", "CampaignStatus"),
            element("budget", "Budget"),
            element("settings", "Setting", UNBOUNDED),
        )
        .complex("Operation", element("operator", "Operator"), element("Operation.Type", "string"), abstract=True)
        .complex("CampaignOperation", element("operand", "Campaign"), base="Operation")
        .complex("ListReturnValue", element("ListReturnValue.Type", "string"), abstract=True)
        .complex("CampaignReturnValue", element("value", "Campaign", UNBOUNDED), base="ListReturnValue")
        .complex("Paging", element("startIndex", "int"), element("numberResults", "int"))
        .complex("Selector", element("fields", "string", UNBOUNDED), element("paging", "Paging"))
        .complex("Page", element("totalNumEntries", "int"), element("Page.Type", "string"), abstract=True)
        .complex("CampaignPage", element("entries", "Campaign", UNBOUNDED), base="Page")
        .complex("Mutate", element("operations", "CampaignOperation", UNBOUNDED))
        .complex("MutateResponse", element("rval", "CampaignReturnValue"))
        .complex("Get", element("serviceSelector", "Selector"))
        .complex("GetResponse", element("rval", "CampaignPage"))
        .complex("Pause")
        .build()
    )


def build_campaign_service_description(version: str = "v201609") -> ServiceDescription:
    """Description of the campaign service matching build_campaign_registry."""
    return ServiceDescription(
        name="CampaignService",
        version=version,
        namespace=CM_NAMESPACE,
        methods=[
            MethodDescription(name="get", input_type="Get", output_type="GetResponse"),
            MethodDescription(name="mutate", input_type="Mutate", output_type="MutateResponse"),
            MethodDescription(name="pause", input_type="Pause", output_type=None),
        ],
    )
