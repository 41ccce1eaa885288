"""
Service and type descriptions taken from a zeep client.

zeep does the WSDL parsing; this module only reads its schema objects into the
library's TypeRegistry and lists the operations of a service. Extension bases
and abstract flags are not kept on zeep's resolved types, so they are read from
the schema document itself.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from lxml import etree
from zeep.xsd import ComplexType, Element

from adsapi.utils.naming import fix_case_up

from .registry import ElementDefinition, TypeDefinition, TypeRegistry

logger = logging.getLogger(__name__)

XSD_NS = "http://www.w3.org/2001/XMLSchema"


@dataclass
class MethodDescription:
    """One remote operation: its name and request/response wrapper types."""

    name: str
    input_type: str | None = None
    output_type: str | None = None


@dataclass
class ServiceDescription:
    """A service of one API version."""

    name: str
    version: str
    namespace: str = ""
    methods: list[MethodDescription] = field(default_factory=list)


def _local_name(value: str | None) -> str | None:
    if not value:
        return None
    return value.split(":")[-1]


def schema_hierarchy(document: Any) -> dict[str, tuple[str | None, bool]]:
    """Map named complex types of a schema document to (base, abstract).

    Args:
        document: lxml root element of the WSDL or XSD document
    """
    hierarchy: dict[str, tuple[str | None, bool]] = {}
    if document is None:
        return hierarchy

    for node in document.iter(f"{{{XSD_NS}}}complexType"):
        name = node.get("name")
        if not name:
            continue
        base = None
        extension = node.find(f"{{{XSD_NS}}}complexContent/{{{XSD_NS}}}extension")
        if extension is not None:
            base = _local_name(extension.get("base"))
        abstract = node.get("abstract", "false").lower() == "true"
        hierarchy[name] = (base, abstract)
    return hierarchy


def _element_definitions(xsd_type: Any) -> list[ElementDefinition]:
    elements = []
    for name, element in getattr(xsd_type, "elements", []) or []:
        element_type = getattr(element, "type", None)
        elements.append(
            ElementDefinition(
                name=name,
                type_name=getattr(element_type, "name", None),
                min_occurs=getattr(element, "min_occurs", 0),
                max_occurs=getattr(element, "max_occurs", 1),
            )
        )
    return elements


def _namespace(qname: Any) -> str | None:
    if qname is None:
        return None
    return getattr(qname, "namespace", None)


def build_registry(client: Any, schema_document: Any = None) -> TypeRegistry:
    """
    Build a TypeRegistry from a zeep client's schema.

    Named types are registered under their local name. Global elements with an
    anonymous complex type (the request/response wrappers of document/literal
    operations) are registered under their name with the first letter
    upper-cased, so ``mutate`` becomes ``Mutate``.

    Args:
        client: zeep.Client loaded with the service WSDL
        schema_document: lxml root of the WSDL, used for extension bases

    Returns:
        Populated TypeRegistry
    """
    registry = TypeRegistry()
    hierarchy = schema_hierarchy(schema_document)
    schema = client.wsdl.types

    for xsd_type in schema.types:
        name = getattr(xsd_type, "name", None)
        if not name:
            continue
        base, abstract = hierarchy.get(name, (None, False))
        if isinstance(xsd_type, ComplexType):
            registry.register(
                TypeDefinition(
                    name=name,
                    namespace=_namespace(xsd_type.qname),
                    elements=_element_definitions(xsd_type),
                    base=base,
                    abstract=abstract,
                )
            )
        else:
            registry.register(TypeDefinition(name=name, namespace=_namespace(xsd_type.qname), simple=True))

    for element in schema.elements:
        # The built-in xsd:schema element is listed too and has no type
        if not isinstance(element, Element) or not element.name:
            continue
        wrapper_name = fix_case_up(element.name)
        if wrapper_name in registry or not isinstance(element.type, ComplexType):
            continue
        registry.register(
            TypeDefinition(
                name=wrapper_name,
                namespace=_namespace(element.qname),
                elements=_element_definitions(element.type),
            )
        )

    logger.debug(f"Built type registry with {len(registry)} types")
    return registry


def describe_service(client: Any, registry: TypeRegistry, service_name: str, version: str) -> ServiceDescription:
    """
    List the operations of a service.

    Args:
        client: zeep.Client loaded with the service WSDL
        registry: registry built from the same client
        service_name: WSDL service name (falls back to the first service)
        version: API version the WSDL belongs to
    """
    services = client.wsdl.services
    service = services.get(service_name) or next(iter(services.values()))

    operation_names: set[str] = set()
    for port in service.ports.values():
        operation_names.update(port.binding.all().keys())

    description = ServiceDescription(name=service_name, version=version)
    for name in sorted(operation_names):
        input_type = fix_case_up(name)
        output_type = f"{input_type}Response"
        method = MethodDescription(
            name=name,
            input_type=input_type if input_type in registry else None,
            output_type=output_type if output_type in registry else None,
        )
        description.methods.append(method)

        if not description.namespace and method.input_type:
            description.namespace = registry.get(method.input_type).namespace or ""

    return description


def load_schema_document(client: Any, wsdl_url: str) -> Any:
    """Fetch the raw WSDL through the client's transport and parse it."""
    content = client.transport.load(wsdl_url)
    return etree.fromstring(content)
