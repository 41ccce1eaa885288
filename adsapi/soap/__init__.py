"""
SOAP layer: type registry, typed objects, marshalling and transport.
"""

from .marshaller import ObjectConverter
from .objects import SoapObject
from .registry import ElementDefinition, TypeDefinition, TypeRegistry
from .wsdl import MethodDescription, ServiceDescription, build_registry, describe_service

__all__ = [
    "ObjectConverter",
    "SoapObject",
    "ElementDefinition",
    "TypeDefinition",
    "TypeRegistry",
    "MethodDescription",
    "ServiceDescription",
    "build_registry",
    "describe_service",
]
