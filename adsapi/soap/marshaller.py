"""
Conversion between property maps and typed SOAP objects.

Property maps are plain dicts. A map may carry an ``xsi_type`` key naming the
concrete type to build when the schema declares a base type; without it the
type declared for the property being set is used.
"""

import logging
from typing import Any

from adsapi.core.errors import InvalidTypeError
from adsapi.utils.naming import camel_case, snake_case

from .objects import SoapObject
from .registry import TypeRegistry

logger = logging.getLogger(__name__)

XSI_TYPE_KEY = "xsi_type"


def _is_type_marker(name: str) -> bool:
    """Discriminator properties such as ``ApiError.Type`` duplicate xsi_type."""
    return name.endswith(".Type") or "_Type" in name


class ObjectConverter:
    """Bidirectional converter between dicts and SoapObjects for one registry."""

    def __init__(self, registry: TypeRegistry, use_snake_case_names: bool = True):
        self.registry = registry
        self.use_snake_case_names = use_snake_case_names

    def validate_object(self, obj: Any, type_name: str | None) -> None:
        """Check that ``obj`` can stand for a value of ``type_name``.

        Args:
            obj: the property map or object being evaluated
            type_name: the expected type, or None when unknown

        Raises:
            InvalidTypeError: in case of an unexpected type or property
        """
        if type_name is None:
            return

        if isinstance(obj, SoapObject):
            if not self.registry.is_subtype(obj.type_name, type_name):
                raise InvalidTypeError(
                    f"Object of type '{obj.type_name}' is not a subclass of {type_name}",
                    {"type_name": obj.type_name, "expected": type_name},
                )
            return

        if not isinstance(obj, dict):
            return

        xsi_type = obj.get(XSI_TYPE_KEY)
        if xsi_type:
            if self.registry.find(xsi_type) is None:
                raise InvalidTypeError(f"Specified xsi_type '{xsi_type}' is unknown", {"xsi_type": xsi_type})
            if not self.registry.is_subtype(xsi_type, type_name):
                raise InvalidTypeError(
                    f"Specified xsi_type '{xsi_type}' is not a subclass of {type_name}",
                    {"xsi_type": xsi_type, "expected": type_name},
                )
        else:
            for key in obj:
                if str(key) == XSI_TYPE_KEY:
                    continue
                if self.registry.element_for(type_name, camel_case(str(key))) is None:
                    raise InvalidTypeError(
                        f"Unknown property '{key}' for type {type_name}", {"property": str(key), "type": type_name}
                    )

    def convert_to_object(self, obj: Any, parent_type: str | None = None, property_name: str | None = None) -> Any:
        """Convert property maps into typed objects.

        Called when setting a property, so the parent type and property name
        determine the default type when the map has no xsi_type.

        Args:
            obj: the value being converted
            parent_type: name of the type whose property is being set
            property_name: the property being set
        """
        if property_name:
            property_name = camel_case(str(property_name))

        if isinstance(obj, dict):
            specified_type = obj.get(XSI_TYPE_KEY)
            default_type = None
            if parent_type and property_name:
                element = self.registry.element_for(parent_type, property_name)
                if element is not None:
                    default_type = element.type_name

            self.validate_object(obj, default_type)

            real_type = specified_type or default_type
            if real_type is None:
                raise InvalidTypeError(
                    f"Unable to determine type for property '{property_name}' of {parent_type}; "
                    f"specify it with '{XSI_TYPE_KEY}'",
                    {"parent_type": parent_type, "property": property_name},
                )

            real_object = self.registry.new_object(real_type)
            for entry, value in obj.items():
                entry = str(entry)
                if entry == XSI_TYPE_KEY:
                    continue
                if self.use_snake_case_names:
                    entry = camel_case(entry)

                if isinstance(value, dict | list | tuple):
                    real_object.set_property(entry, self.convert_to_object(value, real_type, entry))
                else:
                    real_object.set_property(entry, value)
            return real_object

        elif isinstance(obj, list | tuple):
            return [self.convert_to_object(entry, parent_type, property_name) for entry in obj]

        return obj

    def convert_from_object(self, obj: Any) -> Any:
        """Convert typed objects (e.g. remote call results) into property maps."""
        if isinstance(obj, SoapObject):
            if not obj.is_simple:
                result: dict[str, Any] = {XSI_TYPE_KEY: obj.type_name}
                for element in self.registry.all_elements(obj.type_name):
                    name = element.name
                    if _is_type_marker(name):
                        continue
                    value = obj.get_property(name)
                    if value is None:
                        continue
                    key = snake_case(name) if self.use_snake_case_names else name
                    result[key] = self.convert_from_object(value)
                return result
            return obj.value

        elif isinstance(obj, list | tuple):
            return [self.convert_from_object(entry) for entry in obj]

        elif isinstance(obj, dict):
            # Untyped wrappers (anonymous response elements)
            return {key: self.convert_from_object(value) for key, value in obj.items()}

        return obj
