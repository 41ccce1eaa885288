"""
Typed SOAP values.

A SoapObject is a record tagged with its schema type name. Only properties the
type defines (directly or through its base types) can be set. Objects of
simple types carry a single scalar, read and written as ``value``.
"""

from typing import Any

from adsapi.core.errors import MissingPropertyError

SIMPLE_VALUE = "value"


class SoapObject:
    """An instance of a complex (or simple) schema type."""

    def __init__(self, type_name: str, property_names: list[str], simple: bool = False, /, **values):
        object.__setattr__(self, "_type_name", type_name)
        object.__setattr__(self, "_property_names", list(property_names))
        object.__setattr__(self, "_simple", simple)
        object.__setattr__(self, "_values", {})
        object.__setattr__(self, "_scalar", None)
        for name, value in values.items():
            self.set_property(name, value)

    @property
    def type_name(self) -> str:
        return self._type_name

    @property
    def is_simple(self) -> bool:
        return self._simple

    def _holds_scalar(self, name: str) -> bool:
        return self._simple and name == SIMPLE_VALUE and name not in self._property_names

    def has_property(self, name: str) -> bool:
        return name in self._property_names or self._holds_scalar(name)

    def set_property(self, name: str, value: Any) -> None:
        if self._holds_scalar(name):
            object.__setattr__(self, "_scalar", value)
            return
        if not self.has_property(name):
            raise MissingPropertyError(name, self._type_name)
        self._values[name] = value

    def get_property(self, name: str, default: Any = None) -> Any:
        if self._holds_scalar(name):
            return default if self._scalar is None else self._scalar
        return self._values.get(name, default)

    def properties(self) -> list[tuple[str, Any]]:
        """Set properties, in schema order."""
        return [(name, self._values[name]) for name in self._property_names if name in self._values]

    def __getattr__(self, name: str) -> Any:
        # Only called when normal lookup fails
        if name.startswith("_"):
            raise AttributeError(name)
        if self.has_property(name):
            return self.get_property(name)
        raise MissingPropertyError(name, self._type_name)

    def __setattr__(self, name: str, value: Any) -> None:
        self.set_property(name, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SoapObject):
            return NotImplemented
        return (
            self._type_name == other._type_name
            and self._values == other._values
            and self._scalar == other._scalar
        )

    def __repr__(self) -> str:
        if self._simple:
            return f"{self._type_name}({self._scalar!r})"
        props = ", ".join(f"{name}={value!r}" for name, value in self.properties())
        return f"{self._type_name}({props})"
