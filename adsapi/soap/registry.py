"""
Type registry for schema-driven marshalling.

Holds one TypeDefinition per schema type, keyed by local name. The marshaller
and the generator only ever look types up by name here.
"""

from dataclasses import dataclass, field

from adsapi.core.errors import InvalidTypeError, UnknownTypeError

from .objects import SoapObject

UNBOUNDED = "unbounded"


@dataclass
class ElementDefinition:
    """A property of a complex type."""

    name: str
    type_name: str | None = None
    min_occurs: int = 0
    max_occurs: int | str = 1

    @property
    def as_array(self) -> bool:
        if self.max_occurs == UNBOUNDED:
            return True
        try:
            return int(self.max_occurs) > 1
        except (TypeError, ValueError):
            return False


@dataclass
class TypeDefinition:
    """A schema type: its own elements plus a reference to its base type."""

    name: str
    namespace: str | None = None
    elements: list[ElementDefinition] = field(default_factory=list)
    base: str | None = None
    abstract: bool = False
    simple: bool = False


class TypeRegistry:
    """Lookup table of schema types."""

    def __init__(self, definitions: list[TypeDefinition] | None = None):
        self._types: dict[str, TypeDefinition] = {}
        for definition in definitions or []:
            self.register(definition)

    def register(self, definition: TypeDefinition) -> TypeDefinition:
        self._types[definition.name] = definition
        return definition

    def find(self, name: str | None) -> TypeDefinition | None:
        if name is None:
            return None
        return self._types.get(name)

    def get(self, name: str) -> TypeDefinition:
        definition = self.find(name)
        if definition is None:
            raise UnknownTypeError(name)
        return definition

    def names(self) -> list[str]:
        return sorted(self._types)

    def __contains__(self, name: object) -> bool:
        return name in self._types

    def __len__(self) -> int:
        return len(self._types)

    def _lineage(self, name: str) -> list[TypeDefinition]:
        """The type followed by its ancestors, nearest first."""
        lineage = []
        seen = set()
        definition = self.find(name)
        while definition is not None and definition.name not in seen:
            lineage.append(definition)
            seen.add(definition.name)
            definition = self.find(definition.base)
        return lineage

    def is_subtype(self, name: str, base: str) -> bool:
        """True when ``name`` is ``base`` or derives from it."""
        return any(definition.name == base for definition in self._lineage(name))

    def all_elements(self, name: str) -> list[ElementDefinition]:
        """Inherited elements first, then the type's own, without duplicates."""
        elements: list[ElementDefinition] = []
        seen: set[str] = set()
        for definition in reversed(self._lineage(name)):
            for element in definition.elements:
                if element.name not in seen:
                    seen.add(element.name)
                    elements.append(element)
        return elements

    def element_for(self, name: str | None, property_name: str) -> ElementDefinition | None:
        if name is None:
            return None
        for element in self.all_elements(name):
            if element.name == property_name:
                return element
        return None

    def new_object(self, name: str, /, **values) -> SoapObject:
        """Instantiate a typed object, optionally setting initial property values."""
        definition = self.get(name)
        if definition.abstract:
            raise InvalidTypeError(
                f"Type '{name}' is abstract; specify a concrete type with xsi_type", {"type_name": name}
            )
        property_names = [element.name for element in self.all_elements(name)]
        return SoapObject(definition.name, property_names, definition.simple, **values)
