"""
Value records produced by the schema search subsystem.

``SearchableElement`` is the flattened index entry emitted by the collector.
The ``*Details`` records are the richer, kind-specific structures produced by
the path resolver. All of them are immutable and expose ``to_dict()`` for the
JSON wire shape (camelCase keys).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union


class ElementType(Enum):
    """Discriminant of a flattened schema element."""
    TYPE = "type"
    FIELD = "field"
    ARGUMENT = "argument"
    DIRECTIVE = "directive"


class TypeKind(Enum):
    """Closed set of named GraphQL type kinds."""
    OBJECT = "OBJECT"
    INTERFACE = "INTERFACE"
    UNION = "UNION"
    ENUM = "ENUM"
    INPUT_OBJECT = "INPUT_OBJECT"
    SCALAR = "SCALAR"

    @property
    def has_fields(self) -> bool:
        return self in (TypeKind.OBJECT, TypeKind.INTERFACE, TypeKind.INPUT_OBJECT)

    @property
    def has_field_arguments(self) -> bool:
        return self in (TypeKind.OBJECT, TypeKind.INTERFACE)


@dataclass(frozen=True)
class ArgumentInfo:
    """A field or directive argument with its printed type."""
    name: str
    type: str
    description: Optional[str] = None

    def to_dict(self, keep_empty_description: bool = True) -> dict[str, Any]:
        data: dict[str, Any] = {'name': self.name, 'type': self.type}
        if keep_empty_description or self.description is not None:
            data['description'] = self.description
        return data


@dataclass(frozen=True)
class SearchableElement:
    """One flattened, searchable fact about a schema."""
    element_type: ElementType
    name: str
    path: str
    parent_type: Optional[str] = None
    description: Optional[str] = None
    type_kind: Optional[TypeKind] = None  # types only
    return_type: Optional[str] = None  # object/interface fields only
    args: Optional[tuple[ArgumentInfo, ...]] = None  # object/interface fields only

    @property
    def searchable_text(self) -> str:
        return f"{self.name} {self.description or ''}".lower()

    def to_dict(self) -> dict[str, Any]:
        """Convert to the wire representation, omitting absent keys."""
        data: dict[str, Any] = {'elementType': self.element_type.value, 'name': self.name}
        if self.parent_type is not None:
            data['parentType'] = self.parent_type
        if self.description is not None:
            data['description'] = self.description
        data['path'] = self.path
        if self.type_kind is not None:
            data['typeKind'] = self.type_kind.value
        if self.return_type is not None:
            data['returnType'] = self.return_type
        if self.args is not None:
            data['args'] = [arg.to_dict(keep_empty_description=False) for arg in self.args]
        return data


@dataclass(frozen=True)
class FieldSummary:
    """A field as listed inside a type detail record."""
    name: str
    type: str
    description: Optional[str] = None
    args: Optional[tuple[ArgumentInfo, ...]] = None  # None for input fields

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {'name': self.name, 'type': self.type, 'description': self.description}
        if self.args is not None:
            data['args'] = [arg.to_dict() for arg in self.args]
        return data


@dataclass(frozen=True)
class EnumValueInfo:
    name: str
    description: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {'name': self.name, 'description': self.description}


@dataclass(frozen=True)
class TypeDetails:
    """Full description of a named type; which collections are set depends on ``kind``."""
    name: str
    kind: TypeKind
    description: Optional[str] = None
    fields: Optional[tuple[FieldSummary, ...]] = None
    possible_types: Optional[tuple[str, ...]] = None
    values: Optional[tuple[EnumValueInfo, ...]] = None

    element_type = ElementType.TYPE

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            'elementType': self.element_type.value,
            'name': self.name,
            'description': self.description,
            'kind': self.kind.value,
        }
        if self.fields is not None:
            data['fields'] = [field.to_dict() for field in self.fields]
        if self.possible_types is not None:
            data['possibleTypes'] = list(self.possible_types)
        if self.values is not None:
            data['values'] = [value.to_dict() for value in self.values]
        return data


@dataclass(frozen=True)
class FieldDetails:
    """Full description of one object or interface field."""
    name: str
    parent_type: str
    type: str
    description: Optional[str] = None
    args: tuple[ArgumentInfo, ...] = ()

    element_type = ElementType.FIELD

    def to_dict(self) -> dict[str, Any]:
        return {
            'elementType': self.element_type.value,
            'name': self.name,
            'parentType': self.parent_type,
            'type': self.type,
            'description': self.description,
            'args': [arg.to_dict() for arg in self.args],
        }


@dataclass(frozen=True)
class DirectiveDetails:
    """Full description of a directive."""
    name: str
    description: Optional[str] = None
    args: tuple[ArgumentInfo, ...] = ()

    element_type = ElementType.DIRECTIVE

    def to_dict(self) -> dict[str, Any]:
        return {
            'elementType': self.element_type.value,
            'name': self.name,
            'description': self.description,
            'args': [arg.to_dict() for arg in self.args],
        }


ElementDetails = Union[TypeDetails, FieldDetails, DirectiveDetails]
