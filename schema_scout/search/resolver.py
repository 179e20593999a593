"""
Path resolution back to full element details.

Supported path shapes:

* ``@directive``   - a directive
* ``Type.field``   - a field of an object or interface type
* ``Type``         - a named type

Any other shape (including argument paths such as ``Type.field(arg)`` that
the collector emits) resolves to ``None``.
"""

import logging
from typing import Optional

from graphql import GraphQLNamedType, GraphQLSchema

from .printer import print_arguments, print_type_ref, type_kind_of
from .types import (
    DirectiveDetails,
    ElementDetails,
    EnumValueInfo,
    FieldDetails,
    FieldSummary,
    TypeDetails,
    TypeKind,
)

logger = logging.getLogger(__name__)

DIRECTIVE_PREFIX = "@"


def get_element_details(path: str, schema: GraphQLSchema) -> Optional[ElementDetails]:
    """Resolve ``path`` against ``schema``; ``None`` means not found."""
    parts = path.split(".")
    if len(parts) == 1:
        name = parts[0]
        if name.startswith(DIRECTIVE_PREFIX):
            return _directive_details(schema, name[len(DIRECTIVE_PREFIX):])
        return _type_details(schema, name)
    if len(parts) == 2:
        return _field_details(schema, parts[0], parts[1])
    logger.debug("Unsupported schema path shape: %s", path)
    return None


def _directive_details(schema: GraphQLSchema, name: str) -> Optional[DirectiveDetails]:
    directive = schema.get_directive(name)
    if directive is None:
        return None
    return DirectiveDetails(
        name=directive.name,
        description=directive.description,
        args=print_arguments(directive.args),
    )


def _field_details(schema: GraphQLSchema, type_name: str, field_name: str) -> Optional[FieldDetails]:
    named_type = schema.get_type(type_name)
    if named_type is None or not type_kind_of(named_type).has_field_arguments:
        return None
    field = named_type.fields.get(field_name)
    if field is None:
        return None
    return FieldDetails(
        name=field_name,
        parent_type=type_name,
        type=print_type_ref(field.type),
        description=field.description,
        args=print_arguments(field.args),
    )


def _type_details(schema: GraphQLSchema, name: str) -> Optional[TypeDetails]:
    named_type = schema.get_type(name)
    if named_type is None:
        return None
    kind = type_kind_of(named_type)
    return _TYPE_DETAIL_BUILDERS[kind](named_type, kind)


def _fielded_type_details(named_type: GraphQLNamedType, kind: TypeKind) -> TypeDetails:
    fields = tuple(
        FieldSummary(
            name=field_name,
            type=print_type_ref(field.type),
            description=field.description,
            args=print_arguments(field.args),
        )
        for field_name, field in named_type.fields.items()
    )
    return TypeDetails(name=named_type.name, kind=kind, description=named_type.description, fields=fields)


def _input_object_details(named_type: GraphQLNamedType, kind: TypeKind) -> TypeDetails:
    fields = tuple(
        FieldSummary(name=field_name, type=print_type_ref(field.type), description=field.description)
        for field_name, field in named_type.fields.items()
    )
    return TypeDetails(name=named_type.name, kind=kind, description=named_type.description, fields=fields)


def _union_details(named_type: GraphQLNamedType, kind: TypeKind) -> TypeDetails:
    return TypeDetails(
        name=named_type.name,
        kind=kind,
        description=named_type.description,
        possible_types=tuple(member.name for member in named_type.types),
    )


def _enum_details(named_type: GraphQLNamedType, kind: TypeKind) -> TypeDetails:
    values = tuple(
        EnumValueInfo(name=value_name, description=value.description)
        for value_name, value in named_type.values.items()
    )
    return TypeDetails(name=named_type.name, kind=kind, description=named_type.description, values=values)


def _scalar_details(named_type: GraphQLNamedType, kind: TypeKind) -> TypeDetails:
    return TypeDetails(name=named_type.name, kind=kind, description=named_type.description)


_TYPE_DETAIL_BUILDERS = {
    TypeKind.OBJECT: _fielded_type_details,
    TypeKind.INTERFACE: _fielded_type_details,
    TypeKind.UNION: _union_details,
    TypeKind.ENUM: _enum_details,
    TypeKind.INPUT_OBJECT: _input_object_details,
    TypeKind.SCALAR: _scalar_details,
}
