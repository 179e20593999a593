"""
Rendering helpers for graphql-core type references.
"""

from graphql import (
    GraphQLEnumType,
    GraphQLInputObjectType,
    GraphQLInterfaceType,
    GraphQLList,
    GraphQLNamedType,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLType,
    GraphQLUnionType,
)

from .types import ArgumentInfo, TypeKind

_KIND_BY_CLASS: dict[type, TypeKind] = {
    GraphQLObjectType: TypeKind.OBJECT,
    GraphQLInterfaceType: TypeKind.INTERFACE,
    GraphQLUnionType: TypeKind.UNION,
    GraphQLEnumType: TypeKind.ENUM,
    GraphQLInputObjectType: TypeKind.INPUT_OBJECT,
    GraphQLScalarType: TypeKind.SCALAR,
}


def print_type_ref(type_ref: GraphQLType) -> str:
    """Render a possibly wrapped type reference, e.g. ``[User!]!``."""
    if isinstance(type_ref, GraphQLNonNull):
        return f"{print_type_ref(type_ref.of_type)}!"
    if isinstance(type_ref, GraphQLList):
        return f"[{print_type_ref(type_ref.of_type)}]"
    return type_ref.name


def type_kind_of(named_type: GraphQLNamedType) -> TypeKind:
    """Return the kind of a named type; subclasses resolve through their MRO."""
    for klass in type(named_type).__mro__:
        kind = _KIND_BY_CLASS.get(klass)
        if kind is not None:
            return kind
    raise TypeError(f"Not a named GraphQL type: {named_type!r}")


def print_arguments(args) -> tuple[ArgumentInfo, ...]:
    """Build argument records from a graphql-core ``args`` mapping, keeping order."""
    return tuple(
        ArgumentInfo(name=arg_name, type=print_type_ref(arg.type), description=arg.description)
        for arg_name, arg in args.items()
    )
