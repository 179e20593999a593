"""
Flattening of a GraphQL schema into searchable records.
"""

import logging
from dataclasses import replace

from graphql import GraphQLSchema

from .printer import print_arguments, print_type_ref, type_kind_of
from .types import ArgumentInfo, ElementType, SearchableElement

logger = logging.getLogger(__name__)

META_TYPE_PREFIX = "__"


def is_meta_type(type_name: str) -> bool:
    return type_name.startswith(META_TYPE_PREFIX)


def _flat_arguments(args) -> tuple[ArgumentInfo, ...]:
    # Empty descriptions count as absent in the flat index.
    return tuple(replace(arg, description=arg.description or None) for arg in print_arguments(args))


def collect_searchable_elements(schema: GraphQLSchema) -> list[SearchableElement]:
    """
    Walk the schema once and return every type, field, argument and directive.

    Order: each type record is followed by its fields, each field record by
    its arguments; directives (each followed by its arguments) come last.
    Introspection types (``__Schema``, ``__Type``...) are skipped.
    """
    elements: list[SearchableElement] = []

    for type_name, named_type in schema.type_map.items():
        if is_meta_type(type_name):
            continue

        kind = type_kind_of(named_type)
        elements.append(SearchableElement(
            element_type=ElementType.TYPE,
            name=type_name,
            description=named_type.description or None,
            path=type_name,
            type_kind=kind,
        ))

        if not kind.has_fields:
            continue

        for field_name, field in named_type.fields.items():
            field_path = f"{type_name}.{field_name}"
            if not kind.has_field_arguments:
                elements.append(SearchableElement(
                    element_type=ElementType.FIELD,
                    name=field_name,
                    parent_type=type_name,
                    description=field.description or None,
                    path=field_path,
                ))
                continue

            elements.append(SearchableElement(
                element_type=ElementType.FIELD,
                name=field_name,
                parent_type=type_name,
                description=field.description or None,
                path=field_path,
                return_type=print_type_ref(field.type),
                args=_flat_arguments(field.args),
            ))
            for arg_name, arg in field.args.items():
                elements.append(SearchableElement(
                    element_type=ElementType.ARGUMENT,
                    name=arg_name,
                    parent_type=field_path,
                    description=arg.description or None,
                    path=f"{field_path}({arg_name})",
                ))

    for directive in schema.directives:
        directive_path = f"@{directive.name}"
        elements.append(SearchableElement(
            element_type=ElementType.DIRECTIVE,
            name=directive.name,
            description=directive.description or None,
            path=directive_path,
        ))
        for arg_name, arg in directive.args.items():
            elements.append(SearchableElement(
                element_type=ElementType.ARGUMENT,
                name=arg_name,
                parent_type=directive_path,
                description=arg.description or None,
                path=f"{directive_path}({arg_name})",
            ))

    logger.debug("Collected %d searchable elements", len(elements))
    return elements
