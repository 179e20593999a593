import pytest
from graphql import (
    GraphQLField,
    GraphQLID,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLString,
    build_schema,
)

from schema_scout.search import (
    ArgumentInfo,
    ElementType,
    TypeKind,
    collect_searchable_elements,
)

pytestmark = pytest.mark.unit


@pytest.fixture
def user_schema():
    user = GraphQLObjectType(
        "User",
        {
            "id": GraphQLField(GraphQLNonNull(GraphQLID)),
            "name": GraphQLField(GraphQLString),
        },
    )
    return GraphQLSchema(types=[user], directives=[])


def _paths(elements):
    return [element.path for element in elements]


def test_single_object_type_records(user_schema):
    elements = collect_searchable_elements(user_schema)
    user_records = [e for e in elements if e.path.split(".")[0] == "User"]

    assert [(e.element_type, e.path) for e in user_records] == [
        (ElementType.TYPE, "User"),
        (ElementType.FIELD, "User.id"),
        (ElementType.FIELD, "User.name"),
    ]
    user_type, id_field, name_field = user_records
    assert user_type.type_kind is TypeKind.OBJECT
    assert user_type.parent_type is None
    assert id_field.return_type == "ID!"
    assert id_field.parent_type == "User"
    assert id_field.args == ()
    assert name_field.return_type == "String"
    assert not any(e.element_type is ElementType.DIRECTIVE for e in elements)


def test_meta_types_are_skipped(library_schema):
    assert "__Schema" in library_schema.type_map
    elements = collect_searchable_elements(library_schema)

    assert elements
    assert not any(e.path.startswith("__") for e in elements)
    assert not any((e.parent_type or "").startswith("__") for e in elements)


def test_type_followed_by_fields_and_their_arguments(library_schema):
    elements = collect_searchable_elements(library_schema)
    paths = _paths(elements)
    start = paths.index("User")

    assert paths[start:start + 6] == [
        "User",
        "User.id",
        "User.name",
        "User.loans",
        "User.loans(first)",
        "User.loans(active)",
    ]


def test_field_record_carries_return_type_and_arguments(library_schema):
    elements = {e.path: e for e in collect_searchable_elements(library_schema)}

    loans = elements["User.loans"]
    assert loans.element_type is ElementType.FIELD
    assert loans.return_type == "[Loan!]!"
    assert loans.description == "Books borrowed by the user"
    assert loans.args == (
        ArgumentInfo(name="first", type="Int"),
        ArgumentInfo(name="active", type="Boolean", description="Only active loans"),
    )

    active = elements["User.loans(active)"]
    assert active.element_type is ElementType.ARGUMENT
    assert active.parent_type == "User.loans"
    assert active.description == "Only active loans"


def test_interface_fields_are_collected(library_schema):
    elements = {e.path: e for e in collect_searchable_elements(library_schema)}

    assert elements["Node"].type_kind is TypeKind.INTERFACE
    assert elements["Node.id"].return_type == "ID!"


def test_input_fields_have_no_return_type_or_args(library_schema):
    elements = {e.path: e for e in collect_searchable_elements(library_schema)}

    assert elements["UserInput"].type_kind is TypeKind.INPUT_OBJECT
    name = elements["UserInput.name"]
    assert name.element_type is ElementType.FIELD
    assert name.parent_type == "UserInput"
    assert name.return_type is None
    assert name.args is None
    assert name.to_dict() == {
        "elementType": "field",
        "name": "name",
        "parentType": "UserInput",
        "description": "Display name",
        "path": "UserInput.name",
    }


def test_union_enum_and_scalar_contribute_only_type_records(library_schema):
    paths = _paths(collect_searchable_elements(library_schema))

    for type_name in ("SearchResult", "BookStatus", "DateTime"):
        assert type_name in paths
        assert not any(path.startswith(f"{type_name}.") for path in paths)


def test_directives_come_last_with_their_arguments(library_schema):
    elements = collect_searchable_elements(library_schema)
    paths = _paths(elements)
    first_directive = next(i for i, e in enumerate(elements) if e.element_type is ElementType.DIRECTIVE)

    assert all(e.element_type in (ElementType.DIRECTIVE, ElementType.ARGUMENT) for e in elements[first_directive:])
    cached = paths.index("@cached")
    assert paths[cached + 1] == "@cached(ttl)"
    deprecated = paths.index("@deprecated")
    assert paths[deprecated + 1] == "@deprecated(reason)"

    directive = elements[cached]
    assert directive.parent_type is None
    assert directive.args is None
    assert directive.description == "Caches the resolved value of a field."
    assert elements[cached + 1].parent_type == "@cached"
    assert elements[cached + 1].description == "Seconds to keep the value"


def test_missing_descriptions_are_omitted(library_schema):
    elements = {e.path: e for e in collect_searchable_elements(library_schema)}

    loan = elements["Loan"]
    assert loan.description is None
    assert loan.to_dict() == {
        "elementType": "type",
        "name": "Loan",
        "path": "Loan",
        "typeKind": "OBJECT",
    }
    assert elements["User.loans"].to_dict()["args"] == [
        {"name": "first", "type": "Int"},
        {"name": "active", "type": "Boolean", "description": "Only active loans"},
    ]


def test_paths_are_unique(library_schema):
    paths = _paths(collect_searchable_elements(library_schema))
    assert len(paths) == len(set(paths))


def test_collecting_twice_is_idempotent(library_schema):
    assert collect_searchable_elements(library_schema) == collect_searchable_elements(library_schema)


def test_empty_argument_descriptions_are_omitted_from_field_args():
    schema = build_schema('type Query { lookup("" key: Int): Int }')
    elements = {e.path: e for e in collect_searchable_elements(schema)}

    assert elements["Query.lookup"].args == (ArgumentInfo(name="key", type="Int"),)
    assert elements["Query.lookup"].to_dict()["args"] == [{"name": "key", "type": "Int"}]
    assert "description" not in elements["Query.lookup(key)"].to_dict()
