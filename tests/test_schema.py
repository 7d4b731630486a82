import pathlib

import pytest
from graphql import GraphQLError, print_schema

from usergraph import SchemaValidationError, build_schema, concat_documents, load_schema
from usergraph.schema import SCHEMA_PATH


def test_packaged_schema():
    schema = build_schema(load_schema())
    user_type = schema.get_type("User")
    assert user_type is not None
    assert set(user_type.fields) == {"id", "name", "email", "age"}
    assert str(user_type.fields["id"].type) == "ID!"
    assert str(user_type.fields["age"].type) == "Int"

    get_user = schema.query_type.fields["getUser"]
    assert str(get_user.type) == "User"
    assert str(get_user.args["id"].type) == "ID!"

    list_users = schema.query_type.fields["listUsers"]
    assert str(list_users.type) == "[User!]!"
    assert str(list_users.args["limit"].type) == "Int"


def test_packaged_schema_is_read_only():
    schema = build_schema(load_schema())
    assert schema.mutation_type is None
    assert schema.subscription_type is None


def test_load_schema_from_str_path():
    documents = load_schema(str(SCHEMA_PATH))
    assert len(documents) == 1


def test_load_schema_from_directory(tmp_path: pathlib.Path):
    (tmp_path / "user.graphql").write_text("type User { id: ID! }")
    nested = tmp_path / "queries"
    nested.mkdir()
    (nested / "query.graphql").write_text("type Query { getUser(id: ID!): User }")
    (tmp_path / "notes.txt").write_text("not a schema")

    documents = load_schema(tmp_path)
    assert len(documents) == 2

    schema = build_schema(documents)
    assert "getUser" in schema.query_type.fields


def test_build_schema_with_extensions():
    schema = build_schema(
        [
            "type User { id: ID! } type Query { getUser(id: ID!): User }",
            "extend type Query { listUsers(limit: Int): [User!]! }",
        ]
    )
    assert set(schema.query_type.fields) == {"getUser", "listUsers"}


def test_concat_documents():
    document = concat_documents(["type A { a: String }", "type B { b: String }"])
    assert len(document.definitions) == 2


def test_invalid_schema_syntax():
    with pytest.raises(GraphQLError, match="Syntax Error: Expected Name, found <EOF>."):
        build_schema(["type Foo {"])


def test_invalid_schema_unknown_type():
    with pytest.raises(SchemaValidationError, match="Unknown type 'Bar'."):
        build_schema(["type Foo { name: Bar } type Query { foo: Foo }"])


def test_invalid_schema_without_query():
    with pytest.raises(SchemaValidationError, match="Query root type must be provided."):
        build_schema(["type Foo { name: String }"])


def test_schema_round_trip():
    printed = print_schema(build_schema(load_schema()))
    assert "getUser(id: ID!): User" in printed
    assert "listUsers(limit: Int): [User!]!" in printed
