"""
Schema Utilities
----------------
"""

import logging
import pathlib
import typing

from graphql import (
    DocumentNode,
    GraphQLSchema,
    build_ast_schema,
    concat_ast,
    parse,
    validate_schema,
)

from .errors import SchemaValidationError

LOG = logging.getLogger(__name__)

SCHEMA_PATH = pathlib.Path(__file__).parent / "schema.graphql"


def maybe_parse(type_def: typing.Union[str, DocumentNode]) -> DocumentNode:
    if isinstance(type_def, str):
        return parse(type_def)
    return type_def


def concat_documents(
    type_defs: typing.Iterable[typing.Union[str, DocumentNode]],
) -> DocumentNode:
    document_list = [maybe_parse(type_def) for type_def in type_defs]

    return concat_ast(document_list)


def build_schema(
    type_defs: typing.Iterable[typing.Union[str, DocumentNode]],
) -> GraphQLSchema:
    """
    Build Schema

    Combine one or more schema documents and build the executable schema.
    Types may be split across files and joined with `extend`::

        type User {
            id: ID!
        }

        type Query {
            getUser(id: ID!): User
        }

    And in another file::

        extend type Query {
            listUsers(limit: Int): [User!]!
        }

    :param type_defs: list of schema strings or document nodes
    :raises SchemaValidationError: when the combined schema is not valid
    """
    ast_document = concat_documents(type_defs)

    try:
        schema = build_ast_schema(ast_document)
    except TypeError as err:
        raise SchemaValidationError(f"Invalid schema: {err}") from err

    if errors := validate_schema(schema):
        messages = ", ".join(error.message for error in errors)
        raise SchemaValidationError(f"Invalid schema: {messages}")

    return schema


def load_schema(
    directory: typing.Union[str, pathlib.Path] = SCHEMA_PATH,
) -> typing.List[DocumentNode]:
    """
    Load Schema

    This utility will load schema from a directory or a single pathlib.Path,
    by default it loads the schema shipped with this package.

    :param directory: Directory or file to load schema from
    """
    if isinstance(directory, str):
        LOG.debug(f"Converting str {directory} to path object")
        directory = pathlib.Path(directory)

    if directory.is_file():
        LOG.debug(f"loading schema from file: {directory}")
        with open(directory.absolute()) as graphfile:
            return [parse(graphfile.read())]

    def find_graphql_files():
        LOG.debug(f"Checking for graphql files to load in: '{directory}'")
        for graph in sorted(directory.glob("**/*.graphql")):
            LOG.debug(f"loading discovered file: {graph}")
            with open(graph) as graphfile:
                yield graphfile.read()

    return [parse(schema) for schema in find_graphql_files()]
