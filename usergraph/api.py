"""
Using the API
=============

The API ties the schema, the resolvers and the user store together and
executes queries against them::

    from usergraph import UserGraphAPI, UserStore, load_schema
    from usergraph.resolvers import users

    api = UserGraphAPI(schema=load_schema(), store=UserStore.default())
    api.include_resolver(users)

    results = await api.call("query { listUsers(limit: 1) { id name } }")

Queries are parsed and validated before any resolver runs, errors from either
step are returned on the `ExecutionResult` rather than raised.
"""

import asyncio
import collections
import functools
import inspect
import logging
import typing

from graphql import (
    DocumentNode,
    ExecutionResult,
    GraphQLError,
    GraphQLField,
    GraphQLFieldMap,
    GraphQLObjectType,
    GraphQLSchema,
    execute,
    is_object_type,
    parse,
    validate,
)

from .context import Context
from .errors import SchemaValidationError
from .schema import build_schema, maybe_parse
from .store import UserStore

LOG = logging.getLogger(__name__)

SchemaSource = typing.Union[
    str,
    DocumentNode,
    typing.Sequence[typing.Union[str, DocumentNode]],
]


class ParseResults(typing.NamedTuple):
    document_ast: DocumentNode
    errors: typing.List[GraphQLError] = []


class Resolver:
    """
    Collects resolvers in a module so they can be registered on the API
    later. This keeps the resolver modules free of any reference to the
    API instance::

        users = Resolver()

        @users.query("getUser")
        def resolve_get_user(source, info, id):
            return fetch_user(info.context.users, GetUserArgs(id=id))

    Then include the resolver in the API::

        api = UserGraphAPI(schema=load_schema())
        api.include_resolver(users)
    """

    registry: typing.Dict[str, dict]

    def __init__(self):
        self.registry = collections.defaultdict(dict)

    def query(self, field_name: typing.Optional[str] = None) -> typing.Any:
        """Query Resolver

        Short cut to add a resolver for a query, by default it will use the
        name of the function as the `field_name` to be resolved.

        :param field_name: Field name to resolve, by default the function name will be used.
        """
        return self.resolver("Query", field_name)

    def resolver(
        self, type_name: str, field_name: typing.Optional[str] = None
    ) -> typing.Any:
        """Field Resolver

        :param type_name: Parent object type name that is being resolved.
        :param field_name: Field name to resolve, by default the function name will be used.
        """

        def decorator(function):
            _name = field_name or function.__name__
            self.registry[type_name][_name] = function
            return function

        return decorator


class UserGraphAPI:
    """
    Entry point for executing queries::

        api = UserGraphAPI(schema='''
            type User { id: ID! name: String! email: String! age: Int }
            type Query { getUser(id: ID!): User }
        ''')

        @api.query("getUser")
        def get_user(source, info, id):
            return fetch_user(info.context.users, GetUserArgs(id=id))

    :param schema: GraphQL schema as a str, document or a list of either.
    :param store: User store made available to resolvers as `info.context.users`.
    :param context: Context class to hold shared state, added to GraphQLResolveInfo object.
    :param config: Settings object added to the context.
    :param middleware: List of middleware to enable.
    :param logger: Logger used when formatting errors.
    :param level: Log level used when formatting errors.
    """

    _schema: SchemaSource

    def __init__(
        self,
        schema: SchemaSource,
        store: typing.Optional[UserStore] = None,
        context: typing.Optional[typing.Type[Context]] = None,
        config: typing.Optional[typing.Any] = None,
        middleware: typing.Optional[typing.List[typing.Any]] = None,
        logger: typing.Optional[logging.Logger] = None,
        level: int = logging.DEBUG,
    ):
        self._schema = schema
        self.store = store if store is not None else UserStore.default()
        self._context = context or Context
        self.config = config
        self.middleware = middleware or []
        self.logger = logger or LOG
        self.level = level
        self.schema = self._build_schema()

    def query(self, field_name: typing.Optional[str] = None) -> typing.Any:
        """Query Resolver

        Short cut to add a resolver for a query, by default it will use the
        name of the function as the `field_name` to be resolved::

            @api.query()
            def listUsers(source, info, limit=None):
                return list_users(info.context.users, ListUsersArgs(limit=limit))

        :param field_name: Field name to resolve, by default the function name will be used.
        """
        return self.resolver("Query", field_name)

    def resolver(
        self, type_name: str, field_name: typing.Optional[str] = None
    ) -> typing.Any:
        """Field Resolver

        :param type_name: Parent object type name that is being resolved.
        :param field_name: Field name to resolve, by default the function name will be used.
        :raises SchemaValidationError: when the type or field is not in the schema.
        """

        def decorator(function):
            _name = field_name or function.__name__
            field_def = self._validate_field(type_name=type_name, field_name=_name)
            field_def.resolve = function
            return function

        return decorator

    def include_resolver(self, resolver: Resolver):
        """Include a set of resolvers collected with `Resolver`."""
        for type_name, value in resolver.registry.items():
            for field_name, resolve_fn in value.items():
                LOG.debug(f"Registering resolver for {type_name}.{field_name}")
                field_def = self._validate_field(type_name, field_name)
                field_def.resolve = resolve_fn

    def _find_schema(self) -> typing.List[DocumentNode]:
        if isinstance(self._schema, (str, DocumentNode)):
            return [maybe_parse(self._schema)]
        return [maybe_parse(type_def) for type_def in self._schema]

    def _build_schema(self) -> GraphQLSchema:
        return build_schema(self._find_schema())

    def _validate_field(self, type_name: str, field_name: str) -> GraphQLField:
        object_type = self.schema.get_type(type_name)
        if object_type is None or not is_object_type(object_type):
            raise SchemaValidationError(
                f"Invalid type '{type_name}' in resolver decorator"
            )

        # Need to cast this to object_type to satisfy mypy checks
        object_type = typing.cast(GraphQLObjectType, object_type)
        field_map = typing.cast(GraphQLFieldMap, object_type.fields)
        field_definition = field_map.get(field_name)
        if not field_definition:
            raise SchemaValidationError(
                f"Invalid field '{type_name}.{field_name}' in resolver decorator"
            )

        return field_definition

    def get_context(self, request: typing.Any = None) -> Context:
        return self._context(users=self.store, request=request, config=self.config)

    @functools.lru_cache(maxsize=128)
    def _validate(self, document: DocumentNode) -> typing.List[GraphQLError]:
        """Validate the document against the schema and store results in lru_cache."""
        return validate(self.schema, document)

    @functools.lru_cache(maxsize=128)
    def _parse_document(self, document: str) -> ParseResults:
        """Parse and store the document in lru_cache."""
        try:
            document_ast = parse(document)
            return ParseResults(document_ast, [])
        except GraphQLError as err:
            return ParseResults(DocumentNode(), [err])

    async def call(
        self,
        document: typing.Union[DocumentNode, str],
        request: typing.Any = None,
        variables: typing.Optional[typing.Dict[str, typing.Any]] = None,
        operation_name: typing.Optional[str] = None,
    ) -> ExecutionResult:
        """Preform a query against the schema.

        This is meant to be called in an asyncio.loop, if you are using a
        web framework that is synchronous use the `call_sync` method.
        """
        if isinstance(document, str):
            document, errors = self._parse_document(document)
            if errors:
                return ExecutionResult(data=None, errors=errors)

        if validation_errors := self._validate(document):
            return ExecutionResult(data=None, errors=validation_errors)

        context = self.get_context(request)
        result = execute(
            schema=self.schema,
            document=document,
            context_value=context,
            variable_values=variables,
            operation_name=operation_name,
            middleware=self.middleware,
        )
        if inspect.isawaitable(result):
            return await result
        return typing.cast(ExecutionResult, result)

    def call_sync(
        self,
        document: typing.Union[DocumentNode, str],
        request: typing.Optional[typing.Any] = None,
        variables: typing.Optional[typing.Dict[str, typing.Any]] = None,
        operation_name: typing.Optional[str] = None,
    ) -> ExecutionResult:
        return asyncio.run(self.call(document, request, variables, operation_name))
