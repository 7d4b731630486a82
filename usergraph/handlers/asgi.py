import json
import logging
import typing

import fastapi
import pydantic
from fastapi.responses import JSONResponse

from usergraph.api import UserGraphAPI
from usergraph.errors import format_errors

logger = logging.getLogger(__name__)


class GraphQLPayload(pydantic.BaseModel):
    """Model representing a GraphQL request body."""

    query: str
    variables: typing.Optional[typing.Dict[str, typing.Any]] = None
    operationName: typing.Optional[str] = None


class ExecutionResponse(pydantic.BaseModel):
    data: typing.Optional[typing.Dict[str, typing.Any]] = None
    errors: typing.Optional[list] = None
    extensions: typing.Optional[typing.Dict[str, typing.Any]] = None


class GraphQLExec(typing.Protocol):
    async def __call__(self) -> ExecutionResponse: ...


def error_response(message: str, status_code: int = 400) -> JSONResponse:
    return JSONResponse({"errors": [{"message": message}]}, status_code=status_code)


async def execute_payload(
    graph: UserGraphAPI,
    payload: GraphQLPayload,
    request: typing.Optional[fastapi.Request] = None,
) -> ExecutionResponse:
    results = await graph.call(
        document=payload.query,
        variables=payload.variables,
        operation_name=payload.operationName,
        request=request,
    )

    return ExecutionResponse(
        data=results.data,
        errors=format_errors(
            results.errors,
            logger=graph.logger,
            level=graph.level,
        ),
        extensions=results.extensions,
    )


class GraphQLDepends:
    """
    FastAPI Dependency to handle GraphQL POST requests.

    Example::

        app = FastAPI()
        graph = create_api()

        @app.post("/graphql")
        async def _root(
            graph_call: typing.Annotated[
                GraphQLExec,
                Depends(GraphQLDepends(graph)),
            ]
        ) -> ExecutionResponse:
            return await graph_call()
    """

    graph: UserGraphAPI

    def __init__(self, graph: UserGraphAPI) -> None:
        self.graph = graph

    async def __call__(
        self, request: fastapi.Request, payload: GraphQLPayload
    ) -> GraphQLExec:

        async def _call_graph() -> ExecutionResponse:
            return await execute_payload(self.graph, payload, request)

        return _call_graph


def graphql_router(graph: UserGraphAPI, path: str = "/graphql") -> fastapi.APIRouter:
    """Return a router serving the GraphQL endpoint over POST and GET.

    GET requests take the `query`, `variables` and `operationName` from the
    query string, `variables` must be a JSON encoded object.
    """
    router = fastapi.APIRouter()

    @router.post(path)
    async def graphql_post(
        graph_call: typing.Annotated[
            GraphQLExec,
            fastapi.Depends(GraphQLDepends(graph)),
        ]
    ) -> ExecutionResponse:
        return await graph_call()

    @router.get(path, response_model=ExecutionResponse)
    async def graphql_get(
        request: fastapi.Request,
        query: typing.Optional[str] = None,
        variables: typing.Optional[str] = None,
        operationName: typing.Optional[str] = None,
    ) -> typing.Any:
        if not query:
            return error_response("No GraphQL query found in the request")

        parsed_variables: typing.Optional[typing.Dict[str, typing.Any]] = None
        if variables:
            try:
                parsed_variables = json.loads(variables)
            except json.JSONDecodeError:
                logger.debug(f"Invalid variables in request: {variables!r}")
                return error_response("Invalid variables format")

            if not isinstance(parsed_variables, dict):
                return error_response("Invalid variables format")

        payload = GraphQLPayload(
            query=query,
            variables=parsed_variables,
            operationName=operationName,
        )
        return await execute_payload(graph, payload, request)

    return router
