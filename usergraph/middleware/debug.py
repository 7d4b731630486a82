"""
Debug Middleware
================

Use this middleware to log the user queries being run and what they return.

By default this will use logging.debug with the `usergraph.middleware.debug`
logger. You can override that when you setup the middleware::

    from usergraph import UserGraphAPI
    from usergraph.middleware import DebugMiddleware

    api = UserGraphAPI(
        schema=load_schema(),
        middleware=[
            DebugMiddleware(),
        ],
    )

"""

import inspect
import logging
import time
import typing

from graphql import GraphQLResolveInfo

from usergraph.store import User


def describe(results: typing.Any) -> str:
    """Short summary of a resolved value for the log line."""
    if results is None:
        return "no user"
    if isinstance(results, User):
        return f"user '{results.id}'"
    if isinstance(results, (list, tuple)):
        count = len(results)
        return f"{count} user" if count == 1 else f"{count} users"
    return repr(results)


class DebugMiddleware:
    """Log each query operation with its arguments, result and timing.

    Only fields on the `Query` root are logged, the fields of the returned
    users are passed straight through.
    """

    def __init__(self, logger: typing.Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("usergraph.middleware.debug")

    async def resolve(
        self,
        next_fn: typing.Callable[..., typing.Any],
        parent_object: typing.Any,
        info: GraphQLResolveInfo,
        **kwargs,
    ):
        if info.parent_type.name != "Query":
            results = next_fn(parent_object, info, **kwargs)
            if inspect.isawaitable(results):
                results = await results
            return results

        arguments = ", ".join(f"{key}={value!r}" for key, value in kwargs.items())
        operation = f"{info.field_name}({arguments})"
        self.logger.debug(f"Running {operation}")

        start_time = time.perf_counter()
        results = next_fn(parent_object, info, **kwargs)
        if inspect.isawaitable(results):
            results = await results
        total_time = time.perf_counter() - start_time

        self.logger.debug(
            f"{operation} returned {describe(results)} in {total_time:.6f} seconds"
        )
        return results
