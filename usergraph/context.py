"""
Context is how resolvers reach shared state. When a request comes in the API
creates a context instance holding the request, the settings and the user
store the API was built with. This is added to the GraphQLResolveInfo object
which is passed as the second argument to resolvers.

Example Resolver::

    def get_user(source, info: ResolveInfo[Context], id: str):
        return fetch_user(info.context.users, GetUserArgs(id=id))

Context Reference
-----------------
"""

import typing

from graphql import GraphQLResolveInfo
from starlette.datastructures import State
from starlette.requests import Request

from .store import UserStore

C = typing.TypeVar("C")
Settings = typing.TypeVar("Settings")


class ResolveInfo(typing.Generic[C], GraphQLResolveInfo):
    """
    This class is strictly to help with type checking. Use it as the `info`
    argument of a resolver so `info.context` has the right type::

        def list_users(
            source: typing.Any,
            info: ResolveInfo[Context],
            limit: typing.Optional[int] = None,
        ) -> typing.List[User]:
            return list_users(info.context.users, ListUsersArgs(limit=limit))
    """

    context: C


def make_request(state: typing.Any = None) -> Request:
    """Generate a fake request to statisfy the contract."""
    return Request(scope={"type": "http", "headers": [], "state": state or {}})


class Context(typing.Generic[Settings]):
    """Default Context

    Subclasses may override `init` to attach anything else resolvers need.
    """

    request: Request
    config: Settings
    users: UserStore

    def __init__(
        self,
        *,
        users: UserStore,
        request: typing.Optional[Request] = None,
        config: typing.Optional[Settings] = None,
        **kwargs,
    ):
        self.users = users
        self.request = self.handle_request(request)
        self.config = self.handle_config(config)
        self.handle_kwargs(**kwargs)
        self.init()

    def init(self):
        """Hook for subclasses to initialize an instance of Context."""
        pass

    def handle_kwargs(self, **kwargs) -> None:
        """Hook for subclasses to setup any extra arguments."""
        for key, value in kwargs.items():
            setattr(self, key, value)

    def handle_config(self, config: typing.Optional[Settings] = None) -> Settings:
        """Hook for subclasses to handle configuration setup."""
        return config or typing.cast(Settings, State())

    def handle_request(self, request: typing.Optional[Request] = None) -> Request:
        """Hook for subsclasses to handle request setup."""
        return request or make_request()
