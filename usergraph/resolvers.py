"""
Query Resolvers
---------------

The data fetching functions take the store and a typed argument object so
they can be used and tested without going through GraphQL. The field
resolvers registered on `users` unpack the GraphQL arguments into those
objects and read the store from the request context.
"""

import dataclasses
import logging
import typing

from .api import Resolver
from .context import Context, ResolveInfo
from .store import User, UserStore

LOG = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class GetUserArgs:
    id: str


@dataclasses.dataclass(frozen=True)
class ListUsersArgs:
    limit: typing.Optional[int] = None


def fetch_user(store: UserStore, args: GetUserArgs) -> typing.Optional[User]:
    """Return the first user whose id is exactly `args.id`, or None."""
    for user in store.all_records():
        if user.id == args.id:
            return user
    return None


def list_users(store: UserStore, args: ListUsersArgs) -> typing.List[User]:
    """Return the first `args.limit` users in store order.

    No limit returns every user, a limit of zero or less returns an empty
    list and a limit past the end returns the whole collection.
    """
    records = store.all_records()
    if args.limit is None:
        return list(records)
    return list(records[: max(args.limit, 0)])


users = Resolver()


@users.query("getUser")
def resolve_get_user(
    source: typing.Any,
    info: ResolveInfo[Context],
    id: str,
) -> typing.Optional[User]:
    user = fetch_user(info.context.users, GetUserArgs(id=id))
    if user is None:
        LOG.debug(f"No user found with id '{id}'")
    return user


@users.query("listUsers")
def resolve_list_users(
    source: typing.Any,
    info: ResolveInfo[Context],
    limit: typing.Optional[int] = None,
) -> typing.List[User]:
    return list_users(info.context.users, ListUsersArgs(limit=limit))
