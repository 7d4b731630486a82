"""
Record Store
------------

The store holds the canonical list of user records for the lifetime of the
process. It is built once at startup and handed to the API, which passes it
along to resolvers on the context object::

    from usergraph.store import User, UserStore

    store = UserStore([
        User(id="1", name="Laion", email="laion@example.com", age=30),
    ])

    api = UserGraphAPI(schema=SCHEMA, store=store)

Records are never added, changed or removed after the store is created.
"""

import dataclasses
import logging
import typing

LOG = logging.getLogger(__name__)

DEFAULT_USERS: typing.List[typing.Dict[str, typing.Any]] = [
    {
        "id": "1",
        "name": "Laion",
        "email": "laion@example.com",
        "age": 30,
    },
    {
        "id": "2",
        "name": "John Doe",
        "email": "john@example.com",
        "age": 25,
    },
]


class DuplicateUserError(ValueError):
    """Raised when two records in a store share the same id."""

    pass


@dataclasses.dataclass(frozen=True)
class User:
    id: str
    name: str
    email: str
    age: typing.Optional[int] = None

    @classmethod
    def from_dict(cls, data: typing.Mapping[str, typing.Any]) -> "User":
        return cls(
            id=data["id"],
            name=data["name"],
            email=data["email"],
            age=data.get("age"),
        )


class UserStore:
    """Read only, ordered collection of `User` records.

    :param records: Users or mappings of user attributes, order is preserved.
    """

    _records: typing.Tuple[User, ...]

    def __init__(
        self,
        records: typing.Iterable[typing.Union[User, typing.Mapping[str, typing.Any]]],
    ):
        users = tuple(
            record if isinstance(record, User) else User.from_dict(record)
            for record in records
        )

        seen: typing.Set[str] = set()
        for user in users:
            if user.id in seen:
                raise DuplicateUserError(f"Duplicate user id '{user.id}' in store")
            seen.add(user.id)

        self._records = users
        LOG.debug(f"Loaded {len(users)} user records")

    @classmethod
    def default(cls) -> "UserStore":
        return cls(DEFAULT_USERS)

    def all_records(self) -> typing.Tuple[User, ...]:
        return self._records

    def __iter__(self) -> typing.Iterator[User]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"<UserStore records={len(self._records)}>"
