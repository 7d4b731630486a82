import dataclasses
import logging
import typing

import httpx
import pytest
from fastapi import FastAPI

from usergraph import UserGraphAPI, UserStore
from usergraph.app import create_api, create_app
from usergraph.config import Config

LOG = logging.getLogger("usergraph.tests")


logging.basicConfig(level=logging.DEBUG)


def pytest_runtest_setup(item):
    LOG.info("=======================================================")
    LOG.info(f"Running test: {item.name}")
    LOG.info("=======================================================")


LAION = {
    "id": "1",
    "name": "Laion",
    "email": "laion@example.com",
    "age": 30,
}
JOHN = {
    "id": "2",
    "name": "John Doe",
    "email": "john@example.com",
    "age": 25,
}


@pytest.fixture
def store() -> UserStore:
    return UserStore([LAION, JOHN])


@pytest.fixture
def test_config() -> Config:
    config = Config()
    config.debug = False
    config.graphql_path = "/graphql"
    return config


@pytest.fixture
def api(store: UserStore, test_config: Config) -> UserGraphAPI:
    return create_api(store=store, config=test_config)


@pytest.fixture
def app(api: UserGraphAPI, test_config: Config) -> FastAPI:
    return create_app(api=api, config=test_config)


@pytest.fixture
def client(app: FastAPI) -> httpx.AsyncClient:
    transport = httpx.ASGITransport(app=app)
    return httpx.AsyncClient(base_url="http://testclient", transport=transport)


@dataclasses.dataclass
class GraphResponse:
    data: typing.Any = None
    errors: typing.Optional[typing.List[typing.Any]] = None
    extensions: typing.Any = None


class GraphClient(typing.Protocol):
    def __call__(
        self, query: str, **variables: typing.Any
    ) -> typing.Awaitable[GraphResponse]: ...


@pytest.fixture
def graphql_client(client: httpx.AsyncClient) -> GraphClient:
    async def _client(query: str, **variables) -> GraphResponse:
        resp = await client.post(
            "/graphql",
            json={"query": query, "variables": variables},
        )
        assert resp.status_code == 200, resp.text
        return GraphResponse(**resp.json())

    return _client
