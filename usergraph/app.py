import logging
import typing
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .api import UserGraphAPI
from .config import Config, config as default_config
from .handlers.asgi import graphql_router
from .middleware import DebugMiddleware
from .resolvers import users
from .schema import load_schema
from .store import UserStore

LOG = logging.getLogger(__name__)


def create_api(
    store: typing.Optional[UserStore] = None,
    config: typing.Optional[Config] = None,
) -> UserGraphAPI:
    """Build the API with the packaged schema and the user resolvers."""
    config = config or default_config
    middleware = [DebugMiddleware()] if config.debug else []
    api: UserGraphAPI = UserGraphAPI(
        schema=load_schema(),
        store=store,
        config=config,
        middleware=middleware,
    )
    api.include_resolver(users)
    return api


def create_app(
    api: typing.Optional[UserGraphAPI] = None,
    config: typing.Optional[Config] = None,
) -> FastAPI:
    config = config or default_config
    api = api or create_api(config=config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        LOG.info(
            f"Server ready at: http://{config.host}:{config.port}{config.graphql_path}"
        )
        yield
        LOG.info("Server shutting down")

    app = FastAPI(debug=config.debug, lifespan=lifespan)
    app.state.graph = api
    app.include_router(graphql_router(api, path=config.graphql_path))
    return app
