from .api import Resolver, UserGraphAPI
from .context import Context, ResolveInfo
from .errors import format_errors, SchemaValidationError
from .schema import build_schema, concat_documents, load_schema
from .store import DuplicateUserError, User, UserStore

__all__ = [
    "Context",
    "DuplicateUserError",
    "ResolveInfo",
    "Resolver",
    "SchemaValidationError",
    "User",
    "UserGraphAPI",
    "UserStore",
    "build_schema",
    "concat_documents",
    "format_errors",
    "load_schema",
]

__VERSION__ = "0.1.0"
