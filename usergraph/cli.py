import argparse
import json
import logging
import sys

import uvicorn

from usergraph.app import create_api, create_app
from usergraph.config import config
from usergraph.errors import format_errors

LOG = logging.getLogger(__name__)

# create the top-level parser for global options
parser = argparse.ArgumentParser(
    prog="usergraph",
    description="Serve or query the user directory GraphQL API.",
)
parser.add_argument(
    "--debug",
    "-d",
    action="store_true",
    help="Display debug information and log every resolved field.",
)

# Sub Commands parser
subparsers = parser.add_subparsers(dest="command")  # type: ignore

# create the parser for the "serve" command
serve_parser = subparsers.add_parser(
    "serve",
    help="Run the GraphQL server.",
)
serve_parser.add_argument(
    "--host",
    help="Interface to bind the server to.",
    default=None,
)
serve_parser.add_argument(
    "--port",
    help="Port to listen on.",
    type=int,
    default=None,
)

# create the parser for the "query" command
query_parser = subparsers.add_parser(
    "query",
    help="Run a single query against the in memory store and print the result.",
)
query_parser.add_argument(
    "document",
    help="GraphQL query document.",
)
query_parser.add_argument(
    "--variables",
    help="JSON encoded object of query variables.",
    default=None,
)
query_parser.add_argument(
    "--operation-name",
    "--operation_name",
    help="Name of the operation to run when the document has several.",
    default=None,
)


def run_serve(host: str, port: int):
    app = create_app(config=config)
    log_level = logging.getLevelName(config.logging_level).lower()
    uvicorn.run(app, host=host, port=port, log_level=log_level)


def parse_variables(variables: str | None) -> dict | None:
    if not variables:
        return None

    try:
        parsed = json.loads(variables)
    except json.JSONDecodeError:
        LOG.debug(f"Invalid variables: {variables!r}")
        raise ValueError("Invalid variables format") from None

    if not isinstance(parsed, dict):
        raise ValueError("Invalid variables format")
    return parsed


def run_query(document: str, variables: str | None, operation_name: str | None) -> int:
    try:
        parsed_variables = parse_variables(variables)
    except ValueError as err:
        print(json.dumps({"data": None, "errors": [{"message": str(err)}]}, indent=2))
        return 1

    api = create_api(config=config)
    results = api.call_sync(
        document,
        variables=parsed_variables,
        operation_name=operation_name,
    )
    response = {
        "data": results.data,
        "errors": format_errors(results.errors, logger=api.logger, level=api.level),
    }
    print(json.dumps(response, indent=2))
    return 1 if results.errors else 0


def main():
    argv = sys.argv[1:] or ["--help"]
    options = parser.parse_args(argv)
    if not options.command:
        parser.print_help()
        return

    if options.debug:
        config.debug = True

    logging.basicConfig(level=config.logging_level)

    if options.command == "serve":
        run_serve(
            host=options.host or config.host,
            port=options.port or config.port,
        )
    elif options.command == "query":
        sys.exit(
            run_query(
                document=options.document,
                variables=options.variables,
                operation_name=options.operation_name,
            )
        )
