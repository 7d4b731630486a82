import logging
from unittest import mock

from graphql import GraphQLError

from usergraph.errors import format_errors


def test_format_errors_empty():
    assert format_errors(None) is None
    assert format_errors([]) is None


def test_format_errors_logs_message():
    logger = mock.Mock(spec=logging.Logger)
    error = GraphQLError("Cannot query field 'invalidQuery' on type 'Query'.")

    formatted = format_errors([error], logger=logger, level=logging.INFO)

    assert formatted == [
        {"message": "Cannot query field 'invalidQuery' on type 'Query'."},
    ]
    logger.log.assert_called_once_with(
        logging.INFO, "Cannot query field 'invalidQuery' on type 'Query'."
    )


def test_format_errors_logs_context_of_raised_errors():
    logger = mock.Mock(spec=logging.Logger)

    def broken():
        secret_value = "find me"  # noqa: F841
        raise GraphQLError("something failed")

    try:
        broken()
    except GraphQLError as err:
        error = err

    formatted = format_errors([error], logger=logger)

    assert formatted == [{"message": "something failed"}]
    level, message = logger.log.call_args.args
    assert level == logging.DEBUG
    assert "something failed" in message
    assert "find me" in message


async def test_resolver_errors_are_returned(api, mocker):
    mocker.patch(
        "usergraph.resolvers.list_users", side_effect=RuntimeError("store offline")
    )
    results = await api.call("query { listUsers { id } }")
    assert results.data is None
    assert results.errors is not None
    assert results.errors[0].message == "store offline"
    assert results.errors[0].path == ["listUsers"]
