import logging
import os
from typing import Annotated

from usergraph import config


def test_config_alias(mocker):
    mocker.patch.dict(
        os.environ,
        {
            "TEST_OTHER": "lame",
            "TEST_PORT": "not-this",
            "REAL_PORT": "12345",
            "TEST_IS_DEV": "true",
        },
    )

    class Config(config.BaseConfig, prefix="TEST"):

        port: Annotated[int, config.alias("REAL_PORT")]
        other: str = "value"
        is_dev: bool = False

    assert Config.other == "lame"
    assert Config.port == 12345
    assert Config.is_dev is True


def test_config_env_file(tmp_path, mocker):
    mocker.patch.dict(os.environ, {"FILE_HOST": "10.0.0.1"})
    env_file = tmp_path / ".env"
    env_file.write_text("FILE_PORT=8080\nFILE_HOST=127.0.0.1\nFILE_DEBUG=no\n")

    class Config(config.BaseConfig, prefix="FILE", env_file=str(env_file)):
        host: str = "0.0.0.0"
        port: int = 4999
        debug: bool = True

    assert Config.port == 8080
    assert Config.host == "10.0.0.1"
    assert Config.debug is False


def test_default_settings():
    settings = config.Config()
    assert settings.port == 4999
    assert settings.graphql_path == "/graphql"


def test_logging_level():
    settings = config.Config()
    settings.debug = False
    settings.log_level = "warning"
    assert settings.logging_level == logging.WARNING

    settings.debug = True
    assert settings.logging_level == logging.DEBUG
