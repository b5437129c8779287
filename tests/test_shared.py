import logging

import pytest
from fastapi import HTTPException

from rc5service.core import InvalidHexError
from rc5service.shared import Logger, load_config
from rc5service.shared.http import bad_request_handler

CONFIG_TOML = """
[general]
title = "RC5"

[logging]
level = "debug"

[paths]
logs = "logs"

[network]
host = "127.0.0.1"
port = 8000
reload = false
"""


def test_load_config(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(CONFIG_TOML)

    config = load_config(path)

    assert config.general.title == "RC5"
    assert config.logging.level == logging.DEBUG
    assert config.network.port == 8000
    assert config.network.allow_origins == ["*"]


def test_specific_config_overrides_sections(tmp_path):
    shared = tmp_path / "config.toml"
    shared.write_text(CONFIG_TOML)
    specific = tmp_path / "production.toml"
    specific.write_text(
        '[network]\nhost = "0.0.0.0"\nport = 80\nreload = false\n'
        'allow_origins = ["https://example.org"]\n'
    )

    config = load_config(shared, specific)

    assert config.network.host == "0.0.0.0"
    assert config.network.port == 80
    assert config.network.allow_origins == ["https://example.org"]
    assert config.general.title == "RC5"


def test_unknown_log_level_defaults_to_info(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(CONFIG_TOML.replace('"debug"', '"verbose"'))
    assert load_config(path).logging.level == logging.INFO


def test_default_config_loads():
    config = load_config()
    assert config.network.port > 0


def test_logger_attaches_handlers_once(tmp_path):
    first = Logger("rc5service.tests.once", log_file=str(tmp_path)).get_logger()
    second = Logger("rc5service.tests.once", log_file=str(tmp_path)).get_logger()

    assert first is second
    assert len(first.handlers) == 2
    assert list(tmp_path.glob("*.log"))


def test_handler_maps_cipher_errors_to_bad_request():
    with pytest.raises(HTTPException) as excinfo:
        with bad_request_handler():
            raise InvalidHexError("Invalid hex length.")

    assert excinfo.value.status_code == 400
    assert excinfo.value.detail == "Error: Invalid hex length."


def test_handler_maps_unexpected_errors_to_server_error():
    with pytest.raises(HTTPException) as excinfo:
        with bad_request_handler():
            raise RuntimeError("boom")

    assert excinfo.value.status_code == 500


def test_handler_passes_http_errors_through():
    with pytest.raises(HTTPException) as excinfo:
        with bad_request_handler():
            raise HTTPException(status_code=418, detail="teapot")

    assert excinfo.value.status_code == 418
