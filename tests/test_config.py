# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
from __future__ import annotations

import logging

import pytest

from config import ConfigError, load_settings
from logging_config import LOGGER_NAMESPACES, setup_logging


def test_api_key_is_required() -> None:
    with pytest.raises(ConfigError, match="API_KEY"):
        load_settings({})
    with pytest.raises(ConfigError, match="API_KEY"):
        load_settings({"API_KEY": "   "})


def test_defaults() -> None:
    settings = load_settings({"API_KEY": "k"})
    assert settings.secret_key == "dev-secret"
    assert settings.snapshot_path == "containers.yaml"
    assert settings.default_orientation == "horizontal"
    assert settings.log_level == "INFO"
    assert settings.log_file is None


def test_environment_overrides() -> None:
    settings = load_settings(
        {
            "API_KEY": "k",
            "SECRET_KEY": "s",
            "PORTLINE_SNAPSHOT": "/srv/containers.json",
            "PORTLINE_ORIENTATION": "vertical",
            "PORTLINE_LOG_LEVEL": "debug",
        }
    )
    assert settings.snapshot_path == "/srv/containers.json"
    assert settings.default_orientation == "vertical"
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    ("name", "value"), [("PORTLINE_ORIENTATION", "diagonal"), ("PORTLINE_LOG_LEVEL", "loud")]
)
def test_invalid_values_raise_config_error(name: str, value: str) -> None:
    with pytest.raises(ConfigError, match="invalid settings"):
        load_settings({"API_KEY": "k", name: value})


@pytest.fixture
def project_loggers():
    saved = {
        name: (list(logging.getLogger(name).handlers), logging.getLogger(name).level)
        for name in LOGGER_NAMESPACES
    }
    yield
    for name, (handlers, level) in saved.items():
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers[:] = handlers
        logger.setLevel(level)


def test_setup_logging_replaces_handlers(tmp_path, project_loggers) -> None:
    log_file = tmp_path / "portline.log"
    root = logging.getLogger()
    root_handlers = list(root.handlers)
    setup_logging("INFO", str(log_file))
    setup_logging("INFO", str(log_file))
    services = logging.getLogger("services")
    assert len(services.handlers) == 2
    assert len(logging.getLogger("app").handlers) == 2
    assert root.handlers == root_handlers
    logging.getLogger("services.layout").info("hello")
    for handler in services.handlers:
        handler.flush()
    assert "services.layout - INFO - hello" in log_file.read_text(encoding="utf-8")


def test_setup_logging_keeps_caplog_capture(caplog, project_loggers) -> None:
    setup_logging("INFO")
    assert caplog.handler in logging.getLogger().handlers
    logging.getLogger("services.collector").warning("port 8080 claimed twice")
    assert "port 8080 claimed twice" in caplog.text
