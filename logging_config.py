# SPDX-License-Identifier: Apache-2.0
# This file was created or modified with the assistance of an AI (Large Language Model).
"""Logging setup for the portline web app and layout engine."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# top-level logger names used by this project's modules
LOGGER_NAMESPACES = ("app", "services")


def setup_logging(level: int | str = logging.INFO, log_file: str | None = None) -> None:
    """Attach a stdout handler and an optional file handler to the project loggers.

    Only the ``LOGGER_NAMESPACES`` loggers are touched; the root logger and
    any handlers a host process installed there are left alone. Their own
    handlers are replaced on each call so repeated app factory calls
    (tests, reloader) do not duplicate log lines.
    """
    formatter = logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")

    for name in LOGGER_NAMESPACES:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if log_file:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    logging.getLogger("app").debug("Logging initialized.")
