# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import logging

from rich.console import Console
from rich.logging import RichHandler

from benchloop.common.bench_logger import TRACE
from benchloop.common.environment import Environment

PACKAGE_LOGGER_NAME = "benchloop"


def _resolve_level(level: str | int | None) -> int:
    if level is None:
        level = Environment.LOGGING.LEVEL
    if isinstance(level, int):
        return level
    if level.upper() == "TRACE":
        return TRACE
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(
            f"Invalid log level: {level!r}. "
            "Expected one of TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL."
        )
    return resolved


def setup_rich_logging(
    level: str | int | None = None, console: Console | None = None
) -> logging.Logger:
    """Attach a RichHandler to the package logger.

    Logs go to stderr by default so that a report written to stdout stays
    machine readable. Calling this more than once replaces the previous handler.
    """
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(_resolve_level(level))

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
