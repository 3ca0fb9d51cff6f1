# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Thin wrapper around the standard library logger with a TRACE level."""

import logging

TRACE = 5
logging.addLevelName(TRACE, "TRACE")


class BenchLogger:
    """Logger that adds a ``trace`` level and cheap level checks.

    Messages are passed straight through to the wrapped ``logging.Logger``,
    so handlers configured on the ``benchloop`` logger apply.
    """

    def __init__(self, logger_name: str) -> None:
        self.logger_name = logger_name
        self._logger = logging.getLogger(logger_name)

    @property
    def is_trace_enabled(self) -> bool:
        return self._logger.isEnabledFor(TRACE)

    @property
    def is_debug_enabled(self) -> bool:
        return self._logger.isEnabledFor(logging.DEBUG)

    def trace(self, msg: str, *args, stacklevel: int = 1, **kwargs) -> None:
        self._logger.log(TRACE, msg, *args, stacklevel=stacklevel + 1, **kwargs)

    def debug(self, msg: str, *args, stacklevel: int = 1, **kwargs) -> None:
        self._logger.debug(msg, *args, stacklevel=stacklevel + 1, **kwargs)

    def info(self, msg: str, *args, stacklevel: int = 1, **kwargs) -> None:
        self._logger.info(msg, *args, stacklevel=stacklevel + 1, **kwargs)

    def warning(self, msg: str, *args, stacklevel: int = 1, **kwargs) -> None:
        self._logger.warning(msg, *args, stacklevel=stacklevel + 1, **kwargs)

    def error(self, msg: str, *args, stacklevel: int = 1, **kwargs) -> None:
        self._logger.error(msg, *args, stacklevel=stacklevel + 1, **kwargs)

    def exception(self, msg: str, *args, stacklevel: int = 1, **kwargs) -> None:
        self._logger.exception(msg, *args, stacklevel=stacklevel + 1, **kwargs)
