# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from benchloop.common.bench_logger import BenchLogger


class BenchLoggerMixin:
    """Gives a class leveled logging methods bound to a per-class logger.

    The logger name defaults to the fully qualified class name and can be
    overridden with the ``logger_name`` keyword argument.
    """

    def __init__(self, logger_name: str | None = None, **kwargs) -> None:
        self.logger = BenchLogger(
            logger_name or f"{self.__class__.__module__}.{self.__class__.__name__}"
        )
        super().__init__(**kwargs)

    @property
    def is_trace_enabled(self) -> bool:
        return self.logger.is_trace_enabled

    @property
    def is_debug_enabled(self) -> bool:
        return self.logger.is_debug_enabled

    def trace(self, msg: str, *args, **kwargs) -> None:
        self.logger.trace(msg, *args, stacklevel=2, **kwargs)

    def debug(self, msg: str, *args, **kwargs) -> None:
        self.logger.debug(msg, *args, stacklevel=2, **kwargs)

    def info(self, msg: str, *args, **kwargs) -> None:
        self.logger.info(msg, *args, stacklevel=2, **kwargs)

    def warning(self, msg: str, *args, **kwargs) -> None:
        self.logger.warning(msg, *args, stacklevel=2, **kwargs)

    def error(self, msg: str, *args, **kwargs) -> None:
        self.logger.error(msg, *args, stacklevel=2, **kwargs)

    def exception(self, msg: str, *args, **kwargs) -> None:
        self.logger.exception(msg, *args, stacklevel=2, **kwargs)
