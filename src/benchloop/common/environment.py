# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Environment-driven settings for benchloop.

Each settings group reads its own ``BENCHLOOP_<GROUP>_`` prefixed variables,
for example ``BENCHLOOP_SCHEDULER_STEP_LOG_INTERVAL=500``.
"""

from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Self


class _SchedulerSettings(BaseSettings):
    """Step scheduler and event loop health settings."""

    model_config = SettingsConfigDict(env_prefix="BENCHLOOP_SCHEDULER_")

    STEP_LOG_INTERVAL: int = Field(
        default=1000,
        ge=0,
        description="Log scheduler progress every N engine steps. 0 disables progress logging.",
    )
    EVENT_LOOP_HEALTH_ENABLED: bool = Field(
        default=False,
        description="Monitor the event loop while stepping and warn when a step blocks it.",
    )
    EVENT_LOOP_HEALTH_INTERVAL: float = Field(
        default=0.25,
        gt=0,
        description="Sleep interval in seconds between event loop health checks.",
    )
    EVENT_LOOP_HEALTH_WARN_THRESHOLD_MS: float = Field(
        default=10.0,
        ge=0,
        description="Warn when the event loop is blocked for longer than this many milliseconds.",
    )


class _QualitySettings(BaseSettings):
    """Goodness-of-fit thresholds used for the suite-wide interference warning."""

    model_config = SettingsConfigDict(env_prefix="BENCHLOOP_QUALITY_")

    HIGH_INTERFERENCE_THRESHOLD: float = Field(
        default=0.85,
        gt=0,
        le=1,
        description="Minimum goodness-of-fit below which high interference is reported.",
    )
    POSSIBLE_INTERFERENCE_THRESHOLD: float = Field(
        default=0.95,
        gt=0,
        le=1,
        description="Minimum goodness-of-fit below which possible interference is reported.",
    )

    @model_validator(mode="after")
    def validate_threshold_order(self) -> Self:
        if self.HIGH_INTERFERENCE_THRESHOLD >= self.POSSIBLE_INTERFERENCE_THRESHOLD:
            raise ValueError(
                "BENCHLOOP_QUALITY_HIGH_INTERFERENCE_THRESHOLD "
                f"({self.HIGH_INTERFERENCE_THRESHOLD}) must be lower than "
                "BENCHLOOP_QUALITY_POSSIBLE_INTERFERENCE_THRESHOLD "
                f"({self.POSSIBLE_INTERFERENCE_THRESHOLD})."
            )
        return self


class _LoggingSettings(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="BENCHLOOP_LOGGING_")

    LEVEL: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level for the benchloop package logger.",
    )


class _Environment(BaseSettings):
    """Root of all benchloop settings groups."""

    model_config = SettingsConfigDict(env_prefix="BENCHLOOP_")

    SCHEDULER: _SchedulerSettings = Field(default_factory=_SchedulerSettings)
    QUALITY: _QualitySettings = Field(default_factory=_QualitySettings)
    LOGGING: _LoggingSettings = Field(default_factory=_LoggingSettings)


Environment = _Environment()
