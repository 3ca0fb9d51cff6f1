# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0


class BenchloopError(Exception):
    """Base class for all benchloop errors."""


class SchedulerStateError(BenchloopError):
    """Raised when a StepScheduler is driven outside of its lifecycle."""


class SuiteLoadError(BenchloopError):
    """Raised when a benchmark suite target cannot be resolved."""
