# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from benchloop.runner.models import Report, RunStatus


@runtime_checkable
class BenchmarkEngine(Protocol):
    """Protocol for the engine that samples benchmarks and fits their trends.

    Both the benchmark spec and the run state are opaque to benchloop: they are
    only ever handed back to the engine that produced them.
    """

    def start(self, spec: Any) -> Any: ...

    def classify(self, state: Any) -> RunStatus: ...

    def step(self, state: Any) -> Any: ...


@runtime_checkable
class ReportSink(Protocol):
    """Protocol for the destination of a finished report."""

    def deliver(self, report: Report) -> None: ...
