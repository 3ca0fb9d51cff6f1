# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Step scheduling, result reduction and quality assessment."""

from benchloop.runner.models import (
    FitError,
    FitResult,
    Finished,
    FlatResult,
    GroupResult,
    Report,
    ResultNode,
    Running,
    RunStatus,
    SeriesResult,
    SeriesVariant,
    SingleResult,
    Trend,
)
from benchloop.runner.protocols import BenchmarkEngine, ReportSink
from benchloop.runner.quality import (
    HIGH_INTERFERENCE_WARNING,
    POSSIBLE_INTERFERENCE_WARNING,
    QualityThresholds,
    assess_quality,
)
from benchloop.runner.reducer import reduce_results, throughput_of
from benchloop.runner.scheduler import SchedulerState, StepScheduler
from benchloop.runner.sinks import (
    CallbackReportSink,
    ConsoleReportSink,
    StreamReportSink,
)

__all__ = [
    "BenchmarkEngine",
    "CallbackReportSink",
    "ConsoleReportSink",
    "FitError",
    "FitResult",
    "Finished",
    "FlatResult",
    "GroupResult",
    "HIGH_INTERFERENCE_WARNING",
    "POSSIBLE_INTERFERENCE_WARNING",
    "QualityThresholds",
    "Report",
    "ReportSink",
    "ResultNode",
    "RunStatus",
    "Running",
    "SchedulerState",
    "SeriesResult",
    "SeriesVariant",
    "SingleResult",
    "StepScheduler",
    "StreamReportSink",
    "Trend",
    "assess_quality",
    "reduce_results",
    "throughput_of",
]
