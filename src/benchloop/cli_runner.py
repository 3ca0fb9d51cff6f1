# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import asyncio
import importlib
from dataclasses import dataclass
from typing import Any, Literal

from benchloop.common.bench_logger import BenchLogger
from benchloop.common.exceptions import SuiteLoadError
from benchloop.runner.models import Report
from benchloop.runner.protocols import BenchmarkEngine, ReportSink
from benchloop.runner.scheduler import StepScheduler
from benchloop.runner.sinks import ConsoleReportSink, StreamReportSink

logger = BenchLogger(__name__)

OutputFormat = Literal["json", "table"]


@dataclass(slots=True)
class BenchmarkSuite:
    """A benchmark spec together with the engine that knows how to run it.

    Attributes:
        engine: Engine implementing start/classify/step
        spec: Engine-specific description of the benchmarks to run
    """

    engine: BenchmarkEngine
    spec: Any


def load_suite(target: str) -> BenchmarkSuite:
    """Resolve a ``package.module:attribute`` target to a BenchmarkSuite.

    The attribute may be a BenchmarkSuite or a zero-argument callable
    returning one.

    Raises:
        SuiteLoadError: If the target is malformed or does not resolve to a suite
    """
    module_name, sep, attribute = target.partition(":")
    if not sep or not module_name or not attribute:
        raise SuiteLoadError(
            f"Invalid suite target: {target!r}. "
            "Expected the form 'package.module:attribute', e.g. 'benchmarks.lists:suite'."
        )

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise SuiteLoadError(f"Could not import suite module {module_name!r}: {e}") from e

    try:
        suite = getattr(module, attribute)
    except AttributeError as e:
        raise SuiteLoadError(
            f"Module {module_name!r} has no attribute {attribute!r}"
        ) from e

    if callable(suite) and not isinstance(suite, BenchmarkSuite):
        suite = suite()

    if not isinstance(suite, BenchmarkSuite):
        raise SuiteLoadError(
            f"{target!r} resolved to {type(suite).__name__}, expected a BenchmarkSuite"
        )
    if not isinstance(suite.engine, BenchmarkEngine):
        raise SuiteLoadError(
            f"Engine {type(suite.engine).__name__} of {target!r} does not implement "
            "start(), classify() and step()"
        )
    return suite


def run_benchmarks(spec: Any, engine: BenchmarkEngine, sink: ReportSink) -> Report:
    """Run a suite to completion on a fresh event loop and deliver its report."""
    scheduler = StepScheduler(engine, sink)
    return asyncio.run(scheduler.run(spec))


def run_suite_target(
    target: str, output: OutputFormat = "json", log_level: str | None = None
) -> Report:
    """Load a suite target, run it and emit the report in the chosen format."""
    from benchloop.common.logging import setup_rich_logging

    setup_rich_logging(log_level)

    suite = load_suite(target)
    logger.info(f"Loaded benchmark suite from {target}")

    sink: ReportSink = ConsoleReportSink() if output == "table" else StreamReportSink()
    return run_benchmarks(suite.spec, suite.engine, sink)
