# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Cooperative step scheduler that drives a benchmark suite to completion."""

import asyncio
from enum import Enum
from typing import Any

from benchloop.common.environment import Environment
from benchloop.common.event_loop_monitor import EventLoopMonitor
from benchloop.common.exceptions import SchedulerStateError
from benchloop.common.mixins import BenchLoggerMixin
from benchloop.runner.models import Finished, Report, ResultNode, Running
from benchloop.runner.protocols import BenchmarkEngine, ReportSink
from benchloop.runner.quality import QualityThresholds, assess_quality
from benchloop.runner.reducer import reduce_results

__all__ = [
    "SchedulerState",
    "StepScheduler",
]


class SchedulerState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    FINISHED = "finished"
    FAILED = "failed"


class StepScheduler(BenchLoggerMixin):
    """Steps a benchmark suite one unit of work at a time without blocking the loop.

    The engine decides what each step samples; the scheduler only threads the
    run state through ``classify`` and ``step``, yielding to the event loop
    between steps so other tasks can run. Once the engine reports the suite as
    finished, the result tree is flattened, assessed for interference and the
    resulting report is handed to the sink exactly once.

    A scheduler drives a single run. There is no retry, step cap or timeout:
    the engine's own sampling budget bounds the run. If the engine raises or
    the task is cancelled, no report is delivered.
    """

    def __init__(
        self,
        engine: BenchmarkEngine,
        sink: ReportSink,
        *,
        thresholds: QualityThresholds | None = None,
        step_log_interval: int | None = None,
        monitor_event_loop: bool | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._engine = engine
        self._sink = sink
        self._thresholds = thresholds
        self._step_log_interval = (
            Environment.SCHEDULER.STEP_LOG_INTERVAL
            if step_log_interval is None
            else step_log_interval
        )
        self._monitor_event_loop = (
            Environment.SCHEDULER.EVENT_LOOP_HEALTH_ENABLED
            if monitor_event_loop is None
            else monitor_event_loop
        )
        self.state = SchedulerState.IDLE
        self.steps_taken = 0

    async def run(self, spec: Any) -> Report:
        """Drive ``spec`` to completion and deliver its report.

        Args:
            spec: Benchmark spec understood by the engine

        Returns:
            The report that was delivered to the sink

        Raises:
            SchedulerStateError: If this scheduler has already been run
        """
        if self.state != SchedulerState.IDLE:
            raise SchedulerStateError(
                f"StepScheduler can only drive one run (current state: {self.state.value}). "
                "Create a new scheduler for every suite run."
            )
        self.state = SchedulerState.RUNNING
        self.info(f"Starting benchmark run with engine: {self._engine.__class__.__name__}")

        monitor = None
        if self._monitor_event_loop:
            monitor = EventLoopMonitor(monitor_id=self._engine.__class__.__name__)
            monitor.start()

        try:
            tree = await self._step_until_finished(spec)
        except BaseException:
            self.state = SchedulerState.FAILED
            self.error(f"Benchmark run stopped after {self.steps_taken} steps")
            raise
        finally:
            if monitor is not None:
                monitor.stop()

        report = self._build_report(tree)
        self.state = SchedulerState.FINISHED
        self.info(
            f"Benchmark run finished after {self.steps_taken} steps with {len(report.results)} results"
        )
        if monitor is not None and monitor.blocked_count:
            self.warning(
                f"Event loop was blocked {monitor.blocked_count} time(s) during the run, "
                f"longest {monitor.max_blocked_ms:,.2f}ms"
            )

        self._sink.deliver(report)
        return report

    async def _step_until_finished(self, spec: Any) -> ResultNode:
        state = self._engine.start(spec)
        while True:
            status = self._engine.classify(state)
            if isinstance(status, Finished):
                return status.tree
            if not isinstance(status, Running):
                raise TypeError(
                    f"Engine returned an unknown run status: {type(status).__name__}"
                )

            state = self._engine.step(state)
            self.steps_taken += 1
            if self._step_log_interval and self.steps_taken % self._step_log_interval == 0:
                self.debug(f"Completed {self.steps_taken} benchmark steps")

            # Let other pending tasks run before the next step.
            await asyncio.sleep(0)

    def _build_report(self, tree: ResultNode) -> Report:
        warning = assess_quality(tree, self._thresholds)
        if warning is not None:
            self.warning(warning)
        return Report(warning=warning, results=reduce_results(tree))
