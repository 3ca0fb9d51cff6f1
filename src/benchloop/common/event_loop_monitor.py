# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Event loop responsiveness monitor.

Runs a background task next to the step scheduler and reports when a single
engine step kept the event loop busy for longer than a configurable threshold.
"""

import asyncio
import time

from benchloop.common.constants import (
    MILLIS_PER_SECOND,
    NANOS_PER_MILLIS,
    NANOS_PER_SECOND,
)
from benchloop.common.environment import Environment
from benchloop.common.mixins import BenchLoggerMixin


class EventLoopMonitor(BenchLoggerMixin):
    """Watches the running event loop and logs warnings when it is blocked.

    The monitor sleeps for a known interval and measures the actual elapsed
    time. A delta larger than the threshold means something (usually a slow
    engine step) held the loop.

    Configurable via Environment.SCHEDULER:
    - BENCHLOOP_SCHEDULER_EVENT_LOOP_HEALTH_INTERVAL: Sleep interval in seconds (default: 0.25)
    - BENCHLOOP_SCHEDULER_EVENT_LOOP_HEALTH_WARN_THRESHOLD_MS: Warning threshold in ms (default: 10)
    """

    def __init__(self, monitor_id: str, **kwargs) -> None:
        super().__init__(**kwargs)
        self._monitor_id = monitor_id
        self._task: asyncio.Task | None = None
        self._stop_requested = False
        self.blocked_count = 0
        self.max_blocked_ms = 0.0

    def start(self) -> None:
        self._stop_requested = False
        if self._task is None:
            self._task = asyncio.create_task(self._monitor_event_loop())

    def stop(self) -> None:
        if self._stop_requested:
            return
        self._stop_requested = True
        if self._task is not None:
            self._task.cancel()
        self._task = None

    async def _monitor_event_loop(self) -> None:
        interval_sec = Environment.SCHEDULER.EVENT_LOOP_HEALTH_INTERVAL
        threshold_ns = (
            Environment.SCHEDULER.EVENT_LOOP_HEALTH_WARN_THRESHOLD_MS
            * NANOS_PER_MILLIS
        )
        expected_ns = round(interval_sec * NANOS_PER_SECOND)

        while not self._stop_requested:
            start_perf_ns = time.perf_counter_ns()
            await asyncio.sleep(interval_sec)
            elapsed_ns = time.perf_counter_ns() - start_perf_ns
            delta_ns = elapsed_ns - expected_ns
            if self.is_trace_enabled:
                self.trace(
                    f"Event loop health check: expected {interval_sec * MILLIS_PER_SECOND:.1f}ms, actual {elapsed_ns / NANOS_PER_MILLIS:.2f}ms, delta {delta_ns / NANOS_PER_MILLIS:.2f}ms"
                )
            if delta_ns > threshold_ns:
                delta_ms = delta_ns / NANOS_PER_MILLIS
                self.blocked_count += 1
                self.max_blocked_ms = max(self.max_blocked_ms, delta_ms)
                self.warning(
                    f"Event loop for {self._monitor_id} was blocked by a benchmark step. Overhead: {delta_ms:,.2f}ms"
                )
