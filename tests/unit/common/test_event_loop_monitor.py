# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Tests for the EventLoopMonitor used while stepping benchmarks."""

import asyncio
from contextlib import contextmanager
from unittest.mock import AsyncMock, PropertyMock, patch

import pytest

from benchloop.common.environment import Environment
from benchloop.common.event_loop_monitor import EventLoopMonitor

# -----------------------------------------------------------------------------
# Constants
# -----------------------------------------------------------------------------

DEFAULT_MONITOR_ID = "ScriptedEngine"
BASE_TIME_NS = 1_000_000_000
NANOS_PER_MS = 1_000_000
NANOS_PER_SEC = 1_000_000_000
INTERVAL_SEC = 0.001


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------


class MockPerfCounter:
    """Simulates time.perf_counter_ns so each health check sees a chosen delay."""

    def __init__(
        self,
        extra_delay_ms: float = 0,
        stop_after_iterations: int = 1,
        monitor: EventLoopMonitor | None = None,
    ) -> None:
        self.interval_ns = int(INTERVAL_SEC * NANOS_PER_SEC)
        self.extra_delay_ns = int(extra_delay_ms * NANOS_PER_MS)
        self.stop_after = stop_after_iterations
        self.monitor = monitor
        self._call_count = 0
        self._iteration = 0

    def __call__(self) -> int:
        self._call_count += 1
        if self._call_count % 2 == 1:
            self._iteration += 1
            if self._iteration >= self.stop_after and self.monitor:
                self.monitor._stop_requested = True
            return BASE_TIME_NS + (self._iteration - 1) * self.interval_ns
        return BASE_TIME_NS + self._iteration * self.interval_ns + self.extra_delay_ns

    @contextmanager
    def patch(self):
        with patch(
            "benchloop.common.event_loop_monitor.time.perf_counter_ns",
            side_effect=self,
        ):
            yield


# -----------------------------------------------------------------------------
# Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def monitor() -> EventLoopMonitor:
    return EventLoopMonitor(monitor_id=DEFAULT_MONITOR_ID)


@pytest.fixture
def fast_env(monkeypatch) -> None:
    """Short real sleeps with a 10ms warning threshold."""
    monkeypatch.setattr(Environment.SCHEDULER, "EVENT_LOOP_HEALTH_INTERVAL", INTERVAL_SEC)
    monkeypatch.setattr(
        Environment.SCHEDULER, "EVENT_LOOP_HEALTH_WARN_THRESHOLD_MS", 10.0
    )


# -----------------------------------------------------------------------------
# Tests: Initialization
# -----------------------------------------------------------------------------


class TestEventLoopMonitorInit:
    def test_init_sets_default_state(self, monitor):
        assert monitor._task is None
        assert monitor._stop_requested is False
        assert monitor.blocked_count == 0
        assert monitor.max_blocked_ms == 0.0

    @pytest.mark.parametrize("attr", ["warning", "trace", "is_trace_enabled"])
    def test_inherits_logger_mixin_attributes(self, monitor, attr):
        assert hasattr(monitor, attr)


# -----------------------------------------------------------------------------
# Tests: Lifecycle (start/stop)
# -----------------------------------------------------------------------------


class TestEventLoopMonitorLifecycle:
    @pytest.mark.asyncio
    async def test_start_is_idempotent(self, monitor):
        with patch.object(monitor, "_monitor_event_loop", new_callable=AsyncMock):
            monitor.start()
            first_task = monitor._task
            monitor.start()
            try:
                assert monitor._task is first_task
            finally:
                monitor.stop()

    @pytest.mark.asyncio
    async def test_stop_cancels_task(self, monitor):
        with patch.object(monitor, "_monitor_event_loop", new_callable=AsyncMock):
            monitor.start()
            monitor.stop()
            assert monitor._stop_requested is True
            assert monitor._task is None

    @pytest.mark.asyncio
    async def test_stop_without_start_is_safe(self, monitor):
        monitor.stop()
        monitor.stop()
        assert monitor._stop_requested is True


# -----------------------------------------------------------------------------
# Tests: Monitoring Behavior
# -----------------------------------------------------------------------------


class TestEventLoopMonitorBehavior:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("extra_delay_ms", "expect_warning"),
        [
            (50.0, True),
            (5.0, False),
            (10.0, False),
        ],
    )
    async def test_warning_threshold_behavior(
        self, monitor, fast_env, extra_delay_ms, expect_warning
    ):
        """A warning is logged only when the delay exceeds the threshold."""
        messages: list[str] = []
        mock_perf = MockPerfCounter(extra_delay_ms=extra_delay_ms, monitor=monitor)

        with mock_perf.patch(), patch.object(monitor, "warning", side_effect=messages.append):
            await monitor._monitor_event_loop()

        if expect_warning:
            assert len(messages) == 1
            assert DEFAULT_MONITOR_ID in messages[0]
            assert "blocked by a benchmark step" in messages[0]
            assert monitor.blocked_count == 1
            assert monitor.max_blocked_ms == pytest.approx(extra_delay_ms, abs=1.0)
        else:
            assert messages == []
            assert monitor.blocked_count == 0

    @pytest.mark.asyncio
    async def test_blocks_accumulate_across_checks(self, monitor, fast_env):
        mock_perf = MockPerfCounter(
            extra_delay_ms=50.0, stop_after_iterations=2, monitor=monitor
        )

        with mock_perf.patch(), patch.object(monitor, "warning", lambda msg: None):
            await monitor._monitor_event_loop()

        assert monitor.blocked_count == 2
        assert monitor.max_blocked_ms == pytest.approx(50.0, abs=1.0)

    @pytest.mark.asyncio
    async def test_trace_logging_when_enabled(self, monitor, fast_env):
        messages: list[str] = []
        mock_perf = MockPerfCounter(monitor=monitor)

        with (
            patch.object(
                EventLoopMonitor,
                "is_trace_enabled",
                new_callable=PropertyMock,
                return_value=True,
            ),
            patch.object(monitor, "trace", side_effect=messages.append),
            mock_perf.patch(),
        ):
            await monitor._monitor_event_loop()

        assert len(messages) == 1
        assert "Event loop health check" in messages[0]


# -----------------------------------------------------------------------------
# Tests: Integration
# -----------------------------------------------------------------------------


class TestEventLoopMonitorIntegration:
    @pytest.mark.asyncio
    async def test_full_lifecycle(self, monkeypatch):
        monkeypatch.setattr(Environment.SCHEDULER, "EVENT_LOOP_HEALTH_INTERVAL", 0.01)
        monkeypatch.setattr(
            Environment.SCHEDULER, "EVENT_LOOP_HEALTH_WARN_THRESHOLD_MS", 1000.0
        )

        monitor = EventLoopMonitor(monitor_id="integration_test")
        monitor.start()
        await asyncio.sleep(0.05)
        monitor.stop()

        assert monitor._stop_requested is True
        assert monitor._task is None
        assert monitor.blocked_count == 0
