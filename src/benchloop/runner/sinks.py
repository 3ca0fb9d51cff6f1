# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Report sinks: where a finished report goes."""

import sys
from collections.abc import Callable
from typing import TextIO

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from benchloop.runner.models import Report

__all__ = [
    "CallbackReportSink",
    "ConsoleReportSink",
    "StreamReportSink",
]


class CallbackReportSink:
    """Forwards the report to a callable, e.g. a parent process message port."""

    def __init__(self, callback: Callable[[Report], None]) -> None:
        self._callback = callback

    def deliver(self, report: Report) -> None:
        self._callback(report)


class StreamReportSink:
    """Writes the report as a single JSON line to a text stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def deliver(self, report: Report) -> None:
        stream = self._stream or sys.stdout
        stream.write(report.to_json().decode("utf-8"))
        stream.write("\n")
        stream.flush()


class ConsoleReportSink:
    """Renders the report as a table for humans."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def deliver(self, report: Report) -> None:
        table = Table(title="Benchmark Results")
        table.add_column("Benchmark", style="cyan")
        table.add_column("ns/run", justify="right")

        for result in report.results:
            ns_per_run = (
                f"{result.ns_per_run:,.2f}"
                if result.ns_per_run is not None
                else "[red]n/a[/red]"
            )
            table.add_row(" / ".join(result.path), ns_per_run)

        self._console.print(table)
        if report.warning is not None:
            self._console.print(
                Panel(report.warning, title="Warning", border_style="yellow")
            )
