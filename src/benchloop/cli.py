# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Command line interface for benchloop."""

import sys
from typing import Annotated, Literal

from cyclopts import App, Parameter
from rich.console import Console
from rich.markup import escape

from benchloop import __version__
from benchloop.common.exceptions import SuiteLoadError

app = App(name="benchloop", help="Run micro-benchmark suites and report ns/run.", version=__version__)


@app.command
def run(
    target: Annotated[
        str,
        Parameter(help="Suite to run, as 'package.module:attribute'."),
    ],
    *,
    output: Annotated[
        Literal["json", "table"],
        Parameter(name=("--output", "-o"), help="Report format written to stdout."),
    ] = "json",
    log_level: Annotated[
        Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR"] | None,
        Parameter(name="--log-level", help="Override BENCHLOOP_LOGGING_LEVEL."),
    ] = None,
) -> None:
    """Run a benchmark suite to completion and print its report."""
    from benchloop.cli_runner import run_suite_target

    try:
        run_suite_target(target, output=output, log_level=log_level)
    except SuiteLoadError as e:
        Console(stderr=True).print(f"[bold red]Error:[/bold red] {escape(str(e))}", highlight=False)
        sys.exit(2)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
