# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Fake engine, recording sink and result builders shared by the test suite."""

from dataclasses import dataclass, field

from benchloop.runner.models import (
    Finished,
    Report,
    ResultNode,
    Running,
    Trend,
)
from benchloop.runner.reducer import iter_fit_results


@dataclass(frozen=True, slots=True)
class ScriptedRunState:
    """Run state of the scripted engine: steps left before the tree is final."""

    remaining: int
    tree: ResultNode


@dataclass
class ScriptedEngine:
    """Engine that needs a fixed number of steps per leaf, then finishes.

    The spec handed to ``start`` is the finished result tree itself.
    """

    steps_per_leaf: int = 3
    start_calls: int = 0
    classify_calls: int = 0
    step_calls: int = 0
    seen_states: list[ScriptedRunState] = field(default_factory=list)

    def start(self, spec: ResultNode) -> ScriptedRunState:
        self.start_calls += 1
        leaves = sum(1 for _ in iter_fit_results(spec))
        return ScriptedRunState(remaining=leaves * self.steps_per_leaf, tree=spec)

    def classify(self, state: ScriptedRunState) -> Running | Finished:
        self.classify_calls += 1
        if state.remaining > 0:
            return Running()
        return Finished(tree=state.tree)

    def step(self, state: ScriptedRunState) -> ScriptedRunState:
        if state.remaining <= 0:
            raise AssertionError("step() called on a finished run state")
        self.step_calls += 1
        self.seen_states.append(state)
        return ScriptedRunState(remaining=state.remaining - 1, tree=state.tree)


class RecordingSink:
    """Sink that remembers every report it was given."""

    def __init__(self) -> None:
        self.reports: list[Report] = []

    def deliver(self, report: Report) -> None:
        self.reports.append(report)


def trend(slope: float = 1.0, intercept: float = 0.0, fit: float = 0.99) -> Trend:
    """Create a Trend with sensible defaults for testing."""
    return Trend(slope=slope, intercept=intercept, goodness_of_fit=fit)
