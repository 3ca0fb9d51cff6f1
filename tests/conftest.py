# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import pytest

from benchloop.runner.models import (
    FitError,
    GroupResult,
    SeriesResult,
    SeriesVariant,
    SingleResult,
)
from tests.helpers import RecordingSink, ScriptedEngine, trend


@pytest.fixture
def engine() -> ScriptedEngine:
    return ScriptedEngine()


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def nested_tree() -> GroupResult:
    """Suite with every node kind, two levels of groups and one failed fit."""
    return GroupResult(
        name="suite",
        children=[
            SingleResult(name="append", result=trend(slope=0.5, fit=0.99)),
            GroupResult(
                name="lists",
                children=[
                    SeriesResult(
                        name="remove",
                        variants=[
                            SeriesVariant(name="old", result=trend(slope=0.2, fit=0.97)),
                            SeriesVariant(
                                name="new", result=FitError(reason="degenerate")
                            ),
                        ],
                    ),
                    SingleResult(name="reverse", result=trend(slope=0.1, fit=0.96)),
                ],
            ),
            GroupResult(name="empty", children=[]),
        ],
    )
