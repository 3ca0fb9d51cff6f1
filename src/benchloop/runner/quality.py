# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Suite-wide measurement quality assessment."""

from dataclasses import dataclass

import numpy as np

from benchloop.common.environment import Environment
from benchloop.runner.models import ResultNode, Trend
from benchloop.runner.reducer import iter_fit_results

__all__ = [
    "HIGH_INTERFERENCE_WARNING",
    "POSSIBLE_INTERFERENCE_WARNING",
    "QualityThresholds",
    "assess_quality",
    "collect_goodness_of_fit",
    "minimum_goodness_of_fit",
]

HIGH_INTERFERENCE_WARNING = (
    "There is high interference on the system. Don't trust these results. "
    "Close other running programs (especially browsers, editors and chat clients) "
    "and run the benchmarks again. If this warning persists, something on this "
    "machine is adding timing noise that the benchmark runner cannot detect."
)

POSSIBLE_INTERFERENCE_WARNING = (
    "There may be interference on the system. Consider closing "
    "resource-intensive programs and running the benchmarks again."
)


@dataclass(frozen=True, slots=True)
class QualityThresholds:
    """Goodness-of-fit floors for the two warning tiers.

    Attributes:
        high_interference: Minimum fit below this reports high interference
        possible_interference: Minimum fit below this reports possible interference
    """

    high_interference: float = 0.85
    possible_interference: float = 0.95

    def __post_init__(self) -> None:
        for value in (self.high_interference, self.possible_interference):
            if not 0 < value <= 1:
                raise ValueError(
                    f"Invalid goodness-of-fit threshold: {value}. "
                    "Thresholds must be in the range (0, 1]."
                )
        if self.high_interference >= self.possible_interference:
            raise ValueError(
                f"High interference threshold ({self.high_interference}) must be "
                f"lower than the possible interference threshold ({self.possible_interference})."
            )

    @classmethod
    def from_environment(cls) -> "QualityThresholds":
        return cls(
            high_interference=Environment.QUALITY.HIGH_INTERFERENCE_THRESHOLD,
            possible_interference=Environment.QUALITY.POSSIBLE_INTERFERENCE_THRESHOLD,
        )


def collect_goodness_of_fit(node: ResultNode) -> list[float]:
    """Goodness-of-fit of every successfully fitted leaf. Failed fits are skipped."""
    return [
        result.goodness_of_fit
        for result in iter_fit_results(node)
        if isinstance(result, Trend)
    ]


def minimum_goodness_of_fit(scores: list[float]) -> float:
    """Lowest score, or 1.0 when there is nothing to judge."""
    if not scores:
        return 1.0
    return float(np.min(scores))


def assess_quality(
    node: ResultNode, thresholds: QualityThresholds | None = None
) -> str | None:
    """Produce at most one interference warning for a finished suite.

    Args:
        node: Root of the finished result tree
        thresholds: Warning tiers, read from the environment when omitted

    Returns:
        The warning text, or None when every fit is good enough
    """
    thresholds = thresholds or QualityThresholds.from_environment()
    minimum = minimum_goodness_of_fit(collect_goodness_of_fit(node))

    if minimum < thresholds.high_interference:
        return HIGH_INTERFERENCE_WARNING
    if minimum < thresholds.possible_interference:
        return POSSIBLE_INTERFERENCE_WARNING
    return None
