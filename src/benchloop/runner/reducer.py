# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Flattening of finished result trees into path-qualified results."""

import math
from collections.abc import Iterator

import numpy as np

from benchloop.common.constants import NANOS_PER_SECOND, TREND_EVALUATION_POINT
from benchloop.runner.models import (
    FitError,
    FitResult,
    FlatResult,
    GroupResult,
    ResultNode,
    SeriesResult,
    SingleResult,
)

__all__ = [
    "iter_fit_results",
    "reduce_results",
    "throughput_of",
]


def throughput_of(result: FitResult) -> float | None:
    """Derive nanoseconds per run from a fitted trend.

    Closed form of evaluating the line at the reference sample count and
    inverting: ``1e9 * slope / (1e3 - intercept)``. An intercept of exactly
    1000 produces inf or nan rather than raising.

    Args:
        result: Fit result for a single leaf

    Returns:
        The throughput estimate, or None if the fit failed
    """
    if isinstance(result, FitError):
        return None
    with np.errstate(divide="ignore", invalid="ignore"):
        value = (
            np.float64(NANOS_PER_SECOND)
            * result.slope
            / (np.float64(TREND_EVALUATION_POINT) - result.intercept)
        )
    return float(value)


def _flat(path: list[str], result: FitResult) -> FlatResult:
    ns_per_run = throughput_of(result)
    if ns_per_run is not None and not math.isfinite(ns_per_run):
        ns_per_run = None
    return FlatResult(path=path, ns_per_run=ns_per_run)


def reduce_results(node: ResultNode) -> list[FlatResult]:
    """Flatten a finished result tree in depth-first declaration order.

    Group names are prefixed onto every descendant path, series produce one
    entry per variant and non-finite throughput is reported as None.
    """
    if isinstance(node, SingleResult):
        return [_flat([node.name], node.result)]

    if isinstance(node, SeriesResult):
        return [
            _flat([node.name, variant.name], variant.result)
            for variant in node.variants
        ]

    if isinstance(node, GroupResult):
        flattened = []
        for child in node.children:
            for flat in reduce_results(child):
                flattened.append(
                    FlatResult(path=[node.name, *flat.path], ns_per_run=flat.ns_per_run)
                )
        return flattened

    raise TypeError(f"Unsupported result node: {type(node).__name__}")


def iter_fit_results(node: ResultNode) -> Iterator[FitResult]:
    """Yield the fit result of every leaf, depth first."""
    if isinstance(node, SingleResult):
        yield node.result
    elif isinstance(node, SeriesResult):
        for variant in node.variants:
            yield variant.result
    elif isinstance(node, GroupResult):
        for child in node.children:
            yield from iter_fit_results(child)
    else:
        raise TypeError(f"Unsupported result node: {type(node).__name__}")
