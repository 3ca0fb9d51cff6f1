# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""Data models for benchmark results and reports."""

from dataclasses import dataclass
from typing import Annotated, Any, Literal

import orjson
from pydantic import BaseModel, ConfigDict, Field


class BenchloopBaseModel(BaseModel):
    """Immutable base model shared by all result types."""

    model_config = ConfigDict(extra="forbid", frozen=True)


class Trend(BenchloopBaseModel):
    """A linear trend fitted over (sample count, elapsed nanoseconds) observations."""

    kind: Literal["trend"] = "trend"
    slope: float = Field(description="Slope of the fitted line")
    intercept: float = Field(description="Intercept of the fitted line")
    goodness_of_fit: float = Field(
        ge=0, le=1, description="How well the line explains the samples (0.0 to 1.0)"
    )


class FitError(BenchloopBaseModel):
    """The engine could not produce a usable trend for a leaf."""

    kind: Literal["error"] = "error"
    reason: str = Field(default="", description="Engine-provided failure reason")


FitResult = Annotated[Trend | FitError, Field(discriminator="kind")]


class SingleResult(BenchloopBaseModel):
    """A single benchmark and its fit."""

    kind: Literal["single"] = "single"
    name: str
    result: FitResult


class SeriesVariant(BenchloopBaseModel):
    """One named variant of a series."""

    name: str
    result: FitResult


class SeriesResult(BenchloopBaseModel):
    """Named variants sharing one parent name, in declaration order."""

    kind: Literal["series"] = "series"
    name: str
    variants: list[SeriesVariant] = Field(default_factory=list)


class GroupResult(BenchloopBaseModel):
    """A named group of child results, in declaration order."""

    kind: Literal["group"] = "group"
    name: str
    children: list["ResultNode"] = Field(default_factory=list)


ResultNode = Annotated[
    SingleResult | SeriesResult | GroupResult, Field(discriminator="kind")
]

GroupResult.model_rebuild()


class FlatResult(BenchloopBaseModel):
    """A leaf result addressed by its full path from the suite root.

    Attributes:
        path: Names from the root to the leaf, root first
        ns_per_run: Nanoseconds per run, None when the fit failed or was non-finite
    """

    path: list[str] = Field(serialization_alias="name")
    ns_per_run: float | None = Field(default=None, serialization_alias="nsPerRun")


class Report(BenchloopBaseModel):
    """Flattened suite results plus an optional data-quality warning."""

    warning: str | None = None
    results: list[FlatResult] = Field(default_factory=list)

    def to_wire(self) -> dict[str, Any]:
        """Return the report in its external shape.

        {"warning": str | None, "results": [{"name": [...], "nsPerRun": float | None}]}
        """
        return self.model_dump(by_alias=True)

    def to_json(self) -> bytes:
        return orjson.dumps(self.to_wire())


@dataclass(frozen=True, slots=True)
class Running:
    """The run state still has sampling work left."""


@dataclass(frozen=True, slots=True)
class Finished:
    """Every leaf has a fit result.

    Attributes:
        tree: Result tree mirroring the shape of the benchmark spec
    """

    tree: SingleResult | SeriesResult | GroupResult


RunStatus = Running | Finished
