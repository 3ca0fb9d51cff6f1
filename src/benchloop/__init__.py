# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
"""benchloop - Incremental micro-benchmark runner and reporter."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("benchloop")
except PackageNotFoundError:
    __version__ = "unknown"
