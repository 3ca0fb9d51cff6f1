# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from benchloop.common.mixins.bench_logger_mixin import BenchLoggerMixin

__all__ = [
    "BenchLoggerMixin",
]
