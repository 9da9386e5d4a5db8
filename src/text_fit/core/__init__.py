# SPDX-License-Identifier: Apache-2.0
"""Core font size fitting modules."""

from .calculator import ZERO_FLOOR_RATIO, FitRequest, FontSizeCalculator, summarize_batch
from .config import DEFAULT_DELTA, DEFAULT_MIN_SIZE_FACTOR, FitConfig
from .errors import InvalidConfiguration, InvalidInput, TextFitError
from .models import (
    BatchSummary,
    BoundingBox,
    FitMetadata,
    FitResult,
    results_to_json,
    results_to_yaml,
)

__all__ = [
    "BatchSummary",
    "BoundingBox",
    "DEFAULT_DELTA",
    "DEFAULT_MIN_SIZE_FACTOR",
    "FitConfig",
    "FitMetadata",
    "FitRequest",
    "FitResult",
    "FontSizeCalculator",
    "InvalidConfiguration",
    "InvalidInput",
    "TextFitError",
    "ZERO_FLOOR_RATIO",
    "results_to_json",
    "results_to_yaml",
    "summarize_batch",
]
