# SPDX-License-Identifier: Apache-2.0
"""Result models for font size fitting.

All models are immutable snapshots produced once per calculation. The
structured export (``to_dict``) is the canonical shape used for JSON and YAML
output.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import yaml


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box given by two opposite corners.

    Corner order is irrelevant: width and height are absolute differences.

    Attributes:
        x1: X coordinate of the first corner
        y1: Y coordinate of the first corner
        x2: X coordinate of the second corner
        y2: Y coordinate of the second corner
    """

    x1: float
    y1: float
    x2: float
    y2: float

    @property
    def width(self) -> float:
        """Width of the bounding box."""
        return float(abs(self.x2 - self.x1))

    @property
    def height(self) -> float:
        """Height of the bounding box."""
        return float(abs(self.y2 - self.y1))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"x1": self.x1, "y1": self.y1, "x2": self.x2, "y2": self.y2}


@dataclass(frozen=True)
class FitMetadata:
    """Diagnostic information about a calculation.

    Informational only; never fed back into computation.
    """

    bounding_box: BoundingBox
    width: float
    height: float
    original_length: int
    translated_length: int
    minimum_size: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "bounding_box": self.bounding_box.to_dict(),
            "dimensions": {"width": self.width, "height": self.height},
            "text_lengths": {
                "original": self.original_length,
                "translated": self.translated_length,
            },
            "minimum_size": self.minimum_size,
        }


@dataclass(frozen=True)
class FitResult:
    """Result of a font size calculation.

    Attributes:
        font_size: Adapted font size.
        original_size: Size before any shrinking (min of box width/height).
        iterations: Number of shrink steps performed.
        fitted: Whether the translated text fits at ``font_size``.
        metadata: Diagnostic details.
    """

    font_size: float
    original_size: float
    iterations: int
    fitted: bool
    metadata: FitMetadata

    @property
    def reduction(self) -> float:
        """Fraction of the original size removed by shrinking (0.0 - 1.0)."""
        if self.original_size == 0:
            return 0.0
        return 1.0 - self.font_size / self.original_size

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "font_size": self.font_size,
            "original_size": self.original_size,
            "iterations": self.iterations,
            "fitted": self.fitted,
            "metadata": self.metadata.to_dict(),
        }

    def to_json(self, indent: int | None = None) -> str:
        """Export to JSON string.

        Args:
            indent: JSON indentation level (compact when None).

        Returns:
            JSON string representation.
        """
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def to_yaml(self) -> str:
        """Export to YAML string."""
        return yaml.safe_dump(self.to_dict(), sort_keys=False, allow_unicode=True)

    def __str__(self) -> str:
        status = "fitted" if self.fitted else "did not fit (reached minimum)"
        return (
            f"Font size: {round(self.font_size, 2)} "
            f"({status} after {self.iterations} iterations)"
        )


@dataclass(frozen=True)
class BatchSummary:
    """Aggregate statistics over a batch of results."""

    total: int
    fitted: int
    total_iterations: int
    average_font_size: float

    @property
    def not_fitted(self) -> int:
        return self.total - self.fitted

    @property
    def fit_rate(self) -> float:
        """Fraction of results that fitted (0.0 for an empty batch)."""
        if self.total == 0:
            return 0.0
        return self.fitted / self.total

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "total": self.total,
            "fitted": self.fitted,
            "not_fitted": self.not_fitted,
            "total_iterations": self.total_iterations,
            "average_font_size": self.average_font_size,
            "fit_rate": self.fit_rate,
        }

    def __str__(self) -> str:
        return (
            f"Total: {self.total}, fitted: {self.fitted} "
            f"({round(self.fit_rate * 100, 1)}%), "
            f"average font size: {round(self.average_font_size, 2)}, "
            f"total iterations: {self.total_iterations}"
        )


def results_to_json(results: Sequence[FitResult], indent: int | None = 2) -> str:
    """Export a list of results to a JSON array string."""
    return json.dumps([r.to_dict() for r in results], indent=indent, ensure_ascii=False)


def results_to_yaml(results: Sequence[FitResult]) -> str:
    """Export a list of results to a YAML sequence string."""
    return yaml.safe_dump(
        [r.to_dict() for r in results], sort_keys=False, allow_unicode=True
    )
