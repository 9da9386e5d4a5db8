# SPDX-License-Identifier: Apache-2.0
"""Tests for result models."""

from __future__ import annotations

import dataclasses
import json

import pytest
import yaml

from text_fit.core.calculator import FontSizeCalculator
from text_fit.core.models import (
    BatchSummary,
    BoundingBox,
    FitMetadata,
    FitResult,
    results_to_json,
    results_to_yaml,
)


def _make_result(fitted: bool = True, font_size: float = 12.5) -> FitResult:
    return FitResult(
        font_size=font_size,
        original_size=50.0,
        iterations=3,
        fitted=fitted,
        metadata=FitMetadata(
            bounding_box=BoundingBox(0, 0, 100, 50),
            width=100.0,
            height=50.0,
            original_length=2,
            translated_length=7,
            minimum_size=15.0,
        ),
    )


class TestBoundingBox:
    """Tests for BoundingBox."""

    def test_dimensions(self) -> None:
        bbox = BoundingBox(x1=100, y1=10, x2=20, y2=60)
        assert bbox.width == 80.0
        assert bbox.height == 50.0

    def test_to_dict(self) -> None:
        assert BoundingBox(1, 2, 3, 4).to_dict() == {"x1": 1, "y1": 2, "x2": 3, "y2": 4}


class TestFitResult:
    """Tests for FitResult exports."""

    def test_to_dict_shape(self) -> None:
        d = _make_result().to_dict()

        assert list(d) == ["font_size", "original_size", "iterations", "fitted", "metadata"]
        assert d["metadata"] == {
            "bounding_box": {"x1": 0, "y1": 0, "x2": 100, "y2": 50},
            "dimensions": {"width": 100.0, "height": 50.0},
            "text_lengths": {"original": 2, "translated": 7},
            "minimum_size": 15.0,
        }

    def test_to_json(self) -> None:
        result = _make_result()
        data = json.loads(result.to_json())
        assert data == result.to_dict()

    def test_to_json_indent(self) -> None:
        assert "\n" in _make_result().to_json(indent=2)
        assert "\n" not in _make_result().to_json()

    def test_to_yaml(self) -> None:
        result = _make_result()
        text = result.to_yaml()
        assert text.startswith("font_size: 12.5\n")
        assert yaml.safe_load(text) == result.to_dict()

    def test_str_fitted(self) -> None:
        assert str(_make_result()) == "Font size: 12.5 (fitted after 3 iterations)"

    def test_str_not_fitted(self) -> None:
        result = _make_result(fitted=False, font_size=15.0)
        assert str(result) == "Font size: 15.0 (did not fit (reached minimum) after 3 iterations)"

    def test_str_rounds_size(self) -> None:
        assert str(_make_result(font_size=12.3456)).startswith("Font size: 12.35 ")

    def test_reduction(self) -> None:
        assert _make_result(font_size=12.5).reduction == pytest.approx(0.75)

    def test_immutable(self) -> None:
        result = _make_result()
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.font_size = 1.0  # type: ignore[misc]

    def test_from_calculator(self) -> None:
        result = FontSizeCalculator().calculate(0, 0, 100, 50, "hello", "hello")
        assert str(result) == "Font size: 50.0 (fitted after 0 iterations)"
        assert result.to_dict()["metadata"]["minimum_size"] == pytest.approx(15.0)


class TestListExports:
    """Tests for results_to_json / results_to_yaml."""

    def test_results_to_json(self) -> None:
        results = [_make_result(), _make_result(fitted=False)]
        data = json.loads(results_to_json(results))
        assert [d["fitted"] for d in data] == [True, False]

    def test_results_to_yaml(self) -> None:
        results = [_make_result(), _make_result(font_size=20.0)]
        data = yaml.safe_load(results_to_yaml(results))
        assert [d["font_size"] for d in data] == [12.5, 20.0]

    def test_empty(self) -> None:
        assert json.loads(results_to_json([])) == []


class TestBatchSummary:
    """Tests for BatchSummary."""

    def test_to_dict(self) -> None:
        summary = BatchSummary(total=4, fitted=3, total_iterations=10, average_font_size=20.0)
        assert summary.to_dict() == {
            "total": 4,
            "fitted": 3,
            "not_fitted": 1,
            "total_iterations": 10,
            "average_font_size": 20.0,
            "fit_rate": 0.75,
        }

    def test_str(self) -> None:
        summary = BatchSummary(total=4, fitted=3, total_iterations=10, average_font_size=20.0)
        assert str(summary) == (
            "Total: 4, fitted: 3 (75.0%), average font size: 20.0, total iterations: 10"
        )
