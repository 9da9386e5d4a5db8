# SPDX-License-Identifier: Apache-2.0
"""Font size adaptation for translated text.

The calculator starts from the largest font size the bounding box allows,
``min(width, height)``, and shrinks it in ``delta`` steps until the box
capacity covers the translated text or the configured floor is reached::

    capacity = width * height / size ** 2

Capacity is measured in characters. Shrinking only happens when the
translated text is strictly longer than the original; equal or shorter text is
assumed to fit at the original size.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from numbers import Real
from typing import Any, Union

from text_fit.core.config import FitConfig
from text_fit.core.errors import InvalidInput
from text_fit.core.models import BatchSummary, BoundingBox, FitMetadata, FitResult

# Floor as a fraction of the original size when min_size_factor is 0.
ZERO_FLOOR_RATIO = 1e-3

_ORIGINAL_TEXT_KEYS = ("t_orig", "orig")
_TRANSLATED_TEXT_KEYS = ("t_trans", "trans")


def _first_present(record: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        value = record.get(key)
        if value is not None:
            return value
    raise InvalidInput(f"record is missing '{keys[0]}' (or '{keys[1]}')")


@dataclass(frozen=True)
class FitRequest:
    """Input of a single calculation.

    Attributes:
        x1: X coordinate of the first box corner
        y1: Y coordinate of the first box corner
        x2: X coordinate of the opposite corner
        y2: Y coordinate of the opposite corner
        original_text: Source text (size reference)
        translated_text: Text that has to fit
    """

    x1: float
    y1: float
    x2: float
    y2: float
    original_text: str
    translated_text: str

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> FitRequest:
        """Normalize an external record into a FitRequest.

        Accepts ``t_orig``/``orig`` for the original text and
        ``t_trans``/``trans`` for the translated text. Values are passed
        through unchanged; they are validated when calculated.

        Args:
            record: Mapping with x1, y1, x2, y2 and the two texts.

        Returns:
            FitRequest instance.

        Raises:
            InvalidInput: If the record is not a mapping or a field is missing.
        """
        if not isinstance(record, Mapping):
            raise InvalidInput(f"record must be a mapping, got {type(record).__name__}")

        coords = {}
        for key in ("x1", "y1", "x2", "y2"):
            if record.get(key) is None:
                raise InvalidInput(f"record is missing '{key}'")
            coords[key] = record[key]

        return cls(
            **coords,
            original_text=_first_present(record, _ORIGINAL_TEXT_KEYS),
            translated_text=_first_present(record, _TRANSLATED_TEXT_KEYS),
        )


BatchItem = Union[FitRequest, Mapping[str, Any]]


class FontSizeCalculator:
    """Adapt font size so that translated text fits into a bounding box."""

    def __init__(self, config: FitConfig | None = None) -> None:
        """Initialize FontSizeCalculator.

        Args:
            config: Fitting parameters (default: FitConfig.default()).
        """
        self._config = config or FitConfig.default()

    @property
    def config(self) -> FitConfig:
        return self._config

    def calculate(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        original_text: str,
        translated_text: str,
    ) -> FitResult:
        """Calculate the font size for translated text in a bounding box.

        Args:
            x1: X coordinate of the first corner.
            y1: Y coordinate of the first corner.
            x2: X coordinate of the opposite corner.
            y2: Y coordinate of the opposite corner.
            original_text: Original text.
            translated_text: Translated text.

        Returns:
            FitResult with the adapted size and metadata.

        Raises:
            InvalidInput: On non-numeric coordinates, non-string texts or a
                zero-area bounding box.
        """
        return self.calculate_request(
            FitRequest(x1, y1, x2, y2, original_text, translated_text)
        )

    def calculate_request(self, request: FitRequest) -> FitResult:
        """Calculate the font size for a FitRequest."""
        bbox = BoundingBox(*self._validate(request))
        width = bbox.width
        height = bbox.height
        original_size = min(width, height)
        min_size = self._config.min_size_factor * original_size
        floor = min_size if min_size > 0 else original_size * ZERO_FLOOR_RATIO
        if floor <= 0:
            # Underflow on subnormal boxes: never shrink to zero.
            floor = original_size

        n_orig = len(request.original_text)
        n_trans = len(request.translated_text)

        size = original_size
        iterations = 0
        fitted = True

        if n_trans > n_orig:
            capacity = _capacity(width, height, size)
            while capacity < n_trans and size > floor:
                # Clamp the last step so size never drops below the floor.
                next_size = max(size - self._config.delta, floor)
                if next_size >= size:
                    # delta is below float precision at this size
                    break
                size = next_size
                capacity = _capacity(width, height, size)
                iterations += 1
            fitted = capacity >= n_trans

        return FitResult(
            font_size=size,
            original_size=original_size,
            iterations=iterations,
            fitted=fitted,
            metadata=FitMetadata(
                bounding_box=bbox,
                width=width,
                height=height,
                original_length=n_orig,
                translated_length=n_trans,
                minimum_size=min_size,
            ),
        )

    def calculate_batch(self, items: Iterable[BatchItem]) -> list[FitResult]:
        """Calculate font sizes for multiple items.

        Items are independent; results are returned in input order.

        Args:
            items: FitRequest instances or mappings accepted by
                FitRequest.from_record.

        Returns:
            List of results (same order and length as input).

        Raises:
            InvalidInput: On the first invalid item, prefixed with its index.
        """
        results: list[FitResult] = []
        for index, item in enumerate(items):
            try:
                request = item if isinstance(item, FitRequest) else FitRequest.from_record(item)
                results.append(self.calculate_request(request))
            except InvalidInput as exc:
                raise InvalidInput(f"item {index}: {exc}") from exc
        return results

    @staticmethod
    def _validate(request: FitRequest) -> tuple[float, float, float, float]:
        """Validate a request and return its coordinates as floats."""
        coords = (request.x1, request.y1, request.x2, request.y2)
        if not all(isinstance(c, Real) and not isinstance(c, bool) for c in coords):
            raise InvalidInput("coordinates must be numeric")
        try:
            x1, y1, x2, y2 = (float(c) for c in coords)
        except OverflowError as exc:
            raise InvalidInput("coordinates must be finite") from exc
        if not all(math.isfinite(c) for c in (x1, y1, x2, y2, x2 - x1, y2 - y1)):
            raise InvalidInput("coordinates must be finite")
        if not (
            isinstance(request.original_text, str)
            and isinstance(request.translated_text, str)
        ):
            raise InvalidInput("texts must be strings")
        if x2 - x1 == 0 or y2 - y1 == 0:
            raise InvalidInput("bounding box must have positive area")
        return x1, y1, x2, y2


def _capacity(width: float, height: float, size: float) -> float:
    # Same as width * height / size**2 without overflowing on large boxes.
    return (width / size) * (height / size)


def summarize_batch(results: Iterable[FitResult]) -> BatchSummary:
    """Aggregate statistics over batch results."""
    results = list(results)
    total = len(results)
    return BatchSummary(
        total=total,
        fitted=sum(1 for r in results if r.fitted),
        total_iterations=sum(r.iterations for r in results),
        average_font_size=sum(r.font_size for r in results) / total if total else 0.0,
    )
