# SPDX-License-Identifier: Apache-2.0
"""Font size fitting for translated text.

Usage:
    from text_fit import calculate
    result = calculate(0, 0, 100, 50, "hello", "bonjour")
    print(result.font_size, result.fitted)

    # Custom parameters
    from text_fit import FitConfig, FontSizeCalculator
    calculator = FontSizeCalculator(FitConfig(delta=0.25, min_size_factor=0.5))
    results = calculator.calculate_batch(records)
"""

from __future__ import annotations

from text_fit.core import (
    BatchSummary,
    FitConfig,
    FitRequest,
    FitResult,
    FontSizeCalculator,
    InvalidConfiguration,
    InvalidInput,
    TextFitError,
    summarize_batch,
)

__version__ = "0.1.0"

__all__ = [
    "BatchSummary",
    "FitConfig",
    "FitRequest",
    "FitResult",
    "FontSizeCalculator",
    "InvalidConfiguration",
    "InvalidInput",
    "TextFitError",
    "__version__",
    "calculate",
    "summarize_batch",
]


def calculate(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    original_text: str,
    translated_text: str,
    config: FitConfig | None = None,
) -> FitResult:
    """Calculate the font size with a one-off calculator.

    Args:
        x1: X coordinate of the first corner.
        y1: Y coordinate of the first corner.
        x2: X coordinate of the opposite corner.
        y2: Y coordinate of the opposite corner.
        original_text: Original text.
        translated_text: Translated text.
        config: Optional configuration (default: FitConfig.default()).

    Returns:
        Calculation result.
    """
    calculator = FontSizeCalculator(config)
    return calculator.calculate(x1, y1, x2, y2, original_text, translated_text)
