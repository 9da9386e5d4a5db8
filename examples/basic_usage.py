#!/usr/bin/env python3
# SPDX-License-Identifier: Apache-2.0
"""Basic text-fit usage.

Usage:
    python examples/basic_usage.py
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path (for development)
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from text_fit import FontSizeCalculator, calculate  # noqa: E402


def main() -> None:
    print("=== Basic Usage ===")
    result = calculate(0, 0, 100, 50, "hello", "bonjour")
    print(f"Font size: {result.font_size}")
    print(f"Fitted: {result.fitted}")
    print(f"Iterations: {result.iterations}")
    print()

    print("=== Using FontSizeCalculator ===")
    calculator = FontSizeCalculator()
    result = calculator.calculate(0, 0, 200, 100, "short", "much longer translated text")
    print(f"Original size: {result.original_size}")
    print(f"Final size: {result.font_size}")
    print(f"Reduction: {round(result.reduction * 100, 1)}%")
    print(f"Iterations: {result.iterations}")
    print()

    print("=== Metadata ===")
    metadata = result.to_dict()["metadata"]
    print(f"Bounding box: {metadata['bounding_box']}")
    print(f"Dimensions: {metadata['dimensions']}")
    print(f"Text lengths: {metadata['text_lengths']}")
    print()

    print("=== Output Formats ===")
    result = calculate(0, 0, 100, 50, "hi", "hello")
    print(f"String: {result}")
    print(f"JSON: {result.to_json()}")
    print(f"YAML:\n{result.to_yaml()}")


if __name__ == "__main__":
    main()
