#!/usr/bin/env python3
# SPDX-License-Identifier: Apache-2.0
"""Batch processing example.

Usage:
    python examples/batch_processing.py
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path (for development)
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from text_fit import FontSizeCalculator, summarize_batch  # noqa: E402

TRANSLATIONS = [
    {"x1": 0, "y1": 0, "x2": 100, "y2": 50, "orig": "Hello", "trans": "Bonjour"},
    {"x1": 0, "y1": 0, "x2": 150, "y2": 75, "orig": "World", "trans": "Monde"},
    {"x1": 0, "y1": 0, "x2": 200, "y2": 100, "orig": "Good morning", "trans": "Bonjour"},
    {"x1": 0, "y1": 0, "x2": 80, "y2": 40, "orig": "Hi", "trans": "Salut"},
    {"x1": 0, "y1": 0, "x2": 120, "y2": 60, "orig": "Goodbye", "trans": "Au revoir"},
]


def main() -> None:
    calculator = FontSizeCalculator()
    results = calculator.calculate_batch(TRANSLATIONS)

    print("Results:")
    print("-" * 80)
    for idx, (item, result) in enumerate(zip(TRANSLATIONS, results), start=1):
        status = "Fitted" if result.fitted else "Did not fit"
        print(f"[{idx}] {item['orig']} -> {item['trans']}")
        print(
            f"    Bounding box: ({item['x1']},{item['y1']}) to ({item['x2']},{item['y2']})"
        )
        print(f"    Font size: {round(result.font_size, 2)} ({result.iterations} iterations)")
        print(f"    Status: {status}")
    print("-" * 80)

    print(f"Summary: {summarize_batch(results)}")


if __name__ == "__main__":
    main()
