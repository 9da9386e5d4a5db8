#!/usr/bin/env python3
# SPDX-License-Identifier: Apache-2.0
"""Custom configuration example.

Environment variables (loaded from .env in the project root):
    TEXT_FIT_DELTA: Font size reduction step
    TEXT_FIT_MIN_SIZE_FACTOR: Minimum size factor

Usage:
    python examples/custom_config.py
"""

from __future__ import annotations

import sys
from pathlib import Path

from dotenv import load_dotenv

# Add src to path (for development)
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from text_fit import FitConfig, FontSizeCalculator  # noqa: E402

load_dotenv(PROJECT_ROOT / ".env")

ORIGINAL = "Save"
TRANSLATED = "Speichern unter"


def main() -> None:
    configs = {
        "default": FitConfig.default(),
        "fine steps": FitConfig(delta=0.1),
        "keep it large": FitConfig(min_size_factor=0.7),
        "environment": FitConfig.from_env(),
    }

    for name, config in configs.items():
        result = FontSizeCalculator(config).calculate(0, 0, 60, 20, ORIGINAL, TRANSLATED)
        print(f"{name:>14}: {config.to_dict()}")
        print(f"{'':>14}  {result}")


if __name__ == "__main__":
    main()
