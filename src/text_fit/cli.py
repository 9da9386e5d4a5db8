# SPDX-License-Identifier: Apache-2.0
"""
text-fit - CLI Tool

Calculates the font size that lets translated text fit into the bounding box
of the original text.

Usage:
    text-fit [options] calculate X1 Y1 X2 Y2 ORIG TRANS
    text-fit [options] batch FILE
    text-fit version

Examples:
    text-fit calculate 0 0 100 50 "hello" "bonjour"
    text-fit --output-format json calculate 0 0 200 100 "short" "much longer text"
    text-fit --delta 0.25 --min-size-factor 0.4 calculate 0 0 100 50 "hi" "hello"
    text-fit --output-format yaml batch translations.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import NoReturn

from dotenv import load_dotenv

from text_fit import __version__
from text_fit.core.calculator import FontSizeCalculator, summarize_batch
from text_fit.core.config import FitConfig
from text_fit.core.errors import TextFitError
from text_fit.core.models import FitResult, results_to_json, results_to_yaml

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ["text", "json", "yaml"]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser.

    Returns:
        Configured ArgumentParser.
    """
    parser = argparse.ArgumentParser(
        prog="text-fit",
        description="Calculate font sizes that fit translated text into bounding boxes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s calculate 0 0 100 50 "hello" "bonjour"
  %(prog)s --output-format json calculate 0 0 200 100 "short" "much longer text"
  %(prog)s --delta 0.25 --min-size-factor 0.4 calculate 0 0 100 50 "hi" "hello"
  %(prog)s batch translations.json

Environment Variables (with --from-env, .env is loaded first):
  TEXT_FIT_DELTA              Font size reduction step (default: 0.5)
  TEXT_FIT_MIN_SIZE_FACTOR    Minimum size factor (default: 0.3)
""",
    )

    # Configuration options
    config_group = parser.add_argument_group("Configuration options")
    config_group.add_argument(
        "--delta",
        type=float,
        help="Font size reduction step (default: 0.5)",
    )
    config_group.add_argument(
        "--min-size-factor",
        type=float,
        help="Minimum size as a fraction of the original size (default: 0.3)",
    )
    config_group.add_argument(
        "--config",
        type=Path,
        metavar="FILE",
        help="JSON or YAML file with delta and min_size_factor",
    )
    config_group.add_argument(
        "--from-env",
        action="store_true",
        help="Read TEXT_FIT_DELTA / TEXT_FIT_MIN_SIZE_FACTOR (and .env)",
    )

    parser.add_argument(
        "-f",
        "--output-format",
        default="text",
        choices=OUTPUT_FORMATS,
        help="Output format (default: text)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    calc = subparsers.add_parser(
        "calculate",
        help="Calculate font size for text fitting",
    )
    for name in ("x1", "y1", "x2", "y2"):
        calc.add_argument(name, type=float, help=f"Bounding box coordinate {name.upper()}")
    calc.add_argument("orig", help="Original text")
    calc.add_argument("trans", help="Translated text")

    batch = subparsers.add_parser(
        "batch",
        help="Process multiple translations from a JSON file",
        description=(
            "The JSON file holds an array of objects: "
            '[{"x1": 0, "y1": 0, "x2": 100, "y2": 50, "orig": "hello", "trans": "bonjour"}, ...]'
        ),
    )
    batch.add_argument("file", type=Path, help="JSON file with translation records")

    subparsers.add_parser("version", help="Show version")

    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Argument list (default: sys.argv[1:]).

    Returns:
        Parsed argument Namespace.
    """
    return build_parser().parse_args(argv)


def build_config(args: argparse.Namespace) -> FitConfig:
    """Build configuration from arguments.

    Precedence: explicit flags > --config file > --from-env > defaults.

    Args:
        args: Command line arguments.

    Returns:
        Validated FitConfig.
    """
    if args.from_env:
        load_dotenv(Path.cwd() / ".env")
        config = FitConfig.from_env()
    else:
        config = FitConfig.default()
    if args.config:
        config = FitConfig.from_file(args.config, base=config)
    config = config.with_overrides(delta=args.delta, min_size_factor=args.min_size_factor)
    logger.debug("Using configuration: %s", config.to_dict())
    return config


def format_result(result: FitResult, output_format: str) -> str:
    """Render a single result in the requested format."""
    if output_format == "json":
        return result.to_json()
    if output_format == "yaml":
        return result.to_yaml().rstrip("\n")
    return str(result)


def format_batch(results: list[FitResult], output_format: str) -> str:
    """Render batch results in the requested format."""
    if output_format == "json":
        return results_to_json(results)
    if output_format == "yaml":
        return results_to_yaml(results).rstrip("\n")
    lines = [f"[{idx}] {result}" for idx, result in enumerate(results, start=1)]
    lines.append("")
    lines.append(f"Summary: {summarize_batch(results)}")
    return "\n".join(lines)


def load_batch_file(path: Path) -> list:
    """Load batch records from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid JSON or not an array.
    """
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise ValueError("Invalid JSON: expected an array of records")
    logger.debug("Loaded %d records from %s", len(data), path)
    return data


def run(args: argparse.Namespace) -> int:
    """Execute the selected command.

    Args:
        args: Command line arguments.

    Returns:
        Exit code (0: success, 1: failure).
    """
    if args.command == "version":
        print(f"text-fit version {__version__}")
        return 0

    try:
        config = build_config(args)
        calculator = FontSizeCalculator(config)

        if args.command == "calculate":
            result = calculator.calculate(
                args.x1, args.y1, args.x2, args.y2, args.orig, args.trans
            )
            print(format_result(result, args.output_format))
        else:
            records = load_batch_file(args.file)
            results = calculator.calculate_batch(records)
            print(format_batch(results, args.output_format))
    except (TextFitError, FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1

    return 0


def main(argv: Sequence[str] | None = None) -> NoReturn:
    """Main entry point."""
    args = parse_args(argv)

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s")

    sys.exit(run(args))


if __name__ == "__main__":
    main()
