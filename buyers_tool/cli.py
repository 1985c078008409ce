"""
Command-line runner for the Buyer's Tool.

Usage:
    buyers-tool input.json --timestamp 2026-01-15T12:00:00Z
    buyers-tool input.json --timestamp 2026-01-15T12:00:00Z --compact
    buyers-tool input.json --timestamp 2026-01-15T12:00:00Z --json
    buyers-tool input.json --timestamp 2026-01-15T12:00:00Z --export

Reads a BuyerInput JSON file (camelCase or snake_case keys), compiles it and
prints the trace summary. The timestamp is always supplied by the caller so
the same file and timestamp produce the same output.
"""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .config import get_config
from .models import CompilerOptions, CompilerOutput, load_buyer_input
from .pipeline import compile
from .trace import summarize_trace, summarize_trace_compact


logger = logging.getLogger(__name__)


def setup_argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="buyers-tool",
        description="Compile a buy / skip verdict for a scratch-and-dent appliance.",
    )
    parser.add_argument("input", type=Path, help="Path to a BuyerInput JSON file")
    parser.add_argument(
        "--timestamp",
        required=True,
        help="ISO-8601 timestamp recorded in the trace",
    )

    output_group = parser.add_argument_group("Output Options")
    output_group.add_argument(
        "--compact",
        action="store_true",
        help="Print the one-line trace summary and the verdict only",
    )
    output_group.add_argument(
        "--json",
        action="store_true",
        help="Print the full output JSON instead of the summary",
    )
    output_group.add_argument(
        "--export",
        action="store_true",
        help="Also write the output JSON to <exports-dir>/<inputHash>.json",
    )
    output_group.add_argument(
        "--exports-dir",
        type=Path,
        default=None,
        help="Directory for --export (default from BUYERS_TOOL_EXPORTS_DIR)",
    )
    return parser


def export_output(output: CompilerOutput, exports_dir: Path) -> Path:
    """Write the camelCase output JSON, named by input hash."""
    exports_dir.mkdir(parents=True, exist_ok=True)
    path = exports_dir / f"{output.trace.input_hash}.json"
    with open(path, "w", encoding="utf-8") as f:
        json.dump(output.to_json_dict(), f, indent=2, ensure_ascii=False)
    return path


def render(output: CompilerOutput, compact: bool = False) -> list[str]:
    verdict = output.verdict
    verdict_line = f"Verdict: {verdict.recommendation.value} ({verdict.confidence.value}) - {verdict.summary}"
    if compact:
        return [summarize_trace_compact(output.trace), verdict_line]
    return summarize_trace(output.trace) + [verdict_line]


def main(argv: Optional[list[str]] = None) -> int:
    args = setup_argparser().parse_args(argv)
    config = get_config()

    logging.basicConfig(level=config.logging.level, format=config.logging.format)

    try:
        with open(args.input, "r", encoding="utf-8") as f:
            data = json.load(f)
        buyer_input = load_buyer_input(data)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Could not read {args.input}: {e}")
        return 1
    except ValidationError as e:
        logger.error(f"Invalid buyer input in {args.input}:\n{e}")
        return 1

    output = compile(buyer_input, CompilerOptions(timestamp=args.timestamp))

    if args.json:
        print(output.to_json(indent=2))
    else:
        for line in render(output, compact=args.compact):
            print(line)

    if args.export:
        try:
            path = export_output(output, args.exports_dir or config.exports_dir)
        except OSError as e:
            logger.error(f"Could not export output: {e}")
            return 1
        logger.info(f"Exported output to {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
