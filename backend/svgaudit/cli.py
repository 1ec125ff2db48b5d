"""Command line entry point: audit SVG files and print the results.

    svgaudit drawing.svg other.svg
    svgaudit designs/ --json
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from dataclasses import replace

from dotenv import load_dotenv

from svgaudit.config import settings
from svgaudit.engine.analyzer import parse_svg_file
from svgaudit.engine.config import ParserConfig
from svgaudit.errors import SvgAuditError

load_dotenv()

logger = logging.getLogger(__name__)


def collect_paths(inputs: list[str]) -> list[str]:
    """Expand folders into their .svg files (sorted); files pass through."""
    paths: list[str] = []
    for item in inputs:
        if os.path.isdir(item):
            names = sorted(f for f in os.listdir(item) if f.lower().endswith(".svg"))
            paths.extend(os.path.join(item, name) for name in names)
        else:
            paths.append(item)
    return paths


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="svgaudit", description="SVG structural audit: rectangles, coverage and issues")
    parser.add_argument("inputs", nargs="+", help="SVG files or folders of SVGs")
    parser.add_argument("--json", action="store_true", help="Print the stored record as JSON")
    parser.add_argument("--max-depth", type=int, help="Override the group nesting limit")
    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=getattr(logging, settings.svgaudit_log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    args = build_parser().parse_args(argv)
    config = ParserConfig.from_settings(settings)
    if args.max_depth is not None:
        config = replace(config, max_depth=args.max_depth)

    paths = collect_paths(args.inputs)
    logger.debug("Auditing %d files", len(paths))

    failures = 0
    for path in paths:
        try:
            result = parse_svg_file(path, config=config)
        except SvgAuditError as e:
            failures += 1
            print(f"{path}: error: {type(e).__name__}: {e.args[0]}", file=sys.stderr)
            continue

        if args.json:
            print(json.dumps({"file": path, **result.to_record()}))
        else:
            print(f"{path}: {result.summary()}")

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
