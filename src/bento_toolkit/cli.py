"""
Command-line entry point for the placement engine.

Reads content items from a JSON file, computes a single layout or one
layout per breakpoint, and prints the result as JSON or as template
area rows.

Usage:
    bento-grid items.json
    bento-grid items.json --columns 3 --format matrix
    bento-grid items.json --responsive --preview out/layout.png
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from bento_toolkit import __version__
from bento_toolkit.core.models import LayoutResult
from bento_toolkit.core.schemas import ValidationError
from bento_toolkit.core.utils.serialization import load_items, serialize_layout_result
from bento_toolkit.engine import (
    Breakpoint,
    ConfigurationError,
    PlacementConfig,
    calculate_placement,
    calculate_responsive_placement,
    emit_grid_template,
    measure_layout_performance,
    optimize_placement_settings,
)

logger = logging.getLogger("bento_toolkit.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bento-grid",
        description="Compute a content grid layout from weighted content items",
    )
    parser.add_argument("items", type=Path, help="JSON file with content items")
    parser.add_argument("--columns", type=int, default=4, help="Requested column count")
    parser.add_argument("--max-rows", type=int, default=None, help="Hard cap on grid rows")
    parser.add_argument("--container-width", type=int, default=None,
                        help="Container width in pixels (auto-fit columns)")
    parser.add_argument("--responsive", action="store_true",
                        help="Compute one layout per breakpoint")
    parser.add_argument("--optimize", action="store_true",
                        help="Use recommended settings for the item set")
    parser.add_argument("--no-clustering", action="store_true",
                        help="Disable clustering avoidance")
    parser.add_argument("--no-balance", action="store_true", help="Disable row balance")
    parser.add_argument("--format", choices=["json", "matrix"], default="json",
                        help="Output format")
    parser.add_argument("--diagnostics", action="store_true",
                        help="Include layout performance diagnostics in JSON output")
    parser.add_argument("--preview", type=Path, default=None,
                        help="Write a PNG wireframe of the (wide) layout")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _result_payload(result: LayoutResult, diagnostics: bool) -> dict:
    payload = serialize_layout_result(result)
    if diagnostics:
        payload["diagnostics"] = measure_layout_performance(result.layout).to_dict()
    return payload


def _matrix_text(result: LayoutResult) -> str:
    if not result.cells:
        return ""
    return emit_grid_template(result.layout).to_text()


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command-line interface.

    Returns:
        Exit code: 0 when every layout succeeded, 1 when degraded,
        2 for invalid input or configuration
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    try:
        items = load_items(args.items)
        config = PlacementConfig(
            columns=args.columns,
            max_rows=args.max_rows,
            container_width=args.container_width,
        )
    except (OSError, ValidationError, ConfigurationError) as e:
        logger.error(str(e))
        return 2

    if args.optimize:
        config = optimize_placement_settings(items, config)
    if args.no_clustering:
        config = replace(config, prevent_clustering=False)
    if args.no_balance:
        config = replace(config, balance_rows=False)

    if args.responsive:
        layouts = calculate_responsive_placement(items, config)
        results = {bp.value: layouts.for_breakpoint(bp) for bp in Breakpoint}
        preview_result = layouts.wide
    else:
        result = calculate_placement(items, config)
        results = {"layout": result}
        preview_result = result

    if args.format == "matrix":
        blocks = []
        for name, result in results.items():
            header = f"# {name}" if args.responsive else None
            blocks.append("\n".join(filter(None, [header, _matrix_text(result)])))
        print("\n\n".join(blocks))
    elif args.responsive:
        print(json.dumps(
            {name: _result_payload(r, args.diagnostics) for name, r in results.items()},
            indent=2,
        ))
    else:
        print(json.dumps(_result_payload(results["layout"], args.diagnostics), indent=2))

    if args.preview is not None:
        from bento_toolkit.debug.visualizer import save_layout_preview
        save_layout_preview(preview_result.layout, args.preview)

    return 0 if all(r.success for r in results.values()) else 1


if __name__ == "__main__":
    sys.exit(main())
