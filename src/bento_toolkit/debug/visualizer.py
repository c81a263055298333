"""
Module: debug.visualizer

Purpose:
    Debug visualization for the placement engine. Draws a wireframe of a
    computed layout with one labelled box per cell, colored by size
    class, to help diagnose placement decisions.

Key Functions:
    - render_layout_preview(): Create wireframe image for a layout
    - save_layout_preview(): Save wireframe to disk

Dependencies:
    - PIL: Image drawing
    - core.models: GridLayout

Used By:
    - bento_toolkit.cli: --preview option
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple

from PIL import Image, ImageDraw, ImageFont

from bento_toolkit.core.models import GridCell, GridLayout, SizeClass

logger = logging.getLogger(__name__)

# Visualization constants
COLORS = {
    SizeClass.TALL: (220, 60, 60, 150),      # Red - Tall cards
    SizeClass.WIDE: (50, 90, 220, 150),      # Blue - Wide cards
    SizeClass.COMPACT: (40, 170, 80, 150),   # Green - Compact cards
}

BACKGROUND_COLOR = (255, 255, 255)
GRID_LINE_COLOR = (200, 200, 200)
LABEL_TEXT_COLOR = (0, 0, 0)
BOX_LINE_WIDTH = 3
UNIT_SIZE = 120
GAP = 8
FONT_SIZE = 14


def _cell_bbox(cell: GridCell, unit: int, gap: int) -> Tuple[int, int, int, int]:
    """Pixel (left, top, right, bottom) of a cell including gutters."""
    left = gap + cell.col_start * (unit + gap)
    top = gap + cell.row_start * (unit + gap)
    right = left + cell.col_span * unit + (cell.col_span - 1) * gap
    bottom = top + cell.row_span * unit + (cell.row_span - 1) * gap
    return left, top, right, bottom


def render_layout_preview(
    layout: GridLayout,
    unit: int = UNIT_SIZE,
    gap: int = GAP,
) -> Image.Image:
    """
    Create a wireframe image of a layout.

    Empty grid units are drawn as light outlines; each cell is a
    semi-transparent box labelled with its item id and span.

    Args:
        layout: Computed layout
        unit: Pixel size of one grid unit
        gap: Pixel gutter between units

    Returns:
        RGB image sized to the grid (at least 1x1 unit for empty layouts)

    Example:
        >>> img = render_layout_preview(result.layout)
        >>> img.save("layout.png")
    """
    rows = max(1, layout.rows)
    columns = max(1, layout.columns)
    width = gap + columns * (unit + gap)
    height = gap + rows * (unit + gap)

    base = Image.new("RGBA", (width, height), BACKGROUND_COLOR + (255,))
    overlay = Image.new("RGBA", base.size, (255, 255, 255, 0))
    draw = ImageDraw.Draw(overlay)

    try:
        font = ImageFont.truetype("Arial.ttf", FONT_SIZE)
    except (IOError, OSError):
        font = ImageFont.load_default()

    for row in range(rows):
        for col in range(columns):
            left = gap + col * (unit + gap)
            top = gap + row * (unit + gap)
            draw.rectangle((left, top, left + unit, top + unit), outline=GRID_LINE_COLOR)

    for cell in layout.cells:
        bbox = _cell_bbox(cell, unit, gap)
        color = COLORS[cell.size_class]
        draw.rectangle(bbox, fill=color, outline=color[:3] + (255,), width=BOX_LINE_WIDTH)
        draw.text(
            (bbox[0] + 6, bbox[1] + 6),
            f"{cell.item_id}\n{cell.row_span}x{cell.col_span}",
            fill=LABEL_TEXT_COLOR,
            font=font,
        )

    return Image.alpha_composite(base, overlay).convert("RGB")


def save_layout_preview(layout: GridLayout, path: Path, unit: int = UNIT_SIZE) -> Path:
    """
    Render and save a layout wireframe as PNG.

    Args:
        layout: Computed layout
        path: Output file path (parent directories are created)
        unit: Pixel size of one grid unit

    Returns:
        Path to saved image
    """
    image = render_layout_preview(layout, unit=unit)
    path.parent.mkdir(parents=True, exist_ok=True)
    image.save(path, "PNG")

    logger.info(
        f"Saved layout preview to {path}: "
        f"{layout.cell_count} cells on {layout.rows}x{layout.columns}"
    )
    return path
