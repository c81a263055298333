"""Developer previews of computed layouts."""

from .visualizer import render_layout_preview, save_layout_preview

__all__ = ["render_layout_preview", "save_layout_preview"]
