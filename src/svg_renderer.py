# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
SVG Renderer for word hunt grids.
Each cell is drawn in its render state: default, selected or found.
"""

from dataclasses import dataclass
from typing import Optional
from xml.sax.saxutils import escape

from models import Grid


@dataclass
class SVGConfig:
    """Configuration for SVG rendering."""
    cell_size: int = 40
    border_width: int = 2
    inner_border_width: int = 1

    # Colors
    background_color: str = "#FFFFFF"
    grid_color: str = "#999999"
    letter_color: str = "#000000"
    selected_color: str = "#FFE08A"
    found_color: str = "#F7A8C4"

    # Fonts
    font_family: str = "Arial, Helvetica, sans-serif"
    letter_font_size: int = 22

    letter_offset_y: int = 28  # Slightly below center


class SVGRenderer:
    """Renders word hunt grids as SVG."""

    def __init__(self, config: Optional[SVGConfig] = None):
        self.config = config or SVGConfig()

    def render(self, grid: Grid, title: str = "Word Hunt") -> str:
        """
        Render SVG from grid state.

        Args:
            grid: The puzzle grid (letters plus selected/found flags)
            title: Title used for accessibility

        Returns:
            SVG string
        """
        cfg = self.config

        grid_size = grid.size * cfg.cell_size
        total = grid_size + 2 * cfg.border_width

        svg_parts = [
            f'<svg xmlns="http://www.w3.org/2000/svg" '
            f'viewBox="0 0 {total} {total}" '
            f'width="{total}" height="{total}">',
            f'  <title>{escape(title)}</title>',
            '  <style>',
            f'    .cell {{ stroke: {cfg.grid_color}; stroke-width: {cfg.inner_border_width}; }}',
            f'    .default {{ fill: {cfg.background_color}; }}',
            f'    .selected {{ fill: {cfg.selected_color}; }}',
            f'    .found {{ fill: {cfg.found_color}; }}',
            f'    .letter {{ font-family: {cfg.font_family}; font-size: {cfg.letter_font_size}px; '
            f'fill: {cfg.letter_color}; text-anchor: middle; }}',
            '  </style>',
            f'  <rect x="0" y="0" width="{total}" height="{total}" '
            f'fill="{cfg.background_color}" stroke="{cfg.grid_color}" '
            f'stroke-width="{cfg.border_width}" />',
        ]

        for cell in grid.iter_cells():
            x = cfg.border_width + cell.col * cfg.cell_size
            y = cfg.border_width + cell.row * cfg.cell_size
            svg_parts.append(
                f'  <rect x="{x}" y="{y}" '
                f'width="{cfg.cell_size}" height="{cfg.cell_size}" '
                f'class="cell {cell.state.value}" '
                f'data-row="{cell.row}" data-col="{cell.col}" />'
            )
            svg_parts.append(
                f'  <text x="{x + cfg.cell_size // 2}" '
                f'y="{y + cfg.letter_offset_y}" '
                f'class="letter">{escape(cell.letter)}</text>'
            )

        svg_parts.append('</svg>')

        return '\n'.join(svg_parts)

    def save(self, svg_content: str, filepath: str):
        """Save SVG to file."""
        with open(filepath, 'w', encoding='utf-8') as f:
            f.write(svg_content)
