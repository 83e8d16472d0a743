"""
Report rendering: plot styling, bar charts, and styled tables.
"""
from .plot_style import apply_style, bar_colors, palette_for, PALETTE, CATEGORY_PALETTE
from .charts import bar_chart, save_figure
from .tables import format_cells, render_table

__all__ = [
    "apply_style",
    "palette_for",
    "bar_colors",
    "PALETTE",
    "CATEGORY_PALETTE",
    "bar_chart",
    "save_figure",
    "format_cells",
    "render_table",
]
