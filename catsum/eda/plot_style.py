"""
Report theme: warm survey palette, one accent reserved for highlighted bars
(the collapsed Other bucket by default).
"""
from __future__ import annotations

from collections.abc import Iterable

PALETTE = {
    "bar": "#8c3b2e",          # steak red, single-series bars
    "accent": "#e0a458",       # highlighted bars
    "muted": "#7a7a7a",        # subtitles, footers
    "rule": "#dcdcdc",         # table borders
    "stripe": "#f7f3ee",       # alternate table rows
    "header": "#3d2b24",       # table header fill
    "background": "#ffffff",
}

# Hue groups, ordered rare -> well done for steak preparations.
CATEGORY_PALETTE = [
    "#b8323a",
    "#d9675b",
    "#e8a07a",
    "#b98b6e",
    "#6e4b3a",
    "#4f6d7a",
    "#8da9a0",
    "#c9b77c",
]


def apply_style(font_scale: float = 1.0) -> None:
    """Seaborn white grid with the report palette as the color cycle."""
    import matplotlib.pyplot as plt
    import seaborn as sns
    sns.set_theme(
        style="whitegrid",
        palette=CATEGORY_PALETTE,
        font_scale=font_scale,
        rc={
            "axes.spines.top": False,
            "axes.spines.right": False,
            "grid.alpha": 0.4,
            "axes.titleweight": "600",
        },
    )
    plt.rcParams["figure.facecolor"] = PALETTE["background"]


def palette_for(n: int) -> list[str]:
    """n colors from CATEGORY_PALETTE, cycling."""
    return [CATEGORY_PALETTE[i % len(CATEGORY_PALETTE)] for i in range(n)]


def bar_colors(labels: Iterable, highlight: Iterable[str] = ()) -> list[str]:
    """One color per bar: accent for labels in `highlight`, the bar color otherwise."""
    marked = {str(h) for h in highlight}
    return [PALETTE["accent"] if str(label) in marked else PALETTE["bar"] for label in labels]
