"""
Styled summary tables drawn as matplotlib figures: title, subtitle, body, source footer.
"""
from __future__ import annotations

from collections.abc import Callable, Mapping

import matplotlib.pyplot as plt
import pandas as pd

from catsum.eda.plot_style import PALETTE

Formatter = str | Callable[[object], str]


def format_cells(
    table: pd.DataFrame,
    formats: Mapping[str, Formatter] | None = None,
) -> pd.DataFrame:
    """
    Render every cell as text. formats maps column -> format spec ("{:,.0f}") or callable.
    Nulls render as an empty string.
    """
    formats = formats or {}
    out = pd.DataFrame(index=table.index)
    for col in table.columns:
        fmt = formats.get(col)
        s = table[col]
        if fmt is None:
            text = s.map(str)
        elif callable(fmt):
            text = s.map(fmt)
        else:
            text = s.map(fmt.format)
        out[col] = text.where(s.notna(), "")
    return out


def render_table(
    table: pd.DataFrame,
    title: str,
    subtitle: str | None = None,
    source: str | None = None,
    columns: Mapping[str, str] | None = None,
    formats: Mapping[str, Formatter] | None = None,
    col_width: float = 2.2,
    row_height: float = 0.38,
) -> plt.Figure:
    """
    Draw `table` as a figure.
    columns: {source column: header label}; selects and orders columns (default: all).
    formats: per-column cell formatting, keyed by source column.
    """
    if columns:
        missing = [c for c in columns if c not in table.columns]
        if missing:
            raise ValueError(f"render_table: missing columns {missing}")
        body = table[list(columns)]
        headers = list(columns.values())
    else:
        body = table
        headers = [str(c) for c in table.columns]
    cells = format_cells(body, formats)

    n_rows = len(cells) + 1
    fig_h = row_height * n_rows + 1.4
    fig, ax = plt.subplots(figsize=(max(col_width * len(headers), 4.0), fig_h))
    ax.axis("off")

    if len(cells):
        tbl = ax.table(
            cellText=cells.values.tolist(),
            colLabels=headers,
            cellLoc="left",
            colLoc="left",
            loc="upper center",
            bbox=[0, 0, 1, 1],
        )
        tbl.auto_set_font_size(False)
        tbl.set_fontsize(10)
        for (row, _col), cell in tbl.get_celld().items():
            cell.set_edgecolor(PALETTE["rule"])
            if row == 0:
                cell.set_text_props(weight="bold", color=PALETTE["background"])
                cell.set_facecolor(PALETTE["header"])
            elif row % 2 == 0:
                cell.set_facecolor(PALETTE["stripe"])
    else:
        ax.text(0.5, 0.5, "No rows", ha="center", va="center", color=PALETTE["muted"])

    top = 1 - 0.55 / fig_h
    fig.text(0.01, top, title, ha="left", va="bottom", fontsize=14, fontweight="600")
    if subtitle:
        fig.text(0.01, top - 0.02, subtitle, ha="left", va="top", fontsize=10, color=PALETTE["muted"])
    if source:
        fig.text(0.01, 0.01, source, ha="left", va="bottom", fontsize=8, color=PALETTE["muted"])
    fig.subplots_adjust(left=0.01, right=0.99, top=top - 0.35 / fig_h, bottom=0.45 / fig_h)
    return fig
