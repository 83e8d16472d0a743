"""
Bar charts for ranked summary tables.
Category order on the axis follows the table's row order (the ranked order).
"""
from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns
from matplotlib.ticker import PercentFormatter

from catsum.eda.plot_style import PALETTE, bar_colors, palette_for


def _ordered(values: pd.Series) -> list:
    return pd.unique(values.dropna()).tolist()


def _draw(
    ax,
    table: pd.DataFrame,
    x: str,
    y: str,
    order: list,
    hue: str | None,
    hue_order: list,
    stacked: bool,
    horizontal: bool,
    highlight: tuple = (),
) -> None:
    if hue is None:
        values = table.groupby(x, sort=False)[y].sum().reindex(order, fill_value=0)
        plot = ax.barh if horizontal else ax.bar
        plot([str(v) for v in order], values.values, color=bar_colors(order, highlight))
        return
    wide = (
        table.pivot_table(index=x, columns=hue, values=y, aggfunc="sum", sort=False)
        .reindex(index=order, columns=hue_order)
        .fillna(0)
    )
    wide.index = [str(v) for v in wide.index]
    wide.plot(
        kind="barh" if horizontal else "bar",
        stacked=stacked,
        ax=ax,
        color=palette_for(len(hue_order)),
        width=0.8,
        legend=False,
    )


def bar_chart(
    table: pd.DataFrame,
    x: str,
    y: str,
    *,
    hue: str | None = None,
    facet: str | None = None,
    stacked: bool = False,
    horizontal: bool = False,
    percent: bool = False,
    title: str | None = None,
    subtitle: str | None = None,
    xlabel: str | None = None,
    ylabel: str | None = None,
    facet_cols: int = 3,
    highlight: Iterable[str] = (),
) -> plt.Figure:
    """
    Bar chart of `y` per `x`.
    hue: split bars by a second column, dodged or stacked (stacked=True).
    facet: one panel per value of this column, panels in table order.
    horizontal: flip coordinates; the first row of the table is drawn on top.
    percent: y holds percentages (0-100); format the value axis accordingly.
    highlight: x labels drawn in the accent color (single-series charts only).
    """
    missing = [c for c in (x, y, hue, facet) if c is not None and c not in table.columns]
    if missing:
        raise ValueError(f"bar_chart: missing columns {missing}")

    order = _ordered(table[x])
    hue_order = _ordered(table[hue]) if hue else []
    panels = (_ordered(table[facet]) if facet else []) or [None]
    ncols = min(facet_cols, len(panels))
    nrows = -(-len(panels) // ncols)

    fig, axes = plt.subplots(
        nrows,
        ncols,
        figsize=(5 * ncols, 4 * nrows) if facet else None,
        sharex=bool(facet) and horizontal,
        sharey=bool(facet) and not horizontal,
        squeeze=False,
    )
    flat = axes.ravel()
    for ax, panel in zip(flat, panels):
        sub = table if panel is None else table[table[facet] == panel]
        _draw(ax, sub, x, y, order, hue, hue_order, stacked, horizontal, tuple(highlight))
        if panel is not None:
            ax.set_title(str(panel), fontsize=11)
        value_axis = ax.xaxis if horizontal else ax.yaxis
        if percent:
            value_axis.set_major_formatter(PercentFormatter(xmax=100))
        if horizontal:
            ax.invert_yaxis()
            ax.set_xlabel(ylabel if ylabel is not None else y)
            ax.set_ylabel(xlabel if xlabel is not None else x)
        else:
            ax.tick_params(axis="x", labelrotation=45)
            ax.set_xlabel(xlabel if xlabel is not None else x)
            ax.set_ylabel(ylabel if ylabel is not None else y)
    for ax in flat[len(panels):]:
        ax.set_visible(False)

    if hue:
        handles, labels = flat[0].get_legend_handles_labels()
        fig.legend(handles, labels, title=hue, loc="center left", bbox_to_anchor=(1.0, 0.5), frameon=False)
    if title:
        fig.suptitle(title, fontweight="600", x=0.02, ha="left")
    if subtitle:
        fig.text(0.02, 0.93 if title else 0.97, subtitle, ha="left", color=PALETTE["muted"], fontsize=10)
    sns.despine(fig=fig)
    fig.tight_layout(rect=(0, 0, 1, 0.9 if subtitle else 0.95))
    return fig


def save_figure(fig: plt.Figure, path: str | Path, dpi: int = 150) -> Path:
    """Write fig to path (parent dirs created) and close it."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(out, dpi=dpi, bbox_inches="tight")
    plt.close(fig)
    return out
