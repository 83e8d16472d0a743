"""World religions report: follower shares with minor religions lumped into Other."""
from __future__ import annotations

import pandas as pd

from catsum.eda import bar_chart, render_table
from catsum.logging_config import get_logger
from catsum.summarize import DEFAULT_OTHER_LABEL, build_records, summarize, top_n_categories

logger = get_logger(__name__)

DEFAULT_TOP_N = 10


def religion_shares(
    df: pd.DataFrame,
    top_n: int = DEFAULT_TOP_N,
    other_label: str = DEFAULT_OTHER_LABEL,
) -> pd.DataFrame:
    """Followers per religion (top_n kept, rest summed into other_label) and share of the total, ranked."""
    records = build_records(df, category="religion", value="followers")
    keep = top_n_categories(records, top_n)
    out = summarize(records, keep=keep, reference="total", other_label=other_label)
    out = out.rename(columns={"category": "religion", "value": "followers"})
    return out[["rank", "religion", "followers", "n", "ratio", "pct"]]


def build_religions_report(
    df: pd.DataFrame,
    config: dict | None = None,
    other_label: str = DEFAULT_OTHER_LABEL,
) -> dict[str, dict]:
    """Tables and figures for the religions report. config: the `religions` section of report.yaml."""
    config = config or {}
    table_cfg = config.get("table", {})
    shares = religion_shares(df, top_n=int(config.get("top_n", DEFAULT_TOP_N)), other_label=other_label)

    figures = {
        "shares": bar_chart(
            shares, "religion", "pct",
            horizontal=True, percent=True, highlight=[other_label],
            title="Share of world religious followers",
            xlabel="", ylabel="Share of followers",
        ),
        "shares_table": render_table(
            shares,
            title=table_cfg.get("title", "Followers of the world's major religions"),
            subtitle=table_cfg.get("subtitle"),
            source=table_cfg.get("source"),
            columns={"rank": "#", "religion": "Religion", "followers": "Followers", "pct": "Share"},
            formats={"followers": "{:,.0f}", "pct": "{:.1f}%"},
        ),
    }
    logger.info("report_built", report="religions", religions=len(shares))
    return {"tables": {"shares": shares}, "figures": figures}
