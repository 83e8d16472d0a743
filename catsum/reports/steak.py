"""
Steak-risk survey report: how steak eaters like their steak, by demographic,
and how risk behaviours vary with preparation.
"""
from __future__ import annotations

import pandas as pd

from catsum.eda import bar_chart, render_table
from catsum.logging_config import get_logger
from catsum.summarize import build_records, filter_rows, rank_descending, summarize

logger = get_logger(__name__)

YES = "Yes"
DEFAULT_DIMENSIONS = ["educ", "region", "age", "hhold_income", "gender"]
DEFAULT_BEHAVIOURS = ["smoke", "alcohol", "gamble", "skydiving", "speed", "cheated"]

LABELS = {
    "steak_prep": "Preparation",
    "educ": "Education",
    "region": "Census region",
    "age": "Age",
    "hhold_income": "Household income",
    "gender": "Gender",
    "smoke": "Smokes",
    "alcohol": "Drinks alcohol",
    "gamble": "Gambles",
    "skydiving": "Has been skydiving",
    "speed": "Speeds",
    "cheated": "Has cheated on a partner",
    "lottery_a": "Prefers lottery A",
}

_DISPLAY = ["rank", "value", "n", "reference_total", "ratio", "pct"]


def steak_eaters(df: pd.DataFrame) -> pd.DataFrame:
    """Respondents who eat steak and said how they like it prepared."""
    eaters = filter_rows(df, "steak", YES)
    return eaters.loc[eaters["steak_prep"].notna()].reset_index(drop=True)


def preparation_overall(df: pd.DataFrame) -> pd.DataFrame:
    """Share of steak eaters per preparation, ranked."""
    records = build_records(steak_eaters(df), category="steak_prep")
    out = summarize(records, reference="total")
    return out.rename(columns={"category": "steak_prep"})[["steak_prep"] + _DISPLAY]


def preparation_by(df: pd.DataFrame, dimension: str) -> pd.DataFrame:
    """
    Share of each preparation within each level of `dimension` (e.g. educ).
    The reference total is the number of steak eaters at that level.
    """
    records = build_records(steak_eaters(df), category=dimension, subgroup="steak_prep")
    out = summarize(records, by_subgroup=True, reference="category")
    out = out.rename(columns={"category": dimension, "subgroup": "steak_prep"})
    return out[[dimension, "steak_prep"] + _DISPLAY]


def risk_by_preparation(df: pd.DataFrame, behaviour: str) -> pd.DataFrame:
    """Share of each preparation group answering Yes to `behaviour` (smoke, gamble, ...)."""
    records = build_records(steak_eaters(df), category="steak_prep", subgroup=behaviour)
    out = summarize(records, by_subgroup=True, reference="category")
    out = rank_descending(out[out["subgroup"] == YES].drop(columns="rank"))
    out = out.rename(columns={"category": "steak_prep"}).drop(columns="subgroup")
    out.insert(1, "behaviour", behaviour)
    return out[["steak_prep", "behaviour"] + _DISPLAY]


def build_steak_report(df: pd.DataFrame, config: dict | None = None) -> dict[str, dict]:
    """Tables and figures for the steak report. config: the `steak` section of report.yaml."""
    config = config or {}
    dimensions = config.get("dimensions", DEFAULT_DIMENSIONS)
    behaviours = config.get("behaviours", DEFAULT_BEHAVIOURS)
    table_cfg = config.get("table", {})

    tables: dict[str, pd.DataFrame] = {}
    figures = {}

    overall = preparation_overall(df)
    tables["preparation"] = overall
    figures["preparation"] = bar_chart(
        overall, "steak_prep", "pct",
        horizontal=True, percent=True,
        title="How do you like your steak prepared?",
        xlabel=LABELS["steak_prep"], ylabel="Share of steak eaters",
    )
    figures["preparation_table"] = render_table(
        overall,
        title=table_cfg.get("title", "How do steak eaters like their steak?"),
        subtitle=table_cfg.get("subtitle"),
        source=table_cfg.get("source"),
        columns={"rank": "#", "steak_prep": "Preparation", "value": "Respondents", "pct": "Share"},
        formats={"value": "{:,.0f}", "pct": "{:.1f}%"},
    )

    for i, dim in enumerate(dimensions):
        by_dim = preparation_by(df, dim)
        tables[f"preparation_by_{dim}"] = by_dim
        label = LABELS.get(dim, dim)
        if i == 0:
            # first dimension also as one stacked bar per level
            figures[f"preparation_by_{dim}_stacked"] = bar_chart(
                by_dim, dim, "pct", hue="steak_prep",
                stacked=True, horizontal=True, percent=True,
                title=f"Steak preparation by {label.lower()}",
                xlabel=label, ylabel="Share of steak eaters",
            )
        figures[f"preparation_by_{dim}"] = bar_chart(
            by_dim, "steak_prep", "pct", facet=dim, percent=True,
            title=f"Steak preparation by {label.lower()}",
            xlabel=LABELS["steak_prep"], ylabel="Share of steak eaters",
        )

    if behaviours:
        risk = pd.concat([risk_by_preparation(df, b) for b in behaviours], ignore_index=True)
        risk["behaviour"] = risk["behaviour"].map(lambda b: LABELS.get(b, b))
        tables["risk_by_preparation"] = risk
        figures["risk_by_preparation"] = bar_chart(
            risk, "behaviour", "pct", hue="steak_prep", percent=True,
            title="Risky behaviour by steak preparation",
            xlabel="", ylabel="Share answering yes",
        )

    logger.info("report_built", report="steak", tables=len(tables), figures=len(figures))
    return {"tables": tables, "figures": figures}
