"""
Ratios against reference totals, and descending rank with deterministic tie-breaks.
"""
from __future__ import annotations

from collections.abc import Mapping

import pandas as pd

from catsum.exceptions import DivisionUndefined


def reference_totals(records: pd.DataFrame, per: str = "category") -> dict[str, float] | float:
    """
    Denominators for compute_ratios.
    per='category': {category: summed value of its records}; per='total': grand total.
    """
    if per == "category":
        return records.groupby("category", sort=False)["value"].sum().astype(float).to_dict()
    if per == "total":
        return float(records["value"].sum())
    raise ValueError("per must be 'category' or 'total'")


def compute_ratios(
    aggregate_rows: pd.DataFrame,
    reference_totals: Mapping[str, float] | pd.Series | float,
) -> pd.DataFrame:
    """
    Add reference_total, ratio = value / reference_total, and pct = 100 * ratio.
    reference_totals: mapping keyed by category, or one number for every row.
    Raises DivisionUndefined if a row's reference total is zero or missing.
    """
    out = aggregate_rows.copy()
    if isinstance(reference_totals, (Mapping, pd.Series)):
        denom = out["category"].map(reference_totals)
        missing = out.loc[denom.isna(), "category"].unique().tolist()
        if missing:
            raise DivisionUndefined(f"no reference total for categories {missing}")
    else:
        denom = pd.Series(reference_totals, index=out.index, dtype=float)
    denom = denom.astype(float)

    zero = denom == 0
    if zero.any():
        cats = out.loc[zero, "category"].unique().tolist()
        raise DivisionUndefined(f"reference total is zero for categories {cats}")

    out["reference_total"] = denom
    out["ratio"] = out["value"].astype(float) / denom
    out["pct"] = out["ratio"] * 100
    return out


def rank_descending(ranked_rows: pd.DataFrame) -> pd.DataFrame:
    """
    Sort by ratio descending and number rows 1..n in a `rank` column.
    Ties: earlier category_first_seen, then earlier first_seen, then input order.
    """
    if "ratio" not in ranked_rows.columns:
        raise ValueError("rank_descending needs a 'ratio' column; run compute_ratios first")
    tie_breaks = [c for c in ("category_first_seen", "first_seen") if c in ranked_rows.columns]
    df = ranked_rows.reset_index(drop=True)
    df["_order"] = range(len(df))
    keys = ["ratio"] + tie_breaks + ["_order"]
    out = df.sort_values(keys, ascending=[False] + [True] * (len(keys) - 1), kind="mergesort")
    out = out.drop(columns="_order").reset_index(drop=True)
    out["rank"] = range(1, len(out) + 1)
    return out
