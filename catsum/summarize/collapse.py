"""
Category collapsing ("lumping"): merge labels outside a keep set into one bucket.
Every input row maps to exactly one output row; nothing is dropped.
"""
from __future__ import annotations

from collections.abc import Iterable

import pandas as pd

from catsum.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_OTHER_LABEL = "Other"


def collapse_rare_categories(
    records: pd.DataFrame,
    keep: Iterable[str],
    other_label: str = DEFAULT_OTHER_LABEL,
) -> pd.DataFrame:
    """Rewrite every category not in `keep` to `other_label`. Idempotent for a fixed keep set."""
    keep = set(keep)
    out = records.copy()
    in_keep = out["category"].isin(keep)
    collapsed = int(out.loc[~in_keep, "category"].nunique())
    out["category"] = out["category"].where(in_keep, other_label)
    logger.debug("categories_collapsed", kept=len(keep), collapsed=collapsed, other_label=other_label)
    return out


def _totals(records: pd.DataFrame, by: str = "value") -> pd.Series:
    """Per-category totals in first-seen order. by: 'value' (sum) or 'count' (rows)."""
    g = records.groupby("category", sort=False)["value"]
    if by == "value":
        return g.sum()
    if by == "count":
        return g.size()
    raise ValueError("by must be 'value' or 'count'")


def top_n_categories(records: pd.DataFrame, n: int, by: str = "value") -> list[str]:
    """The n categories with the highest totals; equal totals keep first-seen order."""
    if n < 0:
        raise ValueError("n must be >= 0")
    totals = _totals(records, by)
    return totals.sort_values(ascending=False, kind="mergesort").head(n).index.tolist()


def categories_at_least(records: pd.DataFrame, min_value: float, by: str = "value") -> list[str]:
    """Categories whose total (value sum or row count) reaches min_value, in first-seen order."""
    totals = _totals(records, by)
    return totals[totals >= min_value].index.tolist()


def lump_categories(
    records: pd.DataFrame,
    n: int | None = None,
    min_value: float | None = None,
    by: str = "value",
    other_label: str = DEFAULT_OTHER_LABEL,
) -> pd.DataFrame:
    """Keep the top-n (or at-least-min_value) categories, collapse the rest into other_label."""
    if (n is None) == (min_value is None):
        raise ValueError("pass exactly one of n or min_value")
    if n is not None:
        keep = top_n_categories(records, n, by=by)
    else:
        keep = categories_at_least(records, min_value, by=by)
    return collapse_rare_categories(records, keep, other_label=other_label)
