"""
Record construction and row filtering.
A record frame has columns category, subgroup, value (see RECORD_COLUMNS).
"""
from __future__ import annotations

from collections.abc import Iterable

import pandas as pd

from catsum.logging_config import get_logger

logger = get_logger(__name__)

RECORD_COLUMNS = ["category", "subgroup", "value"]


def filter_rows(df: pd.DataFrame, column: str, equals) -> pd.DataFrame:
    """Keep rows where df[column] equals `equals` (or is one of them, for a collection)."""
    if column not in df.columns:
        raise ValueError(f"cannot filter on missing column '{column}'. Found: {list(df.columns)}")
    if isinstance(equals, str) or not isinstance(equals, Iterable):
        equals = [equals]
    return df.loc[df[column].isin(list(equals))].reset_index(drop=True)


def _as_labels(s: pd.Series) -> pd.Series:
    """Stringify non-null labels, leave nulls null."""
    return s.astype(object).where(s.isna(), s.astype(str))


def build_records(
    df: pd.DataFrame,
    category: str,
    subgroup: str | None = None,
    value: str | None = None,
) -> pd.DataFrame:
    """
    Select source columns into record shape.
    value=None counts each row once (value 1.0). Rows with a null category,
    or a non-numeric explicit value, are dropped.
    """
    wanted = [c for c in (category, subgroup, value) if c is not None]
    missing = [c for c in wanted if c not in df.columns]
    if missing:
        raise ValueError(f"missing record columns: {missing}. Found: {list(df.columns)}")

    out = pd.DataFrame(index=df.index)
    out["category"] = _as_labels(df[category])
    out["subgroup"] = _as_labels(df[subgroup]) if subgroup else None
    out["value"] = pd.to_numeric(df[value], errors="coerce") if value else 1.0

    keep = out["category"].notna() & out["value"].notna()
    dropped = int((~keep).sum())
    if dropped:
        logger.info("rows_dropped", reason="null_category_or_value", count=dropped, category=category)
    out = out.loc[keep, RECORD_COLUMNS].reset_index(drop=True)
    out["value"] = out["value"].astype(float)
    return out
