"""Grouped aggregation of record frames into aggregate rows."""
from __future__ import annotations

import pandas as pd

AGGREGATE_COLUMNS = ["value", "n", "first_seen", "category_first_seen"]


def group_and_aggregate(records: pd.DataFrame, by_subgroup: bool = False) -> pd.DataFrame:
    """
    One row per distinct category (and subgroup, if by_subgroup), in first-seen order.
    value = sum of member values, n = member row count, so sum(n) == len(records).
    first_seen / category_first_seen are input positions of the group's and the
    category's first record, used as ranking tie-breaks. Null subgroups form their own group.
    """
    keys = ["category", "subgroup"] if by_subgroup else ["category"]
    if records.empty:
        return pd.DataFrame(columns=keys + AGGREGATE_COLUMNS)

    df = records[keys + ["value"]].reset_index(drop=True)
    df["_pos"] = range(len(df))
    out = (
        df.groupby(keys, sort=False, dropna=False)
        .agg(value=("value", "sum"), n=("_pos", "size"), first_seen=("_pos", "min"))
        .reset_index()
    )
    out["category_first_seen"] = out.groupby("category", sort=False)["first_seen"].transform("min")
    out = out.sort_values("first_seen", kind="mergesort").reset_index(drop=True)
    out["n"] = out["n"].astype(int)
    return out
