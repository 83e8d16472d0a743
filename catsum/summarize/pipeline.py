"""End-to-end categorical summary: collapse -> aggregate -> ratios -> rank."""
from __future__ import annotations

from collections.abc import Iterable

import pandas as pd

from catsum.summarize.aggregate import group_and_aggregate
from catsum.summarize.collapse import DEFAULT_OTHER_LABEL, collapse_rare_categories
from catsum.summarize.ranking import compute_ratios, rank_descending, reference_totals


def summarize(
    records: pd.DataFrame,
    keep: Iterable[str] | None = None,
    by_subgroup: bool = False,
    reference: str = "category",
    other_label: str = DEFAULT_OTHER_LABEL,
) -> pd.DataFrame:
    """
    Ranked summary of a record frame.
    keep: categories to keep as-is (None = no collapsing).
    reference: 'category' divides by each category's total (share within category),
    'total' divides by the grand total.
    """
    if keep is not None:
        records = collapse_rare_categories(records, keep, other_label=other_label)
    rows = group_and_aggregate(records, by_subgroup=by_subgroup)
    ratios = compute_ratios(rows, reference_totals(records, per=reference))
    return rank_descending(ratios)
