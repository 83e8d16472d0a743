"""
Categorical summarizer: build records, collapse rare categories, aggregate,
derive ratios against reference totals, rank for display.
"""
from .records import RECORD_COLUMNS, build_records, filter_rows
from .collapse import (
    DEFAULT_OTHER_LABEL,
    collapse_rare_categories,
    top_n_categories,
    categories_at_least,
    lump_categories,
)
from .aggregate import AGGREGATE_COLUMNS, group_and_aggregate
from .ranking import reference_totals, compute_ratios, rank_descending
from .pipeline import summarize

__all__ = [
    "RECORD_COLUMNS",
    "build_records",
    "filter_rows",
    "DEFAULT_OTHER_LABEL",
    "collapse_rare_categories",
    "top_n_categories",
    "categories_at_least",
    "lump_categories",
    "AGGREGATE_COLUMNS",
    "group_and_aggregate",
    "reference_totals",
    "compute_ratios",
    "rank_descending",
    "summarize",
]
