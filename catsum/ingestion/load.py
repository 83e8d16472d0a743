"""
Dataset loaders: fetch, bind schema, minimal cleaning.
Summaries and report shaping live in catsum.summarize / catsum.reports.
"""
from __future__ import annotations

from pathlib import Path

import pandas as pd

from catsum.ingestion.fetch import fetch_csv, resolve_source
from catsum.ingestion.schema import ColumnSchema, RELIGIONS_SCHEMA, STEAK_SCHEMA
from catsum.logging_config import get_logger

logger = get_logger(__name__)

_MULTIPLIERS = {"thousand": 1e3, "million": 1e6, "billion": 1e9}


def parse_count(series: pd.Series) -> pd.Series:
    """Parse follower counts such as 1,234 / 1.2 billion / 300 million to float. NaN if unparseable."""
    s = series.astype(str).str.strip().str.lower().str.replace(",", "", regex=False)
    parts = s.str.extract(r"^([0-9]*\.?[0-9]+)\s*(thousand|million|billion)?$")
    number = pd.to_numeric(parts[0], errors="coerce")
    scale = parts[1].map(_MULTIPLIERS).fillna(1.0)
    return number * scale


def load_steak_survey(source: str | Path | None = None) -> pd.DataFrame:
    """
    Load the steak-risk survey with STEAK_SCHEMA field names.
    Drops the sub-header row (no respondent id) that follows the question row.
    """
    location, timeout = resolve_source("steak", source)
    df = STEAK_SCHEMA.bind(fetch_csv(location, timeout=timeout))
    keep = df["respondent_id"].notna()
    if (~keep).any():
        logger.info("rows_dropped", dataset="steak", reason="no_respondent_id", count=int((~keep).sum()))
    return df.loc[keep].reset_index(drop=True)


def load_religions(
    source: str | Path | None = None,
    schema: ColumnSchema = RELIGIONS_SCHEMA,
) -> pd.DataFrame:
    """
    Load religion follower counts as columns religion (str) and followers (float).
    Rows with no religion name or an unparseable count are dropped.
    """
    location, timeout = resolve_source("religions", source)
    df = schema.bind(fetch_csv(location, timeout=timeout))
    df["religion"] = df["religion"].astype("string").str.strip()
    df["followers"] = parse_count(df["followers"])
    keep = df["religion"].fillna("").ne("").astype(bool) & df["followers"].notna()
    if (~keep).any():
        logger.info("rows_dropped", dataset="religions", reason="missing_name_or_count", count=int((~keep).sum()))
    out = df.loc[keep].reset_index(drop=True)
    out["religion"] = out["religion"].astype(str)
    return out
