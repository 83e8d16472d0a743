"""
Retrieve CSV sources over HTTP(S) or from disk.
Single attempt, no retry: any failure surfaces as SourceFetchError.
"""
from __future__ import annotations

import io
from pathlib import Path

import pandas as pd
import requests

from catsum.config import get_sources
from catsum.exceptions import SourceFetchError
from catsum.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 30.0


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def resolve_source(name: str, source: str | Path | None = None) -> tuple[str, float]:
    """Return (location, timeout) for a dataset: explicit source, else config url, else config path."""
    spec = get_sources().get("sources", {}).get(name, {}) or {}
    timeout = float(spec.get("timeout") or DEFAULT_TIMEOUT)
    location = source or spec.get("url") or spec.get("path")
    if not location:
        raise SourceFetchError(f"config/sources.yaml: no url or path set for '{name}'")
    return str(location), timeout


def _download(url: str, timeout: float) -> str:
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise SourceFetchError(f"failed to fetch {url}: {e}") from e
    try:
        return response.content.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise SourceFetchError(f"{url} is not UTF-8 encoded: {e}") from e


def fetch_csv(source: str | Path, timeout: float = DEFAULT_TIMEOUT, **read_kwargs) -> pd.DataFrame:
    """
    Load a CSV (header row, comma separated, UTF-8) from a URL or local path.
    Extra keyword arguments go to pd.read_csv.
    """
    src = str(source)
    if _is_url(src):
        text = _download(src, timeout)
    else:
        path = Path(src)
        if not path.is_file():
            raise SourceFetchError(f"source file not found: {src}")
        try:
            text = path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise SourceFetchError(f"cannot read {src}: {e}") from e
    try:
        df = pd.read_csv(io.StringIO(text), **read_kwargs)
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise SourceFetchError(f"malformed CSV at {src}: {e}") from e
    if len(df.columns) == 0:
        raise SourceFetchError(f"no columns in CSV at {src}")
    logger.info("source_loaded", source=src, rows=len(df), columns=len(df.columns))
    return df
