from .fetch import fetch_csv, resolve_source
from .schema import ColumnSchema, STEAK_SCHEMA, RELIGIONS_SCHEMA
from .load import load_steak_survey, load_religions, parse_count

__all__ = [
    "fetch_csv",
    "resolve_source",
    "ColumnSchema",
    "STEAK_SCHEMA",
    "RELIGIONS_SCHEMA",
    "load_steak_survey",
    "load_religions",
    "parse_count",
]
