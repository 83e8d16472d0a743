"""
Explicit column schemas. Sources are bound either by position (index -> field)
or by source column name, and checked at load time.
"""
from __future__ import annotations

from dataclasses import dataclass, field

import pandas as pd

from catsum.exceptions import SchemaMismatch


@dataclass(frozen=True)
class ColumnSchema:
    """
    name: dataset label used in error messages.
    fields: positional binding; column i of the source becomes fields[i].
    rename: name-based binding; source column -> field. Other columns are dropped.
    Exactly one of fields / rename is set.
    """

    name: str
    fields: tuple[str, ...] = ()
    rename: dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        if bool(self.fields) == bool(self.rename):
            raise ValueError("ColumnSchema needs exactly one of fields or rename")

    @property
    def field_names(self) -> list[str]:
        return list(self.fields) if self.fields else list(self.rename.values())

    def bind(self, df: pd.DataFrame) -> pd.DataFrame:
        """Return a copy of df with the schema's field names. Raises SchemaMismatch."""
        if self.fields:
            if len(df.columns) != len(self.fields):
                raise SchemaMismatch(
                    f"{self.name}: expected {len(self.fields)} columns, got {len(df.columns)}"
                )
            out = df.copy()
            out.columns = list(self.fields)
            return out
        missing = [c for c in self.rename if c not in df.columns]
        if missing:
            raise SchemaMismatch(
                f"{self.name}: missing columns {missing}. Found: {list(df.columns)}"
            )
        return df[list(self.rename)].rename(columns=self.rename)


STEAK_SCHEMA = ColumnSchema(
    name="steak",
    fields=(
        "respondent_id",
        "lottery_a",
        "smoke",
        "alcohol",
        "gamble",
        "skydiving",
        "speed",
        "cheated",
        "steak",
        "steak_prep",
        "gender",
        "age",
        "hhold_income",
        "educ",
        "region",
    ),
)

# Both columns arrive without a header name.
RELIGIONS_SCHEMA = ColumnSchema(
    name="religions",
    rename={"Unnamed: 0": "religion", "Unnamed: 1": "followers"},
)
