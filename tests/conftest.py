"""Shared test fixtures: synthetic survey and religion frames, record helpers."""
import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pandas as pd
import pytest

from catsum.ingestion import STEAK_SCHEMA


def make_records(categories, subgroups=None, values=None) -> pd.DataFrame:
    """Record frame straight from lists; implicit value 1 per row."""
    n = len(categories)
    return pd.DataFrame({
        "category": list(categories),
        "subgroup": list(subgroups) if subgroups is not None else [None] * n,
        "value": [float(v) for v in values] if values is not None else [1.0] * n,
    })


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


@pytest.fixture
def abc_records():
    """Stream A, A, B, C with implicit counts."""
    return make_records(["A", "A", "B", "C"])


@pytest.fixture
def tiny_steak():
    """8 survey rows with STEAK_SCHEMA columns; 6 eat steak and gave a preparation."""
    rows = [
        # id, steak, steak_prep, educ, smoke
        (1, "Yes", "Medium rare", "Bachelor degree", "No"),
        (2, "Yes", "Medium", "Bachelor degree", "Yes"),
        (3, "Yes", "Medium rare", "Graduate degree", "No"),
        (4, "Yes", "Well", "Graduate degree", "Yes"),
        (5, "No", None, "Bachelor degree", "No"),
        (6, "Yes", "Medium rare", "Bachelor degree", "Yes"),
        (7, "Yes", None, "Graduate degree", "No"),
        (8, "Yes", "Rare", None, "No"),
    ]
    df = pd.DataFrame({c: [None] * len(rows) for c in STEAK_SCHEMA.fields})
    df["respondent_id"] = [r[0] for r in rows]
    df["steak"] = [r[1] for r in rows]
    df["steak_prep"] = [r[2] for r in rows]
    df["educ"] = [r[3] for r in rows]
    df["smoke"] = [r[4] for r in rows]
    df["region"] = ["Pacific", "Mountain", "Pacific", "New England", "Pacific", "Mountain", "Pacific", "Pacific"]
    df["gender"] = ["Male", "Female", "Female", "Male", "Male", "Female", "Male", "Female"]
    return df


@pytest.fixture
def tiny_religions():
    return pd.DataFrame({
        "religion": ["Christianity", "Islam", "Hinduism", "Buddhism", "Sikhism", "Judaism"],
        "followers": [2400.0, 1900.0, 1200.0, 500.0, 30.0, 15.0],
    })
