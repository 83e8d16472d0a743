from .steak import (
    steak_eaters,
    preparation_overall,
    preparation_by,
    risk_by_preparation,
    build_steak_report,
)
from .religions import religion_shares, build_religions_report

__all__ = [
    "steak_eaters",
    "preparation_overall",
    "preparation_by",
    "risk_by_preparation",
    "build_steak_report",
    "religion_shares",
    "build_religions_report",
]
