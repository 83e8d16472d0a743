"""Categorical summarization and reporting for the steak survey and world religions EDA."""

__version__ = "0.1.0"
