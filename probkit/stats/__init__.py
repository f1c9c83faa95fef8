"""
Descriptive statistics for probkit.

Functions:
    cummean: Running mean of a sequence
    summary_stats: Mean and standard error, ignoring missing values
    n_observed: Number of non-missing values
"""

from .descriptive import (
    cummean,
    summary_stats,
    n_observed,
)

__all__ = [
    "cummean",
    "summary_stats",
    "n_observed",
]
