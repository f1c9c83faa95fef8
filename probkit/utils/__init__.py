"""
Utility functions for probkit.

Categories:
    Mathematical utilities (odds, logit, logit_inverse)
    Validation functions

Functions:
    odds: Compute p / (1 - p)
    logit: Compute log-odds
    logit_inverse: Compute inverse logit (logistic sigmoid)
    odds_to_probability: Convert odds back to probability
"""

from .math_utils import (
    odds,
    logit,
    logit_inverse,
    odds_to_probability,
)
from .validation import (
    validate_numeric,
    validate_probability,
    validate_finite,
    validate_positive,
    validate_non_empty,
    validate_1d,
)

__all__ = [
    # Math utilities
    "odds",
    "logit",
    "logit_inverse",
    "odds_to_probability",
    # Validation functions
    "validate_numeric",
    "validate_probability",
    "validate_finite",
    "validate_positive",
    "validate_non_empty",
    "validate_1d",
]
