"""
probkit: small numeric toolkit for probabilities and descriptive statistics

The toolkit provides:
- Probability transformations (odds, logit, inverse logit)
- Descriptive statistics (cumulative mean, mean and standard error)
- Elementary geometry (trapezoid area)

Every function is pure: inputs are validated, never modified, and never
retained.
"""

__version__ = "1.0.0"
__author__ = "probkit Contributors"
__license__ = "MIT"

# Import probability transformations
from .utils import odds, logit, logit_inverse, odds_to_probability

# Import descriptive statistics
from .stats import cummean, summary_stats, n_observed

# Import geometry
from .geometry import trapezoid

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__license__",
    # Probability transformations
    "odds",
    "logit",
    "logit_inverse",
    "odds_to_probability",
    # Descriptive statistics
    "cummean",
    "summary_stats",
    "n_observed",
    # Geometry
    "trapezoid",
]
