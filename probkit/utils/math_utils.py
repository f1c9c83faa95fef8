"""
Mathematical utility functions for probkit.

This module provides the basic transformations between probabilities, odds
and log-odds.
"""

import numpy as np
from scipy.special import expit
from typing import Union

from .validation import validate_probability, validate_finite, validate_numeric

# Type alias for array-like inputs
ArrayLike = Union[float, np.ndarray]


def odds(p: ArrayLike) -> ArrayLike:
    """
    Compute the odds of probability value(s).

    Maps probabilities from [0, 1) to odds in [0, ∞):
        odds(p) = p / (1 - p)

    Parameters
    ----------
    p : float or array_like
        Probability value(s) in [0, 1)

    Returns
    -------
    float or ndarray
        Odds value(s), same shape and order as ``p``

    Raises
    ------
    TypeError
        If p is not numeric
    ValueError
        If any element of p is negative, greater than or equal to 1, or NaN

    Examples
    --------
    >>> odds(0.5)
    1.0
    >>> odds(np.array([0.0, 0.2, 0.75]))
    array([0.  , 0.25, 3.  ])

    Notes
    -----
    - odds(0) = 0
    - odds(p) grows without bound as p approaches 1
    - p = 1 is rejected rather than mapped to infinity
    """
    p = validate_probability(p, "p")
    return p / (1 - p)


def logit(p: ArrayLike) -> ArrayLike:
    """
    Compute log-odds (logit) transformation.

    Maps probabilities from [0, 1) to log-odds in [-∞, ∞):
        logit(p) = log(odds(p)) = log(p / (1 - p))

    Parameters
    ----------
    p : float or array_like
        Probability value(s) in [0, 1)

    Returns
    -------
    float or ndarray
        Log-odds value(s)

    Raises
    ------
    ValueError
        If any element of p is outside [0, 1) (raised by :func:`odds`)

    Examples
    --------
    >>> logit(0.5)
    0.0
    >>> logit(np.array([0.1, 0.5, 0.9]))
    array([-2.197...,  0.   ,  2.197...])

    Notes
    -----
    - logit(0) = -∞
    - logit(0.5) = 0
    - Negative probabilities raise instead of yielding log of a negative number
    """
    o = odds(p)
    with np.errstate(divide='ignore'):
        return np.log(o)


def logit_inverse(x: ArrayLike) -> ArrayLike:
    """
    Compute logistic sigmoid (inverse logit) transformation.

    Maps log-odds from (-∞, ∞) to probabilities in [0, 1]:
        logit_inverse(x) = exp(x) / (1 + exp(x))

    Parameters
    ----------
    x : float or array_like
        Finite log-odds value(s)

    Returns
    -------
    float or ndarray
        Probability value(s)

    Raises
    ------
    TypeError
        If x is not numeric (e.g. text)
    ValueError
        If x contains infinite or NaN values

    Examples
    --------
    >>> logit_inverse(0.0)
    0.5
    >>> logit_inverse(10)
    0.9999546...

    Notes
    -----
    logit_inverse is the inverse of logit: logit_inverse(logit(p)) = p.
    Evaluated with ``scipy.special.expit``, which does not overflow for
    large |x|.
    """
    x = validate_finite(x, "x")
    return expit(x)


def odds_to_probability(o: ArrayLike) -> ArrayLike:
    """
    Convert odds back to probability value(s).

        p = o / (1 + o)

    Parameters
    ----------
    o : float or array_like
        Non-negative odds value(s); ``inf`` maps to 1

    Returns
    -------
    float or ndarray
        Probability value(s) in [0, 1]

    Raises
    ------
    ValueError
        If any odds value is negative or NaN

    Examples
    --------
    >>> odds_to_probability(1.0)
    0.5
    >>> odds_to_probability(odds(0.2))
    0.2...
    """
    o = validate_numeric(o, "o")
    if not np.all(o >= 0):
        raise ValueError(f"odds must be non-negative, got {o}")

    with np.errstate(invalid='ignore'):
        return np.where(np.isinf(o), 1.0, o / (1 + o))[()]
