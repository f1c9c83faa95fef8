"""
Descriptive statistics for probkit.

Statistics:
    - Cumulative (running) mean
    - Mean and standard error of the mean, ignoring missing values
"""

import numpy as np
from typing import Tuple, Any
import warnings

from ..utils.validation import (
    validate_numeric,
    validate_finite,
    validate_non_empty,
    validate_1d
)


def _as_float_with_missing(x: Any, param_name: str = "x") -> np.ndarray:
    """
    Convert a sequence that may contain ``None`` into a float array.

    ``None`` entries become NaN. Text and other non-numeric entries raise
    ``TypeError``.
    """
    arr = np.asarray(x)

    if arr.dtype.kind == "O":
        if any(v is not None and (isinstance(v, (str, bytes, bool))
                                  or isinstance(v, np.bool_)
                                  or not np.isscalar(v))
               for v in arr.ravel()):
            raise TypeError(f"{param_name} must contain only numbers or None")
        try:
            return arr.astype(float)
        except (TypeError, ValueError):
            raise TypeError(f"{param_name} must contain only numbers or None")

    return validate_numeric(x, param_name)


def cummean(x: Any) -> np.ndarray:
    """
    Compute the cumulative (running) mean of a sequence.

    Element ``i`` of the result is the mean of ``x[0], ..., x[i]``, i.e. the
    running sum divided by the running count.

    Parameters
    ----------
    x : array_like
        Non-empty 1D sequence of numbers

    Returns
    -------
    ndarray
        Running means, same length as ``x``

    Raises
    ------
    TypeError
        If x is not numeric
    ValueError
        If x is empty or not 1D

    Examples
    --------
    >>> cummean([-2, -1, 0, 1, 2])
    array([-2. , -1.5, -1. , -0.5,  0. ])

    Notes
    -----
    Missing values propagate: every element from the first NaN onwards is NaN.
    """
    x = validate_numeric(x, "x")
    validate_1d(x, "x")
    validate_non_empty(x, "x")

    return np.cumsum(x) / np.arange(1, len(x) + 1)


def n_observed(x: Any) -> int:
    """
    Count the non-missing entries of a sequence.

    Parameters
    ----------
    x : array_like
        1D sequence of numbers, possibly containing ``None`` or NaN

    Returns
    -------
    int
        Number of entries that are not missing

    Examples
    --------
    >>> n_observed([8, 0, -19, None, None, 3, 4])
    5
    """
    x = _as_float_with_missing(x, "x")
    validate_1d(x, "x")
    return int(np.sum(~np.isnan(x)))


def summary_stats(x: Any, ddof: int = 1) -> Tuple[float, float]:
    """
    Compute the mean and the standard error of the mean.

    Missing entries (``None`` or NaN) are excluded from both the mean and the
    sample size used in the standard error:

        se = sd(x_observed, ddof) / sqrt(n_observed)

    Parameters
    ----------
    x : array_like
        1D sequence of numbers, possibly containing missing entries
    ddof : int, optional
        Delta degrees of freedom for the standard deviation
        (default: 1, the sample standard deviation)

    Returns
    -------
    mean : float
        Mean of the observed entries (NaN if none are observed)
    se : float
        Standard error of the mean (NaN if fewer than ``ddof + 1``
        entries are observed)

    Raises
    ------
    TypeError
        If x contains non-numeric entries
    ValueError
        If x contains infinite entries

    Examples
    --------
    >>> summary_stats([8, 0, -19, None, None, 3, 4])
    (-0.8, 4.726...)
    >>> summary_stats([5.0])  # Warns, se is undefined
    (5.0, nan)

    Notes
    -----
    Undefined results are returned as NaN together with a warning rather
    than raised.
    """
    x = _as_float_with_missing(x, "x")
    validate_1d(x, "x")

    observed = validate_finite(x[~np.isnan(x)], "x")
    n = len(observed)

    if n == 0:
        warnings.warn("All values are missing; mean and standard error are undefined")
        return float("nan"), float("nan")

    mean = float(np.mean(observed))

    if n <= ddof:
        warnings.warn(
            f"Standard error is undefined for {n} observation(s) "
            f"with ddof={ddof}"
        )
        return mean, float("nan")

    sd = float(np.std(observed, ddof=ddof))
    return mean, float(sd / np.sqrt(n))
