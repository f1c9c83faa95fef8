"""
Validation functions for probkit.

This module provides functions for validating numeric inputs before any
computation takes place. Validators raise ``TypeError`` for the wrong kind of
input and ``ValueError`` for values outside the expected domain.
"""

import numpy as np
from typing import Any


def validate_numeric(
    x: Any,
    param_name: str = "x"
) -> np.ndarray:
    """
    Validate that an input is numeric and convert it to a float array.

    Parameters
    ----------
    x : float or array_like
        Value(s) to validate
    param_name : str, optional
        Name of parameter for error messages

    Returns
    -------
    ndarray
        ``x`` as a float array (0-d for scalar input)

    Raises
    ------
    TypeError
        If x is text, boolean, or contains non-numeric objects

    Examples
    --------
    >>> validate_numeric([1, 2, 3])
    array([1., 2., 3.])
    >>> validate_numeric("hello")  # Raises TypeError
    """
    arr = np.asarray(x)

    # Integers and floats only; bool, text and object arrays are rejected
    if arr.dtype.kind not in "iuf":
        raise TypeError(
            f"{param_name} must be numeric, got {type(x).__name__} "
            f"with dtype {arr.dtype}"
        )

    # numpy casts bools mixed with numbers in a list to int or float
    if isinstance(x, (list, tuple)) and any(
        isinstance(v, (bool, np.bool_))
        for v in np.asarray(x, dtype=object).ravel()
    ):
        raise TypeError(f"{param_name} must be numeric, got boolean entries")

    return arr.astype(float)


def validate_probability(
    p: Any,
    param_name: str = "probability",
    include_upper: bool = False
) -> np.ndarray:
    """
    Validate that value(s) are valid probabilities.

    By default the accepted domain is the half-open interval [0, 1), which is
    the domain on which the odds p / (1 - p) are finite.

    Parameters
    ----------
    p : float or array_like
        Probability value(s) to validate
    param_name : str, optional
        Name of parameter for error messages
    include_upper : bool, optional
        Whether 1 is an accepted value (default: False)

    Returns
    -------
    ndarray
        ``p`` as a float array

    Raises
    ------
    TypeError
        If p is not numeric
    ValueError
        If any element of p lies outside the domain or is NaN

    Examples
    --------
    >>> validate_probability(0.5, "prior")
    array(0.5)
    >>> validate_probability(1.0, "prior")  # Raises ValueError
    >>> validate_probability(1.0, "prior", include_upper=True)
    array(1.)
    """
    p = validate_numeric(p, param_name)

    if include_upper:
        valid = (p >= 0) & (p <= 1)
        interval = "[0, 1]"
    else:
        valid = (p >= 0) & (p < 1)
        interval = "[0, 1)"

    # NaN fails both comparisons and is rejected here
    if not np.all(valid):
        invalid = p[~valid] if p.ndim else p
        raise ValueError(f"{param_name} must be in {interval}, got {invalid}")

    return p


def validate_finite(
    x: Any,
    param_name: str = "x"
) -> np.ndarray:
    """
    Validate that value(s) are numeric and finite.

    Parameters
    ----------
    x : float or array_like
        Value(s) to validate
    param_name : str, optional
        Name of parameter for error messages

    Returns
    -------
    ndarray
        ``x`` as a float array

    Raises
    ------
    TypeError
        If x is not numeric
    ValueError
        If x contains infinite or NaN values

    Examples
    --------
    >>> validate_finite([1.0, 2.0])
    array([1., 2.])
    >>> validate_finite(np.inf)  # Raises ValueError
    """
    x = validate_numeric(x, param_name)

    if np.any(np.isinf(x)):
        raise ValueError(f"{param_name} contains infinite values")

    if np.any(np.isnan(x)):
        raise ValueError(f"{param_name} contains NaN values")

    return x


def validate_positive(
    x: Any,
    param_name: str = "value"
) -> np.ndarray:
    """
    Validate that value(s) are strictly positive.

    Parameters
    ----------
    x : float or array_like
        Value(s) to validate
    param_name : str, optional
        Name of parameter for error messages

    Returns
    -------
    ndarray
        ``x`` as a float array

    Raises
    ------
    TypeError
        If x is not numeric
    ValueError
        If any value is not positive

    Examples
    --------
    >>> validate_positive(1.0, "height")
    array(1.)
    >>> validate_positive(-1.0, "height")  # Raises ValueError
    """
    x = validate_numeric(x, param_name)

    if not np.all(x > 0):
        raise ValueError(f"{param_name} must be positive, got {x}")

    return x


def validate_non_empty(x: np.ndarray, param_name: str = "x") -> None:
    """Raise ValueError if ``x`` has no elements."""
    if np.size(x) == 0:
        raise ValueError(f"{param_name} must not be empty")


def validate_1d(x: np.ndarray, param_name: str = "x") -> None:
    """Raise ValueError if ``x`` is not a 1-D array."""
    if np.ndim(x) != 1:
        raise ValueError(
            f"{param_name} must be 1D, got array with {np.ndim(x)} dimensions"
        )
