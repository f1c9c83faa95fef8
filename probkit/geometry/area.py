"""
Area formulas for probkit.
"""

import numpy as np
from typing import Union

from ..utils.validation import validate_finite, validate_positive

ArrayLike = Union[float, np.ndarray]


def trapezoid(
    base_1: ArrayLike,
    base_2: ArrayLike,
    height: ArrayLike,
    check_positive: bool = False
) -> ArrayLike:
    """
    Compute the area of a trapezoid.

        area = ((base_1 + base_2) / 2) * height

    Parameters
    ----------
    base_1 : float or array_like
        Length of the first parallel side
    base_2 : float or array_like
        Length of the second parallel side
    height : float or array_like
        Distance between the parallel sides
    check_positive : bool, optional
        Whether to reject non-positive lengths (default: False)

    Returns
    -------
    float or ndarray
        Area(s), broadcast over the inputs

    Raises
    ------
    TypeError
        If any input is not numeric
    ValueError
        If any input is infinite or NaN, or non-positive when
        ``check_positive`` is set

    Examples
    --------
    >>> trapezoid(base_1=3, base_2=5, height=4)
    16.0
    >>> trapezoid([3, 1], [5, 1], 2)
    array([8., 2.])

    Notes
    -----
    All lengths are assumed to be positive. The formula itself does not
    require it, so the check is only applied on request.
    """
    base_1 = validate_finite(base_1, "base_1")
    base_2 = validate_finite(base_2, "base_2")
    height = validate_finite(height, "height")

    if check_positive:
        validate_positive(base_1, "base_1")
        validate_positive(base_2, "base_2")
        validate_positive(height, "height")

    return ((base_1 + base_2) / 2) * height
