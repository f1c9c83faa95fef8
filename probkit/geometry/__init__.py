"""
Geometry formulas for probkit.
"""

from .area import trapezoid

__all__ = ["trapezoid"]
