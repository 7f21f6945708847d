"""
Polar curve sampling and membership.
"""

from .sampling import (
    sample_curve,
    curve_membership,
    curve_stats,
    points_from_cartesian,
    as_polar_array,
)

__all__ = ['sample_curve', 'curve_membership', 'curve_stats', 'points_from_cartesian', 'as_polar_array']
