"""
Polarcoords - Polar coordinate points and closed-form planar measures.

This package provides a PolarPoint value type and helpers that:
- Convert between polar (radius, theta) and Cartesian (x, y) coordinates
- Measure arc length, sector area and distance
- Report tangent slope, curvature and curve membership of a point
- Signal invalid numeric input with NaN (or None) instead of raising

Main Functions
--------------
PolarPoint : Immutable polar point with conversions and queries
arc_length : Length of a circular arc
sector_area : Area of a circular sector
distance : Euclidean distance between two polar points
normalize_angle : Map an angle into [0, 2*pi)

Example
-------
>>> import numpy as np
>>> from polarcoords import PolarPoint, distance

>>> p = PolarPoint.from_cartesian(np.array([3.0, 4.0]))
>>> p.radius
5.0
>>> distance(PolarPoint(1.0, 0.0), PolarPoint(1.0, np.pi))
2.0
"""

from .core.geometry import (
    EPS,
    MACHINE_EPS,
    TWO_PI,
    CARTESIAN_DTYPE,
    arc_length,
    sector_area,
    normalize_angle,
    cartesian_to_polar,
    polar_to_cartesian,
    sector_vertices,
)
from .core.point import PolarPoint, RadiusFunc, distance
from .curves.sampling import (
    sample_curve,
    curve_membership,
    curve_stats,
    points_from_cartesian,
    as_polar_array,
)
from .visualization.plotting import plot_polar_point, plot_sector, plot_curve

__all__ = [
    # Constants
    'EPS',
    'MACHINE_EPS',
    'TWO_PI',
    'CARTESIAN_DTYPE',
    # Point type
    'PolarPoint',
    'RadiusFunc',
    # Measures
    'arc_length',
    'sector_area',
    'distance',
    'normalize_angle',
    # Batch conversion
    'cartesian_to_polar',
    'polar_to_cartesian',
    'sector_vertices',
    # Curves
    'sample_curve',
    'curve_membership',
    'curve_stats',
    'points_from_cartesian',
    'as_polar_array',
    # Visualization
    'plot_polar_point',
    'plot_sector',
    'plot_curve',
]
