"""
Core polar geometry: the PolarPoint value type and closed-form measures.
"""

from .geometry import (
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
from .point import PolarPoint, RadiusFunc, distance

__all__ = [
    'EPS',
    'MACHINE_EPS',
    'TWO_PI',
    'CARTESIAN_DTYPE',
    'arc_length',
    'sector_area',
    'normalize_angle',
    'cartesian_to_polar',
    'polar_to_cartesian',
    'sector_vertices',
    'PolarPoint',
    'RadiusFunc',
    'distance',
]
