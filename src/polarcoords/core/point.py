"""
PolarPoint value type.

A planar point stored as (radius, theta). Instances are immutable; every
operation is either a read-only query or a free function returning a new
value. Domain errors are reported with NaN (or None for conversions) and
never raised.
"""

from dataclasses import dataclass
from typing import Callable, Optional
import logging
import math

import numpy as np

from .geometry import (
    EPS,
    MACHINE_EPS,
    CARTESIAN_DTYPE,
    arc_length,
    sector_area,
    normalize_angle,
)

logger = logging.getLogger(__name__)


# Type alias for curve functions: theta -> expected radius
RadiusFunc = Callable[[float], float]


def distance(p1: Optional["PolarPoint"], p2: Optional["PolarPoint"]) -> float:
    """
    Euclidean distance between two polar points.

    Both points are converted to Cartesian coordinates in double precision
    (not through the single-precision to_cartesian() path).

    Parameters
    ----------
    p1, p2 : PolarPoint or None
        Points to measure between.

    Returns
    -------
    float
        Straight-line distance, or NaN if either point is None.
    """
    if p1 is None or p2 is None:
        logger.debug("distance: missing operand")
        return math.nan
    x = p1.radius * math.cos(p1.theta) - p2.radius * math.cos(p2.theta)
    y = p1.radius * math.sin(p1.theta) - p2.radius * math.sin(p2.theta)
    return math.sqrt(x * x + y * y)


@dataclass(frozen=True)
class PolarPoint:
    """
    Point in polar coordinates.

    Attributes
    ----------
    radius : float
        Distance from the origin. Non-negative by convention but not
        enforced; operations that need it flag negative values.
    theta : float
        Angle in radians from the positive x axis. Not normalized.
    """
    radius: float
    theta: float

    # Free functions, also reachable through the class
    arc_length = staticmethod(arc_length)
    sector_area = staticmethod(sector_area)
    normalize_angle = staticmethod(normalize_angle)
    distance = staticmethod(distance)

    @classmethod
    def from_cartesian(cls, point: np.ndarray) -> Optional["PolarPoint"]:
        """
        Build a polar point from Cartesian (x, y).

        Parameters
        ----------
        point : np.ndarray
            Two coordinates, shape (2,).

        Returns
        -------
        PolarPoint or None
            None if either coordinate is NaN. Otherwise theta lies in
            (-pi, pi] following the atan2 convention.
        """
        point = np.asarray(point, dtype=np.float64)

        if point.shape != (2,):
            raise ValueError(f"Expected point of shape (2,), got {point.shape}")

        x, y = float(point[0]), float(point[1])
        if math.isnan(x) or math.isnan(y):
            logger.debug("from_cartesian: undefined point (%r, %r)", x, y)
            return None

        return cls(math.sqrt(x * x + y * y), math.atan2(y, x))

    def to_cartesian(self) -> np.ndarray:
        """
        Convert to Cartesian (x, y).

        The result is narrowed to single precision (CARTESIAN_DTYPE),
        although the trigonometry runs in double precision.

        Returns
        -------
        np.ndarray
            Array of shape (2,) and dtype float32.
        """
        x = self.radius * math.cos(self.theta)
        y = self.radius * math.sin(self.theta)
        return np.array([x, y], dtype=CARTESIAN_DTYPE)

    def tangent_slope(self) -> float:
        """
        Slope of the line perpendicular to the radius vector, -x / y.

        Computed from the single-precision Cartesian form. Returns NaN when
        |x| is below machine epsilon. Note the guard checks x while the
        division is by y; a zero y yields +-inf.
        """
        x, y = self.to_cartesian()
        if abs(x) < MACHINE_EPS:
            logger.debug("tangent_slope: near-zero x at theta=%r", self.theta)
            return math.nan
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(-x / y)

    def curvature(self) -> float:
        """Curvature of the circle through this point, 1 / radius (NaN near zero)."""
        if self.radius < MACHINE_EPS:
            logger.debug("curvature: radius %r below epsilon", self.radius)
            return math.nan
        return 1.0 / self.radius

    def polar_slope(self) -> float:
        # No derivative is stored, the radius stands in for dr/dtheta
        return self.radius

    def is_on_curve(self, radius_function: RadiusFunc, tolerance: float = EPS) -> bool:
        """
        Test whether this point lies on the polar curve r = f(theta).

        Parameters
        ----------
        radius_function : RadiusFunc
            Maps an angle to the expected radius.
        tolerance : float
            Maximum absolute radial deviation (exclusive). Default EPS.

        Returns
        -------
        bool
            True if |radius - f(theta)| < tolerance.
        """
        expected = radius_function(self.theta)
        return bool(abs(self.radius - expected) < tolerance)
