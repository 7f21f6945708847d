"""
Polar Curve Module

Works with curves given in polar form r = f(theta):
- Sampling a curve into Cartesian vertices for drawing
- Batch membership testing of many points against a curve
- Diagnostic statistics of radial deviation

The radius function is called once per angle, so it only needs to accept
a scalar angle.
"""

from typing import Optional, Sequence, Union
import math

import numpy as np

from ..core.geometry import EPS, TWO_PI, cartesian_to_polar
from ..core.point import PolarPoint, RadiusFunc


PointsLike = Union[np.ndarray, Sequence[Optional[PolarPoint]]]


def as_polar_array(points: PointsLike) -> np.ndarray:
    """
    Normalize points to an (N, 2) array of (radius, theta).

    Parameters
    ----------
    points : np.ndarray or sequence of PolarPoint
        Either PolarPoint instances or an array of shape (N, 2) / (2,).
        None entries, as produced by points_from_cartesian(), become
        NaN rows.

    Returns
    -------
    np.ndarray
        Polar coordinates of shape (N, 2).
    """
    if points is None or isinstance(points, PolarPoint):
        points = [points]

    if not isinstance(points, np.ndarray) and any(
        p is None or isinstance(p, PolarPoint) for p in points
    ):
        return np.array(
            [[math.nan, math.nan] if p is None else [p.radius, p.theta] for p in points],
            dtype=np.float64
        )

    polar = np.asarray(points, dtype=np.float64)
    if polar.size == 0:
        return polar.reshape(0, 2)
    polar = np.atleast_2d(polar)
    if polar.ndim != 2 or polar.shape[1] != 2:
        raise ValueError(f"Expected polar points of shape (N, 2), got {polar.shape}")
    return polar


def _expected_radii(polar: np.ndarray, radius_function: RadiusFunc) -> np.ndarray:
    # Undefined rows are not passed to the radius function
    return np.array(
        [math.nan if math.isnan(r) or math.isnan(t) else radius_function(float(t))
         for r, t in polar],
        dtype=np.float64
    )


def sample_curve(
    radius_function: RadiusFunc,
    n_angles: int = 72,
    start_theta: float = 0.0,
    end_theta: float = TWO_PI
) -> np.ndarray:
    """
    Sample the curve r = f(theta) as Cartesian vertices.

    Parameters
    ----------
    radius_function : RadiusFunc
        Maps an angle to a radius.
    n_angles : int
        Number of samples. Default 72 (5-degree steps over a full turn).
    start_theta : float
        First sampled angle. Default 0.
    end_theta : float
        End of the sampled range (exclusive). Default 2*pi.

    Returns
    -------
    np.ndarray
        Vertices of shape (n_angles, 2).

    Examples
    --------
    >>> cardioid = lambda theta: 1 + np.cos(theta)
    >>> sample_curve(cardioid, n_angles=4).shape
    (4, 2)
    """
    if n_angles < 1:
        raise ValueError(f"n_angles must be at least 1, got {n_angles}")

    angles = np.linspace(start_theta, end_theta, n_angles, endpoint=False)
    radii = np.array([radius_function(float(a)) for a in angles], dtype=np.float64)

    curve_x = radii * np.cos(angles)
    curve_y = radii * np.sin(angles)
    return np.column_stack([curve_x, curve_y])


def curve_membership(
    points: PointsLike,
    radius_function: RadiusFunc,
    tolerance: float = EPS
) -> np.ndarray:
    """
    Test which points lie on the curve r = f(theta).

    Batch form of PolarPoint.is_on_curve().

    Parameters
    ----------
    points : np.ndarray or sequence of PolarPoint
        Points to test, as PolarPoint instances or an (N, 2) array of
        (radius, theta). None entries are reported as off the curve.
    radius_function : RadiusFunc
        Maps an angle to the expected radius.
    tolerance : float
        Maximum absolute radial deviation (exclusive). Default EPS.

    Returns
    -------
    np.ndarray
        Boolean array of shape (N,).
    """
    polar = as_polar_array(points)
    if len(polar) == 0:
        return np.zeros(0, dtype=bool)

    expected = _expected_radii(polar, radius_function)
    return np.abs(polar[:, 0] - expected) < tolerance


def curve_stats(
    points: PointsLike,
    radius_function: RadiusFunc,
    tolerance: float = EPS
) -> dict:
    """
    Compute diagnostic statistics of points against a polar curve.

    Parameters
    ----------
    points : np.ndarray or sequence of PolarPoint
        Points to test.
    radius_function : RadiusFunc
        Maps an angle to the expected radius.
    tolerance : float
        Membership tolerance. Default EPS.

    Returns
    -------
    dict
        Statistics including:
        - 'num_points': Number of points tested
        - 'points_on_curve': Count within tolerance
        - 'points_off_curve': Count outside tolerance, undefined points included
        - 'points_undefined': Count of None or NaN points
        - 'fraction_on_curve': Fraction within tolerance (NaN if no points)
        - 'max_deviation': Largest |r - f(theta)| over defined points
          (NaN if there are none)
        - 'mean_deviation': Mean |r - f(theta)| over defined points
          (NaN if there are none)
    """
    polar = as_polar_array(points)
    n_points = len(polar)

    if n_points == 0:
        return {
            'num_points': 0,
            'points_on_curve': 0,
            'points_off_curve': 0,
            'points_undefined': 0,
            'fraction_on_curve': math.nan,
            'max_deviation': math.nan,
            'mean_deviation': math.nan,
        }

    expected = _expected_radii(polar, radius_function)
    deviation = np.abs(polar[:, 0] - expected)
    on_curve = deviation < tolerance
    defined = ~np.isnan(deviation)

    if np.any(defined):
        max_deviation = float(np.max(deviation[defined]))
        mean_deviation = float(np.mean(deviation[defined]))
    else:
        max_deviation = math.nan
        mean_deviation = math.nan

    return {
        'num_points': n_points,
        'points_on_curve': int(np.sum(on_curve)),
        'points_off_curve': int(np.sum(~on_curve)),
        'points_undefined': int(np.sum(~defined)),
        'fraction_on_curve': float(np.mean(on_curve)),
        'max_deviation': max_deviation,
        'mean_deviation': mean_deviation,
    }


def points_from_cartesian(points: np.ndarray) -> list:
    """
    Convert Cartesian points to a list of PolarPoint.

    Rows with a NaN coordinate become None, matching
    PolarPoint.from_cartesian().

    Parameters
    ----------
    points : np.ndarray
        Points of shape (N, 2) or (2,).

    Returns
    -------
    list
        PolarPoint or None per row.
    """
    polar = cartesian_to_polar(points)
    return [
        None if np.isnan(r) else PolarPoint(float(r), float(t))
        for r, t in polar
    ]
