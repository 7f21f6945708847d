"""
Core polar geometry operations.

Contains closed-form helpers for:
- Arc length and sector area
- Angle normalization to [0, 2*pi)
- Batch polar/Cartesian conversion of (N, 2) arrays
- Sector polygon construction

Invalid numeric input (negative radius) is reported with a NaN sentinel
rather than an exception, so results compose with further arithmetic.
"""

import logging
import math

import numpy as np

logger = logging.getLogger(__name__)


# Numerical tolerance for floating point comparisons
EPS = 1e-10

# Threshold for near-zero guards on divisors. This is float64 machine
# epsilon (~2.2e-16), not the smallest subnormal (~4.9e-324), so values
# such as cos(pi/2) ~ 6e-17 count as zero.
MACHINE_EPS = float(np.finfo(np.float64).eps)

TWO_PI = 2.0 * math.pi

# Precision of PolarPoint.to_cartesian() output
CARTESIAN_DTYPE = np.float32


def arc_length(radius: float, start_theta: float, end_theta: float) -> float:
    """
    Length of the circular arc between two angles.

    Parameters
    ----------
    radius : float
        Circle radius. Negative values are invalid.
    start_theta : float
        Start angle in radians.
    end_theta : float
        End angle in radians. The raw difference is used, no normalization.

    Returns
    -------
    float
        radius * |end_theta - start_theta|, or NaN if radius < 0.
    """
    if radius < 0:
        logger.debug("arc_length: negative radius %r", radius)
        return math.nan
    return radius * abs(end_theta - start_theta)


def sector_area(radius: float, start_theta: float, end_theta: float) -> float:
    """
    Area of the circular sector between two angles.

    Parameters
    ----------
    radius : float
        Circle radius. Negative values are invalid.
    start_theta : float
        Start angle in radians.
    end_theta : float
        End angle in radians.

    Returns
    -------
    float
        0.5 * radius^2 * |end_theta - start_theta|, or NaN if radius < 0.
    """
    if radius < 0:
        logger.debug("sector_area: negative radius %r", radius)
        return math.nan
    return 0.5 * radius * radius * abs(end_theta - start_theta)


def normalize_angle(theta: float) -> float:
    """
    Map an angle into the half-open interval [0, 2*pi).

    Parameters
    ----------
    theta : float
        Angle in radians, any range.

    Returns
    -------
    float
        Equivalent angle in [0, 2*pi). NaN or infinite input gives NaN.
    """
    if not math.isfinite(theta):
        logger.debug("normalize_angle: non-finite angle %r", theta)
        return math.nan

    theta = math.fmod(theta, TWO_PI)
    if theta < 0:
        theta += TWO_PI
        # Tiny negative remainders round up to exactly 2*pi
        if theta >= TWO_PI:
            theta = 0.0
    return theta


def _as_pairs(values: np.ndarray, name: str) -> np.ndarray:
    values = np.asarray(values, dtype=np.float64)
    if values.ndim == 1:
        values = values.reshape(1, -1)
    if values.ndim != 2 or values.shape[1] != 2:
        raise ValueError(f"Expected {name} of shape (N, 2) or (2,), got {values.shape}")
    return values


def cartesian_to_polar(points: np.ndarray) -> np.ndarray:
    """
    Convert Cartesian points to polar coordinates.

    Parameters
    ----------
    points : np.ndarray
        Points of shape (N, 2) or (2,) holding (x, y).

    Returns
    -------
    np.ndarray
        Array of shape (N, 2) holding (radius, theta) with theta in
        (-pi, pi]. Rows with a NaN coordinate are returned as NaN.
    """
    points = _as_pairs(points, "points")

    x = points[:, 0]
    y = points[:, 1]
    radii = np.sqrt(x * x + y * y)
    angles = np.arctan2(y, x)

    result = np.column_stack([radii, angles])
    undefined = np.isnan(points).any(axis=1)
    if np.any(undefined):
        logger.debug("cartesian_to_polar: %d undefined rows", int(np.sum(undefined)))
        result[undefined] = np.nan
    return result


def polar_to_cartesian(polar: np.ndarray) -> np.ndarray:
    """
    Convert polar coordinates to Cartesian points in double precision.

    Parameters
    ----------
    polar : np.ndarray
        Array of shape (N, 2) or (2,) holding (radius, theta).

    Returns
    -------
    np.ndarray
        Points of shape (N, 2) holding (x, y).
    """
    polar = _as_pairs(polar, "polar coordinates")

    radii = polar[:, 0]
    angles = polar[:, 1]
    return np.column_stack([radii * np.cos(angles), radii * np.sin(angles)])


def sector_vertices(
    radius: float,
    start_theta: float,
    end_theta: float,
    n_segments: int = 64
) -> np.ndarray:
    """
    Build the polygon outlining a circular sector.

    The first vertex is the origin, followed by n_segments + 1 points
    sampled along the arc from start_theta to end_theta.

    Parameters
    ----------
    radius : float
        Sector radius. Negative values are invalid.
    start_theta : float
        Start angle in radians.
    end_theta : float
        End angle in radians.
    n_segments : int
        Number of straight segments approximating the arc. Default 64.

    Returns
    -------
    np.ndarray
        Vertices of shape (n_segments + 2, 2). All NaN if radius < 0.
    """
    if n_segments < 1:
        raise ValueError(f"n_segments must be at least 1, got {n_segments}")

    n_vertices = n_segments + 2
    if radius < 0:
        logger.debug("sector_vertices: negative radius %r", radius)
        return np.full((n_vertices, 2), np.nan)

    angles = np.linspace(start_theta, end_theta, n_segments + 1)
    arc = np.column_stack([radius * np.cos(angles), radius * np.sin(angles)])
    return np.vstack([[0.0, 0.0], arc])
