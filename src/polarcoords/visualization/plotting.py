"""
Visualization utilities for polar geometry.

Contains plotting functions for:
- A single polar point with its radius vector and circle
- Circular sectors with arc length and area annotations
- Polar curves r = f(theta) with point membership
"""

from typing import Optional
import math

import numpy as np
import matplotlib.pyplot as plt

from ..core.geometry import (
    EPS,
    TWO_PI,
    arc_length,
    sector_area,
    sector_vertices,
    polar_to_cartesian,
)
from ..core.point import PolarPoint, RadiusFunc
from ..curves.sampling import (
    PointsLike,
    sample_curve,
    curve_membership,
    curve_stats,
    as_polar_array,
)


def _stats_box(ax: plt.Axes, text: str) -> None:
    ax.text(
        0.02, 0.98, text,
        transform=ax.transAxes,
        verticalalignment='top',
        fontfamily='monospace',
        fontsize=9,
        bbox=dict(boxstyle='round', facecolor='white', alpha=0.8)
    )


def _finish_axes(ax: plt.Axes, title: str) -> None:
    ax.set_xlabel('X')
    ax.set_ylabel('Y')
    ax.set_title(title)
    ax.legend(loc='upper right')
    ax.set_aspect('equal', adjustable='box')
    ax.grid(True, alpha=0.3)


def plot_polar_point(
    point: PolarPoint,
    ax: Optional[plt.Axes] = None,
    show_circle: bool = True,
    show_radius: bool = True,
    title: str = "Polar Point",
    show_stats: bool = True
) -> plt.Axes:
    """
    Visualize a polar point in the Cartesian plane.

    Parameters
    ----------
    point : PolarPoint
        Point to draw.
    ax : plt.Axes, optional
        Matplotlib axes to plot on. Creates new figure if None.
    show_circle : bool
        Whether to draw the circle of radius point.radius around the origin.
        Skipped when the curvature is undefined.
    show_radius : bool
        Whether to draw the radius vector from the origin.
    title : str
        Plot title.
    show_stats : bool
        Whether to show radius, angle and curvature.

    Returns
    -------
    plt.Axes
        The matplotlib axes object.
    """
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(8, 8))

    x, y = point.to_cartesian().astype(np.float64)
    curvature = point.curvature()

    if show_circle and not math.isnan(curvature):
        angles = np.linspace(0, TWO_PI, 180)
        ax.plot(
            point.radius * np.cos(angles), point.radius * np.sin(angles),
            color='steelblue', linestyle='--', linewidth=1, label='Circle', zorder=1
        )

    if show_radius:
        ax.plot([0, x], [0, y], 'k-', linewidth=2, label='Radius', zorder=2)

    ax.scatter([x], [y], c='coral', s=80, label='Point', zorder=3)
    ax.scatter([0], [0], c='red', s=150, marker='*', zorder=4, label='Origin')

    if show_stats:
        _stats_box(
            ax,
            f"r: {point.radius:.4f}\n"
            f"theta: {point.theta:.4f} rad\n"
            f"Curvature: {curvature:.4f}"
        )

    _finish_axes(ax, title)
    return ax


def plot_sector(
    radius: float,
    start_theta: float,
    end_theta: float,
    ax: Optional[plt.Axes] = None,
    n_segments: int = 64,
    title: str = "Sector",
    show_stats: bool = True
) -> plt.Axes:
    """
    Visualize a circular sector.

    Parameters
    ----------
    radius : float
        Sector radius. A negative radius draws nothing but the origin.
    start_theta : float
        Start angle in radians.
    end_theta : float
        End angle in radians.
    ax : plt.Axes, optional
        Matplotlib axes to plot on. Creates new figure if None.
    n_segments : int
        Number of segments approximating the arc.
    title : str
        Plot title.
    show_stats : bool
        Whether to show arc length and area.

    Returns
    -------
    plt.Axes
        The matplotlib axes object.
    """
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(8, 8))

    poly = sector_vertices(radius, start_theta, end_theta, n_segments)

    if not np.any(np.isnan(poly)):
        closed_poly = np.vstack([poly, poly[0]])
        ax.plot(closed_poly[:, 0], closed_poly[:, 1], 'k-', linewidth=2, label='Sector', zorder=2)
        ax.fill(poly[:, 0], poly[:, 1], alpha=0.15, color='green', zorder=1)

    ax.scatter([0], [0], c='red', s=150, marker='*', zorder=3, label='Origin')

    if show_stats:
        _stats_box(
            ax,
            f"Arc length: {arc_length(radius, start_theta, end_theta):.4f}\n"
            f"Area: {sector_area(radius, start_theta, end_theta):.4f}"
        )

    _finish_axes(ax, title)
    return ax


def plot_curve(
    radius_function: RadiusFunc,
    points: Optional[PointsLike] = None,
    ax: Optional[plt.Axes] = None,
    n_angles: int = 360,
    tolerance: float = EPS,
    title: str = "Polar Curve",
    show_stats: bool = True
) -> plt.Axes:
    """
    Visualize the curve r = f(theta) and optional points against it.

    Parameters
    ----------
    radius_function : RadiusFunc
        Maps an angle to a radius.
    points : np.ndarray or sequence of PolarPoint, optional
        Points to scatter, coloured by curve membership.
    ax : plt.Axes, optional
        Matplotlib axes to plot on. Creates new figure if None.
    n_angles : int
        Number of samples along the curve.
    tolerance : float
        Membership tolerance.
    title : str
        Plot title.
    show_stats : bool
        Whether to show membership statistics (only with points).

    Returns
    -------
    plt.Axes
        The matplotlib axes object.
    """
    if ax is None:
        fig, ax = plt.subplots(1, 1, figsize=(8, 8))

    curve = sample_curve(radius_function, n_angles=n_angles)
    closed_curve = np.vstack([curve, curve[0]])
    ax.plot(closed_curve[:, 0], closed_curve[:, 1], 'k-', linewidth=2, label='Curve', zorder=2)

    if points is not None:
        on_curve = curve_membership(points, radius_function, tolerance)
        stats = curve_stats(points, radius_function, tolerance)

        xy = polar_to_cartesian(as_polar_array(points))

        ax.scatter(
            xy[on_curve, 0], xy[on_curve, 1],
            c='steelblue', alpha=0.8, s=20, label='On curve', zorder=3
        )
        ax.scatter(
            xy[~on_curve, 0], xy[~on_curve, 1],
            c='coral', alpha=0.8, s=20, label='Off curve', zorder=3
        )

        if show_stats and stats['num_points'] > 0:
            _stats_box(
                ax,
                f"On curve: {stats['fraction_on_curve']:.1%}\n"
                f"Points: {stats['num_points']}\n"
                f"Max deviation: {stats['max_deviation']:.2e}"
            )

    ax.scatter([0], [0], c='red', s=150, marker='*', zorder=4, label='Origin')

    _finish_axes(ax, title)
    return ax
