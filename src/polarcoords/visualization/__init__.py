"""
Visualization utilities.
"""

from .plotting import plot_polar_point, plot_sector, plot_curve

__all__ = ['plot_polar_point', 'plot_sector', 'plot_curve']
