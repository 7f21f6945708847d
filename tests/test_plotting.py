"""
Smoke tests for the plotting helpers.
"""

import math

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np
import pytest

from polarcoords import PolarPoint, plot_polar_point, plot_sector, plot_curve


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close('all')


def line_labels(ax):
    return [line.get_label() for line in ax.get_lines()]


class TestPlotPolarPoint:
    """Tests for plot_polar_point() function."""

    def test_creates_axes(self):
        ax = plot_polar_point(PolarPoint(2.0, math.pi / 4))
        assert isinstance(ax, plt.Axes)
        assert ax.get_title() == "Polar Point"
        assert 'Circle' in line_labels(ax)
        assert 'Radius' in line_labels(ax)

    def test_uses_given_axes(self):
        fig, ax = plt.subplots()
        result = plot_polar_point(PolarPoint(1.0, 0.5), ax=ax, title="Given")
        assert result is ax
        assert ax.get_title() == "Given"

    def test_zero_radius_skips_circle(self):
        """Undefined curvature leaves out the circle."""
        ax = plot_polar_point(PolarPoint(0.0, 1.0))
        assert 'Circle' not in line_labels(ax)

    def test_radius_vector_endpoint(self):
        ax = plot_polar_point(PolarPoint(2.0, 0.0), show_circle=False)
        radius_line = [line for line in ax.get_lines() if line.get_label() == 'Radius'][0]
        np.testing.assert_allclose(radius_line.get_xdata(), [0.0, 2.0])
        np.testing.assert_allclose(radius_line.get_ydata(), [0.0, 0.0])


class TestPlotSector:
    """Tests for plot_sector() function."""

    def test_draws_outline(self):
        ax = plot_sector(2.0, 0.0, math.pi / 2, n_segments=8)
        outline = [line for line in ax.get_lines() if line.get_label() == 'Sector'][0]
        # Origin, 9 arc points, closing vertex
        assert len(outline.get_xdata()) == 11

    def test_stats_text(self):
        ax = plot_sector(2.0, 0.0, math.pi)
        text = ax.texts[0].get_text()
        assert "Arc length: 6.2832" in text
        assert "Area: 6.2832" in text

    def test_negative_radius_draws_nothing(self):
        ax = plot_sector(-1.0, 0.0, math.pi)
        assert 'Sector' not in line_labels(ax)
        assert "nan" in ax.texts[0].get_text()


class TestPlotCurve:
    """Tests for plot_curve() function."""

    def test_curve_only(self):
        ax = plot_curve(lambda theta: 1.0, n_angles=90)
        curve = [line for line in ax.get_lines() if line.get_label() == 'Curve'][0]
        assert len(curve.get_xdata()) == 91
        assert len(ax.texts) == 0

    def test_points_split_by_membership(self):
        points = [PolarPoint(1.0, 0.0), PolarPoint(1.0, 1.0), PolarPoint(2.0, 2.0)]
        ax = plot_curve(lambda theta: 1.0, points=points)

        offsets = {c.get_label(): c.get_offsets() for c in ax.collections}
        assert len(offsets['On curve']) == 2
        assert len(offsets['Off curve']) == 1
        assert "On curve: 66.7%" in ax.texts[0].get_text()

    def test_array_points(self):
        polar = np.array([[1.0, 0.0], [3.0, 1.0]])
        ax = plot_curve(lambda theta: 1.0, points=polar, show_stats=False)
        offsets = {c.get_label(): c.get_offsets() for c in ax.collections}
        assert len(offsets['On curve']) == 1
        assert len(offsets['Off curve']) == 1
        assert len(ax.texts) == 0

    def test_undefined_points_from_conversion(self):
        """None entries from points_from_cartesian() are plotted as off curve."""
        points = [None, PolarPoint(1.0, 0.0), PolarPoint(2.0, 1.0)]
        ax = plot_curve(lambda theta: 1.0, points=points)

        offsets = {c.get_label(): c.get_offsets() for c in ax.collections}
        assert len(offsets['On curve']) == 1
        assert "Points: 3" in ax.texts[0].get_text()
        assert "Max deviation: 1.00e+00" in ax.texts[0].get_text()

if __name__ == "__main__":
    pytest.main([__file__, "-v"])
