"""Tests for the surface-to-image pipeline."""

import io
import math
import re

import numpy as np
import pytest

from surfsvg import (
    RenderConfig,
    Color,
    parse_hex_color,
    format_hex_color,
    elevation_fraction,
    interpolate_color,
    zcolor,
    elevation_colors,
    project,
    sample_surface,
    iter_svg,
    write_svg,
    render_svg,
)
from surfsvg.render import SIN30, COS30

POLYGON_RE = re.compile(r"<polygon points='([^']*)' fill='(#[0-9a-f]{6})'/>")


def polygons(svg):
    """Return (points, fill) pairs of every polygon in an SVG document."""
    return [(m.group(1).split(", "), m.group(2)) for m in POLYGON_RE.finditer(svg)]


class TestProjection:
    """Tests for the isometric projection."""

    def test_origin_is_center(self):
        """Test that the world origin lands on the canvas center."""
        config = RenderConfig()
        assert project(0.0, 0.0, 0.0, config) == (300.0, 160.0)

    def test_origin_follows_canvas(self):
        """Test the center for a non-default canvas."""
        config = RenderConfig(width=1000, height=501)
        assert project(0.0, 0.0, 0.0, config) == (500.0, 250.5)

    def test_axes(self):
        """Test the projected directions of the x, y and z axes."""
        config = RenderConfig()
        sx, sy = project(1.0, 0.0, 0.0, config)
        assert sx == pytest.approx(300 + COS30 * 10)
        assert sy == pytest.approx(160 + SIN30 * 10)
        sx, sy = project(0.0, 1.0, 0.0, config)
        assert sx == pytest.approx(300 - COS30 * 10)
        assert sy == pytest.approx(160 + SIN30 * 10)
        sx, sy = project(0.0, 0.0, 1.0, config)
        assert (sx, sy) == pytest.approx((300.0, 160.0 - 128.0))

    def test_invertible(self):
        """Test that (x - y) and (x + y) are recovered from the projection."""
        config = RenderConfig()
        x, y = 3.0, -7.5
        sx, sy = project(x, y, 0.0, config)
        assert (sx - 300) / (COS30 * config.xyscale) == pytest.approx(x - y)
        assert (sy - 160) / (SIN30 * config.xyscale) == pytest.approx(x + y)

    def test_arrays(self):
        """Test that arrays are projected elementwise."""
        config = RenderConfig()
        x = np.array([0.0, 1.0, 2.0])
        sx, sy = project(x, x, np.zeros(3), config)
        np.testing.assert_allclose(sx, 300.0)
        np.testing.assert_allclose(sy, 160 + 2 * x * SIN30 * 10)

    def test_nan_propagates(self):
        """Test that non-finite elevation gives non-finite output."""
        _, sy = project(0.0, 0.0, math.nan, RenderConfig())
        assert math.isnan(sy)


class TestColors:
    """Tests for color parsing and elevation coloring."""

    def test_parse(self):
        """Test big-endian parsing of a hex string."""
        assert parse_hex_color("ff8000") == Color(255, 128, 0, 255)

    def test_parse_short(self):
        """Test that short strings fill from the low (blue) byte."""
        assert parse_hex_color("ff") == Color(0, 0, 255)
        assert parse_hex_color("1") == Color(0, 0, 1)

    def test_parse_upper_case(self):
        """Test that upper case digits are accepted."""
        assert parse_hex_color("00FF00") == Color(0, 255, 0)

    @pytest.mark.parametrize("text", ["", "xyz", "1234567", "0x12", "+12", " ff", "#ff0000"])
    def test_parse_invalid(self, text):
        """Test that malformed strings raise error."""
        with pytest.raises(ValueError):
            parse_hex_color(text)

    def test_round_trip(self):
        """Test that parsing then formatting reproduces the string."""
        assert format_hex_color(parse_hex_color("ff8000")) == "#ff8000"

    def test_format_array(self):
        """Test formatting of a uint8 channel array."""
        assert format_hex_color(np.array([1, 2, 255], dtype=np.uint8)) == "#0102ff"

    def test_fraction(self):
        """Test normalization against the elevation range."""
        assert elevation_fraction(0.5, 0.0, 2.0) == pytest.approx(0.25)
        np.testing.assert_allclose(elevation_fraction(np.array([-1.0, 1.0]), -1.0, 1.0), [0.0, 1.0])

    def test_fraction_collapsed(self):
        """Test the t = 0 fallback for a collapsed range."""
        assert elevation_fraction(0.0, 0.0, 0.0) == 0.0
        np.testing.assert_array_equal(elevation_fraction(np.zeros(3), 1.0, 1.0), np.zeros(3))

    def test_fraction_unobserved(self):
        """Test the t = 0 fallback for the (+inf, -inf) sentinel range."""
        assert elevation_fraction(0.0, math.inf, -math.inf) == 0.0

    def test_endpoints_exact(self):
        """Test that t = 0 gives the peak and t = 1 the valley."""
        peak, valley = Color(0, 0, 255), Color(255, 0, 0)
        assert interpolate_color(0.0, peak, valley) == peak
        assert interpolate_color(1.0, peak, valley)[:3] == valley[:3]

    def test_truncation(self):
        """Test that blended channels are truncated."""
        c = interpolate_color(0.5, Color(0, 0, 0), Color(255, 255, 255))
        assert c[:3] == (127, 127, 127)

    def test_alpha_from_peak(self):
        """Test that alpha is taken from the peak color."""
        c = interpolate_color(0.7, Color(0, 0, 0, 10), Color(255, 255, 255, 200))
        assert c.a == 10

    def test_zcolor(self):
        """Test direction of the gradient against elevation."""
        peak, valley = Color(0, 0, 255), Color(255, 0, 0)
        assert zcolor(-1.0, -1.0, 1.0, peak, valley) == peak
        assert zcolor(1.0, -1.0, 1.0, peak, valley)[:3] == valley[:3]

    def test_elevation_colors(self):
        """Test vectorized coloring at both ends of the range."""
        rgb = elevation_colors(np.array([0.0, 1.0]), 0.0, 1.0, Color(0, 0, 255), Color(255, 0, 0))
        assert rgb.dtype == np.uint8
        np.testing.assert_array_equal(rgb, [[0, 0, 255], [255, 0, 0]])

    def test_elevation_colors_collapsed(self):
        """Test that a collapsed range colors everything with the peak."""
        rgb = elevation_colors(np.zeros(5), 0.0, 0.0, Color(0, 0, 255), Color(255, 0, 0))
        np.testing.assert_array_equal(rgb, np.tile([0, 0, 255], (5, 1)))

    def test_elevation_colors_empty(self):
        """Test coloring of an empty cell set."""
        rgb = elevation_colors(np.zeros(0), math.inf, -math.inf, Color(0, 0, 0), Color(1, 1, 1))
        assert rgb.shape == (0, 3)


class TestSampler:
    """Tests for grid sampling."""

    def test_eggbox_small_grid(self):
        """Test that a 2x2 eggbox grid keeps all four cells."""
        sampled = sample_surface(RenderConfig(surface="eggbox", cells=2, xyrange=2.0))
        assert len(sampled) == 4
        assert sampled.dropped == 0
        assert sampled.points.shape == (4, 4, 2)
        assert sampled.corners.shape == (4, 4, 3)

    def test_row_major_order(self):
        """Test that cells come out in row-major order."""
        sampled = sample_surface(RenderConfig(surface="eggbox", cells=2, xyrange=2.0))
        np.testing.assert_array_equal(sampled.indices, [[0, 0], [0, 1], [1, 0], [1, 1]])

    def test_corner_order(self):
        """Test the corner order (i+1, j), (i, j), (i, j+1), (i+1, j+1)."""
        sampled = sample_surface(RenderConfig(surface="flat", cells=2, xyrange=2.0))
        # x = i - 1, y = j - 1 for this grid
        np.testing.assert_allclose(
            sampled.corners[0, :, :2],
            [[0.0, -1.0], [-1.0, -1.0], [-1.0, 0.0], [0.0, 0.0]],
        )

    def test_ripple_drops_origin_cells(self):
        """Test that the four cells around the ripple singularity are dropped."""
        sampled = sample_surface(RenderConfig(surface="ripple", cells=4, xyrange=4.0))
        assert len(sampled) == 12
        assert sampled.dropped == 4
        kept = {tuple(ij) for ij in sampled.indices.tolist()}
        assert kept.isdisjoint({(1, 1), (1, 2), (2, 1), (2, 2)})
        assert np.isfinite(sampled.points).all()
        assert math.isfinite(sampled.zmin) and math.isfinite(sampled.zmax)

    def test_range_from_corners(self):
        """Test that the elevation range uses raw corner values, not means."""
        sampled = sample_surface(RenderConfig(surface="saddle", cells=2, xyrange=2.0))
        assert sampled.zmax == pytest.approx(0.01)
        assert sampled.zmin == pytest.approx(-0.0025)
        assert sampled.elevation.max() < sampled.zmax
        assert sampled.elevation.min() > sampled.zmin

    def test_mean_elevation(self):
        """Test that each cell's elevation is the mean of its corners."""
        sampled = sample_surface(RenderConfig(surface="moguls", cells=5, xyrange=10.0))
        np.testing.assert_allclose(sampled.elevation, sampled.corners[..., 2].mean(axis=-1))

    def test_points_are_projected_corners(self):
        """Test that screen points are the projection of world corners."""
        config = RenderConfig(surface="eggbox", cells=3, xyrange=6.0, width=200, height=100)
        sampled = sample_surface(config)
        sx, sy = project(sampled.corners[..., 0], sampled.corners[..., 1], sampled.corners[..., 2], config)
        np.testing.assert_allclose(sampled.points[..., 0], sx)
        np.testing.assert_allclose(sampled.points[..., 1], sy)

    def test_empty_grid(self):
        """Test that zero cells leaves the sentinel range."""
        sampled = sample_surface(RenderConfig(cells=0))
        assert len(sampled) == 0
        assert sampled.zmin == math.inf
        assert sampled.zmax == -math.inf

    def test_iter_cells(self):
        """Test iteration over Cell records."""
        sampled = sample_surface(RenderConfig(surface="eggbox", cells=2, xyrange=2.0))
        cells = list(sampled)
        assert [(c.i, c.j) for c in cells] == [(0, 0), (0, 1), (1, 0), (1, 1)]
        assert cells[0].points.shape == (4, 2)
        assert cells[0].elevation == pytest.approx(cells[0].corners[:, 2].mean())

    def test_verbose(self, capsys):
        """Test that verbose mode prints a summary."""
        sample_surface(RenderConfig(surface="ripple", cells=4, xyrange=4.0), verbose=True)
        out = capsys.readouterr().out
        assert "cells = 4" in out
        assert "dropped = 4" in out


class TestSvg:
    """Tests for SVG emission."""

    def test_document_frame(self):
        """Test the root element and its size."""
        svg = render_svg(RenderConfig(width=800, height=400, cells=1))
        assert svg.startswith("<svg xmlns='http://www.w3.org/2000/svg' ")
        assert "stroke: grey; fill: white; stroke-width: 0.7" in svg
        assert "width='800' height='400'>" in svg
        assert svg.endswith("</svg>")

    def test_eggbox_polygons(self):
        """Test that a 2x2 eggbox grid gives four polygons of eight numbers."""
        svg = render_svg(RenderConfig(surface="eggbox", cells=2, xyrange=2.0))
        found = polygons(svg)
        assert len(found) == 4
        assert svg.count("<polygon") == 4
        for points, _ in found:
            assert len(points) == 8
            for value in points:
                assert re.fullmatch(r"-?\d+\.\d{6}", value)

    def test_points_match_sampler(self):
        """Test that polygon coordinates are the sampled screen points."""
        config = RenderConfig(surface="saddle", cells=3, xyrange=6.0)
        sampled = sample_surface(config)
        found = polygons(render_svg(config))
        for (points, _), expected in zip(found, sampled.points):
            np.testing.assert_allclose([float(v) for v in points], expected.reshape(-1), atol=1e-6)

    def test_ripple_polygon_count(self):
        """Test that the ripple singularity removes four polygons."""
        svg = render_svg(RenderConfig(surface="ripple", cells=4, xyrange=4.0))
        assert len(polygons(svg)) == 12

    def test_flat_uses_fallback_color(self):
        """Test that a flat surface is filled with the peak color."""
        config = RenderConfig(
            surface="flat",
            cells=3,
            peak=parse_hex_color("0000ff"),
            valley=parse_hex_color("ff0000"),
        )
        found = polygons(render_svg(config))
        assert len(found) == 9
        assert {fill for _, fill in found} == {"#0000ff"}

    def test_default_colors(self):
        """Test that default endpoints give white polygons."""
        found = polygons(render_svg(RenderConfig(surface="moguls", cells=4)))
        assert {fill for _, fill in found} == {"#ffffff"}

    def test_gradient_endpoints(self):
        """Test that both endpoint colors can appear on a varied surface."""
        config = RenderConfig(
            surface="saddle",
            cells=10,
            peak=parse_hex_color("000000"),
            valley=parse_hex_color("ffffff"),
        )
        fills = [fill for _, fill in polygons(render_svg(config))]
        assert len(set(fills)) > 1

    def test_fills_match_cell_colors(self):
        """Test that polygon fills equal the per-cell zcolor of each Cell."""
        config = RenderConfig(
            surface="moguls",
            cells=6,
            xyrange=12.0,
            peak=parse_hex_color("ff4000"),
            valley=parse_hex_color("2040ff"),
        )
        sampled = sample_surface(config)
        expected = [
            format_hex_color(zcolor(cell.elevation, sampled.zmin, sampled.zmax, config.peak, config.valley))
            for cell in sampled
        ]
        assert [fill for _, fill in polygons(render_svg(config))] == expected

    def test_empty_grid(self):
        """Test that an empty grid gives a document with no polygons."""
        svg = render_svg(RenderConfig(cells=0))
        assert "<polygon" not in svg
        assert svg.endswith("</svg>")

    def test_streaming(self):
        """Test that iter_svg yields header, one chunk per cell and footer."""
        chunks = list(iter_svg(RenderConfig(surface="eggbox", cells=2, xyrange=2.0)))
        assert len(chunks) == 6
        assert chunks[0].startswith("<svg")
        assert chunks[-1] == "</svg>"

    def test_write_svg(self):
        """Test that write_svg writes the same document as render_svg."""
        config = RenderConfig(surface="eggbox", cells=3)
        buf = io.StringIO()
        write_svg(buf, config)
        assert buf.getvalue() == render_svg(config)
