#
# Copyright (c) 2024–2025, Daily
#
# SPDX-License-Identifier: BSD 2-Clause License
#

import numpy as np
import pytest

from spline_resampler.audio.spline import (
    spline,
    spline_c1,
    spline_c2,
    spline_m1,
    spline_m2,
    spline_z0,
    spline_z1,
    spline_z2,
)


class TestMoments:
    def test_linear_window_has_no_curvature(self):
        window = [0.0, 1.0, 2.0, 3.0]
        assert spline_c1(window) == 0.0
        assert spline_c2(window) == 0.0
        assert spline_m1(0.0, 0.0) == 0.0
        assert spline_m2(0.0, 0.0) == 0.0

    def test_second_differences(self):
        window = [0.0, 1.0, 0.0, 0.0]
        assert spline_c1(window) == -6.0
        assert spline_c2(window) == 3.0

    def test_closed_form_constants(self):
        assert spline_m1(-6.0, 3.0) == pytest.approx(-13.5 / 3.75)
        assert spline_m2(-6.0, 3.0) == pytest.approx(-9.0 / -7.75)


class TestSpline:
    def test_linear_window_first_interval(self):
        assert spline(0, [0.0, 1.0, 2.0, 3.0], 0.5) == 0.5

    def test_linear_window_middle_interval(self):
        assert spline(0, [0.0, 1.0, 2.0, 3.0], 1.5) == 1.5

    def test_linear_window_last_interval(self):
        assert spline(0, [0.0, 1.0, 2.0, 3.0], 2.5) == 2.5

    def test_returns_float_for_scalars(self):
        assert isinstance(spline(0, [0.0, 1.0, 2.0, 3.0], 0.5), float)

    def test_passes_through_control_points(self):
        window = [0.2, -0.7, 0.4, 0.9]
        assert spline(0, window, 0.0) == pytest.approx(0.2)
        assert spline(0, window, 1.0) == pytest.approx(-0.7)
        assert spline(0, window, 2.0) == pytest.approx(0.4)
        assert spline(0, window, 3.0) == pytest.approx(0.9)

    def test_query_is_relative_to_base_index(self):
        window = [0.2, -0.7, 0.4, 0.9]
        for offset in (0.25, 1.5, 2.75):
            assert spline(10, window, 10 + offset) == pytest.approx(spline(0, window, offset))

    def test_interval_bounds_select_left_piece(self):
        window = [0.2, -0.7, 0.4, 0.9]
        y0, y1, y2, y3 = window
        c1, c2 = spline_c1(window), spline_c2(window)
        m1, m2 = spline_m1(c1, c2), spline_m2(c1, c2)

        assert spline(0, window, 1.0) == spline_z0(m1, 1, 0, 1, y0, y1, 1.0)
        assert spline(0, window, 2.0) == spline_z1(m1, m2, 1, 1, 2, y1, y2, 2.0)
        assert spline(0, window, 2.5) == spline_z2(m2, 1, 2, 3, y2, y3, 2.5)

    def test_vectorized_matches_scalar(self):
        rng = np.random.default_rng(1234)
        windows = rng.uniform(-1.0, 1.0, size=(4, 50))
        xi = np.arange(50, dtype=np.float64)
        xo = xi + rng.uniform(0.0, 3.0, size=50)

        result = spline(xi, windows, xo)

        expected = [
            spline(float(xi[n]), windows[:, n].tolist(), float(xo[n])) for n in range(50)
        ]
        np.testing.assert_array_equal(result, np.array(expected))

    def test_vectorized_empty(self):
        result = spline(np.zeros(0), np.zeros((4, 0)), np.zeros(0))
        assert result.shape == (0,)
