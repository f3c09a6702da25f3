"""Tests for hslcolor.core.palette: CSS keywords and distance functions."""

import numpy as np
from hslcolor.core.palette import CSS_COLORS, nearest_color, resolve_name, rgb_distance


class TestRgbDistance:
    def test_same_color(self):
        assert rgb_distance((255, 255, 255), (255, 255, 255)) == 0.0

    def test_black_white(self):
        d = rgb_distance((0, 0, 0), (255, 255, 255))
        assert d > 400  # sqrt(3 * 255^2) ≈ 441.7

    def test_symmetry(self):
        a = (100, 50, 200)
        b = (120, 60, 180)
        assert rgb_distance(a, b) == rgb_distance(b, a)

    def test_uses_int_not_uint8(self):
        """uint8 input must not wrap: (0 - 200) stays negative."""
        a = np.array([0, 0, 0], dtype=np.uint8)
        b = np.array([200, 200, 200], dtype=np.uint8)
        assert rgb_distance(a, b) > 300

    def test_returns_python_float(self):
        assert type(rgb_distance((1, 2, 3), (4, 5, 6))) is float


class TestNearestColor:
    def test_exact_white(self):
        name, dist = nearest_color((255, 255, 255))
        assert name == 'white'
        assert dist == 0.0

    def test_exact_black(self):
        name, dist = nearest_color((0, 0, 0))
        assert name == 'black'
        assert dist == 0.0

    def test_near_red(self):
        name, dist = nearest_color((250, 5, 5))
        assert name == 'red'
        assert dist < 10

    def test_beyond_threshold_returns_none(self):
        name, dist = nearest_color((200, 100, 50), threshold=10)
        assert name is None
        assert dist > 10


class TestResolveName:
    def test_lowercase(self):
        assert resolve_name('navy') == '#000080'

    def test_case_insensitive(self):
        assert resolve_name('RebeccaPurple') == '#663399'

    def test_unknown_returns_none(self):
        assert resolve_name('doesNotExist') is None


class TestCssPalette:
    def test_has_basic_keywords(self):
        for name in ['black', 'white', 'red', 'lime', 'blue', 'gray', 'silver', 'aqua', 'fuchsia']:
            assert name in CSS_COLORS

    def test_values_are_hex(self):
        for name, hex_val in CSS_COLORS.items():
            assert hex_val.startswith('#'), f'{name} value {hex_val} missing #'
            assert len(hex_val) == 7, f'{name} value {hex_val} not 7 chars'
            assert hex_val == hex_val.lower(), f'{name} value {hex_val} not lowercase'
