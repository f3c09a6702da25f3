"""Color value type.

State is three integer channels 0-255. HSL and hex are derived views,
recomputed from the channels on every access.

Channel setters validate before storing, so a failed assignment leaves the
color untouched. There is no locking: share a Color across threads only with
external synchronization.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from hslcolor.core.convert import (
    hex_to_rgb,
    hsl_to_rgb,
    normalize_hue,
    rgb_to_hex,
    rgb_to_hsl,
    round_half_up,
    validate,
)
from hslcolor.core.errors import ParseError
from hslcolor.core.palette import rgb_distance
from hslcolor.core.parser import parse_expression


def _channel(component: str, value: float) -> int:
    validate(component, value, 0, 255)
    return int(round_half_up(value))


def _span(component: str, bounds: Sequence[float]) -> tuple[float, float]:
    lo, hi = bounds
    if lo > hi:
        raise ValueError(f'{component} range {lo}-{hi} is inverted')
    return lo, hi


class Color:
    """An 8-bit RGB color.

    Build one with a factory rather than the constructor:

        Color.from_rgb(123, 169, 71)
        Color.from_hsl(330, 1, 0.5)
        Color.from_hex('#f80')
        Color.parse('hsl(90, 90%, 50%)')
        Color.random(hue_range=(180, 240))
    """

    __slots__ = ('_rgb',)

    def __init__(self, r: float = 255, g: float = 255, b: float = 255):
        self._rgb = [_channel('R', r), _channel('G', g), _channel('B', b)]

    # Factories

    @classmethod
    def from_rgb(cls, r: float = 255, g: float = 255, b: float = 255) -> Color:
        """Channels 0-255. Fractions round to nearest. Defaults give white."""
        return cls(r, g, b)

    @classmethod
    def from_hsl(cls, h: float = 360, s: float = 1, l: float = 1) -> Color:  # noqa: E741
        """Hue in degrees (any angle, wrapped into 0-360), saturation and lightness 0-1."""
        validate('S', s, 0, 1)
        validate('L', l, 0, 1)
        return cls(*hsl_to_rgb(normalize_hue(h), s, l))

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """6-digit or 3-digit hex code, with or without '#'."""
        return cls(*hex_to_rgb(text))

    @classmethod
    def parse(cls, text: str) -> Color:
        """Build from 'rgb(r,g,b)', 'hsl(h,s%,l%)', a hex code or a CSS keyword."""
        expr = parse_expression(text)
        if expr.model == 'rgb':
            return cls.from_rgb(*expr.values)
        if expr.model == 'hsl':
            return cls.from_hsl(*expr.values)
        if expr.model in ('hex', 'name'):
            return cls.from_hex(expr.hex)
        raise ParseError(text)

    @classmethod
    def random(
        cls,
        hue_range: Sequence[float] = (0, 360),
        sat_range: Sequence[float] = (0, 1),
        lum_range: Sequence[float] = (0, 1),
        rng: np.random.Generator | None = None,
    ) -> Color:
        """Random color with hue, saturation and lightness drawn uniformly from the ranges.

        Hue is drawn as an integer from the inclusive range. Pass a seeded
        numpy Generator for reproducible output.
        """
        h_lo, h_hi = _span('H', hue_range)
        s_lo, s_hi = _span('S', sat_range)
        l_lo, l_hi = _span('L', lum_range)
        for component, value in (('S', s_lo), ('S', s_hi), ('L', l_lo), ('L', l_hi)):
            validate(component, value, 0, 1)

        # Whole degrees that lie inside the supplied bounds
        first, last = math.ceil(h_lo), math.floor(h_hi)
        if first > last:
            raise ValueError(f'H range {h_lo}-{h_hi} contains no whole degree')

        if rng is None:
            rng = np.random.default_rng()

        h = int(rng.integers(first, last, endpoint=True))
        s = float(rng.uniform(s_lo, s_hi))
        l = float(rng.uniform(l_lo, l_hi))  # noqa: E741
        return cls.from_hsl(h, s, l)

    # Channels

    @property
    def r(self) -> int:
        return self._rgb[0]

    @r.setter
    def r(self, value: float) -> None:
        self._rgb[0] = _channel('R', value)

    @property
    def g(self) -> int:
        return self._rgb[1]

    @g.setter
    def g(self, value: float) -> None:
        self._rgb[1] = _channel('G', value)

    @property
    def b(self) -> int:
        return self._rgb[2]

    @b.setter
    def b(self, value: float) -> None:
        self._rgb[2] = _channel('B', value)

    @property
    def rgb(self) -> tuple[int, int, int]:
        return self._rgb[0], self._rgb[1], self._rgb[2]

    # Derived views

    @property
    def hsl(self) -> tuple[int, float, float]:
        """(hue degrees, saturation, lightness); s and l rounded to 2 decimals."""
        return rgb_to_hsl(*self._rgb)

    @property
    def h(self) -> int:
        return self.hsl[0]

    @property
    def s(self) -> float:
        return self.hsl[1]

    @property
    def l(self) -> float:  # noqa: E743
        return self.hsl[2]

    @property
    def hex(self) -> str:
        """Lowercase '#rrggbb'."""
        return rgb_to_hex(*self._rgb)

    def distance(self, other: Color) -> float:
        """Euclidean distance between the two RGB triples."""
        return rgb_distance(self.rgb, other.rgb)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.rgb == other.rgb

    __hash__ = None  # mutable channels

    def __repr__(self) -> str:
        r, g, b = self._rgb
        return f'Color(r={r}, g={g}, b={b})'

    def __str__(self) -> str:
        return self.hex


# Module-level factories
rgb = Color.from_rgb
hsl = Color.from_hsl
hex = Color.from_hex  # noqa: A001
parse = Color.parse
rand = Color.random
