"""Pure conversions between RGB, HSL and hex.

RGB channels are ints 0-255. Hue is degrees 0-360, saturation and lightness
are 0-1 floats rounded to two decimals. Nothing here holds state: Color calls
these on every access so a channel change is visible immediately.

Rounding is half away from zero. Values are first snapped to 15 significant
digits so float noise (127.49999999999997) lands on the intended side.
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal

from hslcolor.core.errors import ParseError, RangeError

_NON_HEX = re.compile(r'[^0-9a-fA-F]')


def round_half_up(value: float, ndigits: int = 0) -> float:
    snapped = Decimal(f'{value:.15g}')
    return float(snapped.quantize(Decimal(1).scaleb(-ndigits), rounding=ROUND_HALF_UP))


def validate(component: str, value: float, lower: float, upper: float) -> None:
    """Raise RangeError if value is outside [lower, upper]."""
    if not lower <= value <= upper:
        raise RangeError(component, value, lower, upper)


def normalize_hue(h: float) -> float:
    """Wrap an angle into [0, 360). Negative angles wrap forward: -170 -> 190."""
    return h % 360


def rgb_to_hsl(r: int, g: int, b: int) -> tuple[int, float, float]:
    """Convert 0-255 RGB to (hue degrees, saturation, lightness)."""
    r, g, b = r / 255, g / 255, b / 255
    lo = min(r, g, b)
    hi = max(r, g, b)

    light = round_half_up((lo + hi) / 2, 2)

    # Achromatic: hue is undefined, report 0
    if lo == hi:
        return 0, 0.0, light

    delta = hi - lo
    if light < 0.5:
        sat = delta / (hi + lo)
    else:
        sat = delta / (2.0 - hi - lo)

    # Checked in R, G, B order so equal maxima favor red, then green
    if r == hi:
        hue = (g - b) / delta
    elif g == hi:
        hue = 2.0 + (b - r) / delta
    else:
        hue = 4.0 + (r - g) / delta

    hue *= 60
    if hue < 0:
        hue += 360

    return int(round_half_up(hue)), round_half_up(sat, 2), light


def _channel(t: float, temp1: float, temp2: float) -> float:
    if t < 0:
        t += 1
    elif t > 1:
        t -= 1

    if 6 * t < 1:
        return temp2 + (temp1 - temp2) * 6 * t
    if 2 * t < 1:
        return temp1
    if 3 * t < 2:
        return temp2 + (temp1 - temp2) * ((2 / 3) - t) * 6
    return temp2


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[int, int, int]:  # noqa: E741
    """Convert (hue degrees, saturation, lightness) to 0-255 RGB."""
    if s == 0:
        grey = int(round_half_up(l * 255))
        return grey, grey, grey

    if l < 0.5:
        temp1 = l * (1.0 + s)
    else:
        temp1 = l + s - l * s
    temp2 = 2 * l - temp1

    pos = normalize_hue(h) / 360
    channels = (
        _channel(pos + 1 / 3, temp1, temp2),
        _channel(pos, temp1, temp2),
        _channel(pos - 1 / 3, temp1, temp2),
    )
    r, g, b = (int(round_half_up(c * 255)) for c in channels)
    return r, g, b


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return f'#{r:02x}{g:02x}{b:02x}'


def hex_to_rgb(text: str) -> tuple[int, int, int]:
    """Parse a 6-digit or 3-digit hex code. '#', case and stray characters are ignored.

    Shorthand duplicates each digit: 'f80' -> 'ff8800'.
    """
    digits = _NON_HEX.sub('', text)
    if len(digits) == 3:
        digits = ''.join(d * 2 for d in digits)
    elif len(digits) != 6:
        raise ParseError(text, f'hex code must have 3 or 6 digits, got {len(digits)}')
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)
