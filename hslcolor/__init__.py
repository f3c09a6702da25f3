"""hslcolor: an 8-bit RGB color value with HSL and hex views.

    >>> import hslcolor
    >>> hslcolor.rgb(123, 169, 71).hex
    '#7ba947'
    >>> hslcolor.parse('hsl(90, 90%, 50%)').rgb
    (128, 242, 13)
"""

from hslcolor.core.color import Color, hex, hsl, parse, rand, rgb  # noqa: A004
from hslcolor.core.errors import ColorError, ParseError, RangeError

__version__ = '0.1.0'

__all__ = [
    'Color',
    'ColorError',
    'ParseError',
    'RangeError',
    'hex',
    'hsl',
    'parse',
    'rand',
    'rgb',
]
