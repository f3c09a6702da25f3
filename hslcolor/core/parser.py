"""Regex-based parser for free-text color expressions.

Recognized forms (case-insensitive, whitespace tolerant):
  rgb(23, 217, 143)
  hsl(90, 90%, 50%)   s and l are percentages; '%' is optional, always divided by 100
  #c9189d, c9189d, #fff, fff, ff-88-00
  red, navy, rebeccapurple   CSS basic keywords

Only syntax is checked here. Range validation happens when the Color is built.
"""

import re

from hslcolor.core.errors import ParseError
from hslcolor.core.palette import resolve_name
from hslcolor.core.types import ParsedExpression

_NUM = r'([-+]?\d*\.?\d+)'

_RGB = re.compile(rf'^rgb\(\s*{_NUM}\s*,\s*{_NUM}\s*,\s*{_NUM}\s*\)$', re.IGNORECASE)
_HSL = re.compile(rf'^hsl\(\s*{_NUM}\s*,\s*{_NUM}\s*%?\s*,\s*{_NUM}\s*%?\s*\)$', re.IGNORECASE)
# Separators between digit groups are allowed; hex_to_rgb strips them
_HEX = re.compile(r'^#?[0-9a-f]+(?:[\s:._-]+[0-9a-f]+)*$', re.IGNORECASE)
_WORD = re.compile(r'^[a-z]+$', re.IGNORECASE)


def parse_expression(text: str) -> ParsedExpression:
    """Classify an expression and pull out its numeric components."""
    stripped = text.strip()

    m = _RGB.match(stripped)
    if m:
        return ParsedExpression(model='rgb', values=tuple(float(v) for v in m.groups()), text=text)

    m = _HSL.match(stripped)
    if m:
        h, s, l = (float(v) for v in m.groups())  # noqa: E741
        return ParsedExpression(model='hsl', values=(h, s / 100, l / 100), text=text)

    # Hex before keywords: 'fff' and 'bad' are hex codes, not names
    if _HEX.match(stripped):
        return ParsedExpression(model='hex', hex=stripped, text=text)

    if _WORD.match(stripped):
        resolved = resolve_name(stripped)
        if resolved is not None:
            return ParsedExpression(model='name', hex=resolved, text=text)

    raise ParseError(text)
