"""Error taxonomy for hslcolor.

RangeError: a numeric component is outside its declared bound.
ParseError: a hex code or color expression could not be understood.

Both subclass ValueError so callers that only care about bad input can catch that.
"""

from __future__ import annotations


class ColorError(Exception):
    """Base class for every error raised by hslcolor."""


class RangeError(ColorError, ValueError):
    """A component value lies outside [lower, upper]."""

    def __init__(self, component: str, value: float, lower: float, upper: float):
        self.component = component
        self.value = value
        self.lower = lower
        self.upper = upper
        super().__init__(f'{component} value {value} must be {lower}-{upper}')


class ParseError(ColorError, ValueError):
    """Input text is not a recognized hex code or color expression."""

    def __init__(self, text: str, reason: str = 'unrecognized color expression'):
        self.text = text
        self.reason = reason
        super().__init__(f'{reason}: {text!r}')
