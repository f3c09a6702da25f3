"""Describe colors: hex, RGB, HSL and the nearest CSS keyword.

Accepts any number of expressions: rgb(r,g,b), hsl(h,s%,l%), hex codes
(#fff, c9189d) or CSS basic keywords (navy, rebeccapurple). The nearest
keyword is reported only within HSLCOLOR_NEAREST_THRESHOLD (default 60).

Example:
    hslcolor show '#9668c2' 'rgb(23,217,143)' 'hsl(90, 90%, 50%)'
    hslcolor --json show navy
"""

from hslcolor.core.color import Color
from hslcolor.core.config import Settings
from hslcolor.core.report import describe
from hslcolor.core.types import Command, Report

command = Command(name='show', help='Describe colors as hex, RGB and HSL.')


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('expr', nargs='+', help='Color expression')


@command.run
def run(args, report: Report, settings: Settings) -> None:
    for expr in args.expr:
        color = Color.parse(expr)
        report.add(expr, describe(color, threshold=settings.nearest_threshold))
