"""Euclidean RGB distance between two colors.

0 for identical colors, about 441.7 between black and white.

Example:
    hslcolor dist '#9668c2' black
"""

from hslcolor.core.color import Color
from hslcolor.core.config import Settings
from hslcolor.core.report import describe
from hslcolor.core.types import Command, Report

command = Command(name='dist', help='Euclidean RGB distance between two colors.')


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('a', help='First color expression')
    parser.add_argument('b', help='Second color expression')


@command.run
def run(args, report: Report, settings: Settings) -> None:
    a = Color.parse(args.a)
    b = Color.parse(args.b)
    report.add(args.a, describe(a, threshold=settings.nearest_threshold))
    report.add(args.b, describe(b, threshold=settings.nearest_threshold))
    report.summary['distance'] = round(a.distance(b), 1)
