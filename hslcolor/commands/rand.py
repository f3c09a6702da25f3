"""Generate random colors within hue, saturation and lightness ranges.

Hue is drawn as a whole degree from the inclusive range; saturation and
lightness are drawn uniformly. Seed with --seed or HSLCOLOR_SEED for
repeatable output.

Example:
    hslcolor rand -n 5
    hslcolor rand --hue 180 240 --sat 0.5 1 --lum 0.3 0.6 --seed 7
"""

import numpy as np

from hslcolor.core.color import Color
from hslcolor.core.config import Settings
from hslcolor.core.report import describe
from hslcolor.core.types import Command, Report

command = Command(name='rand', help='Generate random colors within HSL ranges.')


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('-n', '--count', type=int, default=1, help='Number of colors (default: 1)')
    parser.add_argument('--hue', nargs=2, type=float, default=[0, 360], metavar=('MIN', 'MAX'))
    parser.add_argument('--sat', nargs=2, type=float, default=[0, 1], metavar=('MIN', 'MAX'))
    parser.add_argument('--lum', nargs=2, type=float, default=[0, 1], metavar=('MIN', 'MAX'))
    parser.add_argument('--seed', type=int, default=None, help='Random seed (overrides HSLCOLOR_SEED)')


@command.run
def run(args, report: Report, settings: Settings) -> None:
    seed = args.seed if args.seed is not None else settings.seed
    rng = np.random.default_rng(seed)
    for i in range(args.count):
        color = Color.random(args.hue, args.sat, args.lum, rng=rng)
        report.add(f'#{i + 1}', describe(color, threshold=settings.nearest_threshold))
