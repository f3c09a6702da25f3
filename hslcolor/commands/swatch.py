"""Render colors as a PNG swatch strip.

One square per color, left to right, saved to OUT. Parent directories are
created if missing.

Example:
    hslcolor swatch ./tmp/palette.png navy '#f80' 'hsl(90, 90%, 50%)' --size 64
"""

import os

import numpy as np
from PIL import Image

from hslcolor.core.color import Color
from hslcolor.core.config import Settings
from hslcolor.core.report import describe
from hslcolor.core.types import Command, Report

command = Command(name='swatch', help='Render colors as a PNG swatch strip.')


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('out', help='Output PNG path')
    parser.add_argument('expr', nargs='+', help='Color expression')
    parser.add_argument('-s', '--size', type=int, default=48, help='Square size in pixels (default: 48)')


def render(colors: list[Color], size: int) -> Image.Image:
    """Build an RGB image with one size x size square per color."""
    strip = np.zeros((size, size * len(colors), 3), dtype=np.uint8)
    for i, color in enumerate(colors):
        strip[:, i * size : (i + 1) * size] = color.rgb
    return Image.fromarray(strip)


@command.run
def run(args, report: Report, settings: Settings) -> None:
    if args.size < 1:
        raise ValueError(f'--size must be positive, got {args.size}')
    colors = [Color.parse(expr) for expr in args.expr]

    parent = os.path.dirname(args.out)
    if parent:
        os.makedirs(parent, exist_ok=True)
    image = render(colors, args.size)
    image.save(args.out)

    for expr, color in zip(args.expr, colors):
        report.add(expr, describe(color, threshold=settings.nearest_threshold))
    report.summary['file'] = args.out
    report.summary['size'] = f'{image.width}x{image.height}'
