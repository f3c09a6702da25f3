"""Report builder: text and JSON output for hslcolor results."""

import json
from typing import Any

from hslcolor.core.color import Color
from hslcolor.core.palette import nearest_color
from hslcolor.core.types import Report


def describe(color: Color, threshold: float | None = None) -> dict[str, Any]:
    """Every view of a color, plus its nearest CSS keyword."""
    name, dist = nearest_color(color.rgb, threshold=threshold)
    return {
        'hex': color.hex,
        'rgb': list(color.rgb),
        'hsl': list(color.hsl),
        'nearest': name,
        'nearest_distance': round(dist, 1),
    }


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    for entry in report.entries:
        label = entry['label']
        if 'hex' in entry:
            r, g, b = entry['rgb']
            h, s, l = entry['hsl']  # noqa: E741
            line = f'{label:<20} {entry["hex"]}  rgb({r}, {g}, {b})  hsl({h}, {s:.0%}, {l:.0%})'
            if entry.get('nearest'):
                line += f'  ~{entry["nearest"]} (Δ={entry["nearest_distance"]})'
            lines.append(line)
        else:
            # Generic fallback
            for k, v in entry.items():
                if k != 'label':
                    lines.append(f'{label}.{k}: {v}')

    for k, v in report.summary.items():
        lines.append(f'{k}: {v}')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {'colors': report.entries}
    if report.summary:
        obj['summary'] = report.summary
    return json.dumps(obj, indent=2)
