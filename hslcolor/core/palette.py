"""Named color palette and RGB distance.

CSS_COLORS holds the CSS basic color keywords. nearest_color() maps any RGB
triple to the closest keyword by Euclidean distance, optionally giving up past
a threshold.
"""

from __future__ import annotations

import numpy as np

from hslcolor.core.convert import hex_to_rgb

CSS_COLORS: dict[str, str] = {
    'black': '#000000',
    'silver': '#c0c0c0',
    'gray': '#808080',
    'white': '#ffffff',
    'maroon': '#800000',
    'red': '#ff0000',
    'purple': '#800080',
    'fuchsia': '#ff00ff',
    'green': '#008000',
    'lime': '#00ff00',
    'olive': '#808000',
    'yellow': '#ffff00',
    'navy': '#000080',
    'blue': '#0000ff',
    'teal': '#008080',
    'aqua': '#00ffff',
    'orange': '#ffa500',
    'rebeccapurple': '#663399',
}

_NAMES = list(CSS_COLORS)
_TABLE = np.array([hex_to_rgb(v) for v in CSS_COLORS.values()], dtype=int)


def rgb_distance(a: tuple[int, int, int], b: tuple[int, int, int]) -> float:
    """Euclidean distance between two RGB triples."""
    # Signed ints: uint8 input would wrap on subtraction
    diff = np.asarray(a, dtype=int) - np.asarray(b, dtype=int)
    return float(np.sqrt(np.sum(diff * diff)))


def nearest_color(rgb: tuple[int, int, int], threshold: float | None = None) -> tuple[str | None, float]:
    """Return (name, distance) of the closest CSS keyword.

    name is None when the closest keyword is further than threshold.
    """
    dists = np.linalg.norm(_TABLE - np.asarray(rgb, dtype=int), axis=1)
    idx = int(np.argmin(dists))
    dist = float(dists[idx])
    if threshold is not None and dist > threshold:
        return None, dist
    return _NAMES[idx], dist


def resolve_name(name: str) -> str | None:
    """Look up a keyword case-insensitively. Returns the hex code or None."""
    return CSS_COLORS.get(name.strip().lower())
