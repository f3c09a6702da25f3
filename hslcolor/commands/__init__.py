"""CLI commands.

Each module defines a `command` object (hslcolor.core.types.Command) and
documents itself in its module docstring, which `hslcolor help` prints.
COMMANDS is the list the registry loads; add new modules here.
"""

from hslcolor.commands import dist, rand, show, swatch

COMMANDS = (show, rand, dist, swatch)
