"""hslcolor.core: foundation layer.

Contains the Color type, conversions, parser, palette, settings and report builder.
This module has NO dependencies on hslcolor.commands or hslcolor.registry.
Only stdlib and numpy are allowed here.
"""
