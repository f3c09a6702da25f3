"""Shared types for hslcolor: ParsedExpression, Report, Command."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


@dataclass
class ParsedExpression:
    """Result of reading a free-text color expression, before any validation."""

    model: str  # 'rgb', 'hsl', 'hex' or 'name'
    values: tuple[float, ...] = ()  # rgb: 0-255 channels, hsl: degrees and 0-1 fractions
    hex: str | None = None  # hex digits for 'hex', resolved code for 'name'
    text: str = ''  # original input


@dataclass
class Report:
    """Accumulates labelled color descriptions for text/JSON output."""

    entries: list[dict[str, Any]] = field(default_factory=list)
    summary: dict[str, Any] = field(default_factory=dict)

    def add(self, label: str, data: dict[str, Any]) -> None:
        self.entries.append({'label': label, **data})


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='show', help='Describe colors')

        @command.arguments
        def add_arguments(parser):
            parser.add_argument('expr', nargs='+')

        @command.run
        def run(args, report, settings):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None
        self._args_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register a function adding this command's CLI arguments."""
        self._args_fn = fn
        return fn

    def configure(self, parser: Any) -> None:
        if self._args_fn is not None:
            self._args_fn(parser)

    def execute(self, args: Any, report: Report, settings: Any) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(args, report, settings)
