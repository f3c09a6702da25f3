"""Command registry for the hslcolor CLI.

Indexes the `command` object of every module in hslcolor.commands.COMMANDS
by name, and keeps the module docstring next to it for `hslcolor help`.
"""

from types import ModuleType

from hslcolor.core.types import Command

_registry: dict[str, Command] = {}
_docs: dict[str, str] = {}


def _register(module: ModuleType) -> None:
    cmd = getattr(module, 'command', None)
    if not isinstance(cmd, Command):
        raise RuntimeError(f'{module.__name__} does not define a Command named `command`')
    if cmd.name in _registry:
        raise RuntimeError(f'Command {cmd.name} registered twice')
    _registry[cmd.name] = cmd
    _docs[cmd.name] = (module.__doc__ or '').strip()


def all_commands() -> dict[str, Command]:
    """Load COMMANDS on first use and return name -> Command."""
    if not _registry:
        from hslcolor.commands import COMMANDS

        for module in COMMANDS:
            _register(module)
    return _registry


def get(name: str) -> Command:
    """Get a command by name."""
    reg = all_commands()
    if name not in reg:
        raise KeyError(f'Unknown command: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def doc(name: str) -> str:
    """Full docs for a command: its module docstring, or its short help if it has none."""
    cmd = get(name)
    return _docs[name] or cmd.help
