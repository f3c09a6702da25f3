"""hslcolor: convert, compare and generate 8-bit colors from the command line.

Usage: hslcolor [--env-file PATH] [--json] <command> [args]

Commands are listed in hslcolor.commands.COMMANDS.
Each command module's docstring is its documentation.
Run `hslcolor help <command>` for full module docs.

Settings / .env loading:
  OS environment variables are always used first.
  If a variable is not set, hslcolor looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import sys

from hslcolor import registry
from hslcolor.core.config import load_settings
from hslcolor.core.report import format_json, format_text
from hslcolor.core.types import Report


def _short_help(name: str) -> str:
    doc = registry.doc(name)
    return doc.splitlines()[0] if doc else ''


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        "  hslcolor show '#9668c2' 'rgb(23,217,143)' 'hsl(90, 90%, 50%)'\n"
        '  hslcolor --json show navy\n'
        '  hslcolor rand -n 5 --hue 180 240 --seed 7\n'
        "  hslcolor dist '#9668c2' black\n"
        "  hslcolor swatch ./tmp/palette.png navy '#f80'\n"
        '  hslcolor help rand\n'
        '\n'
        'Settings (set in .env or environment):\n'
        '  HSLCOLOR_SEED               seed for rand\n'
        '  HSLCOLOR_NEAREST_THRESHOLD  max distance for naming a color (default 60)\n'
        '  HSLCOLOR_JSON=1             JSON output by default\n'
    )
    parser = argparse.ArgumentParser(
        prog='hslcolor',
        description='Convert, compare and generate 8-bit colors.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    # Global options go before the subcommand
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
    sub = parser.add_subparsers(dest='command', help='Command to run')

    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_help(name))
        cmd.configure(p)

    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> None:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name in sorted(commands):
            print(f'  {name:<10} {_short_help(name)}')
        print('\nRun: hslcolor help <command> for full docs.')
        return

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        sys.exit(1)

    doc = registry.doc(topic)
    if not doc:
        print(f'(No module docs for {topic!r})')
        return
    print(doc)


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(args.topic)
        return

    report = Report()
    try:
        settings = load_settings(env_file=args.env_file)
        if settings.source:
            print(f'hslcolor: loaded {settings.source}', file=sys.stderr)
        registry.get(args.command).execute(args, report, settings)
    except ValueError as exc:
        # ColorError subclasses land here too
        print(f'hslcolor: error: {exc}', file=sys.stderr)
        sys.exit(1)

    if args.json or settings.json:
        print(format_json(report))
    else:
        print(format_text(report))


if __name__ == '__main__':
    main()
