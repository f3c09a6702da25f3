"""Settings loading for hslcolor.

Lookup order (first wins):
  1. OS environment variables.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Recognized keys:
  HSLCOLOR_SEED               integer seed for random colors
  HSLCOLOR_NEAREST_THRESHOLD  max RGB distance for naming a color (default 60)
  HSLCOLOR_JSON               1/true/yes to print JSON instead of text
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

PREFIX = 'HSLCOLOR_'
DEFAULT_NEAREST_THRESHOLD = 60.0

_TRUE = {'1', 'true', 'yes', 'on'}


@dataclass
class Settings:
    seed: int | None = None
    nearest_threshold: float = DEFAULT_NEAREST_THRESHOLD
    json: bool = False
    source: Path | None = None  # .env file the values came from, if any


def find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git can be a dir (normal clone) or file (worktree)
        if (current / '.git').exists():
            return None
        parent = current.parent
        if parent == current:
            return None
        current = parent


def parse_dotenv(path: Path) -> dict[str, str]:
    """Parse a .env file into a dict. Handles KEY=value and KEY="value"."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, raw_value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = raw_value.strip().strip('"').strip("'")
    return result


def _number(key: str, raw: str, kind: type) -> int | float:
    try:
        return kind(raw)
    except ValueError:
        raise ValueError(f'{key} must be {"an integer" if kind is int else "a number"}, got {raw!r}') from None


def load_settings(env_file: str | None = None, environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from the .env file and the environment. Environment wins."""
    if environ is None:
        environ = os.environ

    if env_file:
        path: Path | None = Path(env_file)
        if not path.is_file():
            path = None
    else:
        path = find_dotenv(Path.cwd())

    values = parse_dotenv(path) if path else {}
    values.update({k: v for k, v in environ.items() if k.startswith(PREFIX)})

    settings = Settings(source=path)
    seed = values.get(f'{PREFIX}SEED', '').strip()
    if seed:
        settings.seed = int(_number(f'{PREFIX}SEED', seed, int))
    threshold = values.get(f'{PREFIX}NEAREST_THRESHOLD', '').strip()
    if threshold:
        settings.nearest_threshold = float(_number(f'{PREFIX}NEAREST_THRESHOLD', threshold, float))
    settings.json = values.get(f'{PREFIX}JSON', '').strip().lower() in _TRUE
    return settings
