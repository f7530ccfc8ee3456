"""Settings for palette-gen from the environment and .env files.

Lookup order per setting (first wins):
  1. OS environment variables.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file found walking up from cwd, stopping at .git (file or dir).

Unlike a plain dotenv loader this never writes to os.environ; the merged
values are returned as a Settings object.

Variables:
  PALETTE_SEED       integer seed for the random source (default: entropy)
  PALETTE_JITTER     1/true/yes/on to enable palette jitter (default: off)
  PALETTE_STYLE      default palette style, one of the Style values (default: analogous)
  PALETTE_LOG_LEVEL  logging level name (default: WARNING)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from palette_gen.core.types import Style

PREFIX = 'PALETTE_'
_TRUTHY = {'1', 'true', 'yes', 'on'}
_STYLES = [s.value for s in Style]


@dataclass(frozen=True)
class Settings:
    seed: int | None = None
    jitter: bool = False
    style: str = 'analogous'
    log_level: str = 'WARNING'
    source: Path | None = None  # .env file that contributed, if any


def find_env_file(start: Path) -> Path | None:
    """Nearest .env at or above start, never crossing a .git boundary."""
    for directory in [start.resolve(), *start.resolve().parents]:
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        if (directory / '.git').exists():
            return None
    return None


def read_env_file(path: Path) -> dict[str, str]:
    """KEY=value lines; quotes stripped, comments and junk lines skipped."""
    values: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if line.startswith('export '):
            line = line[len('export ') :].lstrip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            values[key] = value.strip().strip('"').strip("'")
    return values


def settings_from_mapping(values: Mapping[str, str], source: Path | None = None) -> Settings:
    seed_text = values.get(f'{PREFIX}SEED', '').strip()
    try:
        seed = int(seed_text) if seed_text else None
    except ValueError:
        raise ValueError(f'{PREFIX}SEED must be an integer, got {seed_text!r}') from None

    style = values.get(f'{PREFIX}STYLE', '').strip().lower() or Style.ANALOGOUS.value
    if style not in _STYLES:
        raise ValueError(f'{PREFIX}STYLE must be one of {", ".join(_STYLES)}, got {style!r}')

    return Settings(
        seed=seed,
        jitter=values.get(f'{PREFIX}JITTER', '').strip().lower() in _TRUTHY,
        style=style,
        log_level=values.get(f'{PREFIX}LOG_LEVEL', '').strip().upper() or 'WARNING',
        source=source,
    )


def load_settings(env_file: str | None = None, environ: Mapping[str, str] | None = None) -> Settings:
    """Merge .env values under the process environment and build Settings."""
    env = os.environ if environ is None else environ

    path: Path | None
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            path = None
    else:
        path = find_env_file(Path.cwd())

    merged = read_env_file(path) if path else {}
    merged.update({k: v for k, v in env.items() if k.startswith(PREFIX)})
    return settings_from_mapping(merged, source=path)
