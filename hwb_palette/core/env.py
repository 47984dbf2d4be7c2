"""Settings and .env loading for hwb-palette.

Load order (first wins):
  1. Command-line flags (applied by __main__ on top of Settings).
  2. Existing OS environment variables — never overwritten.
  3. .env file at --env-file path (if explicitly provided).
  4. .env file walking up from cwd, stopping at .git (file or dir).

Recognised variables:
  HWB_PALETTE_OUT_DIR   output directory for images (default: images)
  HWB_PALETTE_SCALE     swatch size in pixels (default: 16)
  HWB_PALETTE_STEPS     grid steps per axis (default: 8)
"""

import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_OUT_DIR = 'images'
DEFAULT_SCALE = 16
DEFAULT_STEPS = 8


@dataclass
class Settings:
    out_dir: str = DEFAULT_OUT_DIR
    scale: int = DEFAULT_SCALE
    steps: int = DEFAULT_STEPS
    alpha: bool = False


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        if (current / '.git').exists():
            return None
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=value lines. Quotes around values are stripped."""
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


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def _int_var(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f'{name} must be an integer, got {raw!r}') from None
    if value <= 0:
        raise ValueError(f'{name} must be positive, got {value}')
    return value


def load_settings() -> Settings:
    """Build Settings from the environment (call load_env() first)."""
    return Settings(
        out_dir=os.environ.get('HWB_PALETTE_OUT_DIR') or DEFAULT_OUT_DIR,
        scale=_int_var('HWB_PALETTE_SCALE', DEFAULT_SCALE),
        steps=_int_var('HWB_PALETTE_STEPS', DEFAULT_STEPS),
    )
