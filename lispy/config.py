from __future__ import annotations
import logging
import os
from pathlib import Path


# Resolve installation dir (lispy package directory)
_LISPY_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _LISPY_DIR / 'prelude'
_PRELUDE_FILE = 'prelude.lspy'
_DEFAULT_LOG_LEVEL = 'WARNING'
_DEFAULT_PROMPT = 'lispy> '


def path_from_env(var: str, default: Path) -> Path:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    return Path(raw.strip())


def get_prelude_path() -> Path:
    # A directory holds prelude.lspy; anything else is taken as the file itself
    p = path_from_env('LISPY_PRELUDE_PATH', _DEFAULT_PRELUDE_DIR)
    return p / _PRELUDE_FILE if p.is_dir() else p


def get_log_level() -> int:
    name = os.environ.get('LISPY_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def get_prompt() -> str:
    return os.environ.get('LISPY_PROMPT', _DEFAULT_PROMPT)
