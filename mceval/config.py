from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List

DEFAULT_LOG_LEVEL = 'WARNING'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_load_roots() -> List[Path]:
    """Directories searched by `load` for relative locations, after the cwd."""
    return paths_from_env('MCEVAL_LOAD_PATH', [])


def get_log_level() -> str:
    return os.environ.get('MCEVAL_LOG_LEVEL', DEFAULT_LOG_LEVEL).upper()
