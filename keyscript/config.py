from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


# Modules bundled under keyscript/plugins are found by package name, so the
# search path is empty unless the host points it somewhere.
_DEFAULT_PLUGIN_DIRS: List[Path] = []
_DEFAULT_LOG_LEVEL = 'WARNING'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def names_from_env(var: str) -> List[str]:
    raw = os.environ.get(var, '')
    return [name.strip() for name in raw.split(',') if name.strip()]


def get_plugin_roots() -> List[Path]:
    return paths_from_env('KEYSCRIPT_PLUGIN_PATH', _DEFAULT_PLUGIN_DIRS)


def get_autoload_plugins() -> List[str]:
    return names_from_env('KEYSCRIPT_PLUGINS')


def get_log_level() -> str:
    return os.environ.get('KEYSCRIPT_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
