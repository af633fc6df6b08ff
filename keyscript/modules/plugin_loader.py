"""Locate Python modules and install them as keyscript plugins.

A module name is resolved in order against:
1) the directories on KEYSCRIPT_PLUGIN_PATH (dotted names map to sub-paths),
2) the plugins bundled in keyscript.plugins,
3) the regular Python import system.

A module that defines a ``KEYWORDS`` mapping is installed as is. Otherwise
every public callable defined by the module is installed under its own name.
"""

from __future__ import annotations

import importlib
import importlib.util
import logging
from collections.abc import Mapping
from pathlib import Path
from types import ModuleType
from typing import Optional

from keyscript import Value
from keyscript.config import get_plugin_roots
from keyscript.errors import KeyScriptPluginError

logger = logging.getLogger(__name__)

BUNDLED_PACKAGE = "keyscript.plugins"


def _ns_to_relpath(name: str) -> Path:
    return Path(*name.split('.')).with_suffix('.py')


def resolve_plugin(name: str) -> Optional[Path]:
    rel = _ns_to_relpath(name)
    for root in get_plugin_roots():
        candidate = root / rel
        if candidate.is_file():
            return candidate
    return None


def _module_from_path(name: str, path: Path) -> ModuleType:
    spec = importlib.util.spec_from_file_location(f"keyscript_plugin_{name.replace('.', '_')}", path)
    if spec is None or spec.loader is None:
        raise ImportError(f"no loader for {path}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def import_plugin_module(name: str) -> ModuleType:
    """Import the module behind plugin `name`."""
    try:
        path = resolve_plugin(name)
        if path is not None:
            logger.debug("loading plugin %s from %s", name, path)
            return _module_from_path(name, path)
        if "." not in name and importlib.util.find_spec(f"{BUNDLED_PACKAGE}.{name}") is not None:
            return importlib.import_module(f"{BUNDLED_PACKAGE}.{name}")
        return importlib.import_module(name)
    except ImportError as ex:
        raise KeyScriptPluginError(f"Cannot load plugin '{name}': {ex}") from ex


def plugin_keywords(module: ModuleType) -> dict[str, Value]:
    """The name -> capability mapping a module contributes."""
    keywords = getattr(module, "KEYWORDS", None)
    if keywords is not None:
        if not isinstance(keywords, Mapping):
            raise KeyScriptPluginError(f"{module.__name__}.KEYWORDS must be a mapping")
        return dict(keywords)
    return {
        name: value
        for name, value in vars(module).items()
        if not name.startswith("_")
        and callable(value)
        and getattr(value, "__module__", None) == module.__name__
    }


def load_plugin(evaluator, name: str) -> list[str]:
    """Import plugin module `name` and push its keywords onto the evaluator's stack."""
    return evaluator.import_plugin(plugin_keywords(import_plugin_module(name)))
