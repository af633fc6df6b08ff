from __future__ import annotations

from keyscript import Value
from keyscript.errors import KeyScriptArityError, KeyScriptTypeError
from keyscript.modules.plugin_loader import load_plugin
from keyscript.types.native import native


@native
def import_keyword(evaluator, args: list[Value]) -> Value:
    """
    Usage:
        (IMPORT "module_name" ...)
    Installs each plugin module into the current scope.
    """
    names = [a for a in args if a is not None]
    if not names:
        raise KeyScriptArityError("IMPORT requires at least one plugin module name")
    for name in names:
        if not isinstance(name, str):
            raise KeyScriptTypeError(f"IMPORT expects module names, got {name!r}")
        load_plugin(evaluator, name)
    return None
