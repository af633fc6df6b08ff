"""Core evaluator for keyscript.

`run` is the only thing that opens a scope: it records the stack length,
evaluates a script in place and truncates back to the recorded length.
`evaluate` reduces a single expression and dispatches keyword nodes to the
value bound on the stack.

Non-local return is not an exception. RETURN produces a `Returning` value,
which `run` hands back unchanged (after closing its scope) and which every
control-flow keyword passes through. Function invocation is the only place
that unwraps it.
"""

from __future__ import annotations

import logging
from typing import Callable, Mapping, Optional

from keyscript import Expression, Value
from keyscript.diagnostics import Console
from keyscript.errors import KeyScriptPluginError, KeyScriptSyntaxError
from keyscript.types.binding_stack import BindingStack
from keyscript.types.frame import Frame
from keyscript.types.native import is_native
from keyscript.types.signals import Returning

logger = logging.getLogger(__name__)

# Node fields that are never the keyword.
RESERVED_FIELDS = ("line", "script")


def keyword_of(node: dict) -> str:
    """Return the single keyword of a keyword node."""
    for key in node:
        if key not in RESERVED_FIELDS:
            return key
    raise KeyScriptSyntaxError(f"Expression has no keyword: {node!r}")


class Evaluator:
    """Reduces expressions and scripts against one binding stack."""

    __slots__ = ("stack", "console")

    def __init__(self, stack: BindingStack | None = None, console: Console | None = None):
        self.stack: BindingStack = stack if stack is not None else BindingStack()
        self.console: Console = console if console is not None else Console()

    def run(
        self,
        script: list[Expression],
        init: Optional[Callable[[], None]] = None,
        line: int | None = None,
    ) -> list[Value] | Returning:
        """Evaluate `script` in place inside a new scope.

        `init` runs inside the new scope before the first expression; function
        calls use it to bind parameters. Returns the evaluated script, or the
        `Returning` signal that stopped it.
        """
        mark = len(self.stack)
        try:
            if init is not None:
                init()
            for i, expr in enumerate(script):
                value = self.evaluate(expr, line if line is not None else i + 1)
                if isinstance(value, Returning):
                    return value
                script[i] = value
            return script
        finally:
            self.stack.truncate(mark)

    def evaluate(self, expr: Expression, line: int | None = None) -> Value | Returning:
        """Reduce one expression to a value (or a `Returning` signal)."""
        # Scripts run on a copy so stored bodies survive repeated runs.
        if isinstance(expr, list):
            return self.run(list(expr), line=line)

        # --- Atoms return as-is ---
        if not isinstance(expr, dict):
            return expr

        keyword = keyword_of(expr)
        line = expr.get("line", line)

        args = self.evaluate(expr[keyword], line)
        if isinstance(args, Returning):
            return args
        # Always a fresh list: a bound list value must not grow a script.
        args = list(args) if isinstance(args, list) else [args]

        if "script" in expr:
            args.append(expr["script"])

        frame = self.stack.find(keyword)
        if frame is None:
            self.console.report(f"keyword not found: '{keyword}' on line {line}")
            return keyword
        return self.apply(frame.value, args)

    def apply(self, value: Value, args: list[Value]) -> Value | Returning:
        """Invoke a bound value with evaluated arguments.

        Natives (built-ins and user functions) receive the evaluator; other
        Python callables receive the arguments spread; anything else is the
        value of the keyword itself.
        """
        if is_native(value):
            return value(self, args)
        if callable(value):
            return value(*args)
        return value

    def import_plugin(self, plugin: Mapping[str, Value]) -> list[str]:
        """Push one frame per (name, capability) in `plugin`."""
        if not isinstance(plugin, Mapping):
            raise KeyScriptPluginError(f"Plugin must be a mapping of names to values, got {plugin!r}")
        for name, capability in plugin.items():
            self.stack.push(Frame(name, capability))
        logger.debug("installed %d keyword(s): %s", len(plugin), ", ".join(map(str, plugin)))
        return list(plugin)
