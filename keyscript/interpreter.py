from __future__ import annotations

from typing import Callable, Iterable, Literal, Mapping

from keyscript import Expression, Value
from keyscript.config import get_autoload_plugins
from keyscript.diagnostics import Console
from keyscript.errors import KeyScriptSyntaxError, ReturnOutsideFunction
from keyscript.evaluation.evaluator import Evaluator
from keyscript.evaluation.keywords import register
from keyscript.modules.plugin_loader import load_plugin
from keyscript.types.binding_stack import BindingStack
from keyscript.types.signals import Returning


class Interpreter:
    """
    Boots an Evaluator with the core keywords and any configured plugins, and
    runs top-level scripts against its binding stack.
    """

    def __init__(
        self,
        console: Console | None = None,
        plugins: Iterable[str] | None | Literal['auto'] = 'auto',
    ):
        self.console: Console = console if console is not None else Console()
        self.evaluator: Evaluator = Evaluator(console=self.console)
        register(self.evaluator.stack)

        if plugins == 'auto':
            plugins = get_autoload_plugins()
        for name in plugins or ():
            self.load_plugin(name)

    @property
    def stack(self) -> BindingStack:
        return self.evaluator.stack

    def import_plugin(self, plugin: Mapping[str, Value]) -> list[str]:
        """Install a name -> capability mapping at process scope."""
        return self.evaluator.import_plugin(plugin)

    def load_plugin(self, name: str) -> list[str]:
        """Install a plugin module at process scope; returns the names added."""
        return load_plugin(self.evaluator, name)

    def run(self, script: list[Expression], init: Callable[[], None] | None = None) -> list[Value]:
        """Evaluate a top-level script in place and return it.

        Raises ReturnOutsideFunction when a RETURN escapes every function.
        """
        if not isinstance(script, list):
            raise KeyScriptSyntaxError(f"A script must be a list of expressions, got {script!r}")
        result = self.evaluator.run(script, init)
        if isinstance(result, Returning):
            self.console.report(f"RETURN outside of a function with value {result.value!r}")
            raise ReturnOutsideFunction(result.value)
        return result
