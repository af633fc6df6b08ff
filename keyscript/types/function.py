"""User-defined function values for keyscript."""

from __future__ import annotations

import logging
from io import StringIO

from keyscript import Expression, Value
from keyscript.types.signals import Returning

logger = logging.getLogger(__name__)


class Function:
    """A function built by FUNCTION: ordered parameter names over a body script.

    The function holds no reference to an evaluator. The evaluator calling it
    passes itself in, like any other native keyword.
    """

    __slots__ = ("name", "params", "body")

    # Called as fn(evaluator, args), see keyscript.types.native
    _keyscript_native = True

    def __init__(self, name: str, params: list[str], body: Expression):
        self.name: str = name
        self.params: list[str] = params
        self.body: Expression = body

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(FUNCTION ")
            buffer.write(str(self.name))
            buffer.write(" (")
            buffer.write(" ".join(self.params))
            buffer.write("))")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    def bind_params(self, evaluator, args: list[Value]) -> None:
        """Bind each parameter to its argument through the LET in scope.

        Missing arguments bind to None; surplus arguments are ignored.
        """
        let = evaluator.stack.lookup("LET")
        for i, param in enumerate(self.params):
            evaluator.apply(let, [param, args[i] if i < len(args) else None])

    def __call__(self, evaluator, args: list[Value]) -> Value:
        logger.debug("calling %s with %r", self.name, args)
        body = list(self.body) if isinstance(self.body, list) else [self.body]
        result = evaluator.run(body, init=lambda: self.bind_params(evaluator, args))
        if isinstance(result, Returning):
            return result.value
        # Falling off the end of the body does not return the last value.
        return None
