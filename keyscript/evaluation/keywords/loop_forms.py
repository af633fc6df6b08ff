"""Looping keywords for keyscript: FOR and WHILE.

Each loop is a small evaluator object that closes over the loop header and
reuses the main evaluator to run its body, one scope per pass.
"""

from __future__ import annotations

from keyscript import Expression, Value
from keyscript.errors import KeyScriptArityError, KeyScriptTypeError
from keyscript.types.frame import Frame
from keyscript.types.native import native
from keyscript.types.signals import Returning


class ForLoopEval:
    """Implements (FOR name start end step?) with a body script.

    The loop frame is pushed once into the enclosing scope and outlives the
    loop, so the body may SET or INC it and the final value stays visible.
    """

    def __init__(self, name: str, start: Value, end: Value, step: Value, body: Expression):
        self.name: str = name
        self.start: Value = start
        self.end: Value = end
        self.step: Value = step or 1
        self.body: Expression = body

    def eval(self, evaluator) -> Value | Returning:
        frame = evaluator.stack.push(Frame(self.name, self.start))
        while self._within(frame.value):
            result = evaluator.evaluate(self.body)
            if isinstance(result, Returning):
                return result
            try:
                frame.value += self.step
            except TypeError:
                raise KeyScriptTypeError(f"Cannot step FOR variable {self.name} by {self.step!r}")
        return None

    def _within(self, value: Value) -> bool:
        try:
            return value <= self.end
        except TypeError:
            raise KeyScriptTypeError(f"FOR bounds must be comparable, got {value!r} and {self.end!r}")


class WhileLoopEval:
    """Implements (WHILE) with script [[condition], body].

    Unlike IF, the condition is re-evaluated before every pass.
    """

    def __init__(self, condition: Expression, body: Expression):
        self.condition: Expression = condition
        self.body: Expression = body

    def eval(self, evaluator) -> Value | Returning:
        while True:
            test = evaluator.evaluate(self.condition)
            if isinstance(test, Returning):
                return test
            if not test:
                return None
            result = evaluator.evaluate(self.body)
            if isinstance(result, Returning):
                return result


@native
def for_keyword(evaluator, args: list[Value]) -> Value:
    """(FOR name start end step?) with a body script."""
    if len(args) == 4:
        name, start, end, body = args
        step = None
    elif len(args) == 5:
        name, start, end, step, body = args
    else:
        raise KeyScriptArityError("FOR requires name, start, end, optional step and a body script")
    return ForLoopEval(name, start, end, step, body).eval(evaluator)


@native
def while_keyword(evaluator, args: list[Value]) -> Value:
    """(WHILE) with script [[condition], body]."""
    parts = args[-1] if args else None
    if not isinstance(parts, list) or len(parts) != 2:
        raise KeyScriptArityError("WHILE requires a script of [[condition], body]")
    condition, body = parts
    # The condition slot is a one-element script holding the test expression.
    if isinstance(condition, list):
        if len(condition) != 1:
            raise KeyScriptArityError("WHILE condition must hold exactly one expression")
        condition = condition[0]
    return WhileLoopEval(condition, body).eval(evaluator)
