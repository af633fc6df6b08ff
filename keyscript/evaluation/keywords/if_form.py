from keyscript import Value
from keyscript.errors import KeyScriptArityError, KeyScriptTypeError
from keyscript.types.native import native
from keyscript.types.signals import Returning


@native
def if_keyword(evaluator, args: list[Value]) -> Value:
    """(IF condition) with script [then, else?].

    The condition is already evaluated; only the chosen branch runs.
    """
    if len(args) < 2:
        raise KeyScriptArityError("IF requires a condition and a [then, else] script")
    condition, branches = args[0], args[-1]
    if not isinstance(branches, list) or not branches:
        raise KeyScriptTypeError(f"IF script must be [then, else?], got {branches!r}")

    if condition:
        result = evaluator.evaluate(branches[0])
    elif len(branches) > 1:
        result = evaluator.evaluate(branches[1])
    else:
        return None

    if isinstance(result, Returning):
        return result
    return None
