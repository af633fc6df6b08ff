from keyscript import Value
from keyscript.errors import KeyScriptArityError, KeyScriptTypeError
from keyscript.types.frame import Frame
from keyscript.types.function import Function
from keyscript.types.native import native
from keyscript.types.signals import Returning


@native
def function_keyword(evaluator, args: list[Value]) -> Value:
    """
    (FUNCTION name param ... body)
    The body arrives un-evaluated as the last argument (the node's script).
    """
    if len(args) < 2:
        raise KeyScriptArityError("FUNCTION requires a name and a body script")
    name, *params, body = args
    for param in params:
        if not isinstance(param, str):
            raise KeyScriptTypeError(f"FUNCTION parameter names must be strings, got {param!r}")
    evaluator.stack.push(Frame(name, Function(name, params, body)))
    return None


@native
def return_keyword(evaluator, args: list[Value]) -> Returning:
    return Returning(args[0] if args else None)
