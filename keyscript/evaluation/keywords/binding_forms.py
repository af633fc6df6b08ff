from keyscript import Value
from keyscript.errors import KeyScriptArityError, KeyScriptTypeError, KeyScriptUnboundKeyword
from keyscript.types.frame import Frame
from keyscript.types.native import native


@native
def let_keyword(evaluator, args: list[Value]) -> Value:
    """(LET name value): bind `name` in the innermost open scope."""
    if len(args) not in (1, 2):
        raise KeyScriptArityError("LET requires a name and a value: (LET name value)")
    name = args[0]
    value = args[1] if len(args) > 1 else None
    evaluator.stack.push(Frame(name, value))
    return None


@native
def set_keyword(evaluator, args: list[Value]) -> Value:
    """(SET name value): assign through the frame that currently owns `name`.

    When nothing owns it yet, a binding is first created in the current scope.
    """
    if len(args) != 2:
        raise KeyScriptArityError("SET requires exactly 2 arguments: (SET name value)")
    name, value = args
    frame = evaluator.stack.find(name)
    if frame is None:
        frame = evaluator.stack.push(Frame(name, value))
    frame.value = value
    return None


@native
def inc_keyword(evaluator, args: list[Value]) -> Value:
    """(INC name): add 1 to the value bound to `name`, in place."""
    if len(args) != 1:
        raise KeyScriptArityError("INC requires exactly 1 argument: (INC name)")
    name = args[0]
    frame = evaluator.stack.find(name)
    if frame is None:
        raise KeyScriptUnboundKeyword(f"Cannot increment unbound keyword {name}")
    try:
        frame.value += 1
    except TypeError:
        raise KeyScriptTypeError(f"INC requires a number, {name} is {frame.value!r}")
    return None
