from keyscript import Value
from keyscript.types.native import native


def to_text(x: Value) -> str:
    """Printable form of a value (booleans as true/false)."""
    if x is True:
        return "true"
    if x is False:
        return "false"
    return str(x)


@native
def print_keyword(evaluator, args: list[Value]) -> Value:
    """Concatenate the non-None arguments and write one line; returns None."""
    evaluator.console.write_line("".join(to_text(a) for a in args if a is not None))
    return None
