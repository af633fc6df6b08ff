"""String keywords: CONCAT, UPPER, LOWER, LENGTH, FORMAT, DEFINED."""

from keyscript import Value
from keyscript.errors import KeyScriptArityError, KeyScriptTypeError
from keyscript.evaluation.keywords.print_form import to_text
from keyscript.types.native import native


def _single(args: list[Value], keyword: str) -> Value:
    if len(args) != 1:
        raise KeyScriptArityError(f"{keyword} requires exactly 1 argument")
    return args[0]


def _string(args: list[Value], keyword: str) -> str:
    s = _single(args, keyword)
    if not isinstance(s, str):
        raise KeyScriptTypeError(f"{keyword} requires a string, got {s!r}")
    return s


@native
def concat(evaluator, args: list[Value]) -> str:
    return "".join(to_text(a) for a in args if a is not None)


@native
def upper(evaluator, args: list[Value]) -> str:
    return _string(args, "UPPER").upper()


@native
def lower(evaluator, args: list[Value]) -> str:
    return _string(args, "LOWER").lower()


@native
def length(evaluator, args: list[Value]) -> int:
    s = _single(args, "LENGTH")
    try:
        return len(s)
    except TypeError:
        raise KeyScriptTypeError(f"LENGTH requires a string or list, got {s!r}")


@native
def format_keyword(evaluator, args: list[Value]) -> str:
    """(FORMAT template v ...) => template.format(v, ...)"""
    if not args or not isinstance(args[0], str):
        raise KeyScriptArityError("FORMAT requires a template string")
    template, *values = args
    try:
        return template.format(*(to_text(v) for v in values))
    except (IndexError, KeyError, ValueError) as e:
        raise KeyScriptTypeError(f"Format error: {e}")


@native
def defined(evaluator, args: list[Value]) -> bool:
    """(DEFINED name) => true when `name` is bound anywhere on the stack."""
    return evaluator.stack.find(_single(args, "DEFINED")) is not None


KEYWORDS = {
    "CONCAT": concat,
    "UPPER": upper,
    "LOWER": lower,
    "LENGTH": length,
    "FORMAT": format_keyword,
    "DEFINED": defined,
}
