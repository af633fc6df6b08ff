"""Arithmetic, relational and logical keywords.

Each takes exactly two evaluated operands and has no side effects. Python
semantics apply: DIV is true division, MOD is floor modulo, and equality is
strict across types ("1" does not equal 1, while 1 equals 1.0).
"""

from __future__ import annotations

from keyscript import Value
from keyscript.errors import KeyScriptArityError, KeyScriptTypeError, KeyScriptZeroDivision
from keyscript.types.native import native


def _operands(args: list[Value], keyword: str) -> tuple[Value, Value]:
    if len(args) != 2:
        raise KeyScriptArityError(f"{keyword} requires exactly 2 arguments, got {len(args)}")
    return args[0], args[1]


# -------------------------------
# Arithmetic
# -------------------------------
@native
def add(evaluator, args: list[Value]) -> Value:
    a, b = _operands(args, "ADD")
    try:
        return a + b
    except TypeError:
        raise KeyScriptTypeError(f"Cannot ADD {a!r} and {b!r}")


@native
def sub(evaluator, args: list[Value]) -> Value:
    a, b = _operands(args, "SUB")
    try:
        return a - b
    except TypeError:
        raise KeyScriptTypeError(f"Cannot SUB {b!r} from {a!r}")


@native
def mul(evaluator, args: list[Value]) -> Value:
    a, b = _operands(args, "MUL")
    try:
        return a * b
    except TypeError:
        raise KeyScriptTypeError(f"Cannot MUL {a!r} by {b!r}")


@native
def div(evaluator, args: list[Value]) -> Value:
    a, b = _operands(args, "DIV")
    try:
        return a / b
    except TypeError:
        raise KeyScriptTypeError(f"Cannot DIV {a!r} by {b!r}")
    except ZeroDivisionError:
        raise KeyScriptZeroDivision("Division by zero")


@native
def mod(evaluator, args: list[Value]) -> Value:
    a, b = _operands(args, "MOD")
    try:
        return a % b
    except TypeError:
        raise KeyScriptTypeError(f"Cannot MOD {a!r} by {b!r}")
    except ZeroDivisionError:
        raise KeyScriptZeroDivision("Modulo by zero")


# -------------------------------
# Relational
# -------------------------------
@native
def equals(evaluator, args: list[Value]) -> bool:
    a, b = _operands(args, "==")
    return is_equal(a, b)


@native
def not_equals(evaluator, args: list[Value]) -> bool:
    a, b = _operands(args, "<>")
    return not is_equal(a, b)


def is_equal(a: Value, b: Value) -> bool:
    """Value equality; numbers compare by value, other types must match."""
    if a is b:
        return True
    if _is_number(a) and _is_number(b):
        return a == b
    if type(a) != type(b):
        return False
    return a == b


def _is_number(x: Value) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _ordered(a: Value, b: Value, keyword: str, compare) -> bool:
    try:
        return compare(a, b)
    except TypeError:
        raise KeyScriptTypeError(f"Cannot compare {a!r} {keyword} {b!r}")


@native
def gt(evaluator, args: list[Value]) -> bool:
    a, b = _operands(args, ">")
    return _ordered(a, b, ">", lambda x, y: x > y)


@native
def lt(evaluator, args: list[Value]) -> bool:
    a, b = _operands(args, "<")
    return _ordered(a, b, "<", lambda x, y: x < y)


@native
def gte(evaluator, args: list[Value]) -> bool:
    a, b = _operands(args, ">=")
    return _ordered(a, b, ">=", lambda x, y: x >= y)


@native
def lte(evaluator, args: list[Value]) -> bool:
    a, b = _operands(args, "<=")
    return _ordered(a, b, "<=", lambda x, y: x <= y)


# -------------------------------
# Logic
# -------------------------------
# Both operands were evaluated before dispatch, so there is no short circuit.
@native
def logical_and(evaluator, args: list[Value]) -> Value:
    a, b = _operands(args, "AND")
    return a and b


@native
def logical_or(evaluator, args: list[Value]) -> Value:
    a, b = _operands(args, "OR")
    return a or b
