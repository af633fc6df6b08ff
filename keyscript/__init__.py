# Core type aliases for keyscript's data model.
# Programs are plain Python data, already parsed (typically decoded from JSON):
# - dict: a keyword node, {"KEYWORD": argument, "line": n?, "script": body?}
# - list: a script, evaluated in order inside its own scope
# - anything else: a literal that evaluates to itself
#
# Naming guidance:
# - Expression: use where a value is code that has not been evaluated yet.
# - Value:      use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

import logging
from typing import Any, Callable

# Runtime value alias
Value = Any
# Forms alias (code-as-data)
Expression = Value

# Native keyword signature: fn(evaluator, args) -> Value
NativeFn = Callable[..., Value]

logging.getLogger(__name__).addHandler(logging.NullHandler())
