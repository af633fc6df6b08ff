"""Marker protocol for keyword implementations.

A native is called by the evaluator as ``fn(evaluator, args)`` where ``args``
is the evaluated argument list. Any other Python callable bound on the stack
is called as ``fn(*args)``, so host functions such as ``math.sqrt`` can be
installed without a wrapper.
"""

from __future__ import annotations

from keyscript import NativeFn, Value


def native(fn: NativeFn) -> NativeFn:
    fn._keyscript_native = True
    return fn


def is_native(value: Value) -> bool:
    return callable(value) and getattr(value, "_keyscript_native", False)
