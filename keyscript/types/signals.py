from __future__ import annotations

from keyscript import Value


class Returning:
    """Non-local return of `value`, unwinding toward the nearest function call.

    Produced by RETURN and threaded back through every `run` and control-flow
    keyword unchanged. Only a function invocation turns it back into a value.
    """

    __slots__ = ("value",)

    def __init__(self, value: Value = None):
        self.value: Value = value

    def __repr__(self):
        return f"Returning({self.value!r})"
