from __future__ import annotations

from keyscript import Value


class Frame:
    """One keyword or variable name bound to exactly one value."""

    __slots__ = ("name", "value")

    def __init__(self, name: str, value: Value = None):
        self.name: str = name
        self.value: Value = value

    def __repr__(self):
        return f"Frame({self.name!r}, {self.value!r})"
