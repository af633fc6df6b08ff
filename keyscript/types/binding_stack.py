"""Binding stack for keyscript.

The stack is a flat list of single-binding Frames. Scopes are not objects:
a scope is a saved stack length, and leaving it truncates the list back to
that length. Lookup walks from the newest frame to the oldest, so a newer
binding of a name shadows older ones without removing them.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Iterator, Optional

from keyscript import Value
from keyscript.errors import KeyScriptUnboundKeyword
from keyscript.types.frame import Frame


class BindingStack:
    """Ordered frames, appended and discarded only at the top."""

    __slots__ = ("frames",)

    def __init__(self, frames: Iterable[Frame] = ()):
        self.frames: list[Frame] = list(frames)

    def __len__(self) -> int:
        return len(self.frames)

    def __iter__(self) -> Iterator[Frame]:
        return iter(self.frames)

    def push(self, frame: Frame) -> Frame:
        """Append `frame`. Names are not checked for uniqueness."""
        self.frames.append(frame)
        return frame

    def bind(self, name: str, value: Value) -> Frame:
        return self.push(Frame(name, value))

    def truncate(self, length: int) -> None:
        """Discard every frame with index >= `length`."""
        if length < 0:
            raise ValueError(f"Cannot truncate binding stack to {length}")
        del self.frames[length:]

    def find(self, name: str) -> Optional[Frame]:
        """Return the newest frame binding `name`, or None."""
        for frame in reversed(self.frames):
            if frame.name == name:
                return frame
        return None

    def lookup(self, name: str) -> Value:
        """Value bound to `name`; raises KeyScriptUnboundKeyword if absent."""
        frame = self.find(name)
        if frame is None:
            raise KeyScriptUnboundKeyword(f"Cannot lookup unbound keyword {name}")
        return frame.value

    def names(self) -> list[str]:
        """Bound names, newest first (shadowed duplicates included)."""
        return [frame.name for frame in reversed(self.frames)]

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("[")
            buffer.write(", ".join(f"{f.name}: {f.value!r}" for f in self.frames))
            buffer.write("]")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<BindingStack depth={len(self.frames)} top={self.names()[:5]}>"
