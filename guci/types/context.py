"""Evaluation contexts for Guci.

A context is a chain of frames. Each frame maps names to values and names to
functions, and points at its parent by integer handle. Frames live in a
ContextArena owned by the root context; a child frame is pushed for the
duration of a call (see `EvaluationContext.child`) and popped when the call
returns, so a parent always outlives its children.

Bindings never change once made: setting a name that already exists in the
same frame is an error. Shadowing a name from an outer frame is allowed.
"""

from __future__ import annotations

from contextlib import contextmanager
from io import StringIO
from itertools import count
from types import MappingProxyType
from typing import TYPE_CHECKING, Iterator, Mapping, Optional

from guci.errors import GuciDuplicateBinding
from guci.types.function import Function
from guci.types.identifier import Identifier

if TYPE_CHECKING:
    from guci import Term


def _key(name: str | Identifier) -> str:
    return name.id if isinstance(name, Identifier) else name


class _Frame:
    __slots__ = ("values", "functions", "parent", "generation")

    def __init__(self, parent: Optional[int], generation: int):
        self.values: dict[str, Term] = {}
        self.functions: dict[str, Function] = {}
        self.parent = parent
        self.generation = generation


class ContextArena:
    """Stack-shaped storage for context frames, addressed by integer handles."""

    __slots__ = ("frames", "_generations")

    def __init__(self):
        self.frames: list[_Frame] = []
        self._generations = count(1)

    def allocate(self, parent: Optional[int]) -> tuple[int, int]:
        if parent is not None and not 0 <= parent < len(self.frames):
            raise RuntimeError(f"Invalid parent frame handle {parent}")
        frame = _Frame(parent, next(self._generations))
        self.frames.append(frame)
        return len(self.frames) - 1, frame.generation

    def release(self, handle: int) -> None:
        # Children are scoped strictly inside their parent's call, so only the
        # most recently allocated frame may go.
        if handle != len(self.frames) - 1:
            raise RuntimeError(f"Frame {handle} released out of order")
        self.frames.pop()

    def get(self, handle: int, generation: int) -> _Frame:
        if 0 <= handle < len(self.frames):
            frame = self.frames[handle]
            if frame.generation == generation:
                return frame
        raise RuntimeError(f"Stale context frame handle {handle}")

    def __len__(self) -> int:
        return len(self.frames)


class EvaluationContext:
    """A view onto one frame of a ContextArena."""

    __slots__ = ("arena", "handle", "_generation")

    def __init__(
        self,
        functions: Mapping[str, Function] | None = None,
        values: Mapping[str, Term] | None = None,
        *,
        arena: ContextArena | None = None,
        parent: Optional[int] = None,
    ):
        self.arena: ContextArena = arena if arena is not None else ContextArena()
        self.handle, self._generation = self.arena.allocate(parent)
        for name, fn in (functions or {}).items():
            self.set_function(name, fn)
        for name, value in (values or {}).items():
            self.set_value(name, value)

    @property
    def _frame(self) -> _Frame:
        return self.arena.get(self.handle, self._generation)

    @property
    def parent(self) -> Optional[EvaluationContext]:
        parent = self._frame.parent
        if parent is None:
            return None
        view = object.__new__(EvaluationContext)
        view.arena = self.arena
        view.handle = parent
        view._generation = self.arena.frames[parent].generation
        return view

    @contextmanager
    def child(
        self,
        functions: Mapping[str, Function] | None = None,
        values: Mapping[str, Term] | None = None,
    ) -> Iterator[EvaluationContext]:
        """Push a frame whose parent is this one; pop it when the block exits."""
        local = EvaluationContext(functions, values, arena=self.arena, parent=self.handle)
        try:
            yield local
        finally:
            self.arena.release(local.handle)

    def _frames(self) -> Iterator[_Frame]:
        frame: Optional[_Frame] = self._frame
        while frame is not None:
            yield frame
            frame = self.arena.frames[frame.parent] if frame.parent is not None else None

    # --- Lookup ---
    def find_value(self, name: str | Identifier) -> Optional[Term]:
        """Return the nearest value bound to `name`, or None when unbound."""
        key = _key(name)
        for frame in self._frames():
            if key in frame.values:
                return frame.values[key]
        return None

    def find_function(self, name: str | Identifier) -> Optional[Function]:
        """Return the nearest function bound to `name`, or None when unbound."""
        key = _key(name)
        for frame in self._frames():
            if key in frame.functions:
                return frame.functions[key]
        return None

    def contains(self, name: str | Identifier) -> bool:
        """True if this frame (not its parents) binds `name` as value or function."""
        key = _key(name)
        frame = self._frame
        return key in frame.functions or key in frame.values

    def is_bound(self, name: str | Identifier) -> bool:
        key = _key(name)
        return any(key in f.functions or key in f.values for f in self._frames())

    # --- Mutation ---
    def set_value(self, name: str | Identifier, value: Term) -> None:
        key = _key(name)
        frame = self._frame
        if key in frame.values:
            raise GuciDuplicateBinding("value already exists")
        frame.values[key] = value

    def set_function(self, name: str | Identifier, fn: Function) -> None:
        key = _key(name)
        frame = self._frame
        if key in frame.functions:
            raise GuciDuplicateBinding("function already exists")
        frame.functions[key] = fn

    @property
    def values(self) -> Mapping[str, Term]:
        return MappingProxyType(self._frame.values)

    @property
    def functions(self) -> Mapping[str, Function]:
        return MappingProxyType(self._frame.functions)

    def _write_frame(self, frame: _Frame, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v}" for k, v in frame.values.items()))
        if frame.functions:
            if frame.values:
                buffer.write("; ")
            buffer.write("fns: " + " ".join(frame.functions))
        buffer.write("}")

    def __str__(self) -> str:
        """Single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_frame(self._frame, buffer)
            if self._frame.parent is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write(f"<EvaluationContext #{self.handle}: ")
            chain = []
            for frame in self._frames():
                frame_buf = StringIO()
                self._write_frame(frame, frame_buf)
                chain.append(frame_buf.getvalue())
            buffer.write(" -> ".join(chain))
            buffer.write(">")
            return buffer.getvalue()
