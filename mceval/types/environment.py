"""Runtime environment for mceval.

An Environment is a chain of Frames, innermost first. Each Frame keeps its
variable names and bound values in two index-aligned lists, so name ``i``
binds to value ``i``. The global environment is the one whose ``outer`` is
None; walking past it means the variable does not exist.

The environment knows nothing about special forms. Handlers that bind names
check the registry themselves before calling in here.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Iterator, Optional, Sequence

from mceval import LispValue
from mceval.types.errors import ArityError, UnboundVariableError
from mceval.types.symbol import Symbol

logger = logging.getLogger(__name__)


class Frame:
    """One lexical scope: parallel lists of names and values."""

    __slots__ = ("names", "values")

    def __init__(
        self,
        names: Sequence[Symbol] | None = None,
        values: Sequence[LispValue] | None = None,
    ):
        self.names: list[Symbol] = list(names or [])
        self.values: list[LispValue] = list(values or [])

    def index(self, name: Symbol) -> int:
        """Position of `name` in this frame, or -1."""
        for i, n in enumerate(self.names):
            if n == name:
                return i
        return -1

    def add(self, name: Symbol, value: LispValue) -> None:
        self.names.append(name)
        self.values.append(value)

    def remove(self, name: Symbol) -> bool:
        i = self.index(name)
        if i < 0:
            return False
        del self.names[i]
        del self.values[i]
        return True

    def __contains__(self, name: Symbol) -> bool:
        return self.index(name) >= 0

    def __len__(self) -> int:
        return len(self.names)


class Environment:
    """Chain of frames with lookup, define, set and unbind operations."""

    __slots__ = ("frame", "outer")

    def __init__(self, frame: Optional[Frame] = None, outer: Optional[Environment] = None):
        self.frame: Frame = frame if frame is not None else Frame()
        self.outer: Environment | None = outer

    @classmethod
    def empty(cls) -> Environment:
        """A fresh global environment with a single empty frame."""
        return cls()

    def frames(self) -> Iterator[Frame]:
        """Yield frames from innermost to outermost."""
        env: Optional[Environment] = self
        while env is not None:
            yield env.frame
            env = env.outer

    def global_env(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def extend(self, names: Sequence[Symbol], values: Sequence[LispValue]) -> Environment:
        """Return a child environment with a new frame binding `names` to `values`.

        The parent chain is shared, not copied. Raises ArityError when the two
        sequences differ in length.
        """
        if len(values) > len(names):
            raise ArityError("too many", names, values)
        if len(values) < len(names):
            raise ArityError("too few", names, values)
        return Environment(Frame(names, values), outer=self)

    def _find(self, name: Symbol) -> tuple[Frame, int] | None:
        for frame in self.frames():
            i = frame.index(name)
            if i >= 0:
                return frame, i
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Value bound to `name` in the nearest frame that has it.

        Raises UnboundVariableError if no frame in the chain binds it.
        """
        found = self._find(name)
        if found is None:
            raise UnboundVariableError(name)
        frame, i = found
        return frame.values[i]

    def set(self, name: Symbol, value: LispValue) -> None:
        """Overwrite an existing binding in the nearest frame that has it.

        Raises UnboundVariableError if the name was never bound in the chain.
        """
        found = self._find(name)
        if found is None:
            raise UnboundVariableError(name, f"Cannot set! unbound variable {name}")
        frame, i = found
        frame.values[i] = value

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` in the innermost frame only, overwriting in place if present."""
        i = self.frame.index(name)
        if i >= 0:
            self.frame.values[i] = value
        else:
            self.frame.add(name, value)
        logger.debug("define %s in frame of %d bindings", name, len(self.frame))

    def is_defined(self, name: Symbol) -> bool:
        return self._find(name) is not None

    def is_locally_defined(self, name: Symbol) -> bool:
        return name in self.frame

    def unbind_locally(self, name: Symbol) -> bool:
        """Remove `name` from the innermost frame. Returns False if it was not there."""
        removed = self.frame.remove(name)
        logger.debug("unbind %s locally: %s", name, removed)
        return removed

    def unbind(self, name: Symbol) -> bool:
        """Remove `name` from every frame of the chain that binds it.

        Returns True if at least one binding was removed.
        """
        removed = False
        for frame in self.frames():
            while frame.remove(name):
                removed = True
        logger.debug("unbind %s: %s", name, removed)
        return removed

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(
            ", ".join(f"{k}: {v!r}" for k, v in zip(self.frame.names, self.frame.values))
        )
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as buf:
                env._write_vars(buf)
                chain.append(buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
