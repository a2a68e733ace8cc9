"""Lexical scopes for Quill.

A Scope stores bindings of Symbols to values and links to an optional parent
through `outer`. Bindings are fixed when the scope is created: extending a
scope means creating a child with `new_child`, never writing into an existing
frame. Links point only toward the root, so scope chains form a tree and a
closure that captures a scope keeps exactly that chain alive.
"""

from __future__ import annotations

from io import StringIO
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from quill import LispValue
from quill.types.errors import QuillNotFoundError, QuillTypeError
from quill.types.symbol import Symbol


class Scope:
    """Hierarchical, immutable mapping from Symbols to Lisp values."""

    __slots__ = ("vars", "outer")

    def __init__(
        self,
        bindings: Mapping[Symbol, LispValue] | None = None,
        outer: Optional[Scope] = None,
    ):
        frame: dict[Symbol, LispValue] = {}
        for k, v in (bindings or {}).items():
            if isinstance(k, str):
                k = Symbol(k)
            if not isinstance(k, Symbol):
                raise QuillTypeError(f"Cannot bind {k!r}: not a symbol")
            frame[k] = v
        object.__setattr__(self, "vars", MappingProxyType(frame))
        object.__setattr__(self, "outer", outer)

    def __setattr__(self, key, value):
        raise AttributeError("Scope is immutable")

    def new_child(self, bindings: Mapping[Symbol, LispValue] | None = None) -> Scope:
        """Return a scope holding `bindings` whose parent is this scope."""
        return Scope(bindings, self)

    def find(self, name: Symbol) -> Optional[Scope]:
        """Find the nearest scope in the chain that binds `name`."""
        scope: Optional[Scope] = self
        while scope is not None:
            if name in scope.vars:
                return scope
            scope = scope.outer
        return None

    def lookup(self, name: Symbol | str) -> LispValue:
        """Look up the value bound to `name`, walking toward the root.

        Raises QuillNotFoundError if no scope in the chain binds it.
        """
        if isinstance(name, str):
            name = Symbol(name)
        scope = self.find(name)
        if scope is None:
            raise QuillNotFoundError(name.name)
        return scope.vars[name]

    def __contains__(self, name: Symbol | str) -> bool:
        if isinstance(name, str):
            name = Symbol(name)
        return self.find(name) is not None

    def names(self) -> Iterator[str]:
        """Every visible name, innermost first, shadowed duplicates skipped."""
        seen: set[Symbol] = set()
        scope: Optional[Scope] = self
        while scope is not None:
            for k in scope.vars:
                if k not in seen:
                    seen.add(k)
                    yield k.name
            scope = scope.outer

    def depth(self) -> int:
        n = 0
        scope = self.outer
        while scope is not None:
            n += 1
            scope = scope.outer
        return n

    def _write_vars(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Scope depth={self.depth()} names={len(self.vars)}>"
