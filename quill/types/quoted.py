from __future__ import annotations

from quill import SExpression


class Quoted:
    """Wrapper produced by the reader for 'form. Evaluates to `inner`."""

    __slots__ = ("inner",)
    __match_args__ = ("inner",)

    def __init__(self, inner: SExpression):
        object.__setattr__(self, "inner", inner)

    def __setattr__(self, key, value):
        raise AttributeError("Quoted is immutable")

    def __eq__(self, other) -> bool:
        return isinstance(other, Quoted) and self.inner == other.inner

    def __hash__(self) -> int:
        return hash(("quote", self.inner))

    def __repr__(self) -> str:
        return f"Quoted({self.inner!r})"
