"""Cons cells and list helpers.

A Cell is an immutable pair. Chains of cells linked through `right` form
lists; a chain ending in Nil is a proper list, any other terminal value makes
it a dotted (improper) list. Cells never change after construction, so the
same sub-chain may be shared by any number of parents.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from quill import LispValue
from quill.types.errors import QuillTypeError
from quill.types.nil import Nil


class Cell:
    """A two-slot pair (`left`, `right`)."""

    __slots__ = ("left", "right")
    __match_args__ = ("left", "right")

    def __init__(self, left: LispValue, right: LispValue = Nil):
        object.__setattr__(self, "left", left)
        object.__setattr__(self, "right", right)

    def __setattr__(self, key, value):
        raise AttributeError("Cell is immutable")

    def __eq__(self, other) -> bool:
        # Walk the spine iteratively so long lists do not recurse per element.
        a, b = self, other
        while isinstance(a, Cell) and isinstance(b, Cell):
            if a is b:
                return True
            if a.left != b.left:
                return False
            a, b = a.right, b.right
        if isinstance(a, Cell) or isinstance(b, Cell):
            return False
        return a == b

    def __hash__(self) -> int:
        return hash((self.left, self.right))

    def __repr__(self) -> str:
        return f"Cell({self.left!r}, {self.right!r})"

    def pairs(self) -> Iterator[Cell]:
        """Yield each cell of the chain, stopping at the first non-cell."""
        cur = self
        while isinstance(cur, Cell):
            yield cur
            cur = cur.right

    def tail(self) -> LispValue:
        """The terminal value of the chain: Nil for a proper list."""
        cur = self
        while isinstance(cur, Cell):
            cur = cur.right
        return cur

    def is_proper(self) -> bool:
        return self.tail() is Nil


def from_list(values: Iterable[LispValue], tail: LispValue = Nil) -> LispValue:
    """Build a chain holding `values` in order, ending in `tail`.

    The chain is built back to front, so every cell is complete when created.
    An empty `values` returns `tail` itself.
    """
    result = tail
    for value in reversed(list(values)):
        result = Cell(value, result)
    return result


def to_list(value: LispValue) -> list[LispValue]:
    """Return the elements of a proper list as a Python list.

    Nil is the empty list. Raises QuillTypeError for a dotted chain or for a
    value that is not a list at all.
    """
    if value is Nil:
        return []
    if not isinstance(value, Cell):
        raise QuillTypeError(f"Expected a list, got {value!r}")
    items = []
    cur = value
    while isinstance(cur, Cell):
        items.append(cur.left)
        cur = cur.right
    if cur is not Nil:
        raise QuillTypeError("Cannot decompose an improper list")
    return items
