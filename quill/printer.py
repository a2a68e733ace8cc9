"""Canonical text rendering of Quill values."""

from __future__ import annotations

from io import StringIO

from quill import LispValue
from quill.types.cell import Cell
from quill.types.function import Function
from quill.types.nil import NilType
from quill.types.quoted import Quoted
from quill.types.special_form import SpecialForm
from quill.types.symbol import Symbol

FUNCTION_PLACEHOLDER = "#<function>"
SPECIAL_FORM_PLACEHOLDER = "#<special-form>"


def _write(buffer: StringIO, value: LispValue) -> None:
    match value:
        case NilType():
            buffer.write("nil")
        case Symbol(name):
            buffer.write(name)
        case Quoted(inner):
            buffer.write("'")
            _write(buffer, inner)
        case Cell():
            buffer.write("(")
            first = True
            cur = value
            while isinstance(cur, Cell):
                if not first:
                    buffer.write(" ")
                first = False
                _write(buffer, cur.left)
                cur = cur.right
            if not isinstance(cur, NilType):
                buffer.write(" . ")
                _write(buffer, cur)
            buffer.write(")")
        case Function():
            buffer.write(FUNCTION_PLACEHOLDER)
        case SpecialForm():
            buffer.write(SPECIAL_FORM_PLACEHOLDER)
        case _:
            buffer.write(repr(value))


def to_string(value: LispValue) -> str:
    """Render `value` as text; function-free values read back unchanged."""
    with StringIO() as buffer:
        _write(buffer, value)
        return buffer.getvalue()
