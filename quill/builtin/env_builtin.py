"""Built-in bindings for the Quill root scope.

This module defines the native list primitives and assembles the bootstrap
scope that every session starts from.
"""
from __future__ import annotations

from quill import LispValue
from quill.evaluation.special_forms import SPECIAL_FORMS
from quill.types.bind import Arity
from quill.types.cell import Cell, from_list
from quill.types.environment import Scope
from quill.types.errors import QuillTypeError
from quill.types.function import NativeFunction
from quill.types.nil import Nil
from quill.printer import to_string


# -------------------------------
# List processing
# -------------------------------
def cons(args: list[LispValue]) -> LispValue:
    """Return a new Cell with the two arguments as left and right."""
    left, right = args
    return Cell(left, right)


def car(args: list[LispValue]) -> LispValue:
    """Return the left slot of a Cell."""
    (value,) = args
    if not isinstance(value, Cell):
        raise QuillTypeError(f"car expects a cell, got {to_string(value)}")
    return value.left


def cdr(args: list[LispValue]) -> LispValue:
    """Return the right slot of a Cell."""
    (value,) = args
    if not isinstance(value, Cell):
        raise QuillTypeError(f"cdr expects a cell, got {to_string(value)}")
    return value.right


def list_(args: list[LispValue]) -> LispValue:
    return from_list(args)


NATIVE_FUNCTIONS = {
    "cons": NativeFunction("cons", Arity(2), cons),
    "car": NativeFunction("car", Arity(1), car),
    "cdr": NativeFunction("cdr", Arity(1), cdr),
    "list": NativeFunction("list", Arity(0, variadic=True), list_),
}


def builtin() -> Scope:
    """Return a fresh root scope holding every native binding."""
    return Scope({
        "nil": Nil,
        **NATIVE_FUNCTIONS,
        **SPECIAL_FORMS,
    })
