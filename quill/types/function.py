"""Function values: native primitives and user-defined closures."""

from __future__ import annotations

from typing import Callable

from quill import LispValue, SExpression
from quill.types.bind import Arity, bind_arguments, parse_formals
from quill.types.environment import Scope
from quill.types.symbol import Symbol


class Function:
    """Base of every callable whose arguments are evaluated before the call."""

    __slots__ = ()

    arity: Arity

    def __setattr__(self, key, value):
        raise AttributeError(f"{type(self).__name__} is immutable")


class NativeFunction(Function):
    """A fixed host routine taking the list of evaluated arguments."""

    __slots__ = ("name", "arity", "routine")
    __match_args__ = ("name", "arity", "routine")

    def __init__(self, name: str, arity: Arity, routine: Callable[[list[LispValue]], LispValue]):
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "arity", arity)
        object.__setattr__(self, "routine", routine)

    def __repr__(self) -> str:
        return f"<native {self.name}/{self.arity}>"


class Closure(Function):
    """A first-class lambda: formals, single body expression, captured scope."""

    __slots__ = ("scope", "formals", "body", "arity")
    __match_args__ = ("scope", "formals", "body")

    def __init__(self, scope: Scope, formals: SExpression, body: SExpression):
        params, arity = parse_formals(formals)
        object.__setattr__(self, "scope", scope)
        object.__setattr__(self, "formals", params)
        object.__setattr__(self, "body", body)
        object.__setattr__(self, "arity", arity)

    def extend_scope(self, args: list[LispValue]) -> Scope:
        """Bind the argument values in a child of the captured scope."""
        return self.scope.new_child(bind_arguments(self.formals, args))

    def __repr__(self) -> str:
        return f"<lambda ({' '.join(str(f) for f in self.formals)})>"
