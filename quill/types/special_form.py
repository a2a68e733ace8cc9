"""Special-form values: callables receiving their operands unevaluated."""

from __future__ import annotations

from typing import Callable

from quill import LispValue, SExpression
from quill.types.bind import Arity, bind_arguments, parse_formals
from quill.types.environment import Scope


class SpecialForm:
    """Base of every callable whose operand forms are passed unevaluated."""

    __slots__ = ()

    arity: Arity

    def __setattr__(self, key, value):
        raise AttributeError(f"{type(self).__name__} is immutable")


class NativeSpecialForm(SpecialForm):
    """A host routine called as routine(scope, operand_forms)."""

    __slots__ = ("name", "arity", "routine")
    __match_args__ = ("name", "arity", "routine")

    def __init__(
        self,
        name: str,
        arity: Arity,
        routine: Callable[[Scope, list[SExpression]], LispValue],
    ):
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "arity", arity)
        object.__setattr__(self, "routine", routine)

    def __repr__(self) -> str:
        return f"<special {self.name}/{self.arity}>"


class Macro(SpecialForm):
    """
    User-defined special form.

    Calling a macro is two evaluations: the body runs in a child of the
    definition scope with the formals bound to the raw operand forms, and the
    code it produces then runs in the caller's scope.
    """

    __slots__ = ("scope", "formals", "body", "arity")
    __match_args__ = ("scope", "formals", "body")

    def __init__(self, scope: Scope, formals: SExpression, body: SExpression):
        params, arity = parse_formals(formals)
        object.__setattr__(self, "scope", scope)
        object.__setattr__(self, "formals", params)
        object.__setattr__(self, "body", body)
        object.__setattr__(self, "arity", arity)

    def extend_scope(self, forms: list[SExpression]) -> Scope:
        return self.scope.new_child(bind_arguments(self.formals, forms))

    def __repr__(self) -> str:
        return f"<macro ({' '.join(str(f) for f in self.formals)})>"
