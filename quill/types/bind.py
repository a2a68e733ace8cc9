from __future__ import annotations

from typing import NamedTuple

from quill import LispValue, SExpression
from quill.types.cell import from_list, to_list
from quill.types.errors import QuillArityError, QuillEvalError, QuillTypeError
from quill.types.symbol import Symbol

SPLAT = "*"


class Arity(NamedTuple):
    """Argument-count metadata carried by every callable.

    `required` fixed arguments, plus any number more when `variadic`.
    """

    required: int
    variadic: bool = False

    def accepts(self, count: int) -> bool:
        if self.variadic:
            return count >= self.required
        return count == self.required

    def __str__(self) -> str:
        if self.variadic:
            return f"at least {self.required}"
        return str(self.required)


def is_splat(formal: Symbol) -> bool:
    return len(formal.name) > len(SPLAT) and formal.name.startswith(SPLAT)


def parse_formals(formals: SExpression) -> tuple[tuple[Symbol, ...], Arity]:
    """
    Validate a formal-parameter list and compute its Arity.

    Accepts Nil or a proper list of Symbols. At most one splat formal
    (`*name`) is allowed, and only in last position. The returned formals
    keep the splat marker so binding can tell the variadic slot apart.
    """
    try:
        items = to_list(formals)
    except QuillTypeError:
        raise QuillTypeError("Formal parameters must be a proper list of symbols") from None

    for f in items:
        if not isinstance(f, Symbol):
            raise QuillTypeError(f"Formal parameter must be a symbol, got {f!r}")

    splats = [i for i, f in enumerate(items) if is_splat(f)]
    if len(splats) > 1:
        raise QuillTypeError("Malformed parameter list: more than one splat formal")
    if splats and splats[0] != len(items) - 1:
        raise QuillTypeError("Malformed parameter list: splat formal must be last")

    names = [bound_name(f) for f in items]
    if len(set(names)) != len(names):
        raise QuillEvalError(f"Duplicate formal parameter in {[str(n) for n in names]}")

    if splats:
        return tuple(items), Arity(len(items) - 1, True)
    return tuple(items), Arity(len(items))


def bound_name(formal: Symbol) -> Symbol:
    """The name a formal binds in the callee scope (splat marker stripped)."""
    if is_splat(formal):
        return Symbol(formal.name[len(SPLAT):])
    return formal


def check_arity(what: str, arity: Arity, args: list) -> None:
    if not arity.accepts(len(args)):
        raise QuillArityError(
            f"{what} expects {arity} argument(s), got {len(args)}"
        )


def bind_arguments(
    formals: tuple[Symbol, ...], args: list[LispValue]
) -> dict[Symbol, LispValue]:
    """
    Map formals to the supplied values. The caller has already checked
    the arity. A trailing splat formal receives the remaining values as a
    proper list (Nil when none remain).
    """
    bindings: dict[Symbol, LispValue] = {}
    for i, formal in enumerate(formals):
        if is_splat(formal):
            bindings[bound_name(formal)] = from_list(args[i:])
            break
        bindings[formal] = args[i]
    return bindings
