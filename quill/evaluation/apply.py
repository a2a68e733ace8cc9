"""Application engine for Quill.

This module centralizes call semantics for the four callable shapes:
- NativeFunction: host routine over evaluated arguments.
- Closure: formals bound in a child of the captured scope, body evaluated there.
- NativeSpecialForm: host routine over (calling scope, unevaluated operands).
- Macro: body evaluated in a child of the definition scope to produce code,
  which is then evaluated in the caller's scope.

Arity is checked here, once, for all of them. The evaluator entry point is
passed in as `evaluate_fn` so this module does not import the evaluator.
"""

from __future__ import annotations

import logging
from typing import Callable

from quill import LispValue, SExpression
from quill.types.bind import check_arity
from quill.types.environment import Scope
from quill.types.function import Closure, Function, NativeFunction
from quill.types.special_form import Macro, NativeSpecialForm, SpecialForm

logger = logging.getLogger(__name__)

EvaluatorFn = Callable[[Scope, SExpression], LispValue]


def apply_function(fn: Function, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Call a Function with already-evaluated arguments."""
    match fn:
        case NativeFunction(name, arity, routine):
            check_arity(name, arity, args)
            return routine(args)
        case Closure():
            check_arity("lambda", fn.arity, args)
            return evaluate_fn(fn.extend_scope(args), fn.body)
    raise TypeError(f"Unknown function shape: {type(fn).__name__}")


def expand_macro(macro: Macro, forms: list[SExpression], evaluate_fn: EvaluatorFn) -> SExpression:
    """First phase of a macro call: produce code from the raw operand forms."""
    check_arity("macro", macro.arity, forms)
    code = evaluate_fn(macro.extend_scope(forms), macro.body)
    logger.debug("macro expanded to %r", code)
    return code


def apply_special(
    form: SpecialForm, scope: Scope, forms: list[SExpression], evaluate_fn: EvaluatorFn
) -> LispValue:
    """Call a SpecialForm with unevaluated operand forms from `scope`."""
    match form:
        case NativeSpecialForm(name, arity, routine):
            check_arity(name, arity, forms)
            return routine(scope, forms)
        case Macro():
            code = expand_macro(form, forms, evaluate_fn)
            # Second phase runs in the caller's scope, not the definition scope.
            return evaluate_fn(scope, code)
    raise TypeError(f"Unknown special form shape: {type(form).__name__}")
