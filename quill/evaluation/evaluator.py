"""Core tree-walking evaluator for the Quill interpreter.

Dispatches between self-evaluating values, symbol lookup, quoting and
application. Recursion depth follows expression nesting; there is no
trampoline.
"""

from __future__ import annotations

from quill import SExpression, LispValue
from quill.evaluation.apply import apply_function, apply_special, expand_macro
from quill.printer import to_string
from quill.types.cell import Cell, to_list
from quill.types.environment import Scope
from quill.types.errors import QuillEvalError
from quill.types.function import Function
from quill.types.quoted import Quoted
from quill.types.special_form import Macro, SpecialForm
from quill.types.symbol import Symbol


def evaluate(scope: Scope, expr: SExpression) -> LispValue:
    """Evaluate `expr` in `scope` and return the resulting value."""
    match expr:
        case Symbol():
            return scope.lookup(expr)

        case Quoted(inner):
            return inner

        case Cell(head, _):
            # Raises QuillTypeError for an improper chain
            operands = to_list(expr)[1:]
            operator = evaluate(scope, head)

            if isinstance(operator, Function):
                args = [evaluate(scope, operand) for operand in operands]
                return apply_function(operator, args, evaluate)

            if isinstance(operator, SpecialForm):
                return apply_special(operator, scope, operands, evaluate)

            raise QuillEvalError(f"not callable: {to_string(operator)}")

    # --- Nil, functions and special forms return as-is ---
    return expr


def expand(scope: Scope, expr: SExpression) -> SExpression:
    """
    Run only the first phase of a macro call and return the generated code.

    Forms whose operator does not evaluate to a Macro are returned unchanged.
    """
    if isinstance(expr, Cell):
        operands = to_list(expr)[1:]
        operator = evaluate(scope, expr.left)
        if isinstance(operator, Macro):
            return expand_macro(operator, operands, evaluate)
    return expr
