"""Special form: macro.

(macro (formals...) body) builds a user-defined special form. The body is
evaluated with the formals bound to the caller's unevaluated operand forms;
whatever it returns is then evaluated in the caller's scope.
"""

import logging

from quill import SExpression, LispValue
from quill.types.environment import Scope
from quill.types.special_form import Macro

logger = logging.getLogger(__name__)


def macro_form(scope: Scope, tail: list[SExpression]) -> LispValue:
    formals, body = tail
    macro = Macro(scope, formals, body)
    logger.debug("built %r", macro)
    return macro
