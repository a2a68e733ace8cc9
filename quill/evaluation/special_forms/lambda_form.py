import logging

from quill import SExpression, LispValue
from quill.types.environment import Scope
from quill.types.function import Closure

logger = logging.getLogger(__name__)


def lambda_form(scope: Scope, tail: list[SExpression]) -> LispValue:
    """
    (lambda (formals...) body)

    Exactly one body expression. The closure captures the scope the lambda
    form is evaluated in; calls bind their arguments in a child of it.
    """
    formals, body = tail
    closure = Closure(scope, formals, body)
    logger.debug("built %r", closure)
    return closure
