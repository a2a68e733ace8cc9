from quill import SExpression, LispValue
from quill.types.environment import Scope


def quote_form(scope: Scope, tail: list[SExpression]) -> LispValue:
    """(quote form) -> form, unevaluated."""
    return tail[0]
