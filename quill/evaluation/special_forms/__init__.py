"""Registry of native special forms for the Quill evaluator.

Maps names to NativeSpecialForm values. The builtin scope binds each of them,
so special forms are ordinary first-class values looked up like any symbol.
"""

from quill.types.bind import Arity
from quill.types.special_form import NativeSpecialForm
from quill.evaluation.special_forms.quote_form import quote_form
from quill.evaluation.special_forms.lambda_form import lambda_form
from quill.evaluation.special_forms.macro_form import macro_form

SPECIAL_FORMS = {
    "quote": NativeSpecialForm("quote", Arity(1), quote_form),
    "lambda": NativeSpecialForm("lambda", Arity(2), lambda_form),
    "macro": NativeSpecialForm("macro", Arity(2), macro_form),
}
