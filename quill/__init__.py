# Core type aliases for Quill's data model.
#
# Every runtime value is one of the classes in quill.types (Nil, Cell, Symbol,
# Quoted, Function, SpecialForm). Code and data share the same representation.
#
# Naming guidance:
# - SExpression: use in reader/special-form code to denote unevaluated forms.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any`; they document intent, not structure.

from typing import Any

LispValue = Any
SExpression = LispValue

__version__ = "0.1.0"
