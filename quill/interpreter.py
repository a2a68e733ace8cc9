from __future__ import annotations

import logging

from quill import LispValue
from quill.builtin.env_builtin import builtin
from quill.evaluation.evaluator import evaluate
from quill.printer import to_string
from quill.reader.parser import parse
from quill.types.environment import Scope
from quill.types.errors import QuillError, QuillEvalError
from quill.types.symbol import Symbol

logger = logging.getLogger(__name__)

RECURSION_MESSAGE = "maximum recursion depth exceeded"


class Interpreter:
    """
    A session evaluating Quill expressions one at a time.

    The session scope only ever grows by replacement with a child scope, so a
    failed evaluation leaves the session exactly as it was.
    """

    def __init__(self, scope: Scope | None = None):
        self.scope: Scope = scope if scope is not None else builtin()

    def bind(self, name: Symbol | str, value: LispValue) -> None:
        """Make `name` visible to later evaluations in this session."""
        if isinstance(name, str):
            name = Symbol(name)
        self.scope = self.scope.new_child({name: value})

    def eval(self, code: str) -> LispValue:
        """Parse exactly one expression from `code` and evaluate it."""
        try:
            return evaluate(self.scope, parse(code))
        except RecursionError:
            raise QuillEvalError(RECURSION_MESSAGE) from None

    def eval_line(self, line: str) -> str:
        """Evaluate one input line and render the result or the error tag."""
        line = line.strip()
        if not line:
            return ""
        logger.debug("eval: %s", line)
        try:
            # Reading, evaluating and printing all recurse with nesting depth
            try:
                return to_string(self.eval(line))
            except RecursionError:
                raise QuillEvalError(RECURSION_MESSAGE) from None
        except QuillError as e:
            logger.info("%s on input %r", e.format(), line)
            return e.format()
