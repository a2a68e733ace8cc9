"""
  Quill Reader: tokenizer and recursive-descent parser.

Grammar:

    value := '(' value* ')'     -> proper list of Cells (Nil when empty)
           | "'" value           -> Quoted(value)
           | symbol              -> Symbol

A symbol is a maximal run of characters that are neither whitespace nor one
of the structuring characters ( ) '. There are no numbers, strings or
comments. `parse` accepts exactly one top-level value per call.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, Optional

from quill import SExpression
from quill.types.cell import from_list
from quill.types.errors import QuillParseError
from quill.types.quoted import Quoted
from quill.types.symbol import Symbol

logger = logging.getLogger(__name__)

OPEN, CLOSE, QUOTE, SYMBOL = "lparen", "rparen", "quote", "symbol"

TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<quote>')"
    r"|(?P<symbol>[^\s()']+)"
    r")"
)

Token = tuple[str, str]


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value) tuples.

    Never fails; trailing whitespace simply ends the stream.
    """
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None or m.lastgroup is None:
            # Only whitespace remains
            break
        yield m.lastgroup, m.group(m.lastgroup)
        pos = m.end()


class TokenStream:
    """Token iterator with one token of lookahead."""

    def __init__(self, tokens: Iterator[Token]):
        self.tokens = iter(tokens)
        self.buffer: Optional[Token] = None

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer is None:
            self.buffer = next(self.tokens, None)
            if self.buffer is None:
                return None, None
        return self.buffer

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        tok = self.peek()
        self.buffer = None
        return tok

    def at_end(self) -> bool:
        return self.peek()[0] is None

    def parse_value(self) -> SExpression:
        tok_type, tok_val = self.advance()

        if tok_type is None:
            raise QuillParseError("Unexpected end of input")

        if tok_type == SYMBOL:
            return Symbol(tok_val)

        if tok_type == QUOTE:
            if self.at_end():
                raise QuillParseError("Quote mark with nothing to quote")
            return Quoted(self.parse_value())

        if tok_type == OPEN:
            items = []
            while self.peek()[0] != CLOSE:
                if self.at_end():
                    raise QuillParseError("Unmatched '('")
                items.append(self.parse_value())
            self.advance()  # consume ')'
            return from_list(items)

        raise QuillParseError("Unmatched ')'")


def parse(text: str) -> SExpression:
    """Parse exactly one top-level expression from `text`."""
    stream = TokenStream(lex(text))
    value = stream.parse_value()
    if not stream.at_end():
        raise QuillParseError(f"Unexpected trailing input: {stream.peek()[1]!r}")
    logger.debug("parsed %r", value)
    return value

