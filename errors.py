"""Exceptions raised by the expression pipeline.

Two kinds of failure leave the core:

- `ParseError` (a `SyntaxError`): the token at the parser's cursor does not
    match what the grammar requires. It carries the expected and found token.
- `EvaluationError` (a `RuntimeError`): a fatal fault while walking the tree,
    such as division by zero or leaving the 32-bit integer range.

Nothing in the core catches these; the driver decides how to report them.
"""

from __future__ import annotations
from typing import Optional
from tokens import Token


class CalcError(Exception):
    """Base class for every error raised by the lexer/parser/evaluator."""


class ParseError(CalcError, SyntaxError):
    def __init__(self, expected: Token | str, found: Token, message: Optional[str] = None):
        self.expected = expected
        self.found = found
        msg = message or f"expected {expected}, found {found}"
        if found.column:
            msg += f" at column {found.column}"
        super().__init__(f"Syntax Error: {msg}")

    def __str__(self) -> str:
        return self.args[0]


class EvaluationError(CalcError, RuntimeError):
    pass


class DivisionByZeroError(EvaluationError):
    pass


class IntegerOverflowError(EvaluationError):
    pass
