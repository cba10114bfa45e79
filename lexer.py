"""
Lexer for integer arithmetic expressions.

Overview:
- This module implements a small hand-written lexical analyzer (scanner) that
    transforms an input string into a list of `Token` objects defined in
    `tokens.py`.
- It recognizes integer literals (a maximal run of ASCII digits), the four
    arithmetic operators `+ - * /`, parentheses and single spaces. Every other
    character becomes an `UNKNOWN` token.

Examples:
    Input:  "2 + 3 * 4"
    Tokens: [INTEGER(2), WHITESPACE, OPERATOR(ADD), WHITESPACE, INTEGER(3), ...]

Implementation notes:
- The lexer is a simple stateful scanner using `self.pos` and `self.current_char`.
- The lexer never fails. Validity checking is left to the parser, which
    rejects `UNKNOWN` tokens wherever they appear.
- A leading minus is never folded into a number: `-3` lexes as
    `OPERATOR(SUB)` followed by `INTEGER(3)`.
- A digit run too large for a signed 32-bit integer is emitted as a single
    `UNKNOWN` token carrying the digits.
"""

from __future__ import annotations
import logging
from typing import Optional, List
from tokens import Token, TokenType, Operator, INT32_MAX

logger = logging.getLogger(__name__)

DIGITS = "0123456789"


class Lexer:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.current_char = self.text[self.pos] if self.text else None

        self.operators = {
            "+": Operator.ADD,
            "-": Operator.SUB,
            "*": Operator.MUL,
            "/": Operator.DIV,
        }

    @property
    def column(self) -> int:
        return self.pos + 1

    def advance(self) -> None:
        """Advance to next character."""
        self.pos += 1
        if self.pos < len(self.text):
            self.current_char = self.text[self.pos]
        else:
            self.current_char = None

    def integer(self) -> Token:
        """Scan a maximal run of digits."""
        start_col = self.column
        result = []

        while self.current_char is not None and self.current_char in DIGITS:
            result.append(self.current_char)
            self.advance()

        digits = "".join(result)
        significant = digits.lstrip("0") or "0"
        # Length check first: int() refuses very long digit strings.
        if len(significant) > len(str(INT32_MAX)) or int(significant) > INT32_MAX:
            logger.debug("integer literal %s out of 32-bit range", digits)
            return Token(TokenType.UNKNOWN, digits, start_col)
        return Token.integer(int(significant), start_col)

    def get_next_token(self) -> Optional[Token]:
        """Return the next token, or None once the input is exhausted."""
        if self.current_char is None:
            return None

        if self.current_char in DIGITS:
            return self.integer()

        char = self.current_char
        column = self.column
        self.advance()

        # Single character tokens handled directly via structural matching.
        match char:
            case "+" | "-" | "*" | "/":
                return Token.operator(self.operators[char], column)
            case "(":
                return Token(TokenType.LPAREN, column=column)
            case ")":
                return Token(TokenType.RPAREN, column=column)
            case " ":
                return Token(TokenType.WHITESPACE, column=column)
            case _:
                return Token(TokenType.UNKNOWN, char, column)

    def tokenize(self) -> List[Token]:
        """Return all tokens from the input string."""
        tokens = []
        while (token := self.get_next_token()) is not None:
            tokens.append(token)
        logger.debug("lexed %d tokens from %r", len(tokens), self.text)
        return tokens


def lex(text: str) -> List[Token]:
    """Tokenize input string."""
    return Lexer(text).tokenize()
