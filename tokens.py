"""Token definitions for the lexer.

This module defines the `TokenType` enum for the lexical categories recognized
by the lexer, the `Operator` enum for the four arithmetic operators, and a
small frozen `Token` dataclass holding a token type and an optional value.
Tokens are the atomic units produced by the lexer and consumed by the parser.

Equality is structural: two tokens are equal when their type and value are
equal. The source column is carried for diagnostics only and does not take
part in comparisons.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Optional

# Range of the signed 32-bit integers all arithmetic is carried out in.
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class TokenType(Enum):
    # Literals
    INTEGER = auto()

    # Arithmetic operators (the concrete operator lives in `Token.value`)
    OPERATOR = auto()

    # Parentheses
    LPAREN = auto()
    RPAREN = auto()

    # Layout
    WHITESPACE = auto()

    # Anything else
    UNKNOWN = auto()

    # Special: never produced by the lexer, reported by the parser when the
    # cursor has run past the last token.
    EOF = auto()

    def __str__(self) -> str:
        return self.name


class Operator(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    def __str__(self) -> str:
        return self.name

    @property
    def symbol(self) -> str:
        return self.value


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: Optional[int | Operator | str] = None
    column: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        if self.value is None:
            return f"Token({self.type})"
        return f"Token({self.type}, {self.value!r})"

    def __str__(self) -> str:
        match self.type:
            case TokenType.INTEGER:
                return f"Integer({self.value})"
            case TokenType.OPERATOR:
                return f"Operator({self.value})"
            case TokenType.LPAREN:
                return "LeftParen"
            case TokenType.RPAREN:
                return "RightParen"
            case TokenType.WHITESPACE:
                return "Whitespace"
            case TokenType.UNKNOWN:
                return f"Unknown({self.value!r})"
            case _:
                return "end of input"

    @classmethod
    def integer(cls, value: int, column: int = 0) -> Token:
        return cls(TokenType.INTEGER, value, column)

    @classmethod
    def operator(cls, op: Operator, column: int = 0) -> Token:
        return cls(TokenType.OPERATOR, op, column)

    def is_add_sub(self) -> bool:
        return self.type == TokenType.OPERATOR and self.value in (
            Operator.ADD,
            Operator.SUB,
        )

    def is_mul_div(self) -> bool:
        return self.type == TokenType.OPERATOR and self.value in (
            Operator.MUL,
            Operator.DIV,
        )

    def is_whitespace(self) -> bool:
        return self.type == TokenType.WHITESPACE


LPAREN = Token(TokenType.LPAREN)
RPAREN = Token(TokenType.RPAREN)
WHITESPACE = Token(TokenType.WHITESPACE)
EOF = Token(TokenType.EOF)
