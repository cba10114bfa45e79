"""
Parser for integer arithmetic expressions.

Overview and approach:
- This parser is a small, hand-written recursive-descent parser over the flat
    token list produced by the lexer. It walks the list with a read cursor
    (`self.pos`) that starts at 0 and only moves forward.

Grammar (left-associative, `*` and `/` bind tighter than `+` and `-`):

    expr   := term ( ( '+' | '-' ) term )*
    term   := factor ( ( '*' | '/' ) factor )*
    factor := INTEGER | '(' expr ')'

Key points:
- Whitespace tokens are transparent. They are skipped before reading a factor
    and before checking for an operator continuation, and nowhere else.
- Left associativity comes from folding: each time an operator is consumed the
    tree built so far becomes the left child of a new `BinaryOpNode`, so
    `3 - 2 - 1` parses as `(3 - 2) - 1`.
- `eat()` compares the token at the cursor structurally against an expected
    token and raises `ParseError` on mismatch. Advancing is clamped at the end
    of the token list; reading there yields an `EOF` token.
- After the top-level `expr` the whole token list must be consumed, so a
    dangling `)` or two adjacent numbers are rejected.

Examples:
    `3 + 2 * 5`   -> BinaryOp(+, 3, BinaryOp(*, 2, 5))
    `(3 + 2) * 5` -> BinaryOp(*, BinaryOp(+, 3, 2), 5)
"""

from __future__ import annotations
import logging
from typing import List
from tokens import Token, TokenType, LPAREN, RPAREN, EOF
from ast_nodes import ASTNode, IntLiteralNode, BinaryOpNode
from errors import ParseError

logger = logging.getLogger(__name__)


class Parser:
    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.pos = 0

    @property
    def current(self) -> Token:
        """Token under the cursor, or `EOF` past the last token."""
        return self.tokens[self.pos] if self.pos < len(self.tokens) else EOF

    def advance(self) -> None:
        """Move to next token. A no-op once the end has been reached."""
        self.pos = min(self.pos + 1, len(self.tokens))

    def eat(self, expected: Token) -> Token:
        """Consume the current token if it equals `expected`."""
        token = self.current
        if token != expected:
            raise ParseError(expected, token)
        self.advance()
        return token

    def skip_whitespace(self) -> None:
        while self.current.is_whitespace():
            self.advance()

    def parse_factor(self) -> ASTNode:
        """factor := INTEGER | '(' expr ')'"""
        self.skip_whitespace()
        token = self.current

        match token.type:
            case TokenType.INTEGER:
                self.eat(token)
                return IntLiteralNode(token=token)

            case TokenType.LPAREN:
                self.eat(LPAREN)
                node = self.parse_expr()
                self.eat(RPAREN)
                return node

            case _:
                raise ParseError("Integer or LeftParen", token)

    def parse_term(self) -> ASTNode:
        """term := factor ( ( '*' | '/' ) factor )*"""
        node = self.parse_factor()

        while True:
            self.skip_whitespace()
            token = self.current
            if not token.is_mul_div():
                break
            self.eat(token)
            node = BinaryOpNode(left=node, operator=token.value, right=self.parse_factor())

        return node

    def parse_expr(self) -> ASTNode:
        """expr := term ( ( '+' | '-' ) term )*"""
        node = self.parse_term()

        while True:
            self.skip_whitespace()
            token = self.current
            if not token.is_add_sub():
                break
            self.eat(token)
            node = BinaryOpNode(left=node, operator=token.value, right=self.parse_term())

        return node

    def parse(self) -> ASTNode:
        """Parse the complete token list into a single expression tree."""
        try:
            node = self.parse_expr()
        except RecursionError:
            raise ParseError(
                "a shallower expression",
                self.current,
                "expression is nested too deeply",
            ) from None

        self.skip_whitespace()
        if self.current.type != TokenType.EOF:
            raise ParseError("Operator or end of input", self.current)

        logger.debug("parsed %d tokens into a %s tree", len(self.tokens), node.type)
        return node


def parse(tokens: List[Token]) -> ASTNode:
    """Parse tokens into AST."""
    return Parser(tokens).parse()
