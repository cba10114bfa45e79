"""AST node definitions for integer arithmetic expressions.

This module defines the two AST node dataclasses built by the parser and read
by the evaluator and the debugging printers:

- `IntLiteralNode`: a leaf wrapping a single `INTEGER` token.
- `BinaryOpNode`: an operator with exclusively owned left and right children.

Conventions:
- All AST node dataclasses inherit from `ASTNode`, which records the node
    kind (`NodeType`), so the rest of the toolchain can pattern-match on either
    the class or `node.type`.
- `iter_postorder()` walks a tree without recursion; the evaluator and the
    debugging printers all build on it.
- Nodes are frozen: the tree is built bottom-up by the parser and never
    changes afterwards. Construction validates that a leaf wraps an integer
    token and that a binary node holds an arithmetic `Operator`.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator, List, Tuple
from tokens import Token, TokenType, Operator


class NodeType(Enum):
    INT_LITERAL = auto()
    BINARY_OP = auto()

    def __str__(self) -> str:
        return self.name


# Base AST Node
@dataclass(frozen=True)
class ASTNode:
    type: NodeType


@dataclass(frozen=True)
class IntLiteralNode(ASTNode):
    type: NodeType = NodeType.INT_LITERAL
    token: Token = field(default_factory=lambda: Token.integer(0))

    def __post_init__(self) -> None:
        if self.token.type != TokenType.INTEGER:
            raise ValueError(f"Leaf must wrap an Integer token, got {self.token}")

    @property
    def value(self) -> int:
        return self.token.value


@dataclass(frozen=True)
class BinaryOpNode(ASTNode):
    type: NodeType = NodeType.BINARY_OP
    left: ASTNode = field(default_factory=lambda: IntLiteralNode())
    operator: Operator = Operator.ADD
    right: ASTNode = field(default_factory=lambda: IntLiteralNode())

    def __post_init__(self) -> None:
        if not isinstance(self.operator, Operator):
            raise ValueError(f"Binary node needs an arithmetic operator, got {self.operator!r}")
        for child in (self.left, self.right):
            if not isinstance(child, ASTNode):
                raise ValueError(f"Binary node child must be an AST node, got {child!r}")


def iter_postorder(node: ASTNode) -> Iterator[ASTNode]:
    """Yield every node of the tree, children before their parent.

    Uses an explicit stack: `+`/`-` chains build left-deep trees that can be
    far deeper than the interpreter's recursion limit.
    """
    stack: List[Tuple[ASTNode, bool]] = [(node, False)]
    while stack:
        current, expanded = stack.pop()
        if isinstance(current, BinaryOpNode) and not expanded:
            stack.append((current, True))
            stack.append((current.right, False))
            stack.append((current.left, False))
        else:
            yield current
