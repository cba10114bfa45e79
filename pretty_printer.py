"""Pretty-printer for the AST.

Provides `PrettyPrinter.print_ast(node, indent, prefix)` which renders an
AST into a readable multi-line string, and `PrettyPrinter.print_surface(node)`
which renders it back into one line of expression syntax. The tree printer is
intended for debugging and tests; the surface printer parenthesizes every
nested operation, so its output lexes and parses back into an equal tree.

Both walk the tree with an explicit stack, so long `+`/`-` chains print at
any length.

Examples:
    PrettyPrinter.print_ast(ast)
    PrettyPrinter.print_surface(ast)  # "3 + (2 * 5)"
"""

from __future__ import annotations
from ast_nodes import *


class PrettyPrinter:
    @staticmethod
    def print_ast(node: ASTNode, indent: int = 0, prefix: str = "") -> str:
        """Pretty print AST and return as string."""
        if not isinstance(node, ASTNode):
            return f"{' ' * indent}{prefix}{node}"

        lines = []
        # Pre-order: (node, indent, prefix); right is pushed first so the
        # left child is printed first.
        stack = [(node, indent, prefix)]
        while stack:
            current, level, pre = stack.pop()
            indent_str = " " * level

            match current:
                case IntLiteralNode(token=token):
                    lines.append(f"{indent_str}{pre}IntLiteral({token.value})")

                case BinaryOpNode(left=left, operator=op, right=right):
                    lines.append(f"{indent_str}{pre}BinaryOp({op.symbol})")
                    stack.append((right, level + 2, "right: "))
                    stack.append((left, level + 2, "left: "))

                case _:
                    lines.append(f"{indent_str}{pre}Unknown node type: {type(current)}")

        return "\n".join(lines)

    @staticmethod
    def print_surface(node: ASTNode) -> str:
        """Return a compact, surface-syntax one-line representation of an AST node.

        Nested binary operations are always parenthesized; the outermost one
        is not.
        """
        if node is None:
            return ""

        # Post-order: each entry is (text, is_binary_op) for a finished subtree.
        parts = []

        def _p(text: str, is_binary: bool) -> str:
            return f"({text})" if is_binary else text

        for current in iter_postorder(node):
            match current:
                case IntLiteralNode(token=token):
                    parts.append((str(token.value), False))
                case BinaryOpNode(operator=op):
                    r = _p(*parts.pop())
                    l = _p(*parts.pop())
                    parts.append((f"{l} {op.symbol} {r}", True))
                case _:
                    s = PrettyPrinter.print_ast(current)
                    parts.append((" ".join(line.strip() for line in s.splitlines()), False))

        return parts.pop()[0]
