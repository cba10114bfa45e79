"""Graphviz visualization helpers for expression trees.

Provides `render_ast_dot(node, show_values=False, use_surface=False)` which
returns a `graphviz.Digraph` object (not rendered). Optionally
`write_and_render` can write the file to disk.

Layout: the tree is drawn top-down. Operators are rendered as circles and
integer leaves as boxes; edges are labeled `left`/`right`. With
`show_values=True` every node also shows the value of the sub-expression it
roots, computed in a single evaluator pass; a failing sub-expression shows the
error message instead. With `use_surface=True` operator nodes show
the whole sub-expression in surface syntax rather than just the operator.
"""

from typing import List, Optional
import html
from graphviz import Digraph
from ast_nodes import ASTNode, IntLiteralNode, BinaryOpNode
from evaluator import evaluate_subtrees
from pretty_printer import PrettyPrinter


def _node_html(text: str, value: Optional[str] = None) -> str:
    escaped = html.escape(text)
    # Avoid empty FONT elements which some Graphviz versions reject
    if not escaped.strip():
        escaped = "&nbsp;"
    value_html = ""
    if value is not None:
        value_html = f'<BR/><FONT POINT-SIZE="8">= {html.escape(value)}</FONT>'
    return f'<<FONT POINT-SIZE="10">{escaped}</FONT>{value_html}>'


def render_ast_dot(
    node: ASTNode,
    show_values: bool = False,
    use_surface: bool = False,
) -> Digraph:
    """Return a graphviz.Digraph for the given expression tree.

    The caller may call `dot.source` to inspect the dot text, or call
    `dot.render(filename, format=...)` to write files (requires Graphviz installed).
    """
    dot = Digraph(format="svg")
    dot.attr("graph", rankdir="TB")

    values = evaluate_subtrees(node) if show_values else {}
    counter = 0
    # Explicit stack of (node, parent id, edge label) so deep trees do not
    # hit the recursion limit while drawing.
    stack: List[tuple] = [(node, None, None)]
    while stack:
        current, parent, edge_label = stack.pop()
        node_id = f"n{counter}"
        counter += 1

        value = str(values[id(current)]) if show_values else None
        match current:
            case IntLiteralNode(token=token):
                dot.node(node_id, label=_node_html(str(token.value), value), shape="box")
            case BinaryOpNode(left=left, operator=op, right=right):
                text = PrettyPrinter.print_surface(current) if use_surface else op.symbol
                dot.node(node_id, label=_node_html(text, value), shape="circle")
                # right is pushed first so the left subtree gets the lower ids
                stack.append((right, node_id, "right"))
                stack.append((left, node_id, "left"))
            case _:
                dot.node(node_id, label=_node_html(repr(current)), shape="plaintext")

        if parent is not None:
            dot.edge(parent, node_id, label=edge_label)

    return dot


def write_and_render(
    node: ASTNode,
    out_path: str,
    fmt: str = "svg",
    show_values: bool = False,
    use_surface: bool = False,
) -> None:
    """Write and render the tree to the given path (without extension). Returns when rendered.

    Example: write_and_render(ast, 'out/ast', fmt='png') will create out/ast.png
    (requires Graphviz)."""
    dot = render_ast_dot(node, show_values=show_values, use_surface=use_surface)
    dot.format = fmt
    # Note: render will append extension automatically
    dot.render(out_path, cleanup=True)
