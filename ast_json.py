"""Convert AST nodes into JSON-serializable structures.

This module provides `ast_to_json(node)` which returns a nested structure
of dicts/lists/primitives describing the AST node. It encodes the node type
and its key fields, and records the source column of integer leaves. The tree
is walked with an explicit stack, so any parsed tree converts.

Note that `json.dump` itself recurses into nested dicts; very long `+`/`-`
chains produce structures too deep for it, which the driver reports.
"""

from typing import Any, Dict, List, Optional
from ast_nodes import *


def ast_to_json(node: Optional[ASTNode]) -> Any:
    if node is None:
        return None

    done: List[Dict[str, Any]] = []
    for current in iter_postorder(node):
        t = current.type
        if t == NodeType.INT_LITERAL and isinstance(current, IntLiteralNode):
            done.append(
                {
                    "node_type": "IntLiteral",
                    "value": current.value,
                    "column": current.token.column,
                }
            )
        elif t == NodeType.BINARY_OP and isinstance(current, BinaryOpNode):
            right = done.pop()
            left = done.pop()
            done.append(
                {
                    "node_type": "BinaryOp",
                    "operator": current.operator.symbol,
                    "left": left,
                    "right": right,
                }
            )
        else:
            raise TypeError(f"Cannot serialize {type(current).__name__} to JSON")

    return done.pop()
