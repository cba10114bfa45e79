"""Tree-walking evaluator for expression ASTs.

`evaluate(node)` computes the integer value of a tree produced by the parser
with a post-order walk over an explicit value stack: both children of a
`BinaryOpNode` are evaluated before the operator is applied. The walk keeps no
Python call stack, so long `+`/`-` chains evaluate at any length.

All arithmetic is carried out in the signed 32-bit range. Division truncates
toward zero. Dividing by zero raises `DivisionByZeroError` and any result that
leaves the 32-bit range raises `IntegerOverflowError`; neither is caught here.
"""

import logging
from typing import Dict, List, Union
from ast_nodes import ASTNode, IntLiteralNode, BinaryOpNode, iter_postorder
from errors import EvaluationError, DivisionByZeroError, IntegerOverflowError
from tokens import Operator, INT32_MIN, INT32_MAX

logger = logging.getLogger(__name__)


def _check_range(value: int, lhs: int, op: Operator, rhs: int) -> int:
    if not INT32_MIN <= value <= INT32_MAX:
        raise IntegerOverflowError(
            f"Integer overflow: {lhs} {op.symbol} {rhs} does not fit in 32 bits"
        )
    return value


def _divide(lhs: int, rhs: int) -> int:
    if rhs == 0:
        raise DivisionByZeroError(f"Division by zero: {lhs} / {rhs}")
    # Python's `//` floors; the quotient here truncates toward zero.
    quotient = abs(lhs) // abs(rhs)
    return -quotient if (lhs < 0) != (rhs < 0) else quotient


def apply_operator(op: Operator, lhs: int, rhs: int) -> int:
    match op:
        case Operator.ADD:
            result = lhs + rhs
        case Operator.SUB:
            result = lhs - rhs
        case Operator.MUL:
            result = lhs * rhs
        case Operator.DIV:
            result = _divide(lhs, rhs)
        case _:
            raise EvaluationError(f"Unsupported binary operator: {op}")
    return _check_range(result, lhs, op, rhs)


def _eval_expr(node: ASTNode) -> int:
    values: List[int] = []
    for current in iter_postorder(node):
        match current:
            case IntLiteralNode(token=token):
                values.append(token.value)
            case BinaryOpNode(operator=op):
                rv = values.pop()
                lv = values.pop()
                values.append(apply_operator(op, lv, rv))
            case _:
                raise EvaluationError(f"Unhandled expression node type: {current}")
    return values.pop()


def evaluate(node: ASTNode) -> int:
    """Evaluate an expression tree and return its integer value."""
    result = _eval_expr(node)
    logger.debug("evaluated expression to %d", result)
    return result


def evaluate_subtrees(node: ASTNode) -> Dict[int, Union[int, EvaluationError]]:
    """Value of every sub-expression, keyed by `id()` of the node rooting it.

    A sub-expression that fails maps to the error it raised; every enclosing
    node maps to that same error.
    """
    results: Dict[int, Union[int, EvaluationError]] = {}
    for current in iter_postorder(node):
        match current:
            case IntLiteralNode(token=token):
                results[id(current)] = token.value
            case BinaryOpNode(left=l, operator=op, right=r):
                lv = results[id(l)]
                rv = results[id(r)]
                if isinstance(lv, EvaluationError):
                    results[id(current)] = lv
                elif isinstance(rv, EvaluationError):
                    results[id(current)] = rv
                else:
                    try:
                        results[id(current)] = apply_operator(op, lv, rv)
                    except EvaluationError as e:
                        results[id(current)] = e
            case _:
                raise EvaluationError(f"Unhandled expression node type: {current}")
    return results
