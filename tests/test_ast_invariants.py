import dataclasses

import pytest

from main import lex, parse_tokens
from ast_nodes import *
from tokens import Token, TokenType, Operator, LPAREN


def _walk(node):
    yield node
    if isinstance(node, BinaryOpNode):
        yield from _walk(node.left)
        yield from _walk(node.right)


def test_tree_contains_only_literals_and_arithmetic_operators():
    ast = parse_tokens(lex("(1 + 2) * 3 - 4 / (5 - 6)"))
    for node in _walk(ast):
        match node:
            case IntLiteralNode(token=token):
                assert token.type == TokenType.INTEGER
            case BinaryOpNode(operator=op):
                assert isinstance(op, Operator)
            case _:
                pytest.fail(f"unexpected node {node!r}")


def test_leaf_must_wrap_integer_token():
    with pytest.raises(ValueError):
        IntLiteralNode(token=LPAREN)


def test_binary_node_requires_operator():
    with pytest.raises(ValueError):
        BinaryOpNode(operator="+")


def test_nodes_are_immutable():
    node = IntLiteralNode(token=Token.integer(1))
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.token = Token.integer(2)


def test_node_type_tags_match_classes():
    assert IntLiteralNode().type == NodeType.INT_LITERAL
    assert BinaryOpNode().type == NodeType.BINARY_OP
