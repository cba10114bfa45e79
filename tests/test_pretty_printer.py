from tests.utils import parse_text, lex, parse_tokens
from pretty_printer import PrettyPrinter


def test_print_ast_shows_structure():
    out = PrettyPrinter.print_ast(parse_text("3 + 2 * 5"))
    assert out.splitlines() == [
        "BinaryOp(+)",
        "  left: IntLiteral(3)",
        "  right: BinaryOp(*)",
        "    left: IntLiteral(2)",
        "    right: IntLiteral(5)",
    ]


def test_print_surface_parenthesizes_nested_operations():
    assert PrettyPrinter.print_surface(parse_text("3+2*5")) == "3 + (2 * 5)"
    assert PrettyPrinter.print_surface(parse_text("3 - 2 - 1")) == "(3 - 2) - 1"
    assert PrettyPrinter.print_surface(parse_text("(7)")) == "7"


def test_print_surface_reparses_to_same_tree():
    for src in ["(200 + 50) * 3", "1 - (2 - 3) / 4 * 5", "9"]:
        ast = parse_text(src)
        assert parse_tokens(lex(PrettyPrinter.print_surface(ast))) == ast


LONG_CHAIN = " + ".join(["1"] * 5000)


def test_print_ast_handles_long_chain():
    out = PrettyPrinter.print_ast(parse_text(LONG_CHAIN)).splitlines()
    assert len(out) == 2 * 5000 - 1
    assert out[0] == "BinaryOp(+)"
    assert out[-1] == "  right: IntLiteral(1)"


def test_print_surface_handles_long_chain():
    out = PrettyPrinter.print_surface(parse_text(LONG_CHAIN))
    assert out.startswith("(" * 4998 + "1 + 1)")
    assert out.endswith(" + 1")
