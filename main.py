from __future__ import annotations
import argparse
import json
import logging
import sys
from typing import List, Optional

from graphviz import ExecutableNotFound

from lexer import Lexer
from tokens import Token
from ast_nodes import ASTNode
from parser import Parser
from evaluator import evaluate
from errors import CalcError
from pretty_printer import PrettyPrinter
from ast_json import ast_to_json
from ast_viz import render_ast_dot, write_and_render

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def lex(text: str) -> List[Token]:
    """Tokenize input string."""
    lexer = Lexer(text)
    return lexer.tokenize()


def parse_tokens(tokens: List[Token]) -> ASTNode:
    """Parse tokens into AST."""
    parser = Parser(tokens)
    return parser.parse()


def evaluate_text(text: str) -> int:
    """Run the whole pipeline on one line of text."""
    return evaluate(parse_tokens(lex(text)))


def process_expression(
    text: str,
    *,
    print_tokens: bool = False,
    print_ast: bool = False,
    print_surface: bool = False,
    dump_ast_path: Optional[str] = None,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
    viz_values: bool = False,
) -> int:
    """Process a single expression: lex, parse, evaluate and optionally print stages.

    Prints `= <result>` and returns the result. Errors from the pipeline are
    not caught here.
    """
    tokens = lex(text)
    if print_tokens:
        print(f"Tokens ({len(tokens)}):")
        for i, token in enumerate(tokens[:50]):
            print(f"  {i:3}: {token}")
        if len(tokens) > 50:
            print(f"  ... and {len(tokens) - 50} more")

    ast = parse_tokens(tokens)
    if print_ast:
        print("AST:")
        print(PrettyPrinter.print_ast(ast))
    if print_surface:
        print(f"Surface: {PrettyPrinter.print_surface(ast)}")

    if dump_ast_path:
        try:
            # json recurses per nesting level; serialize before touching the file
            payload = json.dumps(ast_to_json(ast), indent=2)
            with open(dump_ast_path, "w", encoding="utf-8") as fh:
                fh.write(payload)
            print(f"Wrote AST JSON to {dump_ast_path}")
        except RecursionError:
            print(
                f"Failed to write AST JSON to {dump_ast_path}: tree too deep for JSON",
                file=sys.stderr,
            )
        except OSError as e:
            print(f"Failed to write AST JSON to {dump_ast_path}: {e}", file=sys.stderr)

    # Optionally render visualization via Graphviz
    if viz_path:
        try:
            write_and_render(ast, viz_path, fmt=viz_format, show_values=viz_values)
            print(f"Wrote AST visualization to {viz_path}.{viz_format}")
        except ExecutableNotFound:
            # fallback: write dot source
            dot = render_ast_dot(ast, show_values=viz_values)
            with open(f"{viz_path}.dot", "w", encoding="utf-8") as fh:
                fh.write(dot.source)
            print(f"Wrote DOT to {viz_path}.dot (Graphviz executables not found)")

    result = evaluate(ast)
    print(f"= {result}")
    return result


def interactive_mode(
    print_tokens: bool = False,
    print_ast: bool = False,
    print_surface: bool = False,
) -> None:
    """Run interactive calculator REPL reading expressions from stdin."""
    print("Interactive Calculator Mode (type 'quit' to exit)")

    while True:
        try:
            text = input("expr: ").strip()
            if text.lower() in ("quit", "exit", "q"):
                break

            if not text:
                continue

            process_expression(
                text,
                print_tokens=print_tokens,
                print_ast=print_ast,
                print_surface=print_surface,
            )

        except CalcError as e:
            print(e, file=sys.stderr)
        except (EOFError, KeyboardInterrupt):
            print()
            break


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Evaluate an integer arithmetic expression given as an argument, "
        "read from one line of stdin, or interactively"
    )
    parser.add_argument(
        "expression",
        nargs="?",
        help="Expression to evaluate (default: read one line from stdin)",
    )
    parser.add_argument(
        "--interactive",
        "-i",
        dest="interactive",
        action="store_true",
        help="Start interactive REPL mode",
    )
    # printing/verbosity options
    parser.add_argument(
        "--print-tokens", dest="print_tokens", action="store_true", help="Print tokens"
    )
    parser.add_argument(
        "--print-ast", dest="print_ast", action="store_true", help="Print the AST"
    )
    parser.add_argument(
        "--print-surface",
        dest="print_surface",
        action="store_true",
        help="Print the fully parenthesized expression",
    )
    parser.add_argument(
        "--dump-ast", dest="dump_ast", help="Path to write the AST as JSON"
    )
    parser.add_argument(
        "--viz-ast",
        dest="viz_ast",
        help="Path (without extension) to write Graphviz visualization of the AST",
    )
    parser.add_argument(
        "--viz-format",
        dest="viz_format",
        default="svg",
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )
    parser.add_argument(
        "--viz-values",
        dest="viz_values",
        action="store_true",
        help="Annotate every node of the visualization with its value",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level for diagnostics written to stderr",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)
    if args.interactive and (args.dump_ast or args.viz_ast or args.viz_values):
        arg_parser.error(
            "--dump-ast, --viz-ast and --viz-values cannot be used with --interactive"
        )

    logging.basicConfig(
        level=getattr(logging, args.log_level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    if args.interactive:
        interactive_mode(
            print_tokens=args.print_tokens,
            print_ast=args.print_ast,
            print_surface=args.print_surface,
        )
        return 0

    if args.expression is not None:
        text = args.expression
    else:
        text = sys.stdin.readline().rstrip("\r\n")

    try:
        process_expression(
            text,
            print_tokens=args.print_tokens,
            print_ast=args.print_ast,
            print_surface=args.print_surface,
            dump_ast_path=args.dump_ast,
            viz_path=args.viz_ast,
            viz_format=args.viz_format,
            viz_values=args.viz_values,
        )
    except CalcError as e:
        logger.debug("evaluation of %r failed", text, exc_info=True)
        print(e, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
