"""
Main expression driver.

Coordinates lexing, parsing, and evaluation or printing of the tree.
"""

import sys
from typing import Optional

from .errors import EvaluationError, InternalError, ParseError
from .evaluator import evaluate
from .lexer import Lexer
from .parser import Parser
from .parser.ast_nodes import ASTNode, count_nodes
from .printer import dump_tree, to_infix, to_sexpr


MODES = ('eval', 'infix', 'sexpr', 'tree')


class ExpressionCompiler:
    """Front-end driver: source text in, tree or result out."""

    def __init__(self, verbose: bool = False, allow_trailing: bool = False):
        self.verbose = verbose
        self.allow_trailing = allow_trailing  # Accept and ignore tokens after the expression

    def log(self, message: str):
        """Print log message if verbose mode is enabled."""
        if self.verbose:
            print(f"[vcc] {message}", file=sys.stderr)

    def compile_string(self, source: str, filename: str = "<input>") -> ASTNode:
        """
        Lex and parse source text.

        Returns:
            Root node of the expression tree

        Raises:
            ParseError: on malformed input
        """
        self.log("Lexing...")
        tokens = Lexer(source, filename).tokenize()
        self.log(f"  {len(tokens)} tokens")

        self.log("Parsing...")
        parser = Parser(tokens, filename, source, allow_trailing=self.allow_trailing)
        root = parser.parse()
        numbers, binaries = count_nodes(root)
        self.log(f"  {parser.node_count} nodes ({numbers} numbers, {binaries} operators)")

        leftover = parser.remaining()
        if leftover:
            self.log(f"  Ignoring {len(leftover)} trailing tokens: "
                     f"{' '.join(t.text for t in leftover)}")

        return root

    def run_string(self, source: str, filename: str = "<input>", mode: str = 'eval') -> str:
        """Compile source and render it according to mode."""
        if mode not in MODES:
            raise ValueError(f"Unknown mode: {mode} (expected one of {', '.join(MODES)})")

        root = self.compile_string(source, filename)

        if mode == 'eval':
            self.log("Evaluating...")
            value = evaluate(root)
            try:
                return str(value)
            except ValueError:
                raise EvaluationError(
                    f"Result too large to print ({value.bit_length()} bits)", root.line, root.column)
        elif mode == 'infix':
            return to_infix(root)
        elif mode == 'sexpr':
            return to_sexpr(root)
        return dump_tree(root)

    def run(self, source: str, filename: str = "<input>", mode: str = 'eval') -> bool:
        """
        Compile source, print the result to stdout.

        Returns:
            True if it succeeded, False otherwise
        """
        if mode not in MODES:
            print(f"Error: Unknown mode: {mode} (expected one of {', '.join(MODES)})", file=sys.stderr)
            return False

        try:
            print(self.run_string(source, filename, mode))
            return True
        except ParseError as e:
            print(f"Syntax error: {e.pretty()}", file=sys.stderr)
            return False
        except EvaluationError as e:
            print(f"Evaluation error: {e}", file=sys.stderr)
            return False
        except InternalError as e:
            print(f"Internal error: {e}", file=sys.stderr)
            if self.verbose:
                import traceback
                traceback.print_exc()
            return False

    def run_file(self, input_path: str, mode: str = 'eval') -> bool:
        """Read an expression from input_path and run it."""
        try:
            self.log(f"Reading {input_path}...")
            with open(input_path, 'r', encoding='utf-8') as f:
                source = f.read()
        except FileNotFoundError:
            print(f"Error: File not found: {input_path}", file=sys.stderr)
            return False

        return self.run(source, input_path, mode)


def main(argv: Optional[list] = None):
    """Command-line interface for the expression front end."""
    import argparse

    parser = argparse.ArgumentParser(
        description='vcc - Parse integer arithmetic expressions and evaluate or print them'
    )
    parser.add_argument('expression', nargs='?', help='Expression source text')
    parser.add_argument('-f', '--file', help='Read the expression from a file')
    parser.add_argument('-m', '--mode', default='eval', choices=MODES,
                        help='What to output (default: eval)')
    parser.add_argument('--allow-trailing', action='store_true',
                        help='Ignore tokens after a complete expression instead of failing')
    parser.add_argument('--verbose', action='store_true',
                        help='Verbose output')

    args = parser.parse_args(argv)

    if (args.expression is None) == (args.file is None):
        parser.error('give exactly one of EXPRESSION or --file')

    compiler = ExpressionCompiler(verbose=args.verbose, allow_trailing=args.allow_trailing)

    if args.file:
        success = compiler.run_file(args.file, args.mode)
    else:
        success = compiler.run(args.expression, '<command line>', args.mode)

    sys.exit(0 if success else 1)


if __name__ == '__main__':
    main()
