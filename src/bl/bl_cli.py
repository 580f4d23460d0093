"""
BL CLI Entrypoint.

This module provides the command-line interface for parsing BL statements.

Features:
    - Read source from `.bl` files or inline strings.
    - Lex and parse one statement, or a whole block with `--block`.
    - Print the parsed tree as pretty-printed BL or as JSON.
    - Output to console or file.
    - Echo the token stream to stderr with `--tokens`.

Example usage:
    bl program.bl
    bl -s "WHILE true DO move END WHILE"
    bl body.bl --block --json -o body.json

Functions:
    run_bl(source: str, is_string: bool = False, block: bool = False, as_json: bool = False,
           out: Optional[str] = None, show_tokens: bool = False) -> str:
        Executes the BL pipeline (lex → parse → print/write).

    main() -> None:
        Parses CLI arguments, runs the pipeline, and turns syntax errors into exit status 1.
"""

import argparse
import json
import sys

from bl.bl_lexer import tokenize
from bl.bl_parser import BLSyntaxError, Parser
from bl.bl_printer import pretty_print


def run_bl(
    source: str,
    is_string: bool = False,
    block: bool = False,
    as_json: bool = False,
    out: str | None = None,
    show_tokens: bool = False,
) -> str:
    """
    Run the BL toolchain: lex, parse, and render the result.

    Args:
        source (str): The BL source code or path to a `.bl` file.
        is_string (bool): If True, treats `source` as raw code instead of a file path.
        block (bool): If True, parses a block covering the whole input instead of one statement.
        as_json (bool): If True, renders the tree as JSON instead of BL source.
        out (str | None): Optional path to write the output to. If None, prints to stdout.
        show_tokens (bool): If True, prints the token stream to stderr before parsing.

    Returns:
        str: The rendered output.

    Raises:
        ValueError: If `is_string` is False and the source does not end with '.bl'.
        BLSyntaxError: If the input is not well-formed BL.
    """
    if not is_string and not source.endswith(".bl"):
        raise ValueError("Only .bl files are supported.")
    # 1. Read source
    if not is_string:
        with open(source, encoding="utf-8") as f:
            source = f.read()

    # 2. Lexing
    tokens = tokenize(source)
    if show_tokens:
        for tok in tokens:
            print(f"{tok.line}:{tok.col}\t{tok.type}\t{tok.value}", file=sys.stderr)

    # 3. Parsing
    parser = Parser(tokens)
    statements = parser.parse_program_block() if block else [parser.parse()]

    # 4. Rendering
    if as_json:
        payload = [s.to_dict() for s in statements] if block else statements[0].to_dict()
        output = json.dumps(payload, indent=2)
    else:
        output = pretty_print(statements)

    # 5. Output result
    if out:
        with open(out, "w", encoding="utf-8") as f:
            f.write(output + "\n")
    else:
        print(output)
    return output


def main() -> None:
    """
    Entry point for the BL CLI.

    Supported flags:
        - `-s`, `--string`: Interpret source as a raw string instead of a file path.
        - `-b`, `--block`: Parse a block of statements instead of a single statement.
        - `-j`, `--json`: Print the parsed tree as JSON.
        - `-o`, `--out`: Write output to a file.
        - `--tokens`: Echo the token stream to stderr.
    """
    parser = argparse.ArgumentParser(prog="bl")
    parser.add_argument("source", help="Filename or raw source (with -s)")
    parser.add_argument(
        "-s", "--string", action="store_true", help="Interpret source as literal string"
    )
    parser.add_argument(
        "-b",
        "--block",
        action="store_true",
        help="Parse a block of statements instead of one statement",
    )
    parser.add_argument(
        "-j", "--json", dest="as_json", action="store_true", help="Print the tree as JSON"
    )
    parser.add_argument("-o", "--out", metavar="OUTFILE", help="Output to file")
    parser.add_argument(
        "--tokens", action="store_true", help="Print the token stream to stderr"
    )

    args = parser.parse_args()

    try:
        run_bl(
            source=args.source,
            is_string=args.string,
            block=args.block,
            as_json=args.as_json,
            out=args.out,
            show_tokens=args.tokens,
        )
    except BLSyntaxError as e:
        print(f"Error: {e} (line {e.line}, col {e.col})", file=sys.stderr)
        sys.exit(1)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__" and not any("pytest" in arg for arg in sys.argv):
    main()
