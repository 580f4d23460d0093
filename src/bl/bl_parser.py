"""
BL Statement Parser

Parses BL token lists into statement trees.

This module implements a recursive-descent parser for the statement layer of BL.
It transforms a sentinel-terminated list of lexer-generated `Token` objects into
`Statement` nodes, recursing into blocks for the bodies of `IF` and `WHILE`.

Supported Constructs
--------------------
- `IF condition THEN block END IF`
- `IF condition THEN block ELSE block END IF`
- `WHILE condition DO block END WHILE`
- `identifier` (a call to an instruction)
- Blocks: zero or more of the above, in order

Parser Behavior
---------------
- The token list is never modified. The parser keeps a cursor (`position`);
  consuming a token advances it.
- Dispatch is by one token of look-ahead on the token type.
- Fail-fast: the first malformed construct raises `BLSyntaxError` and no
  statement is returned.

Entry Points
------------
- `parse()`: Parse exactly one statement.
- `parse_statement()`: Same, as used for nested statements.
- `parse_block()`: Parse the longest run of statements at the cursor.
- `parse_program_block()`: Parse a block that must use up all input.
- `parse_statement_source()` / `parse_block_source()`: Lex and parse a string.

Raises
------
BLSyntaxError
    Raised when an expected keyword, condition or statement is missing, or the
    input ends before a construct is complete.
"""

from __future__ import annotations

from bl.bl_ast import (
    Condition,
    Statement,
    assemble_call,
    assemble_if,
    assemble_if_else,
    assemble_while,
)
from bl.bl_constants import statement_keywords
from bl.bl_lexer import Token, is_condition, tokenize


class BLSyntaxError(SyntaxError):
    """
    Raised on malformed BL input.

    `str(error)` is the bare diagnostic message; the offending token and its
    position are kept alongside for reporting.

    Attributes
    ----------
    message : str
        The diagnostic, e.g. "Expected THEN".
    token : Token
        The token at which the expectation failed.
    line : int
        Line of that token.
    col : int
        Column of that token.
    """

    def __init__(self, message: str, token: Token) -> None:
        super().__init__(message)
        self.message = message
        self.token = token
        self.line = token.line
        self.col = token.col

    def __str__(self) -> str:
        return self.message


class Parser:
    """
    BL Parser Class

    Responsible for transforming a list of lexical tokens into `Statement` trees.

    Attributes
    ----------
    tokens : list[Token]
        The input token list, terminated by the EOF sentinel.
    position : int
        Index of the current (front) token.

    Methods
    -------
    parse() -> Statement
        Parse one statement.
    parse_statement() -> Statement
        Dispatch on the current token to the IF, WHILE or CALL handler.
    parse_block() -> list[Statement]
        Parse zero or more statements.
    parse_program_block() -> list[Statement]
        Parse a block and require the end of input after it.
    parse_if() -> Statement
        Parse an `IF ... END IF` construct, with or without `ELSE`.
    parse_while() -> Statement
        Parse a `WHILE ... END WHILE` construct.
    parse_call() -> Statement
        Parse an identifier as a call.
    parse_condition(tok) -> Condition
        Convert a validated condition token.

    Raises
    ------
    BLSyntaxError
        When an invalid construct or malformed syntax is encountered.
    """

    def __init__(self, tokens: list[Token]) -> None:
        self.tokens: list[Token] = tokens
        self.position: int = 0

    def current(self) -> Token:
        return (
            self.tokens[self.position]
            if self.position < len(self.tokens)
            else Token.end_of_input()
        )

    def advance(self) -> Token:
        """Consume the current token and return it."""
        tok = self.current()
        self.position += 1
        return tok

    def has_tokens(self) -> bool:
        return self.position < len(self.tokens)

    def expect(self, type_: str, message: str) -> Token:
        """Consume the current token if it has type `type_`, else raise `message`."""
        tok = self.current()
        if tok.type != type_:
            raise BLSyntaxError(message, tok)
        return self.advance()

    def starts_statement(self, tok: Token) -> bool:
        return tok.type in statement_keywords or tok.type == "IDENT"

    @staticmethod
    def parse_condition(tok: Token) -> Condition:
        """Convert a token already known to be a condition into a `Condition`."""
        assert tok is not None, "Violation of: tok is not None"
        assert is_condition(tok.value), "Violation of: tok is a condition string"
        return Condition(tok.value)

    def parse(self) -> Statement:
        """Parse exactly one statement starting at the current token."""
        return self.parse_statement()

    def parse_statement(self) -> Statement:
        """Parse one IF, WHILE or CALL statement, chosen by the current token."""
        assert self.has_tokens(), "Violation of: EOF sentinel is a suffix of tokens"

        tok = self.current()
        if tok.type == "IF":
            return self.parse_if()
        if tok.type == "WHILE":
            return self.parse_while()
        if tok.type == "IDENT":
            return self.parse_call()
        raise BLSyntaxError("Expected statement", tok)

    def parse_block(self) -> list[Statement]:
        """Parse the longest run of statements at the cursor.

        Stops without consuming anything at the first token that cannot begin a
        statement; an empty block is a valid result.
        """
        assert self.has_tokens(), "Violation of: EOF sentinel is a suffix of tokens"

        block: list[Statement] = []
        while self.has_tokens() and self.starts_statement(self.current()):
            block.append(self.parse_statement())
        return block

    def parse_program_block(self) -> list[Statement]:
        """Parse a block that must extend to the end of input."""
        block = self.parse_block()
        if self.current().type != "EOF":
            raise BLSyntaxError("Expected statement", self.current())
        return block

    def _parse_body(self) -> list[Statement]:
        if not self.has_tokens():
            raise BLSyntaxError("Unexpected termination", self.current())
        return self.parse_block()

    def parse_if(self) -> Statement:
        """Parse `IF c THEN block END IF` or `IF c THEN block ELSE block END IF`."""
        assert self.current().type == "IF", "Violation of: <IF> is a prefix of tokens"

        if_tok = self.advance()
        cond_tok = self.expect("CONDITION", "Expected condition")
        condition = self.parse_condition(cond_tok)
        self.expect("THEN", "Expected THEN")
        then_body = self._parse_body()

        tok = self.current()
        if tok.type not in ("ELSE", "END"):
            raise BLSyntaxError("Expected ELSE or END IF", tok)

        if tok.type == "ELSE":
            self.advance()
            else_body = self._parse_body()
            self.expect("END", "Expected END IF")
            self.expect("IF", "Expected END IF")
            return assemble_if_else(
                condition, then_body, else_body, line=if_tok.line, col=if_tok.col
            )

        self.advance()
        self.expect("IF", "Expected END IF")
        return assemble_if(condition, then_body, line=if_tok.line, col=if_tok.col)

    def parse_while(self) -> Statement:
        """Parse `WHILE c DO block END WHILE`."""
        assert (
            self.current().type == "WHILE"
        ), "Violation of: <WHILE> is a prefix of tokens"

        while_tok = self.advance()
        cond_tok = self.expect("CONDITION", "Expected condition")
        condition = self.parse_condition(cond_tok)
        self.expect("DO", "Expected DO")
        body = self._parse_body()
        self.expect("END", "Expected WHILE")
        self.expect("WHILE", "Expected WHILE")
        return assemble_while(condition, body, line=while_tok.line, col=while_tok.col)

    def parse_call(self) -> Statement:
        """Parse an identifier as a call statement."""
        assert (
            self.current().type == "IDENT"
        ), "Violation of: identifier is a prefix of tokens"

        tok = self.advance()
        return assemble_call(tok.value, line=tok.line, col=tok.col)


def parse_statement_source(source: str) -> Statement:
    """Lex `source` and parse one statement from the front of it."""
    return Parser(tokenize(source)).parse()


def parse_block_source(source: str) -> list[Statement]:
    """Lex `source` and parse it as a block covering all of the input."""
    return Parser(tokenize(source)).parse_program_block()


__all__ = ["BLSyntaxError", "Parser", "parse_block_source", "parse_statement_source"]
