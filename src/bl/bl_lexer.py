"""
Lexical analyzer for the BL language.

This module turns raw BL source text into the token list consumed by the parser:

Classes:
    CharacterStream: Stream abstraction for reading characters with line/column tracking.
    Token: Represents a single token with type, value, and source location.
    Lexer: Converts a CharacterStream into a sequence of tokens.

Functions:
    tokenize(source): Lex a whole source string into a sentinel-terminated token list.
    is_identifier(word), is_condition(word), is_keyword(word): Token classification predicates.

Features:
    - Skips whitespace and single-line comments (`#`)
    - Words are maximal runs of letters, digits and hyphens, classified as
      keywords, conditions, identifiers, or errors
    - Any other character becomes a single-character ERROR token
    - Every token list ends with exactly one EOF sentinel

Example:
    >>> tokenize("WHILE true DO move END WHILE")[:3]
    [Token(WHILE, WHILE), Token(CONDITION, true), Token(DO, DO)]

Exports:
    - CharacterStream
    - Token
    - Lexer
    - tokenize
    - is_identifier
    - is_condition
    - is_keyword
"""

import re
from typing import Any

from bl.bl_constants import END_OF_INPUT, condition_tokens, token_hashmap

_IDENTIFIER_RE = re.compile(r"[A-Za-z][A-Za-z0-9-]*")
_CONDITIONS = frozenset(condition_tokens)


def is_keyword(word: str) -> bool:
    """Return True if `word` is a reserved BL keyword (case-sensitive)."""
    return word in token_hashmap


def is_condition(word: str) -> bool:
    """Return True if `word` is one of the fixed condition words."""
    return word in _CONDITIONS


def is_identifier(word: str) -> bool:
    """Return True if `word` is a legal identifier.

    Identifiers start with a letter, continue with letters, digits or hyphens,
    and are neither keywords nor condition words.
    """
    return (
        _IDENTIFIER_RE.fullmatch(word) is not None
        and not is_keyword(word)
        and not is_condition(word)
    )


def _is_word_char(ch: str) -> bool:
    return ch != "" and ch.isascii() and (ch.isalnum() or ch == "-")


class CharacterStream:
    """
    A utility for reading characters from a string source with line and column tracking.

    Attributes:
        source (str): The input source string.
        position (int): Current index in the source.
        line (int): Current line number (1-indexed).
        column (int): Current column number (1-indexed).
    """

    def __init__(self, source: str, position: int = 0, line: int = 1, column: int = 1):
        self.source = source
        self.position = position
        self.line = line
        self.column = column

    def next(self) -> str:
        """
        Consumes and returns the next character in the stream.

        Raises:
            EOFError: If reading past the end of the source.
        """
        if self.position >= len(self.source):
            raise EOFError(
                f"Attempted to read past end of source at position=<{self.position}>, line=<{self.line}>"
            )
        char = self.source[self.position]
        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.position += 1
        return char

    def peek(self, offset: int = 0) -> str:
        """Returns the character at `offset` without advancing, or "" if out of bounds."""
        index = self.position + offset
        if index < 0 or index >= len(self.source):
            return ""
        return self.source[index]

    def end_of_file(self) -> bool:
        return self.position >= len(self.source)


class Token:
    """Represents a single lexical token in the BL language.

    Attributes:
        type (str): The token tag: a keyword ('IF', 'END', ...), 'IDENT',
            'CONDITION', 'ERROR', or 'EOF' for the end-of-input sentinel.
        value (str): The raw text of the token.
        line (int): The 1-based line number where the token appears.
        col (int): The 1-based column number where the token starts.
    """

    def __init__(self, type_: str, value: str, line: int = 0, col: int = 0):
        self.type = type_
        self.value = value
        self.line = line
        self.col = col

    def __repr__(self) -> str:
        return f"Token({self.type}, {self.value})"

    def __eq__(self, other: Any) -> bool:
        return (
            isinstance(other, Token)
            and self.type == other.type
            and self.value == other.value
            and self.line == other.line
            and self.col == other.col
        )

    def __hash__(self) -> int:
        return hash((self.type, self.value, self.line, self.col))

    @classmethod
    def from_word(cls, word: str, line: int = 0, col: int = 0) -> "Token":
        """Classifies a single word and wraps it in a Token.

        Args:
            word (str): The raw token text.
            line (int, optional): Source line (default is 0).
            col (int, optional): Source column (default is 0).

        Returns:
            Token: A keyword, CONDITION, IDENT, or ERROR token.
        """
        if is_keyword(word):
            return cls(token_hashmap[word], word, line, col)
        if is_condition(word):
            return cls("CONDITION", word, line, col)
        if is_identifier(word):
            return cls("IDENT", word, line, col)
        return cls("ERROR", word, line, col)

    @classmethod
    def end_of_input(cls, line: int = 0, col: int = 0) -> "Token":
        return cls("EOF", END_OF_INPUT, line, col)


class Lexer:
    """Lexical analyzer for the BL language.

    Attributes:
        stream (CharacterStream): The source stream to tokenize.
    """

    def __init__(self, stream: CharacterStream) -> None:
        self.stream = stream

    def peek(self) -> str:
        return self.stream.peek()

    def advance(self) -> str:
        return self.stream.next()

    def skip_whitespace(self) -> None:
        """Skips all whitespace and comments in the stream."""
        while not self.stream.end_of_file():
            if self.peek().isspace():
                self.advance()
            elif self.peek() == "#":
                self.skip_comment()
            else:
                break

    def skip_comment(self) -> None:
        """Advances through the stream until the end of a comment line."""
        while not self.stream.end_of_file() and self.peek() != "\n":
            self.advance()

    def next_token(self) -> Token:
        """Consumes and returns the next Token from the stream.

        Returns:
            Token: The next token, or the EOF sentinel once the source is exhausted.
        """
        self.skip_whitespace()

        if self.stream.end_of_file():
            return Token.end_of_input(self.stream.line, self.stream.column)

        line, col = self.stream.line, self.stream.column

        # 1. Word: keyword, condition, identifier, or malformed word
        if _is_word_char(self.peek()):
            word = ""
            while _is_word_char(self.peek()):
                word += self.advance()
            return Token.from_word(word, line, col)

        # 2. Anything else stands alone
        return Token("ERROR", self.advance(), line, col)


def tokenize(source: str) -> list[Token]:
    """Lex `source` into a token list that ends with exactly one EOF sentinel."""
    lexer = Lexer(CharacterStream(source))
    tokens = []
    while True:
        tok = lexer.next_token()
        tokens.append(tok)
        if tok.type == "EOF":
            break
    return tokens


__all__ = [
    "CharacterStream",
    "Lexer",
    "Token",
    "is_condition",
    "is_identifier",
    "is_keyword",
    "tokenize",
]
