import pytest
from hypothesis import given
from hypothesis import strategies as st

from bl.bl_constants import END_OF_INPUT, condition_tokens, token_hashmap
from bl.bl_lexer import (
    CharacterStream,
    Lexer,
    Token,
    is_condition,
    is_identifier,
    is_keyword,
    tokenize,
)


def types(source: str) -> list[str]:
    return [tok.type for tok in tokenize(source)]


def test_if_statement_token_types() -> None:
    assert types("IF next-is-empty THEN move END IF") == [
        "IF",
        "CONDITION",
        "THEN",
        "IDENT",
        "END",
        "IF",
        "EOF",
    ]


def test_while_statement_token_values() -> None:
    values = [tok.value for tok in tokenize("WHILE true DO turnleft END WHILE")]
    assert values == ["WHILE", "true", "DO", "turnleft", "END", "WHILE", END_OF_INPUT]


def test_empty_source_is_only_sentinel() -> None:
    assert tokenize("") == [Token("EOF", END_OF_INPUT, 1, 1)]


def test_whitespace_only_source_is_only_sentinel() -> None:
    assert types("  \n\t  \n") == ["EOF"]


def test_exactly_one_sentinel() -> None:
    tokens = tokenize("move move move")
    assert [t.type for t in tokens].count("EOF") == 1
    assert tokens[-1].type == "EOF"


def test_all_reserved_words_are_keywords() -> None:
    source = " ".join(token_hashmap)
    assert types(source)[:-1] == list(token_hashmap.values())


def test_reserved_token_disambiguation() -> None:
    tok = tokenize("if")[0]
    assert tok.type == "IDENT"
    assert tok.value == "if"


@pytest.mark.parametrize("word", condition_tokens)  # type: ignore[misc]
def test_condition_words(word: str) -> None:
    tok = tokenize(word)[0]
    assert tok.type == "CONDITION"
    assert tok.value == word


def test_uppercase_condition_is_identifier() -> None:
    assert tokenize("NEXT-IS-EMPTY")[0].type == "IDENT"


def test_word_starting_with_digit_is_error() -> None:
    tok = tokenize("3abc")[0]
    assert tok.type == "ERROR"
    assert tok.value == "3abc"


def test_punctuation_is_single_char_error() -> None:
    tokens = tokenize("move;;")
    assert tokens[0] == Token("IDENT", "move", 1, 1)
    assert tokens[1] == Token("ERROR", ";", 1, 5)
    assert tokens[2] == Token("ERROR", ";", 1, 6)


def test_non_ascii_letter_is_error() -> None:
    tokens = tokenize("café")
    assert tokens[0] == Token("IDENT", "caf", 1, 1)
    assert tokens[1].type == "ERROR"
    assert tokens[1].value == "é"


def test_line_and_column_tracking() -> None:
    tokens = tokenize("IF true THEN\n    move\nEND IF")
    move = tokens[3]
    assert (move.value, move.line, move.col) == ("move", 2, 5)
    end = tokens[4]
    assert (end.line, end.col) == (3, 1)


def test_skip_whitespace_and_comments() -> None:
    tokens = tokenize("   \n  # a comment with IF and WHILE\nmove # trailing")
    assert tokens[0] == Token("IDENT", "move", 3, 1)
    assert tokens[1].type == "EOF"


def test_sentinel_position_after_last_token() -> None:
    eof = tokenize("move")[-1]
    assert (eof.line, eof.col) == (1, 5)


def test_lexer_keeps_returning_sentinel() -> None:
    lexer = Lexer(CharacterStream(""))
    assert lexer.next_token().type == "EOF"
    assert lexer.next_token().type == "EOF"


def test_character_stream_read_past_end() -> None:
    stream = CharacterStream("a")
    assert stream.next() == "a"
    assert stream.peek() == ""
    with pytest.raises(EOFError):
        stream.next()


def test_from_word_classification() -> None:
    assert Token.from_word("DO").type == "DO"
    assert Token.from_word("random").type == "CONDITION"
    assert Token.from_word("turnright").type == "IDENT"
    assert Token.from_word("-x").type == "ERROR"


def test_token_hash_and_repr() -> None:
    tok = Token("IDENT", "move", 1, 1)
    assert repr(tok) == "Token(IDENT, move)"
    assert len({tok, Token("IDENT", "move", 1, 1)}) == 1
    assert tok != "move"


@pytest.mark.parametrize(  # type: ignore[misc]
    "word,expected",
    [
        ("move", True),
        ("turn-left", True),
        ("a1-b2", True),
        ("X", True),
        ("if", True),
        ("IF", False),
        ("END", False),
        ("true", False),
        ("next-is-wall", False),
        ("-move", False),
        ("1move", False),
        ("mo ve", False),
        ("", False),
    ],
)
def test_is_identifier(word: str, expected: bool) -> None:
    assert is_identifier(word) is expected


def test_is_condition_and_is_keyword() -> None:
    assert is_condition("random")
    assert not is_condition("RANDOM")
    assert not is_condition("move")
    assert is_keyword("WHILE")
    assert not is_keyword("while")


@given(st.from_regex(r"[a-z][a-z0-9-]{0,12}", fullmatch=True))  # type: ignore[misc]
def test_lowercase_words_are_identifiers_or_conditions(word: str) -> None:
    tok = tokenize(word)[0]
    expected = "CONDITION" if word in condition_tokens else "IDENT"
    assert tok.type == expected
    assert tok.value == word
