"""
Shared vocabulary for the BL language.

Exports:
    token_hashmap: Maps each reserved keyword to its canonical token type.
    statement_keywords: Keywords that may begin a statement.
    condition_tokens: The fixed set of condition words, in declaration order.
    END_OF_INPUT: Text of the sentinel token that terminates every token list.
"""

END_OF_INPUT = "### END OF INPUT ###"

# Keyword -> token type. Keywords are case-sensitive.
token_hashmap: dict[str, str] = {
    "IF": "IF",
    "THEN": "THEN",
    "ELSE": "ELSE",
    "END": "END",
    "WHILE": "WHILE",
    "DO": "DO",
    # Reserved for whole-program syntax
    "PROGRAM": "PROGRAM",
    "IS": "IS",
    "BEGIN": "BEGIN",
    "INSTRUCTION": "INSTRUCTION",
}

statement_keywords: frozenset[str] = frozenset({"IF", "WHILE"})

condition_tokens: tuple[str, ...] = (
    "next-is-empty",
    "next-is-not-empty",
    "next-is-wall",
    "next-is-not-wall",
    "next-is-friend",
    "next-is-not-friend",
    "next-is-enemy",
    "next-is-not-enemy",
    "random",
    "true",
)

__all__ = ["END_OF_INPUT", "condition_tokens", "statement_keywords", "token_hashmap"]
