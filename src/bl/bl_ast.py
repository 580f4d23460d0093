"""
Defines the statement tree produced by the BL parser.

Classes:
    Condition:
        Enumeration of the fixed condition vocabulary. Each member's value is its
        source token, so `Condition("next-is-wall")` is a table lookup.

    Statement:
        A node in the statement tree. Four kinds exist: "call", "if", "if_else"
        and "while". A block is a plain `list[Statement]`.

    StatementDict:
        TypedDict representation for serializing Statement instances to plain
        Python dictionaries, suitable for JSON output or debugging.

Functions:
    assemble_call, assemble_if, assemble_if_else, assemble_while:
        The only supported way to build a Statement from fully parsed parts.

Each Statement tracks:
    kind (str): "call", "if", "if_else" or "while".
    value (str | Condition): The identifier of a call, or the condition of a construct.
    children (list[Statement]): Body block (then-body for "if_else").
    else_children (list[Statement]): Else-body, only used by "if_else".
    line (int): Source line of the leading token.
    col (int): Source column of the leading token.

Example:
    node = assemble_while(Condition.TRUE, [assemble_call("move")])
"""

from enum import Enum
from typing import Any, TypedDict, Union


class Condition(Enum):
    NEXT_IS_EMPTY = "next-is-empty"
    NEXT_IS_NOT_EMPTY = "next-is-not-empty"
    NEXT_IS_WALL = "next-is-wall"
    NEXT_IS_NOT_WALL = "next-is-not-wall"
    NEXT_IS_FRIEND = "next-is-friend"
    NEXT_IS_NOT_FRIEND = "next-is-not-friend"
    NEXT_IS_ENEMY = "next-is-enemy"
    NEXT_IS_NOT_ENEMY = "next-is-not-enemy"
    RANDOM = "random"
    TRUE = "true"


STATEMENT_KINDS = ("call", "if", "if_else", "while")


class StatementDict(TypedDict):
    """
    TypedDict representation of a Statement used for serialization.

    Fields:
        kind (str): The statement kind.
        value (str): The identifier of a call, or the condition member name.
        line (int): Line number of the leading token.
        col (int): Column number of the leading token.
        children (list[StatementDict]): Body block.
        else_children (list[StatementDict]): Else block ("if_else" only).
    """

    kind: str
    value: str
    line: int
    col: int
    children: list["StatementDict"]
    else_children: list["StatementDict"]


class Statement:
    """
    Represents one node of a BL statement tree.

    Statements are normally created through the `assemble_*` functions, which
    check the shape of each kind. Once assembled a node is not modified; it is
    only placed into a parent block.

    Args:
        kind (str): One of "call", "if", "if_else", "while".
        value (Union[str, Condition]): Identifier or condition.
        children (list[Statement], optional): Body block.
        else_children (list[Statement], optional): Else block.
        line (int): Source line number (default is 0).
        col (int): Source column number (default is 0).

    Methods:
        __repr__(): Returns a structured string representation for debugging.
        __eq__(other): Checks structural equality with another Statement.
        to_dict(): Converts the node (and all descendants) into a nested dictionary.
    """

    def __init__(
        self,
        kind: str,
        value: Union[str, Condition],
        children: list["Statement"] | None = None,
        else_children: list["Statement"] | None = None,
        line: int = 0,
        col: int = 0,
    ):
        self.kind = kind
        self.value = value
        self.children: list["Statement"] = list(children or [])
        self.else_children: list["Statement"] = list(else_children or [])
        self.line = line
        self.col = col

    @property
    def condition(self) -> Condition:
        if not isinstance(self.value, Condition):
            raise TypeError(f"{self.kind} statement has no condition")
        return self.value

    def __repr__(self) -> str:
        value = self.value.name if isinstance(self.value, Condition) else self.value
        parts = [self.kind, f"value={value!r}"]
        if self.children:
            preview = ", ".join(repr(c) for c in self.children[:3])
            if len(self.children) > 3:
                preview += ", ..."
            parts.append(f"children=[{preview}]")
        if self.else_children:
            preview = ", ".join(repr(c) for c in self.else_children[:3])
            if len(self.else_children) > 3:
                preview += ", ..."
            parts.append(f"else_children=[{preview}]")
        return f"Statement({', '.join(parts)})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Statement):
            return False
        return (
            self.kind == other.kind
            and self.value == other.value
            and self.line == other.line
            and self.col == other.col
            and self.children == other.children
            and self.else_children == other.else_children
        )

    def to_dict(self) -> StatementDict:
        value = self.value.name if isinstance(self.value, Condition) else self.value
        return {
            "kind": self.kind,
            "value": value,
            "line": self.line,
            "col": self.col,
            "children": [c.to_dict() for c in self.children],
            "else_children": [c.to_dict() for c in self.else_children],
        }


def _check_condition(condition: Any) -> None:
    if not isinstance(condition, Condition):
        raise TypeError(f"Expected Condition, got {condition!r}")


def _check_block(block: Any) -> None:
    if not isinstance(block, list) or not all(isinstance(s, Statement) for s in block):
        raise TypeError(f"Expected list of Statement, got {block!r}")


def assemble_call(identifier: str, line: int = 0, col: int = 0) -> Statement:
    if not isinstance(identifier, str) or not identifier:
        raise TypeError(f"Expected identifier string, got {identifier!r}")
    return Statement("call", identifier, line=line, col=col)


def assemble_if(
    condition: Condition, body: list[Statement], line: int = 0, col: int = 0
) -> Statement:
    _check_condition(condition)
    _check_block(body)
    return Statement("if", condition, body, line=line, col=col)


def assemble_if_else(
    condition: Condition,
    then_body: list[Statement],
    else_body: list[Statement],
    line: int = 0,
    col: int = 0,
) -> Statement:
    _check_condition(condition)
    _check_block(then_body)
    _check_block(else_body)
    return Statement("if_else", condition, then_body, else_body, line=line, col=col)


def assemble_while(
    condition: Condition, body: list[Statement], line: int = 0, col: int = 0
) -> Statement:
    _check_condition(condition)
    _check_block(body)
    return Statement("while", condition, body, line=line, col=col)


__all__ = [
    "STATEMENT_KINDS",
    "Condition",
    "Statement",
    "StatementDict",
    "assemble_call",
    "assemble_if",
    "assemble_if_else",
    "assemble_while",
]
