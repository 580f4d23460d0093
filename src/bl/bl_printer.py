"""
Renders BL statement trees back into BL source text.

This module defines the `BLPrinter` class, which walks `Statement` nodes and
writes them out in the canonical BL layout: one construct keyword per line and
four spaces of indentation per nesting level.

Example output:

    IF next-is-enemy THEN
        infect
    ELSE
        WHILE next-is-empty DO
            move
        END WHILE
    END IF

Printing a tree and parsing the text again gives back an equal tree, apart from
source positions.

Raises:
    - `TypeError`: If a construct node does not carry a `Condition`.
    - `NotImplementedError`: If a node kind has no corresponding emitter.
"""

from bl.bl_ast import Condition, Statement


class BLPrinter:
    """Emits BL source from statement trees.

    Attributes:
        lines (list[str]): Accumulated lines of emitted source.
        indent (int): Current indentation level.
    """

    INDENT = "    "

    def __init__(self, indent: int = 0) -> None:
        self.lines: list[str] = []
        self.indent = indent

    def indent_str(self) -> str:
        return self.INDENT * self.indent

    def get_output(self) -> str:
        return "\n".join(self.lines)

    def emit_condition(self, node: Statement) -> str:
        if not isinstance(node.value, Condition):
            raise TypeError(f"Expected Condition in value of {node.kind} statement")
        return node.value.value

    def emit_block(self, block: list[Statement]) -> None:
        self.indent += 1
        for stmt in block:
            self._visit(stmt)
        self.indent -= 1

    def emit_call(self, node: Statement) -> None:
        self.lines.append(f"{self.indent_str()}{node.value}")

    def emit_if(self, node: Statement) -> None:
        self.lines.append(f"{self.indent_str()}IF {self.emit_condition(node)} THEN")
        self.emit_block(node.children)
        self.lines.append(f"{self.indent_str()}END IF")

    def emit_if_else(self, node: Statement) -> None:
        self.lines.append(f"{self.indent_str()}IF {self.emit_condition(node)} THEN")
        self.emit_block(node.children)
        self.lines.append(f"{self.indent_str()}ELSE")
        self.emit_block(node.else_children)
        self.lines.append(f"{self.indent_str()}END IF")

    def emit_while(self, node: Statement) -> None:
        self.lines.append(f"{self.indent_str()}WHILE {self.emit_condition(node)} DO")
        self.emit_block(node.children)
        self.lines.append(f"{self.indent_str()}END WHILE")

    def _visit(self, node: Statement) -> None:
        """
        Dispatches a statement to the matching emit method.

        Raises
        ------
        NotImplementedError
            If no emitter is defined for the node kind.
        """
        meth = getattr(self, f"emit_{node.kind}", None)
        if not meth or node.kind in ("block", "condition"):
            raise NotImplementedError(f"BLPrinter: no emitter for {node.kind}")
        meth(node)

    def print(self, statements: Statement | list[Statement]) -> str:
        """Emit one statement or a block and return the accumulated source."""
        if isinstance(statements, Statement):
            statements = [statements]
        for stmt in statements:
            self._visit(stmt)
        return self.get_output()


def pretty_print(statements: Statement | list[Statement], indent: int = 0) -> str:
    """Render a statement or block as BL source, starting at `indent` levels."""
    return BLPrinter(indent).print(statements)


__all__ = ["BLPrinter", "pretty_print"]
