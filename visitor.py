"""Visitor framework and the passes run over a parsed program.

A program is a flat list of statement nodes. Each pass is a `Visitor` that is
applied to every node in order by `run_pass`; the passes themselves are run
one after another by `run_passes`:

1. `SemanticAnalysisVisitor` rejects print statements without an argument.
2. `OptimizationVisitor` rejects print statements whose argument is empty.
   It relies on the semantic pass having run first, because it reads the
   argument's value unconditionally.
3. `ExecuteVisitor` writes each printed string to the output stream.

The first error raised by a visit aborts the pass and propagates to the
caller, so later passes (and any output) never happen for a rejected program.
"""

from __future__ import annotations
import sys
from typing import Any, Iterable, List, Optional, TextIO
from ast_nodes import ASTNode, PrintNode, StringNode
from errors import EmptyStringArgumentError, MissingArgumentError


class Visitor:
    """Base class for passes; dispatches on the node kind."""

    def visit(self, node: ASTNode) -> Any:
        match node:
            case StringNode():
                return self.visit_string(node)
            case PrintNode():
                return self.visit_print(node)
            case _:
                raise TypeError(f"Cannot visit node type: {type(node).__name__}")

    def visit_string(self, node: StringNode) -> Any:
        raise NotImplementedError

    def visit_print(self, node: PrintNode) -> Any:
        raise NotImplementedError


class SemanticAnalysisVisitor(Visitor):
    def visit_string(self, node: StringNode) -> None:
        pass

    def visit_print(self, node: PrintNode) -> None:
        if node.argument is None:
            raise MissingArgumentError(node.line)


class OptimizationVisitor(Visitor):
    """Rejects empty print arguments. No rewriting is done."""

    def visit_string(self, node: StringNode) -> None:
        pass

    def visit_print(self, node: PrintNode) -> None:
        if node.argument.value == "":
            raise EmptyStringArgumentError(node.line)


class ExecuteVisitor(Visitor):
    def __init__(self, stream: Optional[TextIO] = None):
        # None means whatever sys.stdout is when the node is visited.
        self.stream = stream

    def visit_string(self, node: StringNode) -> None:
        pass

    def visit_print(self, node: PrintNode) -> None:
        out = self.stream if self.stream is not None else sys.stdout
        out.write(node.argument.value + "\n")


def run_pass(nodes: Iterable[ASTNode], visitor: Visitor) -> None:
    """Visit every node in order."""
    for node in nodes:
        node.accept(visitor)


def run_passes(nodes: List[ASTNode], visitors: Iterable[Visitor]) -> None:
    """Run each pass to completion before starting the next."""
    for visitor in visitors:
        run_pass(nodes, visitor)


def default_passes(stream: Optional[TextIO] = None) -> List[Visitor]:
    """The checking passes followed by execution, in the order they must run."""
    return [SemanticAnalysisVisitor(), OptimizationVisitor(), ExecuteVisitor(stream)]


def analyze(nodes: List[ASTNode]) -> None:
    """Run only the checking passes."""
    run_passes(nodes, [SemanticAnalysisVisitor(), OptimizationVisitor()])
