"""Graphviz visualization helpers for parsed programs.

Provides `render_ast_dot(nodes)` which returns a `graphviz.Digraph` object
(not rendered). `write_and_render` writes the rendered file to disk.

Layout: a `program` root node points at one node per statement, in source
order. Each print statement points at its string argument, or at a dashed
`<missing>` node when the argument is absent.
"""

from typing import List
import html
from graphviz import Digraph
from ast_nodes import ASTNode, PrintNode, StringNode


def _label(title: str, detail: str = "") -> str:
    """Return an HTML-like label with an optional smaller second line."""
    body = f"<B>{html.escape(title)}</B>"
    if detail:
        body += f'<BR/><FONT POINT-SIZE="8">{html.escape(detail)}</FONT>'
    return f"<{body}>"


def render_ast_dot(nodes: List[ASTNode]) -> Digraph:
    """Return a graphviz.Digraph for the given statement list.

    The caller may call `dot.source` to inspect the dot text, or call
    `dot.render(filename, format=...)` to write files (requires Graphviz installed).
    """
    dot = Digraph(format="svg")
    dot.attr("graph", rankdir="TB")
    dot.attr("node", shape="box", fontname="Helvetica")

    dot.node("program", label=_label("Program", f"{len(nodes)} statement(s)"))

    for i, node in enumerate(nodes):
        name = f"stmt_{i}"
        match node:
            case PrintNode(argument=arg):
                dot.node(name, label=_label("Print", f"line {node.line}"))
                arg_name = f"{name}_arg"
                if arg is None:
                    dot.node(arg_name, label=_label("<missing>"), style="dashed")
                else:
                    dot.node(
                        arg_name,
                        label=_label("String", repr(arg.value)),
                        shape="ellipse",
                    )
                dot.edge(name, arg_name, label="argument")
            case StringNode(value=v):
                dot.node(name, label=_label("String", repr(v)), shape="ellipse")
            case _:
                raise TypeError(f"Cannot render node type: {type(node).__name__}")
        dot.edge("program", name, label=str(i))

    return dot


def write_and_render(nodes: List[ASTNode], out_path: str, fmt: str = "svg") -> None:
    """Write and render the AST to the given path (without extension).

    Example: write_and_render(nodes, 'out/ast', fmt='png') will create out/ast.png
    (requires Graphviz)."""
    dot = render_ast_dot(nodes)
    dot.format = fmt
    # Note: render will append extension automatically
    dot.render(out_path, cleanup=True)
