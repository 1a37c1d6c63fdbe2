"""Convert AST nodes into JSON-serializable structures.

This module provides `ast_to_json(node)` which returns a nested structure of
dicts/lists/primitives describing the AST node, and `program_to_json(nodes)`
for a whole parsed program. It encodes the node type, key fields and the
source position of each node.
"""

from typing import Any, Dict, List, Optional
from ast_nodes import *


def ast_to_json(node: Optional[ASTNode]) -> Any:
    if node is None:
        return None

    match node:
        case StringNode(value=v):
            return {
                "node_type": "String",
                "value": v,
                "line": node.line,
                "column": node.column,
            }
        case PrintNode(argument=arg):
            return {
                "node_type": "Print",
                "argument": ast_to_json(arg),
                "line": node.line,
                "column": node.column,
            }
        case _:
            raise TypeError(f"Cannot serialize node type: {type(node).__name__}")


def program_to_json(nodes: List[ASTNode]) -> Dict[str, Any]:
    return {
        "node_type": "Program",
        "statements": [ast_to_json(n) for n in nodes],
    }
