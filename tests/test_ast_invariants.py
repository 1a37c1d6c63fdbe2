import pytest
from main import lex, parse_tokens
from ast_nodes import *
from ast_json import ast_to_json, program_to_json
from pretty_printer import PrettyPrinter


def test_print_node_owns_its_string_node():
    nodes = parse_tokens(lex('print("a");print("b");'))
    assert all(isinstance(n, PrintNode) for n in nodes)
    assert nodes[0].argument is not nodes[1].argument
    assert all(isinstance(n.argument, StringNode) for n in nodes)


def test_nodes_record_statement_position():
    nodes = parse_tokens(lex('print("a")\n   print("b")'))
    assert (nodes[0].line, nodes[0].column) == (1, 1)
    assert (nodes[1].line, nodes[1].column) == (2, 4)
    assert nodes[1].argument.column == 10


def test_pretty_printer_outputs_program():
    nodes = parse_tokens(lex('print("a");print()'))
    s = PrettyPrinter.print_program(nodes)
    assert s.splitlines() == [
        "Program",
        "    stmt[0]: Print",
        "      argument: String('a')",
        "    stmt[1]: Print",
        "      argument: <missing>",
    ]


def test_pretty_printer_tokens():
    s = PrettyPrinter.print_tokens(lex('print("a")\n'))
    assert s.splitlines() == ["PRINT print", "LPAREN (", "STRING a", "RPAREN )", "END \\n"]


def test_ast_json_shape():
    nodes = parse_tokens(lex('print("a");print();'))
    assert ast_to_json(nodes[1]) == {
        "node_type": "Print",
        "argument": None,
        "line": 1,
        "column": 12,
    }
    data = program_to_json(nodes)
    assert data["statements"][0]["argument"]["node_type"] == "String"
    assert ast_to_json(None) is None


def test_debug_outputs_reject_foreign_objects():
    with pytest.raises(TypeError):
        PrettyPrinter.print_ast("not a node")
    with pytest.raises(TypeError):
        ast_to_json("not a node")
