import pytest

from pretty_printer import PrettyPrinter
from tests.utils import parse_text


def test_print_ast_demo_program(demo_source):
    out = PrettyPrinter.print_ast(parse_text(demo_source))
    assert out.splitlines() == [
        "Program",
        "    stmt[0]: VariableDeclaration(abc)",
        "      init: StringLiteral('abc')",
        "    stmt[1]: ExpressionStatement",
        "      CallExpression(alert)",
        "          arg[0]: Identifier(abc)",
        "          arg[1]: NumericLiteral(246)",
    ]


def test_print_surface_statements():
    ast = parse_text('var   x=f( g(1),"a b" )   h()')
    assert PrettyPrinter.print_surface(ast) == 'var x = f(g(1), "a b")\nh()'
    assert PrettyPrinter.print_surface(ast.body[0].init.arguments[1]) == '"a b"'


def test_surface_output_parses_back_to_equal_tree(demo_source):
    src = demo_source + 'var n = 0  print(n, "s", k(), m(z(1)))'
    ast = parse_text(src)
    assert parse_text(PrettyPrinter.print_surface(ast)) == ast


def test_print_surface_of_none_is_empty():
    assert PrettyPrinter.print_surface(None) == ""


@pytest.mark.parametrize("printer", [PrettyPrinter.print_ast, PrettyPrinter.print_surface])
def test_printers_reject_non_nodes(printer):
    with pytest.raises(TypeError):
        printer("x")
