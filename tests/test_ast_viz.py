"""Tests for ast_viz: ensure a Digraph is produced with one node per AST node."""

from graphviz import Digraph

from ast_viz import render_ast_dot, write_and_render
from tests.utils import parse_text


def test_ast_viz_dot_source(demo_source):
    dot = render_ast_dot(parse_text(demo_source))
    src = dot.source
    assert "Program" in src
    assert "VariableDeclaration" in src
    assert "CallExpression" in src
    assert "n0 -> n1" in src
    assert "init" in src
    assert "arg[1]" in src


def test_ast_viz_node_count():
    dot = render_ast_dot(parse_text("f(g(1), 2)"))
    # Program, ExpressionStatement, f, g, 1, 2
    node_lines = [
        line for line in dot.body if "label=" in line and "->" not in line
    ]
    assert len(node_lines) == 6


def test_ast_viz_empty_program():
    dot = render_ast_dot(parse_text(""))
    assert "n0" in dot.source
    assert "->" not in dot.source


def test_write_and_render_sets_format_and_cleans_up(monkeypatch, tmp_path):
    calls = []

    def fake_render(self, filename, **kwargs):
        calls.append((self.format, filename, kwargs))
        return f"{filename}.{self.format}"

    monkeypatch.setattr(Digraph, "render", fake_render)
    out_path = str(tmp_path / "ast")
    result = write_and_render(parse_text("f(1)"), out_path, fmt="png")

    assert result == f"{out_path}.png"
    assert calls == [("png", out_path, {"cleanup": True})]
