import json

import pytest

import main
from tokens import TokenType


def test_lex_and_parse_text_helpers():
    tokens = main.lex("f(1)")
    assert [t.type for t in tokens][-1] == TokenType.EOF
    assert len(main.parse_text("f(1) g(2)").body) == 2


def test_demo_program_runs_by_default(capsys):
    assert main.main(["--no-ast", "--json"]) == 0
    out = capsys.readouterr().out
    data = json.loads(out)
    assert data["body"][1]["expression"]["callee"] == "alert"


def test_file_input_with_tokens_and_surface(tmp_path, capsys):
    src = tmp_path / "prog.vs"
    src.write_text("var   a =  1\nshow( a )\n", encoding="utf-8")
    assert main.main(["-f", str(src), "--print-tokens", "--surface"]) == 0
    out = capsys.readouterr().out
    assert "Tokens (9):" in out
    assert "AST:" in out
    assert "VariableDeclaration(a)" in out
    assert "var a = 1\nshow(a)" in out


def test_syntax_error_reported_with_exit_status(tmp_path, capsys):
    src = tmp_path / "bad.vs"
    src.write_text("var = 1", encoding="utf-8")
    assert main.main(["--file", str(src)]) == 1
    out = capsys.readouterr().out
    assert out.startswith("Syntax Error: Expected variable name")


def test_missing_file(tmp_path, capsys):
    assert main.main(["-f", str(tmp_path / "nope.vs")]) == 1
    assert "Failed to read file" in capsys.readouterr().out


def test_process_program_returns_false_on_lexer_error(capsys):
    assert main.process_program("a @", print_ast=False, print_tokens=True) is False
    assert "Unexpected character '@'" in capsys.readouterr().out


def test_viz_falls_back_to_dot_source(tmp_path, monkeypatch, capsys):
    def fail(*args, **kwargs):
        raise RuntimeError("dot not found")

    monkeypatch.setattr(main, "write_and_render", fail)
    out_path = tmp_path / "ast"
    assert main.process_program("f(1)", print_ast=False, viz_path=str(out_path))
    dot_file = tmp_path / "ast.dot"
    assert dot_file.exists()
    assert "CallExpression" in dot_file.read_text(encoding="utf-8")
    assert "Wrote DOT" in capsys.readouterr().out


def test_interactive_mode(monkeypatch, capsys):
    lines = iter(["var x = 1", "", "f(", "quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
    assert main.main(["-i", "--no-ast", "--surface"]) == 0
    out = capsys.readouterr().out
    assert "var x = 1" in out
    assert "Syntax Error" in out
    assert "Goodbye!" in out


def test_interactive_mode_stops_at_end_of_input(monkeypatch, capsys):
    def eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", eof)
    main.interactive_mode(print_ast=False)
    assert "Exiting" in capsys.readouterr().out


def test_deep_nesting_reported_as_syntax_error(capsys):
    text = "f(" * 1000 + ")" * 1000
    assert main.process_program(text, print_ast=False) is False
    assert "nested too deeply" in capsys.readouterr().out
