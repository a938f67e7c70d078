import pytest

from symbolic_differentiation import dump_tree, latex_representation, to_dot
from symbolic_differentiation.expression_tree import to_latex_document, write_outputs
from symbolic_differentiation.expression_tree.utils import rendering
from symbolic_differentiation.logging_system import LogLevel, configure_logging


def test_dump_format(parse):
    expected = "\n".join([
        "OPERATOR ARITY=2, PRECEDENCE=1, TYPE=ADDITION",
        "\tCONSTANT_VALUE VALUE=2.000000",
        "\tOPERATOR ARITY=2, PRECEDENCE=2, TYPE=MULTIPLICATION",
        "\t\tVARIABLE NAME=x",
        "\t\tFUNCTION TYPE=SINE",
        "\t\t\tVARIABLE NAME=x",
    ])
    assert dump_tree(parse("2 + x*sin(x)")) == expected


def test_dump_unary_operator(parse):
    assert parse("-5").dump() == (
        "OPERATOR ARITY=1, PRECEDENCE=1000, TYPE=ARITHMETIC_NEGATION\n"
        "\tCONSTANT_VALUE VALUE=5.000000")


def test_dot_numbers_nodes_in_preorder(parse):
    dot = to_dot(parse("2+3*4"))
    lines = dot.splitlines()

    assert lines[0] == "digraph AST {"
    assert lines[-1] == "}"
    assert lines[1].startswith('0 [label="+"')
    assert "0->1" in lines
    assert "0->2" in lines
    assert "2->3" in lines
    assert "2->4" in lines
    assert '4 [label="4"' in dot
    assert '"= 14" [shape=box];' in lines


def test_dot_omits_value_for_variables(parse):
    dot = to_dot(parse("x + 1"), title="Derivative")

    assert dot.startswith("digraph Derivative {")
    assert '"= ' not in dot
    assert '[label="x"' in dot


def test_latex(parse):
    assert r"\frac" in latex_representation(parse("x/y"))
    assert r"\sin" in latex_representation(parse("sin(x)"))

    document = to_latex_document(parse("x^2"))
    assert document.startswith(r"\documentclass{article}")
    assert "x^{2}" in document
    assert document.rstrip().endswith(r"\end{document}")


def test_write_outputs(parse, tmp_path):
    stem = tmp_path / "tree"
    written = write_outputs(parse("1 + x"), str(stem))

    assert [path.name for path in written] == ["tree.dot", "tree.tex"]
    assert (tmp_path / "tree.dot").read_text().startswith("digraph AST {")
    assert r"\begin{document}" in (tmp_path / "tree.tex").read_text()


def test_write_outputs_without_graphviz(parse, tmp_path, monkeypatch, caplog):
    monkeypatch.setattr(rendering.shutil, "which", lambda name: None)
    configure_logging(LogLevel.MODERATE)

    written = write_outputs(parse("x"), str(tmp_path / "tree"), render_png=True)

    assert len(written) == 2
    assert not (tmp_path / "tree.png").exists()
    assert "Graphviz 'dot' not found" in caplog.text


def test_write_outputs_runs_graphviz(parse, tmp_path, monkeypatch):
    calls = []
    monkeypatch.setattr(rendering.shutil, "which", lambda name: "/usr/bin/dot")
    monkeypatch.setattr(rendering.subprocess, "run", lambda args, check: calls.append(args))

    written = write_outputs(parse("x"), str(tmp_path / "tree"), render_png=True)

    assert written[-1].name == "tree.png"
    assert calls == [["/usr/bin/dot", "-Tpng", "-o", str(tmp_path / "tree.png"),
                      str(tmp_path / "tree.dot")]]


@pytest.mark.parametrize("text, expected", [
    ("2+3*4", "(2 + (3 * 4))"),
    ("-x", "-x"),
    ("sin(x)", "sin(x)"),
    ("ln(x+1)", "ln(x + 1)"),
    ("2^0.5", "(2 ^ 0.5)"),
])
def test_infix_text(text, expected, parse):
    assert parse(text).to_string() == expected
