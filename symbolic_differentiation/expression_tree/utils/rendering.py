"""
Renderers for expression trees: indented text dump, Graphviz DOT and LaTeX files.
"""

import shutil
import subprocess
from pathlib import Path
from typing import Dict, List

from ..core.node import Node
from ..core.operators import TokenType
from ...errors import ExpressionError
from ...logging_system import log_outputs, log_warning
from .sympy_utils import latex_representation

FILL_COLORS: Dict[TokenType, str] = {
    TokenType.CONSTANT_VALUE: '#FFFEC9',
    TokenType.VARIABLE: '#D4F5C9',
    TokenType.OPERATOR: '#C9E7FF',
    TokenType.FUNCTION: '#E8D4FF',
}

LATEX_TEMPLATE = """\\documentclass{{article}}
\\usepackage{{amsmath}}
\\begin{{document}}
\\[
{formula}
\\]
\\end{{document}}
"""


def dump_tree(node: Node) -> str:
    """Depth-first dump, one token description per line, tab-indented by depth."""
    return node.dump()


def to_dot(node: Node, title: str = 'AST') -> str:
    """
    Describe the tree as a Graphviz digraph.

    Nodes are numbered in pre-order. Each node is labelled with its constant
    value, variable name or operator symbol and has one edge per child, in
    child order. When the tree folds to a number, a "= value" box is added.
    """
    lines: List[str] = [f'digraph {title} {{']
    _dot_nodes(node, lines, 0)
    try:
        lines.append(f'"= {node.evaluate():g}" [shape=box];')
    except ExpressionError:
        pass
    lines.append('}')
    return '\n'.join(lines) + '\n'


def _dot_nodes(node: Node, lines: List[str], node_id: int) -> int:
    """Emit node and its subtree starting at node_id; return the next free id."""
    label = node.token.label.replace('"', '\\"')
    color = FILL_COLORS.get(node.token.type, '#FFFFFF')
    lines.append(f'{node_id} [label="{label}", shape=box, style=filled, '
                 f'color="grey", fillcolor="{color}"];')
    next_id = node_id + 1
    for child in node.children:
        lines.append(f'{node_id}->{next_id}')
        next_id = _dot_nodes(child, lines, next_id)
    return next_id


def to_latex_document(node: Node) -> str:
    return LATEX_TEMPLATE.format(formula=latex_representation(node))


def write_outputs(node: Node, stem: str, render_png: bool = False) -> List[Path]:
    """
    Write <stem>.dot and <stem>.tex, and <stem>.png when render_png is set.

    Args:
        node: Root node of the tree
        stem: Output path without extension
        render_png: Run the Graphviz 'dot' executable on the .dot file

    Returns:
        Paths of the files written
    """
    dot_path = Path(f'{stem}.dot')
    tex_path = Path(f'{stem}.tex')
    dot_path.write_text(to_dot(node))
    tex_path.write_text(to_latex_document(node))
    written = [dot_path, tex_path]

    if render_png:
        dot_executable = shutil.which('dot')
        if dot_executable is None:
            log_warning("Graphviz 'dot' not found on PATH, skipping PNG rendering")
        else:
            png_path = Path(f'{stem}.png')
            subprocess.run([dot_executable, '-Tpng', '-o', str(png_path), str(dot_path)], check=True)
            written.append(png_path)

    log_outputs(written)
    return written
