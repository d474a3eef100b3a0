from __future__ import annotations

"""
Python module generator.

Renders the nested mapping as an indented dict literal and wraps it with
base64 accessors and a namespace object bundling them.
"""

from string import Template
from typing import List

from embedfiles.core.generators.base import GENERATED_NOTICE, CodeGenerator
from embedfiles.domain.tree_models import Tree

INDENT = "    "

_MODULE_TEMPLATE = Template('''\
"""$notice"""

import base64
from types import SimpleNamespace

files = $files


def get(value):
    """Decode an embedded entry to its raw bytes."""
    return base64.b64decode(value)


def getString(value, encoding="utf-8"):
    """Decode an embedded entry to text."""
    return get(value).decode(encoding)


get_string = getString

embedded = SimpleNamespace(files=files, get=get, getString=getString)

__all__ = ["files", "get", "getString", "get_string", "embedded"]
''')


class PythonGenerator(CodeGenerator):
    """Emit a Python module exposing 'files', 'get', 'getString' and 'embedded'."""

    language = "py"
    extension = "py"
    display_name = "Python"
    experimental = True

    def generate(self, tree: Tree) -> str:
        return _MODULE_TEMPLATE.substitute(
            notice=GENERATED_NOTICE,
            files=render_dict_literal(tree),
        )


def render_dict_literal(node: Tree, depth: int = 0) -> str:
    """
    Render a Tree as a Python dict literal, one entry per line, keys sorted.

    Keys and leaves are emitted with repr(), which escapes every character
    that is not printable so the result always parses back to the same data.
    """
    if not node:
        return "{}"

    pad = INDENT * (depth + 1)
    lines: List[str] = ["{"]
    for key in sorted(node):
        value = node[key]
        if isinstance(value, dict):
            rendered = render_dict_literal(value, depth + 1)
        else:
            rendered = repr(value)
        lines.append(f"{pad}{key!r}: {rendered},")
    lines.append(INDENT * depth + "}")
    return "\n".join(lines)
