from typing import List, Optional, TextIO

from htmlval.dom.core import Node, NodeKind
from htmlval_shell.core.views.console_view import emit

OUTLINE_HEADER = "Parsed HTML document:"
INDENT = "  "


def _describe(node: Node) -> Optional[str]:
    """One outline line for a node, or None for whitespace-only text."""
    if node.kind == NodeKind.DOCUMENT:
        return "Document"
    if node.kind == NodeKind.DOCTYPE:
        return f"Doctype: {node.name}"
    if node.kind == NodeKind.ELEMENT:
        attrs = " ".join(f'{name}="{value}"' for name, value in node.attrs)
        return f"Element: <{node.name}{' ' + attrs if attrs else ''}>"
    if node.kind == NodeKind.TEXT:
        text = node.content.strip()
        return f'Text: "{text}"' if text else None
    if node.kind == NodeKind.COMMENT:
        return f"Comment: <!--{node.content}-->"
    return "Other node type"


def render_outline(root: Node) -> List[str]:
    """Lists every node in document order, indented by depth."""
    lines: List[str] = []

    def walk(node: Node, depth: int) -> None:
        line = _describe(node)
        if line is not None:
            lines.append(f"{INDENT * depth}{line}")
        for child in node.children:
            walk(child, depth + 1)

    walk(root, 0)
    return lines


def print_outline(root: Node, stream: Optional[TextIO] = None, color: bool = True) -> None:
    emit([("class:heading", OUTLINE_HEADER)], stream, color)
    for line in render_outline(root):
        label, sep, rest = line.partition(":")
        if sep:
            emit([("class:label", label + sep), ("", rest)], stream, color)
        else:
            emit([("class:label", line)], stream, color)
