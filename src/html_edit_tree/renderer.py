"""Render a node tree back into markup text."""

from __future__ import annotations

from html_edit_tree.markers import WRAPPER_TAGS
from html_edit_tree.models import Element, Node, Text


def _render_into(node: Node, parts: list[str]) -> None:
    if isinstance(node, Text):
        parts.append(node.content)
        return

    parts.append(f"<{node.tag}")
    for name, value in node.attributes.items():
        parts.append(f' {name}="{value}"')
    parts.append(">")
    for child in node.children:
        _render_into(child, parts)
    parts.append(f"</{node.tag}>")


def render_tree(tree: Node) -> str:
    """
    Render ``tree`` as markup.

    A top-level ``root`` wrapper contributes only its children. A top-level
    ``rawHtml`` fallback is treated the same way instead of being emitted as
    a ``<rawHtml>`` tag, so markup that failed to parse renders back exactly
    as it was given. Below the top level every element keeps its tag.

    Text and attribute values are emitted exactly as stored. The ampersand
    escaping added before parsing is undone by the parser and the JSON codec
    decodes its own escapes, so no escape sequence is rewritten here; text
    that literally contains a backslash-u sequence renders unchanged.
    """
    parts: list[str] = []
    if isinstance(tree, Element) and tree.tag in WRAPPER_TAGS:
        for child in tree.children:
            _render_into(child, parts)
    else:
        _render_into(tree, parts)
    return "".join(parts)
