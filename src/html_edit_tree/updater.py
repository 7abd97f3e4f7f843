"""Merge an edit map into a node tree, producing a new tree."""

from __future__ import annotations

from typing import Mapping, Optional

from html_edit_tree.models import Element, Node, Text, iter_nodes


def _replacement_text(element: Element, content: str) -> Optional[Text]:
    # Ids below the element are freed by the edit; the smallest keeps post-order.
    descendant_ids = [node.id for node in iter_nodes(element) if node is not element]
    if not descendant_ids:
        return None
    return Text(id=min(descendant_ids), content=content)


def _merge(node: Node, edits: Mapping[str, str], is_top_level: bool) -> Node:
    content = None if is_top_level else edits.get(node.id)

    if isinstance(node, Text):
        return Text(id=node.id, content=content or node.content)

    if content:
        replacement = _replacement_text(node, content)
        if replacement is not None:
            return Element(
                id=node.id,
                tag=node.tag,
                attributes=dict(node.attributes),
                is_editable=node.is_editable,
                children=(replacement,),
            )

    return Element(
        id=node.id,
        tag=node.tag,
        attributes=dict(node.attributes),
        is_editable=node.is_editable,
        children=tuple(_merge(child, edits, False) for child in node.children),
    )


def merge_edits(tree: Node, edits: Mapping[str, str]) -> Node:
    """
    Return a copy of ``tree`` with ``edits`` applied.

    The top-level node is never edited itself. An edited text node gets the
    new payload. An edited element has its children replaced by one text
    node holding the new string. Empty values and unknown ids change nothing.
    ``tree`` is left untouched.
    """
    return _merge(tree, edits, True)
