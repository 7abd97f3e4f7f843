"""High-level library API over the JSON tree contract."""

from __future__ import annotations

from typing import Mapping

from html_edit_tree.builder import build_tree
from html_edit_tree.chunks import chunk_tree, parse_edited_chunks
from html_edit_tree.markers import DEFAULT_MAX_CHUNK_SIZE
from html_edit_tree.renderer import render_tree
from html_edit_tree.serialization import TreeInput, dumps_tree, loads_tree
from html_edit_tree.updater import merge_edits


def html_to_json(html: str) -> str:
    """Convert markup into the JSON node tree. Never raises on bad markup."""
    return dumps_tree(build_tree(html))


def json_to_html(tree_json: TreeInput) -> str:
    """Render a JSON node tree back into markup."""
    return render_tree(loads_tree(tree_json, operation="json_to_html"))


def extract_chunks(tree_json: TreeInput, max_chunk_size: int = DEFAULT_MAX_CHUNK_SIZE) -> list[str]:
    """Return the ``##NNN##``-headed chunk strings for the tree's editable text."""
    tree = loads_tree(tree_json, operation="extract_chunks")
    return [chunk.render() for chunk in chunk_tree(tree, max_chunk_size=max_chunk_size)]


def apply_edits(tree_json: TreeInput, edit_map: Mapping[str, str]) -> str:
    """Apply an id -> text edit map and return the updated JSON node tree."""
    tree = loads_tree(tree_json, operation="apply_edits")
    return dumps_tree(merge_edits(tree, edit_map))


def merge_edited_chunks(tree_json: TreeInput, edited_text: str) -> str:
    """Parse concatenated edited chunks and merge them into the tree in one step."""
    return apply_edits(tree_json, parse_edited_chunks(edited_text))


__all__ = [
    "html_to_json",
    "json_to_html",
    "extract_chunks",
    "parse_edited_chunks",
    "apply_edits",
    "merge_edited_chunks",
]
