"""Public package API for html-edit-tree."""

from html_edit_tree.api import (
    apply_edits,
    extract_chunks,
    html_to_json,
    json_to_html,
    merge_edited_chunks,
    parse_edited_chunks,
)
from html_edit_tree.builder import build_tree, convert_file, convert_html
from html_edit_tree.chunks import chunk_tree
from html_edit_tree.models import Chunk, ConversionResult, Element, Node, Text, iter_nodes
from html_edit_tree.renderer import render_tree
from html_edit_tree.serialization import TreeFormatError, dumps_tree, loads_tree
from html_edit_tree.updater import merge_edits

__all__ = [
    "html_to_json",
    "json_to_html",
    "extract_chunks",
    "parse_edited_chunks",
    "apply_edits",
    "merge_edited_chunks",
    "build_tree",
    "convert_html",
    "convert_file",
    "render_tree",
    "chunk_tree",
    "merge_edits",
    "dumps_tree",
    "loads_tree",
    "TreeFormatError",
    "Element",
    "Text",
    "Node",
    "Chunk",
    "ConversionResult",
    "iter_nodes",
]
