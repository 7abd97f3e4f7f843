"""Chunk extraction and edited-chunk parsing."""

from html_edit_tree.chunks.edits import iter_edited_runs, parse_edited_chunks
from html_edit_tree.chunks.extractor import chunk_tree

__all__ = ["chunk_tree", "iter_edited_runs", "parse_edited_chunks"]
