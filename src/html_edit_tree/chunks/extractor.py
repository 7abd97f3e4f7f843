"""Serialize the editable text of a node tree into size-bounded chunks."""

from __future__ import annotations

from html_edit_tree.markers import (
    DEFAULT_MAX_CHUNK_SIZE,
    FIRST_CHUNK_INDEX,
    RAW_HTML_TAG,
    next_chunk_index,
    node_marker,
)
from html_edit_tree.models import Chunk, Element, Node, Text


class _ChunkWriter:
    """Accumulating buffer and chunk counter for a single extraction call."""

    def __init__(self, max_chunk_size: int):
        self.max_chunk_size = max_chunk_size
        self.chunks: list[Chunk] = []
        self._parts: list[str] = []
        self._length = 0
        self._index = FIRST_CHUNK_INDEX

    def append(self, text: str) -> None:
        self._parts.append(text)
        self._length += len(text)
        if self._length >= self.max_chunk_size:
            self.flush()

    def flush(self) -> None:
        if not self._parts:
            return
        self.chunks.append(Chunk(index=self._index, text="".join(self._parts)))
        self._parts = []
        self._length = 0
        self._index = next_chunk_index(self._index)

    def visit(self, node: Node) -> None:
        if isinstance(node, Text):
            self.append(node_marker(node.id))
            self.append(node.content)
            return

        if node.is_editable:
            self.append(node_marker(node.id))
        # Non-editable elements still expose their descendants.
        for child in node.children:
            self.visit(child)


def chunk_tree(tree: Node, max_chunk_size: int = DEFAULT_MAX_CHUNK_SIZE) -> list[Chunk]:
    """
    Walk ``tree`` depth-first and cut its editable text into chunks.

    Every editable node contributes its ``##id##`` marker, and text nodes
    their payload. A chunk is flushed as soon as the buffer reaches
    ``max_chunk_size`` characters, which may split a text payload across two
    chunks. Concatenating the chunk texts in order always gives back the
    unbounded stream.

    A top-level ``rawHtml`` passthrough has no editable content.
    """
    if max_chunk_size < 1:
        raise ValueError(f"max_chunk_size must be positive, got {max_chunk_size}")

    writer = _ChunkWriter(max_chunk_size)
    if not (isinstance(tree, Element) and tree.tag == RAW_HTML_TAG):
        writer.visit(tree)
    writer.flush()
    return writer.chunks
