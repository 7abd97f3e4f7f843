"""Parse externally edited chunk text back into an edit map."""

from __future__ import annotations

from typing import Iterator

from html_edit_tree.markers import BROKEN_MARKER, MARKER_DELIMITER, MARKER_RE


def iter_edited_runs(text: str) -> Iterator[tuple[str, str]]:
    """
    Yield ``(node_id, content)`` for every node marker in ``text``.

    Content runs from a ``##IIIII##`` marker to the next node marker or the
    end of the text. Chunk headers inside a run are dropped, which joins a
    node whose text was split across two chunks back together. Text before
    the first node marker is ignored.
    """
    text = text.replace(BROKEN_MARKER, MARKER_DELIMITER)
    current_id: str | None = None
    parts: list[str] = []
    position = 0

    for match in MARKER_RE.finditer(text):
        if current_id is not None:
            parts.append(text[position : match.start()])
        position = match.end()

        node_id = match.group("id")
        if node_id is None:
            continue
        if current_id is not None:
            yield current_id, "".join(parts)
        current_id = node_id
        parts = []

    if current_id is not None:
        parts.append(text[position:])
        yield current_id, "".join(parts)


def parse_edited_chunks(text: str) -> dict[str, str]:
    """Build the edit map; when an id occurs more than once the last run wins."""
    return dict(iter_edited_runs(text))
