"""Tests for chunk extraction from node trees."""

from __future__ import annotations

import pytest

from html_edit_tree.builder import build_tree
from html_edit_tree.chunks import chunk_tree, parse_edited_chunks
from html_edit_tree.markers import next_chunk_index
from html_edit_tree.models import Chunk

LIST_HTML = "<div><p>A</p><p>B</p></div>"


def test_example_paragraph_yields_one_chunk() -> None:
    chunks = chunk_tree(build_tree("<p>Hello <b>world</b></p>"))

    assert chunks == [Chunk(index=100, text="##00001##Hello ##00003####00002##world")]
    assert chunks[0].render() == "##100####00001##Hello ##00003####00002##world"
    assert str(chunks[0]) == chunks[0].render()


def test_non_editable_containers_are_descended() -> None:
    chunks = chunk_tree(build_tree(LIST_HTML))

    assert [chunk.text for chunk in chunks] == ["##00002####00001##A##00004####00003##B"]


def test_size_limit_flushes_without_dropping_or_reordering() -> None:
    unbounded = chunk_tree(build_tree(LIST_HTML))[0].text
    chunks = chunk_tree(build_tree(LIST_HTML), max_chunk_size=10)

    assert [chunk.index for chunk in chunks] == [100, 101, 102]
    assert [chunk.text for chunk in chunks] == ["##00002####00001##", "A##00004##", "##00003##B"]
    assert "".join(chunk.text for chunk in chunks) == unbounded


def test_every_chunk_but_the_last_reaches_the_limit() -> None:
    html = "".join(f"<p>Paragraph number {n} with some words.</p>" for n in range(50))
    chunks = chunk_tree(build_tree(html), max_chunk_size=120)

    assert len(chunks) > 2
    assert all(len(chunk.text) >= 120 for chunk in chunks[:-1])
    assert chunks[-1].text


def test_node_text_may_land_in_the_chunk_after_its_marker() -> None:
    chunks = chunk_tree(build_tree(f"<p>{'x' * 25}</p>"), max_chunk_size=10)

    assert [chunk.text for chunk in chunks] == ["##00002####00001##", "x" * 25]


def test_trees_without_editable_nodes_yield_no_chunks() -> None:
    assert chunk_tree(build_tree("")) == []
    assert chunk_tree(build_tree('<img src="x.png"/>')) == []


def test_raw_html_fallback_is_not_extracted() -> None:
    assert chunk_tree(build_tree("<div><span></div>")) == []


def test_script_text_is_extracted_like_any_text_node() -> None:
    chunks = chunk_tree(build_tree("<script>run()</script>"))

    assert [chunk.text for chunk in chunks] == ["##00001##run()"]


def test_extraction_counters_restart_per_call() -> None:
    tree = build_tree(LIST_HTML)

    assert chunk_tree(tree, max_chunk_size=10) == chunk_tree(tree, max_chunk_size=10)


def test_wide_chunk_index_renders_all_digits() -> None:
    assert Chunk(index=1000, text="x").render() == "##1000##x"


@pytest.mark.parametrize("size", [0, -5])
def test_non_positive_chunk_size_is_rejected(size: int) -> None:
    with pytest.raises(ValueError):
        chunk_tree(build_tree(LIST_HTML), max_chunk_size=size)


def test_chunk_indexes_skip_the_node_id_width() -> None:
    assert next_chunk_index(100) == 101
    assert next_chunk_index(999) == 1000
    assert next_chunk_index(9999) == 100000
    assert next_chunk_index(100000) == 100001


def test_wide_chunk_headers_never_parse_as_node_markers(monkeypatch) -> None:
    monkeypatch.setattr("html_edit_tree.chunks.extractor.FIRST_CHUNK_INDEX", 9998)
    tree = build_tree(LIST_HTML)
    unbounded = chunk_tree(tree)[0].text

    chunks = chunk_tree(tree, max_chunk_size=10)

    assert [chunk.index for chunk in chunks] == [9998, 9999, 100000]
    assert chunks[2].render() == "##100000####00003##B"
    assert parse_edited_chunks("".join(chunk.render() for chunk in chunks)) == parse_edited_chunks(unbounded)
