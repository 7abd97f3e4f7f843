"""Tests for merging edit maps into node trees."""

from __future__ import annotations

from html_edit_tree.builder import build_tree
from html_edit_tree.models import Element, Text, iter_nodes
from html_edit_tree.renderer import render_tree
from html_edit_tree.serialization import dumps_tree
from html_edit_tree.updater import merge_edits

EXAMPLE_HTML = "<p>Hello <b>world</b></p>"


def test_text_edit_changes_only_that_text() -> None:
    tree = build_tree(EXAMPLE_HTML)

    merged = merge_edits(tree, {"00002": "earth"})

    assert render_tree(merged) == "<p>Hello <b>earth</b></p>"
    changed = [
        (old.id, new.id)
        for old, new in zip(iter_nodes(tree), iter_nodes(merged))
        if isinstance(old, Text) and old != new
    ]
    assert changed == [("00002", "00002")]


def test_element_edit_replaces_children_with_one_text() -> None:
    tree = build_tree(EXAMPLE_HTML)

    merged = merge_edits(tree, {"00003": "earth"})

    bold = merged.children[0].children[1]
    assert bold == Element(
        id="00003",
        tag="b",
        attributes={},
        is_editable=True,
        children=(Text(id="00002", content="earth"),),
    )


def test_element_edit_is_not_overridden_by_nested_edit() -> None:
    merged = merge_edits(build_tree(EXAMPLE_HTML), {"00003": "X", "00002": "Y"})

    assert render_tree(merged) == "<p>Hello <b>X</b></p>"


def test_container_edit_reuses_smallest_descendant_id() -> None:
    merged = merge_edits(build_tree(EXAMPLE_HTML), {"00004": "Replaced"})

    paragraph = merged.children[0]
    assert paragraph.children == (Text(id="00001", content="Replaced"),)
    assert render_tree(merged) == "<p>Replaced</p>"
    ids = [node.id for node in iter_nodes(merged)]
    assert len(ids) == len(set(ids))


def test_top_level_node_is_never_edited() -> None:
    tree = build_tree(EXAMPLE_HTML)

    assert merge_edits(tree, {"00005": "gone"}) == tree


def test_empty_replacement_means_no_change() -> None:
    tree = build_tree(EXAMPLE_HTML)

    assert merge_edits(tree, {"00002": "", "00003": "", "00001": ""}) == tree


def test_unknown_ids_are_ignored() -> None:
    tree = build_tree(EXAMPLE_HTML)

    assert merge_edits(tree, {"99999": "x", "abc": "y"}) == tree


def test_element_without_descendants_is_left_unchanged() -> None:
    tree = build_tree("<p>a<br/>b</p>")

    assert merge_edits(tree, {"00002": "line break"}) == tree


def test_input_tree_is_not_mutated() -> None:
    tree = build_tree('<div class="c"><p>One</p><p>Two</p></div>')
    before = dumps_tree(tree)

    merged = merge_edits(tree, {"00001": "Uno", "00004": "Dos"})

    assert dumps_tree(tree) == before
    assert merged is not tree
    assert merged.children[0].attributes is not tree.children[0].attributes
    assert render_tree(merged) == '<div class="c"><p>Uno</p><p>Dos</p></div>'


def test_edits_reach_deeply_nested_nodes() -> None:
    tree = build_tree("<div><section><article><p>deep</p></article></section></div>")

    merged = merge_edits(tree, {"00001": "deeper"})

    assert render_tree(merged) == "<div><section><article><p>deeper</p></article></section></div>"
