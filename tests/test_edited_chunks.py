"""Tests for parsing externally edited chunk text."""

from __future__ import annotations

from html_edit_tree.chunks import iter_edited_runs, parse_edited_chunks


def test_example_chunk_parses_every_marker() -> None:
    edits = parse_edited_chunks("##100####00001##Hello ##00003####00002##world")

    assert edits == {"00001": "Hello ", "00003": "", "00002": "world"}


def test_space_inside_marker_is_repaired() -> None:
    assert parse_edited_chunks("##100##" + "# #00001##Bonjour") == {"00001": "Bonjour"}


def test_last_occurrence_of_an_id_wins() -> None:
    assert parse_edited_chunks("##00001##first##00001##second") == {"00001": "second"}
    assert list(iter_edited_runs("##00001##first##00001##second")) == [
        ("00001", "first"),
        ("00001", "second"),
    ]


def test_text_before_first_marker_is_ignored() -> None:
    edited = "Reviewer notes: all good.\n##100####00001##Hi"

    assert parse_edited_chunks(edited) == {"00001": "Hi"}


def test_content_spans_lines() -> None:
    assert parse_edited_chunks("##00001##line one\nline two\n") == {"00001": "line one\nline two\n"}


def test_chunk_headers_rejoin_split_content() -> None:
    edited = "##100####00001##Hel" + "##101##lo##00002##x"

    assert parse_edited_chunks(edited) == {"00001": "Hello", "00002": "x"}


def test_markers_with_other_digit_counts_are_not_node_ids() -> None:
    assert parse_edited_chunks("##000001##text") == {}
    assert parse_edited_chunks("##0001##x##00002##z") == {"00002": "z"}
    assert parse_edited_chunks("##00001##a##12##b") == {"00001": "a##12##b"}


def test_digit_only_content_is_not_mistaken_for_a_header() -> None:
    assert parse_edited_chunks("##00001##2024##00002##x") == {"00001": "2024", "00002": "x"}


def test_hash_at_end_of_content_is_kept() -> None:
    assert parse_edited_chunks("##00001##C###00002##x") == {"00001": "C#", "00002": "x"}


def test_text_without_markers_yields_empty_map() -> None:
    assert parse_edited_chunks("") == {}
    assert parse_edited_chunks("no markers here") == {}
