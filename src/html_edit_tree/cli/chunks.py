"""CLI entrypoint for extracting editable chunks and merging edited ones back."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from html_edit_tree.chunks import chunk_tree, parse_edited_chunks
from html_edit_tree.markers import DEFAULT_MAX_CHUNK_SIZE
from html_edit_tree.serialization import TreeFormatError, dumps_tree, loads_tree
from html_edit_tree.updater import merge_edits


def _read_text(path: Path) -> str:
    if not path.exists():
        print(f"Error: Input file not found: {path}", file=sys.stderr)
        raise SystemExit(1)
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def main() -> None:
    parser = argparse.ArgumentParser(description="Extract editable chunks from a JSON node tree or merge edits back")
    parser.add_argument("--tree", "-t", required=True, help="Path to JSON node tree file")
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("--extract", action="store_true", help="Write the tree's editable text as chunks")
    mode.add_argument("--merge", metavar="EDITED", help="Path to edited chunk text to merge into the tree")
    parser.add_argument(
        "--out",
        "-o",
        help="Path to output file (default: out/chunks/<name>.txt or out/json/<name>_edited.json)",
    )
    parser.add_argument("--out-dir", default="out", help="Base output directory (default: out)")
    parser.add_argument(
        "--max-chunk-size",
        type=int,
        default=DEFAULT_MAX_CHUNK_SIZE,
        help=f"Flush a chunk once it reaches this many characters (default: {DEFAULT_MAX_CHUNK_SIZE})",
    )

    args = parser.parse_args()

    if args.max_chunk_size < 1:
        parser.error("--max-chunk-size must be positive")

    tree_path = Path(args.tree)
    base_name = tree_path.stem
    out_dir = Path(args.out_dir)

    operation = "extract_chunks" if args.extract else "apply_edits"
    try:
        tree = loads_tree(_read_text(tree_path), operation=operation)
    except TreeFormatError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(1)

    if args.extract:
        output_path = Path(args.out) if args.out else out_dir / "chunks" / f"{base_name}.txt"
        chunks = chunk_tree(tree, max_chunk_size=args.max_chunk_size)
        # Chunks are concatenated without separators so a merge sees the exact stream.
        output = "".join(chunk.render() for chunk in chunks)
        summary = f"Extracted {len(chunks)} chunks -> {output_path}"
    else:
        output_path = Path(args.out) if args.out else out_dir / "json" / f"{base_name}_edited.json"
        edits = parse_edited_chunks(_read_text(Path(args.merge)))
        output = dumps_tree(merge_edits(tree, edits))
        summary = f"Merged {len(edits)} edited runs -> {output_path}"

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(output)

    print(summary)


if __name__ == "__main__":
    main()
