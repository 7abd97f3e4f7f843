"""CLI entrypoint converting HTML to JSON node trees and back."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from html_edit_tree.builder import convert_html
from html_edit_tree.models import iter_nodes
from html_edit_tree.renderer import render_tree
from html_edit_tree.serialization import TreeFormatError, dumps_tree, loads_tree


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Convert HTML to an editable JSON node tree, or render a JSON tree (*.json input) back to HTML"
    )
    parser.add_argument("--input", "-i", required=True, help="Path to input HTML or JSON tree file")
    parser.add_argument(
        "--out",
        "-o",
        help="Path to output file (default: out/json/<name>.json or out/html/<name>.html)",
    )
    parser.add_argument("--out-dir", default="out", help="Base output directory (default: out)")

    args = parser.parse_args()

    input_path = Path(args.input)
    base_name = input_path.stem
    out_dir = Path(args.out_dir)
    to_html = input_path.suffix.lower() == ".json"

    if args.out:
        output_path = Path(args.out)
    elif to_html:
        output_path = out_dir / "html" / f"{base_name}.html"
    else:
        output_path = out_dir / "json" / f"{base_name}.json"

    if not input_path.exists():
        print(f"Error: Input file not found: {input_path}", file=sys.stderr)
        raise SystemExit(1)

    with open(input_path, "r", encoding="utf-8") as f:
        content = f.read()

    if to_html:
        try:
            tree = loads_tree(content, operation="json_to_html")
        except TreeFormatError as e:
            print(f"Error: {e}", file=sys.stderr)
            raise SystemExit(1)
        output = render_tree(tree)
    else:
        result = convert_html(content)
        if result.is_fallback:
            print(
                f"Warning: markup is not well-formed, stored as non-editable rawHtml: {result.fallback_reason}",
                file=sys.stderr,
            )
        tree = result.tree
        output = dumps_tree(tree)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(output)

    nodes = list(iter_nodes(tree))
    editable = sum(1 for node in nodes if node.is_editable)
    print(f"Converted {len(nodes)} nodes ({editable} editable) -> {output_path}")


if __name__ == "__main__":
    main()
