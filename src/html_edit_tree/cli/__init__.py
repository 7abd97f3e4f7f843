"""CLI module exports."""

from html_edit_tree.cli.chunks import main as chunks_main
from html_edit_tree.cli.convert import main as convert_main

__all__ = ["convert_main", "chunks_main"]
