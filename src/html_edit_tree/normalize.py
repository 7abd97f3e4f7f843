"""Light markup repair applied before parsing."""

import re

SELF_CLOSING_RE = re.compile(r"<(\w+)([^>]*)/>")


def expand_self_closing_tags(html: str) -> str:
    """Rewrite ``<tag attrs/>`` as an explicit ``<tag attrs></tag>`` pair."""
    return SELF_CLOSING_RE.sub(r"<\1\2></\1>", html)


def escape_ampersands(html: str) -> str:
    """
    Escape every ``&`` so entity references survive the XML parse as text.

    ``&nbsp;`` becomes ``&amp;nbsp;`` and parses back to the literal
    ``&nbsp;``, which the renderer then emits unchanged. The parser consumes
    every escape added here, so stored text carries none of them.
    """
    return html.replace("&", "&amp;")


def normalize_markup(html: str) -> str:
    return escape_ampersands(expand_self_closing_tags(html))
