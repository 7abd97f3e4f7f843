"""Marker grammar and tag constants shared by the tree and chunk modules."""

import re

ROOT_TAG = "root"
RAW_HTML_TAG = "rawHtml"
TEXT_TYPE = "text"
WRAPPER_TAGS = frozenset({ROOT_TAG, RAW_HTML_TAG})
NON_EDITABLE_TAGS = frozenset({"img", "video", "meta", "script", "style", "br", "hr"})

DEFAULT_MAX_CHUNK_SIZE = 4000
FIRST_NODE_ID = 1
MAX_NODE_ID = 99999
FIRST_CHUNK_INDEX = 100
NODE_ID_WIDTH = 5

NODE_ID_PATTERN = "^[0-9]{5}$"

# Editors sometimes split the hash pair with a space.
BROKEN_MARKER = "# #"
MARKER_DELIMITER = "##"

# Five digits mark a node; any other run of three or more digits is a chunk
# header. Chunk indexes never take five digits, see next_chunk_index.
MARKER_RE = re.compile(r"##(?:(?P<id>[0-9]{5})|(?P<index>[0-9]{3,}))##")


def format_node_id(value: int) -> str:
    return f"{value:0{NODE_ID_WIDTH}d}"


def node_marker(node_id: str) -> str:
    return f"{MARKER_DELIMITER}{node_id}{MARKER_DELIMITER}"


def chunk_header(index: int) -> str:
    return f"{MARKER_DELIMITER}{index:03d}{MARKER_DELIMITER}"


def next_chunk_index(index: int) -> int:
    """Return the index after ``index``, jumping from 9999 straight to 100000."""
    following = index + 1
    if len(str(following)) == NODE_ID_WIDTH:
        return 10**NODE_ID_WIDTH
    return following
