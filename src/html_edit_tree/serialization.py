"""JSON encoding and validated decoding of node trees."""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Any, Mapping, Union

from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match

from html_edit_tree.markers import TEXT_TYPE
from html_edit_tree.models import Element, Node, Text
from html_edit_tree.schema import build_tree_schema

TreeInput = Union[str, bytes, Mapping[str, Any]]


class TreeFormatError(ValueError):
    """Raised when an operation receives something that is not a valid node tree."""

    def __init__(self, operation: str, detail: str):
        self.operation = operation
        self.detail = detail
        super().__init__(f"{operation}: input is not a valid node tree: {detail}")


@lru_cache(maxsize=1)
def tree_validator() -> Draft202012Validator:
    return Draft202012Validator(build_tree_schema())


def tree_to_dict(node: Node) -> dict[str, Any]:
    """Return the JSON-compatible dict for ``node`` using the wire field names."""
    if isinstance(node, Text):
        return {"id": node.id, "type": TEXT_TYPE, "isEditable": True, "content": node.content}
    return {
        "id": node.id,
        "type": node.tag,
        "attributes": dict(node.attributes),
        "isEditable": node.is_editable,
        "content": [tree_to_dict(child) for child in node.children],
    }


def _node_from_dict(data: Mapping[str, Any]) -> Node:
    if data["type"] == TEXT_TYPE:
        return Text(id=data["id"], content=data["content"])
    return Element(
        id=data["id"],
        tag=data["type"],
        attributes=dict(data["attributes"]),
        is_editable=data["isEditable"],
        children=tuple(_node_from_dict(child) for child in data["content"]),
    )


def tree_from_dict(data: Any, operation: str = "tree_from_dict") -> Node:
    """Validate ``data`` against the tree schema and build the node tree."""
    error = best_match(tree_validator().iter_errors(data))
    if error is not None:
        location = "/".join(str(part) for part in error.absolute_path) or "<root>"
        raise TreeFormatError(operation, f"{error.message} (at {location})")
    return _node_from_dict(data)


def dumps_tree(node: Node) -> str:
    return json.dumps(tree_to_dict(node), ensure_ascii=False, indent=2)


def loads_tree(tree: TreeInput, operation: str = "loads_tree") -> Node:
    """Decode a tree given as JSON text or as an already decoded mapping."""
    if isinstance(tree, (str, bytes)):
        try:
            data = json.loads(tree)
        except ValueError as e:
            raise TreeFormatError(operation, f"invalid JSON ({e})") from e
    else:
        data = tree
    return tree_from_dict(data, operation=operation)
