"""Core data models for the editable node tree and its chunks."""

from __future__ import annotations

from dataclasses import MISSING, dataclass, field
from typing import Any, Iterator, Optional, Union

from html_edit_tree.markers import NODE_ID_PATTERN, TEXT_TYPE, chunk_header


def schema_field(
    description: str,
    *,
    default: Any = MISSING,
    default_factory: Any = MISSING,
    init: bool = True,
    json_name: str | None = None,
    json_schema: dict[str, Any] | None = None,
) -> Any:
    """Create a dataclass field with reusable JSON Schema metadata.

    ``json_name`` is the key used in the serialized tree when it differs from
    the Python attribute name.
    """

    metadata: dict[str, Any] = {"description": description}
    if json_name is not None:
        metadata["json_name"] = json_name
    if json_schema is not None:
        metadata["json_schema"] = json_schema

    kwargs: dict[str, Any] = {"metadata": metadata, "init": init}
    if default is not MISSING:
        kwargs["default"] = default
    if default_factory is not MISSING:
        kwargs["default_factory"] = default_factory
    return field(**kwargs)


@dataclass(frozen=True)
class Element:
    """Markup element with its attributes and ordered child nodes."""

    id: str = schema_field(
        "Five-digit node identifier, unique within one conversion and assigned in post-order.",
        json_schema={"pattern": NODE_ID_PATTERN},
    )
    tag: str = schema_field(
        "Element tag name as written in the source markup.",
        json_name="type",
        json_schema={"minLength": 1, "not": {"const": TEXT_TYPE}},
    )
    attributes: dict[str, str] = schema_field(
        "Attribute values keyed by attribute name, in source order.",
        default_factory=dict,
    )
    is_editable: bool = schema_field(
        "True for leaf elements outside the non-editable tag set that carry non-blank text.",
        default=False,
        json_name="isEditable",
    )
    children: tuple[Node, ...] = schema_field(
        "Child element and text nodes in document order.",
        default=(),
        json_name="content",
    )


@dataclass(frozen=True)
class Text:
    """Text run stored verbatim inside an element."""

    id: str = schema_field(
        "Five-digit node identifier, unique within one conversion and assigned in post-order.",
        json_schema={"pattern": NODE_ID_PATTERN},
    )
    content: str = schema_field("Text payload exactly as parsed from the source markup.")
    kind: str = schema_field(
        "Discriminator marking the node as a text run.",
        default=TEXT_TYPE,
        init=False,
        json_name="type",
        json_schema={"const": TEXT_TYPE},
    )
    is_editable: bool = schema_field(
        "Text nodes are always editable.",
        default=True,
        init=False,
        json_name="isEditable",
        json_schema={"const": True},
    )


Node = Union[Element, Text]


@dataclass(frozen=True)
class Chunk:
    """One size-bounded slice of extracted editable text."""

    index: int
    text: str

    def render(self) -> str:
        return f"{chunk_header(self.index)}{self.text}"

    def __str__(self) -> str:
        return self.render()


@dataclass
class ConversionResult:
    """Outcome of converting one markup document into a node tree."""

    tree: Node
    fallback_reason: Optional[str] = None

    @property
    def is_fallback(self) -> bool:
        return self.fallback_reason is not None


def iter_nodes(node: Node) -> Iterator[Node]:
    """Yield ``node`` and all of its descendants in document order."""
    yield node
    if isinstance(node, Element):
        for child in node.children:
            yield from iter_nodes(child)
