"""Tree builder that turns markup into an identifier-tagged node tree."""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

from lxml import etree

from html_edit_tree.markers import (
    FIRST_NODE_ID,
    MAX_NODE_ID,
    NON_EDITABLE_TAGS,
    RAW_HTML_TAG,
    ROOT_TAG,
    format_node_id,
)
from html_edit_tree.models import ConversionResult, Element, Node, Text
from html_edit_tree.normalize import normalize_markup

LOG = logging.getLogger(__name__)

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"


class IdSpaceExhausted(RuntimeError):
    """Raised when a document needs more ids than five digits can express."""


class IdAllocator:
    """Monotonic node id counter owned by exactly one conversion."""

    def __init__(self, start: int = FIRST_NODE_ID):
        self._next = start

    def allocate(self) -> str:
        if self._next > MAX_NODE_ID:
            raise IdSpaceExhausted(f"more than {MAX_NODE_ID} nodes in one document")
        value = self._next
        self._next += 1
        return format_node_id(value)


def _make_parser() -> etree.XMLParser:
    # lxml parsers must not be shared between threads.
    return etree.XMLParser(resolve_entities=False, no_network=True, load_dtd=False)


def _qualified_name(name: str, element: etree._Element) -> str:
    qname = etree.QName(name)
    if qname.namespace is None:
        return qname.localname
    if qname.namespace == XML_NAMESPACE:
        return f"xml:{qname.localname}"
    for prefix, uri in element.nsmap.items():
        if prefix and uri == qname.namespace:
            return f"{prefix}:{qname.localname}"
    return qname.localname


def _element_attributes(element: etree._Element, parent_nsmap: dict) -> dict[str, str]:
    attributes: dict[str, str] = {}
    for prefix, uri in element.nsmap.items():
        if parent_nsmap.get(prefix) != uri:
            attributes["xmlns" if prefix is None else f"xmlns:{prefix}"] = uri
    for name, value in element.attrib.items():
        attributes[_qualified_name(name, element)] = value
    return attributes


def _tag_name(element: etree._Element) -> str:
    local = etree.QName(element).localname
    return f"{element.prefix}:{local}" if element.prefix else local


def is_editable_element(tag: str, children: list[Node]) -> bool:
    """
    Decide editability of an element from its tag and already built children.

    Elements in the non-editable tag set, elements with child elements and
    elements without any non-blank text are not editable.
    """
    if tag.lower() in NON_EDITABLE_TAGS:
        return False
    if any(isinstance(child, Element) for child in children):
        return False
    return bool("".join(child.content for child in children if isinstance(child, Text)).strip())


def _build_element(element: etree._Element, ids: IdAllocator, parent_nsmap: dict) -> Element:
    children: list[Node] = []
    if element.text:
        children.append(Text(id=ids.allocate(), content=element.text))

    for child in element:
        # Comments and processing instructions are dropped, their tail text is kept.
        if isinstance(child.tag, str):
            children.append(_build_element(child, ids, element.nsmap))
        if child.tail:
            children.append(Text(id=ids.allocate(), content=child.tail))

    tag = _tag_name(element)
    return Element(
        id=ids.allocate(),
        tag=tag,
        attributes=_element_attributes(element, parent_nsmap),
        is_editable=is_editable_element(tag, children),
        children=tuple(children),
    )


def raw_html_tree(html: str) -> Element:
    """Wrap unparseable markup in a non-editable passthrough node."""
    ids = IdAllocator()
    text = Text(id=ids.allocate(), content=html)
    return Element(id=ids.allocate(), tag=RAW_HTML_TAG, attributes={}, is_editable=False, children=(text,))


def convert_html(html: str) -> ConversionResult:
    """
    Convert markup into a node tree.

    The input is wrapped in a synthetic ``root`` element so fragments with
    several top-level nodes parse as one document. Parse failures never
    propagate: the result then holds a ``rawHtml`` passthrough tree and
    ``fallback_reason`` explains why.
    """
    wrapped = f"<{ROOT_TAG}>{normalize_markup(html)}</{ROOT_TAG}>"
    try:
        document = etree.fromstring(wrapped, parser=_make_parser())
        root = _build_element(document, IdAllocator(), {})
    except (etree.LxmlError, ValueError, IdSpaceExhausted) as e:
        LOG.warning("markup could not be parsed, keeping it as raw passthrough: %s", e)
        return ConversionResult(tree=raw_html_tree(html), fallback_reason=str(e))

    # The synthetic wrapper is never an edit target.
    tree = replace(root, is_editable=False)
    LOG.debug("built tree with root id %s", tree.id)
    return ConversionResult(tree=tree)


def build_tree(html: str) -> Node:
    return convert_html(html).tree


def convert_file(input_path: str | Path) -> ConversionResult:
    """Convert an HTML file from disk."""
    path = Path(input_path)
    return convert_html(path.read_text(encoding="utf-8"))
