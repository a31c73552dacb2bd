"""String serializer: renders node trees to ``str``."""

from __future__ import annotations

from typing import Iterable, List, Union

from .escaping import escape
from .markup import NEWLINE, close_tag, open_tag, preamble, self_closing_bracket
from .nodes import Node, as_node_sequence
from .props import split_props


def _build_node(is_html: bool, parts: List[str], node: Node) -> None:
    kind = node.kind
    if kind == "text_node":
        parts.append(escape(node.text))
    elif kind == "raw_text":
        parts.append(node.text)
    elif kind == "void_element":
        split = split_props(node.props)
        parts.append(open_tag(node.tag, split.attrs, self_closing_bracket(is_html)))
    elif kind == "element":
        split = split_props(node.props)
        parts.append(open_tag(node.tag, split.attrs))
        for child in split.content():
            _build_node(is_html, parts, child)
        parts.append(close_tag(node.tag))
    elif kind == "node_list":
        for child in node.nodes:
            _build_node(is_html, parts, child)
    else:
        raise TypeError(f"Unknown node kind: {kind!r}")


def serialize_node(is_html: bool, node: Node) -> str:
    parts: List[str] = []
    _build_node(is_html, parts, node)
    return "".join(parts)


def serialize_nodes(is_html: bool, nodes: Iterable[Node]) -> str:
    parts: List[str] = []
    for node in nodes:
        _build_node(is_html, parts, node)
    return "".join(parts)


def serialize_document(is_html: bool, node: Node, *, newline: str = NEWLINE) -> str:
    """Serialize ``node`` behind a doctype (HTML) or XML declaration."""
    parts: List[str] = [preamble(is_html, newline)]
    _build_node(is_html, parts, node)
    return "".join(parts)


def html_view(node_or_nodes: Union[Node, Iterable[Node]]) -> str:
    return serialize_nodes(True, as_node_sequence(node_or_nodes))


def xml_view(node_or_nodes: Union[Node, Iterable[Node]]) -> str:
    return serialize_nodes(False, as_node_sequence(node_or_nodes))


def html_document(document: Node, *, newline: str = NEWLINE) -> str:
    return serialize_document(True, document, newline=newline)


def xml_document(document: Node, *, newline: str = NEWLINE) -> str:
    return serialize_document(False, document, newline=newline)


__all__ = [
    "html_document",
    "html_view",
    "serialize_document",
    "serialize_node",
    "serialize_nodes",
    "xml_document",
    "xml_view",
]
