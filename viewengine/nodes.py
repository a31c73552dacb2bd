"""Immutable node and property values describing a markup tree.

Every variant carries a ``kind`` tag so the serializers can dispatch on it
explicitly instead of relying on subclass polymorphism.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Literal, Tuple, Union


@dataclass(frozen=True)
class KeyValue:
    """A single attribute. ``value`` is rendered with ``str()`` and never escaped."""

    name: str
    value: Any
    kind: Literal["key_value"] = field(default="key_value", init=False)


@dataclass(frozen=True)
class Children:
    """Nested content attached to an element."""

    nodes: Tuple["Node", ...]
    kind: Literal["children"] = field(default="children", init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "nodes", tuple(self.nodes))


@dataclass(frozen=True)
class TextProp:
    """Inline text content, rendered as a text node ahead of the children."""

    text: str
    kind: Literal["text"] = field(default="text", init=False)


Property = Union[KeyValue, Children, TextProp]


@dataclass(frozen=True)
class Element:
    """A container element that always renders a matching closing tag."""

    tag: str
    props: Tuple[Property, ...] = ()
    kind: Literal["element"] = field(default="element", init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "props", tuple(self.props))


@dataclass(frozen=True)
class VoidElement:
    """An element without content or closing tag.

    ``Children`` and ``TextProp`` entries are accepted but ignored when
    serializing; only the attributes are rendered.
    """

    tag: str
    props: Tuple[Property, ...] = ()
    kind: Literal["void_element"] = field(default="void_element", init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "props", tuple(self.props))


@dataclass(frozen=True)
class TextNode:
    """Literal text; always escaped on output."""

    text: str
    kind: Literal["text_node"] = field(default="text_node", init=False)


@dataclass(frozen=True)
class RawText:
    """Markup emitted verbatim, e.g. comments or pre-rendered fragments."""

    text: str
    kind: Literal["raw_text"] = field(default="raw_text", init=False)


@dataclass(frozen=True)
class NodeList:
    """A fragment: its members are serialized in order with no wrapper."""

    nodes: Tuple["Node", ...] = ()
    kind: Literal["node_list"] = field(default="node_list", init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "nodes", tuple(self.nodes))


Node = Union[Element, VoidElement, TextNode, RawText, NodeList]

NODE_TYPES = (Element, VoidElement, TextNode, RawText, NodeList)


def is_node(value: object) -> bool:
    return isinstance(value, NODE_TYPES)


def as_node_sequence(node_or_nodes: Union[Node, Iterable[Node]]) -> Tuple[Node, ...]:
    """Normalize a single node or an iterable of nodes into a tuple."""
    if is_node(node_or_nodes):
        return (node_or_nodes,)  # type: ignore[return-value]
    return tuple(node_or_nodes)  # type: ignore[arg-type]


__all__ = [
    "Children",
    "Element",
    "KeyValue",
    "NODE_TYPES",
    "Node",
    "NodeList",
    "Property",
    "RawText",
    "TextNode",
    "TextProp",
    "VoidElement",
    "as_node_sequence",
    "is_node",
]
