"""Serialize immutable HTML/XML node trees to strings or byte sinks."""

from .escaping import escape
from .nodes import (
    Children,
    Element,
    KeyValue,
    Node,
    NodeList,
    Property,
    RawText,
    TextNode,
    TextProp,
    VoidElement,
)
from .renderer import Renderer
from .sinks import ByteBufferSink, ByteSink
from .view_builder import (
    html_document,
    html_view,
    serialize_document,
    serialize_node,
    serialize_nodes,
    xml_document,
    xml_view,
)

__all__ = [
    "ByteBufferSink",
    "ByteSink",
    "Children",
    "Element",
    "KeyValue",
    "Node",
    "NodeList",
    "Property",
    "RawText",
    "Renderer",
    "TextNode",
    "TextProp",
    "VoidElement",
    "escape",
    "html_document",
    "html_view",
    "serialize_document",
    "serialize_node",
    "serialize_nodes",
    "xml_document",
    "xml_view",
]
