"""Shorthand constructors for node trees.

``element("p", class_name("main"), "hello")`` collects properties in order and
gathers bare nodes and strings into one trailing ``Children`` property.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Tuple, Union

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
    is_node,
)

Item = Union[Property, Node, str]


def _collect(items: Iterable[Item]) -> Tuple[Property, ...]:
    props: List[Property] = []
    nodes: List[Node] = []
    for item in items:
        if isinstance(item, str):
            nodes.append(TextNode(item))
        elif is_node(item):
            nodes.append(item)  # type: ignore[arg-type]
        else:
            props.append(item)  # type: ignore[arg-type]
    if nodes:
        props.append(Children(nodes))
    return tuple(props)


def element(tag: str, *items: Item) -> Element:
    return Element(tag, _collect(items))


def void_element(tag: str, *props: Property) -> VoidElement:
    return VoidElement(tag, props)


def text(value: str) -> TextNode:
    return TextNode(value)


def raw_text(value: str) -> RawText:
    """Markup inserted verbatim. Never pass untrusted input."""
    return RawText(value)


def comment(value: str) -> RawText:
    return RawText(f"<!-- {value} -->")


def fragment(*nodes: Node) -> NodeList:
    return NodeList(nodes)


def none() -> NodeList:
    return NodeList(())


def attr(name: str, value: Any) -> KeyValue:
    return KeyValue(name, value)


def children(*nodes: Node) -> Children:
    return Children(nodes)


def text_prop(value: str) -> TextProp:
    return TextProp(value)


def class_name(value: str) -> KeyValue:
    return KeyValue("class", value)


def classes(names: Iterable[str]) -> KeyValue:
    return KeyValue("class", " ".join(names))


def style(declarations: Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]) -> KeyValue:
    """``style`` attribute from ``(property, value)`` pairs, e.g. ``color:#137373``."""
    pairs = declarations.items() if isinstance(declarations, Mapping) else declarations
    return KeyValue("style", ";".join(f"{name}:{value}" for name, value in pairs))


__all__ = [
    "attr",
    "children",
    "class_name",
    "classes",
    "comment",
    "element",
    "fragment",
    "none",
    "raw_text",
    "style",
    "text",
    "text_prop",
    "void_element",
]
