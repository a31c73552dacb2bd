"""Pydantic models for declarative tree files and render options."""

from pathlib import Path
from typing import Annotated, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from .io_utils import read_structured
from .markup import NEWLINE
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


class StrictSpec(BaseModel):
    """Base for tree-file models; unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid")


class AttrSpec(StrictSpec):
    """A single attribute."""

    kind: Literal["attr"] = "attr"
    name: str = Field(..., description="Attribute name, emitted verbatim.")
    value: Union[str, int, float, bool] = Field(
        ..., description="Attribute value, rendered with str() and not escaped."
    )

    def to_property(self) -> Property:
        return KeyValue(self.name, self.value)


class ChildrenSpec(StrictSpec):
    """Nested content as a property."""

    kind: Literal["children"] = "children"
    nodes: List["NodeSpec"] = Field(default_factory=list, description="Child nodes.")

    def to_property(self) -> Property:
        return Children([node.to_node() for node in self.nodes])


class TextPropSpec(StrictSpec):
    """Inline text rendered ahead of the element's children."""

    kind: Literal["text"] = "text"
    text: str = Field(..., description="Text content; escaped on output.")

    def to_property(self) -> Property:
        return TextProp(self.text)


PropSpec = Annotated[
    Union[AttrSpec, ChildrenSpec, TextPropSpec],
    Field(discriminator="kind"),
]


class ElementSpec(StrictSpec):
    """Container element with an opening and closing tag."""

    type: Literal["element"] = "element"
    tag: str = Field(..., description="Tag name, emitted verbatim.")
    props: List[PropSpec] = Field(default_factory=list, description="Ordered properties.")
    children: List["NodeSpec"] = Field(
        default_factory=list,
        description="Shorthand for a trailing children property.",
    )

    def to_node(self) -> Node:
        props = [prop.to_property() for prop in self.props]
        if self.children:
            props.append(Children([child.to_node() for child in self.children]))
        return Element(self.tag, props)


class VoidSpec(StrictSpec):
    """Element without content or closing tag."""

    type: Literal["void"] = "void"
    tag: str = Field(..., description="Tag name, emitted verbatim.")
    props: List[PropSpec] = Field(
        default_factory=list,
        description="Ordered properties; only attributes are rendered.",
    )

    def to_node(self) -> Node:
        return VoidElement(self.tag, [prop.to_property() for prop in self.props])


class TextSpec(StrictSpec):
    type: Literal["text"] = "text"
    text: str = Field(..., description="Text content; escaped on output.")

    def to_node(self) -> Node:
        return TextNode(self.text)


class RawSpec(StrictSpec):
    type: Literal["raw"] = "raw"
    text: str = Field(..., description="Trusted markup emitted verbatim.")

    def to_node(self) -> Node:
        return RawText(self.text)


class FragmentSpec(StrictSpec):
    """Grouping of nodes without wrapping markup."""

    type: Literal["fragment"] = "fragment"
    children: List["NodeSpec"] = Field(default_factory=list, description="Grouped nodes.")

    def to_node(self) -> Node:
        return NodeList([child.to_node() for child in self.children])


NodeSpec = Annotated[
    Union[ElementSpec, VoidSpec, TextSpec, RawSpec, FragmentSpec],
    Field(discriminator="type"),
]

ChildrenSpec.model_rebuild()
ElementSpec.model_rebuild()
VoidSpec.model_rebuild()
FragmentSpec.model_rebuild()


class RenderOptions(StrictSpec):
    """How a tree should be serialized."""

    mode: Literal["html", "xml"] = Field(
        "html", description="HTML writes void elements as <br>, XML as <br />."
    )
    document: bool = Field(
        False, description="Prepend the doctype or XML declaration."
    )
    newline: Optional[str] = Field(
        None, description="Line terminator after the preamble; defaults to os.linesep."
    )

    @property
    def is_html(self) -> bool:
        return self.mode == "html"

    @property
    def resolved_newline(self) -> str:
        return NEWLINE if self.newline is None else self.newline


class TreeFile(StrictSpec):
    """Schema for a tree file: options plus one root node or a list of roots."""

    options: RenderOptions = Field(
        default_factory=RenderOptions, description="Default render options."
    )
    root: Union[NodeSpec, List[NodeSpec]] = Field(..., description="Node(s) to render.")

    def nodes(self) -> Tuple[Node, ...]:
        roots = self.root if isinstance(self.root, list) else [self.root]
        return tuple(spec.to_node() for spec in roots)


def load_tree_file(path: Path) -> TreeFile:
    data = read_structured(path) or {}
    return TreeFile.model_validate(data)


__all__ = [
    "AttrSpec",
    "ChildrenSpec",
    "ElementSpec",
    "FragmentSpec",
    "NodeSpec",
    "PropSpec",
    "RawSpec",
    "RenderOptions",
    "StrictSpec",
    "TextPropSpec",
    "TextSpec",
    "TreeFile",
    "VoidSpec",
    "load_tree_file",
]
