"""Splitting element properties into content and attributes."""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Any, Iterable, List, Optional, Tuple

from .nodes import Node, Property, TextNode


@dataclass(frozen=True)
class SplitProps:
    children: Tuple[Node, ...]
    text: Optional[str]
    attrs: Tuple[Tuple[str, Any], ...]

    def content(self) -> Tuple[Node, ...]:
        """Effective child list: the text node (if any) first, then the children."""
        if self.text is None:
            return self.children
        return (TextNode(self.text),) + self.children


_EMPTY = SplitProps(children=(), text=None, attrs=())


def _fold(acc: SplitProps, prop: Property) -> SplitProps:
    # acc holds everything to the right of prop.
    if prop.kind == "key_value":
        return SplitProps(acc.children, acc.text, ((prop.name, prop.value),) + acc.attrs)
    if prop.kind == "children":
        return SplitProps(acc.children + prop.nodes, acc.text, acc.attrs)
    if prop.kind == "text":
        return SplitProps(acc.children, prop.text, acc.attrs)
    raise TypeError(f"Unknown property kind: {prop.kind!r}")


def split_props(props: Iterable[Property]) -> SplitProps:
    """Right fold over ``props``.

    Attributes keep their order. Because the fold runs from the end, the
    leftmost ``TextProp`` is the one that survives, and each ``Children``
    group lands after the groups that follow it in the list.
    """
    items: List[Property] = list(props)
    return reduce(_fold, reversed(items), _EMPTY)


__all__ = ["SplitProps", "split_props"]
