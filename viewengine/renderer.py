"""Renderer bound to a single byte sink."""

from __future__ import annotations

from typing import Iterable, Union

from .markup import NEWLINE
from .nodes import Node, NodeList, as_node_sequence
from .sinks import ByteSink
from .view_writer import WriterState, write_document, write_nodes


class Renderer:
    """Writes views and documents into ``sink``.

    Every method returns the number of bytes written by that call alone. The
    sink is only appended to; a single sink must not be shared by concurrent
    renders.
    """

    def __init__(self, sink: ByteSink) -> None:
        self.sink = sink

    def _start(self) -> WriterState:
        return WriterState(self.sink, 0)

    def html_view(self, node_or_nodes: Union[Node, Iterable[Node]]) -> int:
        return write_nodes(True, self._start(), as_node_sequence(node_or_nodes)).written

    def xml_view(self, node_or_nodes: Union[Node, Iterable[Node]]) -> int:
        return write_nodes(False, self._start(), as_node_sequence(node_or_nodes)).written

    def html_document(self, document: Node, *, newline: str = NEWLINE) -> int:
        return write_document(True, self._start(), document, newline=newline).written

    def xml_document(self, document: Node, *, newline: str = NEWLINE) -> int:
        return write_document(False, self._start(), document, newline=newline).written

    def render(
        self,
        node_or_nodes: Union[Node, Iterable[Node]],
        *,
        is_html: bool,
        document: bool = False,
        newline: str = NEWLINE,
    ) -> int:
        """Pick one of the four entry points from runtime options.

        In document mode several roots are grouped into a fragment behind a
        single preamble.
        """
        nodes = as_node_sequence(node_or_nodes)
        if not document:
            return write_nodes(is_html, self._start(), nodes).written
        root = nodes[0] if len(nodes) == 1 else NodeList(nodes)
        return write_document(is_html, self._start(), root, newline=newline).written


__all__ = ["Renderer"]
