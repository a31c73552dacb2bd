"""Sink serializer: writes UTF-8 fragments into a byte sink.

Each step takes a ``WriterState`` and returns the next one, so the running
byte count is threaded through the walk rather than kept on the side.
"""

from __future__ import annotations

import codecs
from functools import reduce
from typing import Iterable, NamedTuple

from .escaping import escape
from .markup import NEWLINE, close_tag, open_tag, preamble, self_closing_bracket
from .nodes import Node
from .props import split_props
from .sinks import ByteSink

ENCODING = "utf-8"
ENCODING_ERRORS = "viewengine.replacement_char"


def _replacement_char(exc: UnicodeError):
    # Lone surrogates become U+FFFD, one per unencodable code point.
    if not isinstance(exc, UnicodeEncodeError):
        raise exc
    return "\ufffd" * (exc.end - exc.start), exc.end


codecs.register_error(ENCODING_ERRORS, _replacement_char)


class WriterState(NamedTuple):
    sink: ByteSink
    written: int = 0


def _emit(state: WriterState, text: str) -> WriterState:
    data = text.encode(ENCODING, ENCODING_ERRORS)
    if data:
        state.sink.write(data)
    return WriterState(state.sink, state.written + len(data))


def write_node(is_html: bool, state: WriterState, node: Node) -> WriterState:
    kind = node.kind
    if kind == "text_node":
        return _emit(state, escape(node.text))
    if kind == "raw_text":
        return _emit(state, node.text)
    if kind == "void_element":
        split = split_props(node.props)
        return _emit(state, open_tag(node.tag, split.attrs, self_closing_bracket(is_html)))
    if kind == "element":
        split = split_props(node.props)
        state = _emit(state, open_tag(node.tag, split.attrs))
        state = write_nodes(is_html, state, split.content())
        return _emit(state, close_tag(node.tag))
    if kind == "node_list":
        return write_nodes(is_html, state, node.nodes)
    raise TypeError(f"Unknown node kind: {kind!r}")


def write_nodes(is_html: bool, state: WriterState, nodes: Iterable[Node]) -> WriterState:
    return reduce(lambda acc, node: write_node(is_html, acc, node), nodes, state)


def write_document(
    is_html: bool, state: WriterState, document: Node, *, newline: str = NEWLINE
) -> WriterState:
    state = _emit(state, preamble(is_html, newline))
    return write_node(is_html, state, document)


__all__ = ["ENCODING", "ENCODING_ERRORS", "WriterState", "write_document", "write_node", "write_nodes"]
