"""Tag and preamble text shared by the string and sink serializers."""

from __future__ import annotations

import os
from typing import Any, Sequence, Tuple

HTML_PREAMBLE = "<!DOCTYPE html>"
XML_PREAMBLE = '<?xml version="1.0" encoding="utf-8"?>'
NEWLINE = os.linesep


def self_closing_bracket(is_html: bool) -> str:
    return ">" if is_html else " />"


def open_tag(tag: str, attrs: Sequence[Tuple[str, Any]], closing: str = ">") -> str:
    """Opening tag with attributes in the given order.

    Attribute values are converted with ``str()`` and inserted as-is: callers
    passing untrusted values must sanitize them first.
    """
    if not attrs:
        return f"<{tag}{closing}"
    rendered = "".join(f' {name}="{value}"' for name, value in attrs)
    return f"<{tag}{rendered}{closing}"


def close_tag(tag: str) -> str:
    return f"</{tag}>"


def preamble(is_html: bool, newline: str = NEWLINE) -> str:
    return (HTML_PREAMBLE if is_html else XML_PREAMBLE) + newline


__all__ = [
    "HTML_PREAMBLE",
    "NEWLINE",
    "XML_PREAMBLE",
    "close_tag",
    "open_tag",
    "preamble",
    "self_closing_bracket",
]
