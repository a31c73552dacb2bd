"""Escaping for text content."""

from __future__ import annotations

ESCAPE_SEQUENCES = {
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&apos;",
    "&": "&amp;",
}

_ESCAPE_TABLE = str.maketrans(ESCAPE_SEQUENCES)


def escape(text: str) -> str:
    """Replace markup-significant characters; everything else passes through.

    Only text content goes through here. Attribute values and names are
    emitted verbatim by the serializers.
    """
    return text.translate(_ESCAPE_TABLE)


__all__ = ["ESCAPE_SEQUENCES", "escape"]
