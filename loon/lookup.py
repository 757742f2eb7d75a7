"""Nested document lookup."""

from typing import Any, Iterable, Mapping, Optional


class _Missing:
    """Marker for a failed walk. ``None`` is a valid leaf, so it can't be used."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


def _parse_index(segment: str) -> Optional[int]:
    if segment.isascii() and segment.isdigit():
        return int(segment)
    return None


def dig(segments: Iterable[str], document: Any) -> Any:
    """Walk a document one segment at a time.

    Mappings are addressed by field name, lists and tuples by a
    non-negative decimal index. Any other node, an absent field, an index
    out of range or a segment that is not an index stops the walk.

    Args:
        segments: Path segments, e.g. a KeyPath.
        document: Parsed locale document.

    Returns:
        The node at the end of the path, or MISSING.
    """
    node = document
    for segment in segments:
        if isinstance(node, Mapping):
            if segment not in node:
                return MISSING
            node = node[segment]
        elif isinstance(node, (list, tuple)):
            index = _parse_index(segment)
            if index is None or index >= len(node):
                return MISSING
            node = node[index]
        else:
            return MISSING
    return node


def find_template(segments: Iterable[str], document: Any) -> Optional[str]:
    """Return the string leaf at the end of the path, if there is one."""
    node = dig(segments, document)
    if isinstance(node, str):
        return node
    return None
