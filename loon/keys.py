"""Key paths addressing messages inside a locale document.

A key path is an ordered sequence of string segments. It can be written as
a dotted string (``"messages.other"``), as an explicit list of segments
(``["messages", "other"]``), or as the concatenation of two key paths.
All three iterate the same way, so lookups never depend on how a key was
built.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterator, Sequence, Tuple, Union

from loon.lookup import dig

KeyLike = Union["KeyPath", str, Sequence[str]]


class KeyPath(ABC):
    """Abstract base for key paths.

    Subclasses only define how to produce segments; equality, hashing,
    display and chaining are shared.
    """

    @abstractmethod
    def __iter__(self) -> Iterator[str]:
        """Yield the path segments in order. Each call starts over."""

    @classmethod
    def of(cls, value: KeyLike) -> "KeyPath":
        """Coerce a dotted string, a segment sequence or a KeyPath.

        Args:
            value: Key in any supported representation.

        Returns:
            KeyPath instance.

        Raises:
            TypeError: If value is not a supported key representation.
        """
        if isinstance(value, KeyPath):
            return value
        if isinstance(value, str):
            return DottedKeyPath(value)
        if isinstance(value, (list, tuple)):
            if not all(isinstance(part, str) for part in value):
                raise TypeError(f"Key segments must be strings: {value!r}")
            return SegmentKeyPath(tuple(value))
        raise TypeError(f"Unsupported key type: {type(value).__name__}")

    def chain(self, other: KeyLike) -> "KeyPath":
        """Append another key path without copying either side.

        Args:
            other: Key to append after this one.

        Returns:
            ChainedKeyPath yielding this path's segments, then other's.
        """
        return ChainedKeyPath(self, KeyPath.of(other))

    def segments(self) -> Tuple[str, ...]:
        return tuple(self)

    def find(self, document: Any) -> Any:
        """Walk document along this path. See ``loon.lookup.dig``."""
        return dig(self, document)

    def to_display_string(self) -> str:
        """Return the full dot-separated key path.

        Returns:
            Full key (e.g., "messages.other").
        """
        return ".".join(self)

    def __str__(self) -> str:
        return self.to_display_string()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyPath):
            return NotImplemented
        return self.segments() == other.segments()

    def __hash__(self) -> int:
        return hash(self.segments())


@dataclass(frozen=True, eq=False)
class DottedKeyPath(KeyPath):
    """Key path written as a single dot-delimited string."""

    text: str

    def __iter__(self) -> Iterator[str]:
        return iter(self.text.split("."))

    def to_display_string(self) -> str:
        return self.text


@dataclass(frozen=True, eq=False)
class SegmentKeyPath(KeyPath):
    """Key path written as an explicit sequence of segments.

    Segments may themselves contain dots; they are never split.
    """

    parts: Tuple[str, ...]

    def __iter__(self) -> Iterator[str]:
        return iter(self.parts)


@dataclass(frozen=True, eq=False)
class ChainedKeyPath(KeyPath):
    """Concatenation of two key paths, evaluated lazily."""

    head: KeyPath
    tail: KeyPath

    def __iter__(self) -> Iterator[str]:
        yield from self.head
        yield from self.tail
