"""Options for a translate call.

Options are built either fluently::

    Opts().with_locale("de").with_var("name", "Jacob")

or by combining independent fragments::

    Opts.of(Locale("de"), Var("name", "Jacob"), Count(3))

Both forms produce a new ``Opts`` each step; nothing is mutated in place.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional

from loon.keys import KeyLike, KeyPath


def _check_count(count: Any) -> int:
    if isinstance(count, bool) or not isinstance(count, int):
        raise TypeError(f"count must be an int, got {type(count).__name__}")
    return count


class OptsPart(ABC):
    """A single option that can be applied to an ``Opts`` value."""

    @abstractmethod
    def apply(self, opts: "Opts") -> "Opts":
        """Return a copy of opts with this option applied."""


@dataclass(frozen=True)
class Opts(OptsPart):
    """Resolution parameters for ``Dictionary.translate``.

    Attributes:
        locale: Locale override; the dictionary default is used when None.
        variables: Interpolation variables. None means no variable was ever
            set, in which case templates are returned verbatim.
        count: Pluralization count; selects the zero/one/other sub-key.
        default_key: Fallback key tried verbatim when the key is missing.
    """

    locale: Optional[str] = None
    variables: Optional[Dict[str, str]] = None
    count: Optional[int] = None
    default_key: Optional[KeyPath] = None

    def __post_init__(self):
        variables = self.variables
        if variables is not None:
            variables = {str(name): str(value) for name, value in variables.items()}
        if self.count is not None:
            _check_count(self.count)
            # An explicit "count" variable takes precedence over the number.
            variables = dict(variables or {})
            variables.setdefault("count", str(self.count))
        object.__setattr__(self, "variables", variables)
        if self.default_key is not None and not isinstance(self.default_key, KeyPath):
            object.__setattr__(self, "default_key", KeyPath.of(self.default_key))

    @classmethod
    def of(cls, *parts: Any) -> "Opts":
        """Fold option fragments into a single Opts.

        Fragments are applied left to right. ``None`` is ignored and lists
        or tuples of fragments are flattened, so ``Opts.of()``,
        ``Opts.of(None)`` and ``Opts.of([Count(1), Locale("de")])`` are all
        valid.

        Raises:
            TypeError: If a part is not an option fragment.
        """
        opts = cls()
        for part in parts:
            opts = _apply_part(part, opts)
        return opts

    def with_locale(self, locale: str) -> "Opts":
        """Set the locale for this translate call."""
        return replace(self, locale=locale)

    def with_var(self, name: str, value: Any) -> "Opts":
        """Set a variable to be interpolated. The value is stringified."""
        variables = dict(self.variables or {})
        variables[str(name)] = str(value)
        return replace(self, variables=variables)

    def with_vars(self, variables: Mapping[str, Any]) -> "Opts":
        opts = self
        for name, value in variables.items():
            opts = opts.with_var(name, value)
        return opts

    def with_count(self, count: int) -> "Opts":
        """Set the pluralization count.

        Uses Rails style pluralization keys: ``zero``, ``one``, ``other``.
        Also sets the ``count`` variable to the count's decimal text.
        """
        count = _check_count(count)
        return replace(self, count=count).with_var("count", count)

    def with_default_key(self, default_key: KeyLike) -> "Opts":
        """If the key does not exist, fall back to using another key."""
        return replace(self, default_key=KeyPath.of(default_key))

    def apply(self, opts: "Opts") -> "Opts":
        """Overlay the fields set on this Opts onto another one."""
        if self.locale is not None:
            opts = replace(opts, locale=self.locale)
        if self.default_key is not None:
            opts = replace(opts, default_key=self.default_key)
        if self.count is not None:
            opts = opts.with_count(self.count)
        if self.variables is not None:
            variables = dict(opts.variables or {})
            variables.update(self.variables)
            opts = replace(opts, variables=variables)
        return opts


@dataclass(frozen=True)
class Locale(OptsPart):
    """Fragment setting the locale option."""

    locale: str

    def apply(self, opts: Opts) -> Opts:
        return opts.with_locale(self.locale)


@dataclass(frozen=True)
class DefaultKey(OptsPart):
    """Fragment setting the fallback key option."""

    key: KeyLike

    def apply(self, opts: Opts) -> Opts:
        return opts.with_default_key(self.key)


@dataclass(frozen=True)
class Var(OptsPart):
    """Fragment setting one interpolation variable."""

    name: str
    value: Any

    def apply(self, opts: Opts) -> Opts:
        return opts.with_var(self.name, self.value)


@dataclass(frozen=True)
class Count(OptsPart):
    """Fragment setting the pluralization count."""

    count: int

    def apply(self, opts: Opts) -> Opts:
        return opts.with_count(self.count)


def _apply_part(part: Any, opts: Opts) -> Opts:
    if part is None:
        return opts
    if isinstance(part, OptsPart):
        return part.apply(opts)
    if isinstance(part, (list, tuple)):
        for item in part:
            opts = _apply_part(item, opts)
        return opts
    raise TypeError(f"Unsupported option: {part!r}")
