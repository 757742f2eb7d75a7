"""Configuration used to build a ``Dictionary``.

A Config collects explicit ``(locale, path)`` pairs, an optional glob
pattern and an optional default locale. ``finish()`` reads the files and
returns the Dictionary.
"""

import glob
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from loon.dictionary import DEFAULT_LOCALE, Dictionary
from loon.errors import DocumentLoadError
from loon.loader import DocumentLoader, FileDocumentLoader, PathLike
from loon.logging import get_module_logger
from loon.settings import LoonSettings, get_settings

logger = get_module_logger()


class ConfigPart(ABC):
    """A single setting that can be applied to a ``Config``."""

    @abstractmethod
    def apply(self, config: "Config") -> "Config":
        """Return a copy of config with this setting applied."""


@dataclass(frozen=True)
class Config(ConfigPart):
    """Configuration to build a Dictionary.

    Attributes:
        load_paths: Explicit (locale, path) pairs, loaded before globbed files.
        path_pattern: Glob pattern; each match's file stem is its locale.
        default_locale: Default locale of the built Dictionary.
    """

    load_paths: Tuple[Tuple[str, Path], ...] = ()
    path_pattern: Optional[str] = None
    default_locale: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(
            self,
            "load_paths",
            tuple((str(locale), Path(path)) for locale, path in self.load_paths),
        )

    @classmethod
    def of(cls, *parts: Any) -> "Config":
        """Fold configuration fragments into a single Config.

        Raises:
            TypeError: If a part is not a configuration fragment.
        """
        config = cls()
        for part in parts:
            config = _apply_part(part, config)
        return config

    @classmethod
    def global_default(cls, settings: Optional[LoonSettings] = None) -> "Config":
        """Build the configuration used when ``set_config`` was never called.

        Looks for documents matching ``LOON_LOCALES_PATH_PATTERN``
        (``config/locales/*.*`` by default).
        """
        settings = settings or get_settings()
        return cls(
            path_pattern=settings.LOCALES_PATH_PATTERN,
            default_locale=settings.DEFAULT_LOCALE,
        )

    def with_localized_path(self, locale: str, path: PathLike) -> "Config":
        """Add messages for a specific locale (e.g. ``en``) from a specific file."""
        return replace(self, load_paths=self.load_paths + ((locale, Path(path)),))

    def with_path_pattern(self, path_pattern: str) -> "Config":
        """Use the glob pattern to add multiple files.

        The locale of each file is its stem, e.g. ``en`` for ``en.yml``.
        """
        return replace(self, path_pattern=path_pattern)

    def with_default_locale(self, default_locale: str) -> "Config":
        """Set the default locale."""
        return replace(self, default_locale=default_locale)

    def apply(self, config: "Config") -> "Config":
        """Overlay this configuration onto another one."""
        if self.load_paths:
            config = replace(config, load_paths=config.load_paths + self.load_paths)
        if self.path_pattern is not None:
            config = replace(config, path_pattern=self.path_pattern)
        if self.default_locale is not None:
            config = replace(config, default_locale=self.default_locale)
        return config

    def _resolve_paths(self) -> List[Tuple[str, Path]]:
        paths = list(self.load_paths)
        if self.path_pattern is None:
            return paths

        try:
            matches = sorted(glob.glob(self.path_pattern))
        except (OSError, ValueError) as e:
            raise DocumentLoadError(
                f"Invalid path pattern {self.path_pattern!r}: {e}"
            ) from e

        for match in matches:
            path = Path(match)
            if path.is_file():
                paths.append((path.stem, path))
        return paths

    def finish(self, loader: Optional[DocumentLoader] = None) -> Dictionary:
        """Build the Dictionary.

        Explicit paths are loaded first, then glob matches in sorted order.
        A later file for the same locale replaces an earlier one. Files the
        loader does not support are skipped.

        Args:
            loader: Document loader (default: FileDocumentLoader).

        Returns:
            Dictionary with every loaded document.

        Raises:
            DocumentLoadError: If a file cannot be read or parsed.
        """
        loader = loader or FileDocumentLoader()
        documents: Dict[str, Any] = {}

        for locale, path in self._resolve_paths():
            if not loader.supports(path):
                logger.info("skipped_unsupported_document", file=str(path))
                continue
            documents[locale] = loader.load(path)

        default_locale = self.default_locale or DEFAULT_LOCALE
        logger.info(
            "documents_loaded",
            locales=sorted(documents),
            default_locale=default_locale,
        )
        return Dictionary(documents, default_locale=default_locale)


@dataclass(frozen=True)
class DefaultLocale(ConfigPart):
    """Fragment setting the default locale."""

    locale: str

    def apply(self, config: Config) -> Config:
        return config.with_default_locale(self.locale)


@dataclass(frozen=True)
class PathPattern(ConfigPart):
    """Fragment setting the glob path pattern."""

    pattern: str

    def apply(self, config: Config) -> Config:
        return config.with_path_pattern(self.pattern)


@dataclass(frozen=True)
class LocalizedPath(ConfigPart):
    """Fragment adding one file for one locale."""

    locale: str
    path: PathLike

    def apply(self, config: Config) -> Config:
        return config.with_localized_path(self.locale, self.path)


def _apply_part(part: Any, config: Config) -> Config:
    if part is None:
        return config
    if isinstance(part, ConfigPart):
        return part.apply(config)
    if isinstance(part, (list, tuple)):
        for item in part:
            config = _apply_part(item, config)
        return config
    raise TypeError(f"Unsupported configuration: {part!r}")
