"""lo[calizati]on - a small localization provider, inspired by ruby-i18n.

Resolves message templates from per-locale documents by key path, with
zero/one/other pluralization, fallback keys and variable interpolation.

Main components:
- keys: KeyPath and its dotted, segment and chained forms
- lookup: nested document walking
- options: Opts and the Locale, Var, Count, DefaultKey fragments
- dictionary: Dictionary, the resolver
- config: Config builder and its DefaultLocale, PathPattern, LocalizedPath fragments
- registry: process-wide set_config / translate / t

Example:
    import loon

    loon.set_config(loon.PathPattern("config/locales/*.yml"))

    loon.t("greeting")
    loon.t("messages", loon.Count(3))
    loon.t("custom.greeting", loon.Var("name", "Jacob"), loon.Locale("de"))
"""

from loon.config import Config, ConfigPart, DefaultLocale, LocalizedPath, PathPattern
from loon.dictionary import Dictionary
from loon.errors import (
    ConfigurationAlreadySetError,
    DocumentLoadError,
    InterpolationError,
    LoonError,
    UnknownKeyError,
    UnknownLocaleError,
)
from loon.keys import ChainedKeyPath, DottedKeyPath, KeyPath, SegmentKeyPath
from loon.loader import DocumentLoader, FileDocumentLoader
from loon.options import Count, DefaultKey, Locale, Opts, OptsPart, Var
from loon.registry import (
    DictionaryRegistry,
    get_dictionary,
    set_config,
    t,
    translate,
)

__all__ = [
    # Resolution
    "Dictionary",
    "KeyPath",
    "DottedKeyPath",
    "SegmentKeyPath",
    "ChainedKeyPath",
    # Options
    "Opts",
    "OptsPart",
    "Locale",
    "Var",
    "Count",
    "DefaultKey",
    # Configuration
    "Config",
    "ConfigPart",
    "DefaultLocale",
    "PathPattern",
    "LocalizedPath",
    "DocumentLoader",
    "FileDocumentLoader",
    # Global
    "DictionaryRegistry",
    "set_config",
    "get_dictionary",
    "translate",
    "t",
    # Errors
    "LoonError",
    "UnknownLocaleError",
    "UnknownKeyError",
    "InterpolationError",
    "DocumentLoadError",
    "ConfigurationAlreadySetError",
]
