"""Custom exceptions for the loon localization library.

Provides the error taxonomy raised by dictionary lookups, interpolation,
document loading and the process-wide configuration.
"""

from pathlib import Path
from typing import Optional, Union


class LoonError(Exception):
    """Base exception for all loon errors.

    Example:
        try:
            loon.t("greeting")
        except LoonError as e:
            logger.error("translation_failed", error=str(e))
    """

    pass


class UnknownLocaleError(LoonError, LookupError):
    """Raised when the effective locale has no loaded document.

    Example:
        >>> dictionary.translate("greeting", Locale("xx"))
        Traceback (most recent call last):
        ...
        UnknownLocaleError: Unknown locale: xx
    """

    def __init__(self, locale: str):
        self.locale = locale
        super().__init__(f"Unknown locale: {locale}")


class UnknownKeyError(LoonError, LookupError):
    """Raised when no string template exists at the searched key path.

    The key is the dotted form of the path that was actually searched,
    including any pluralization suffix.

    Example:
        >>> dictionary.translate("messages", Count(0))
        Traceback (most recent call last):
        ...
        UnknownKeyError: Unknown key: messages.zero
    """

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Unknown key: {key}")


class InterpolationError(LoonError, ValueError):
    """Raised when a template cannot be interpolated.

    Covers placeholders with no matching variable and malformed
    placeholder syntax.
    """

    def __init__(
        self,
        message: str,
        template: str,
        placeholder: Optional[str] = None,
    ):
        self.template = template
        self.placeholder = placeholder
        super().__init__(message)


class DocumentLoadError(LoonError):
    """Raised when a locale document cannot be read or parsed.

    The underlying I/O or parser exception is available as ``__cause__``.
    """

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.path = path
        super().__init__(message)


class ConfigurationAlreadySetError(LoonError, RuntimeError):
    """Raised when the global configuration is set more than once."""

    def __init__(self, message: str = "configuration already set"):
        super().__init__(message)
