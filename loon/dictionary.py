"""Dictionary of translation messages.

Core component that resolves a key in a locale document, applies
pluralization and fallback keys, and interpolates variables.
"""

from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

from loon.errors import UnknownKeyError, UnknownLocaleError
from loon.interpolation import interpolate
from loon.keys import KeyLike, KeyPath
from loon.logging import get_module_logger
from loon.lookup import find_template
from loon.options import Opts

logger = get_module_logger()

DEFAULT_LOCALE = "en"


def plural_suffix(count: int) -> str:
    """Return the pluralization sub-key for a count.

    Only the zero/one/other convention is supported; negative counts and
    counts above one all map to ``other``.
    """
    if count == 0:
        return "zero"
    if count == 1:
        return "one"
    return "other"


class Dictionary:
    """Container for translation messages.

    Holds one parsed document per locale plus the default locale. The
    mapping is read-only once constructed, so a Dictionary can be shared
    between threads without locking.

    Attributes:
        default_locale: Locale used when a call does not name one.
    """

    def __init__(
        self,
        documents: Optional[Mapping[str, Any]] = None,
        default_locale: str = DEFAULT_LOCALE,
    ):
        """Initialize Dictionary.

        Args:
            documents: Mapping of locale name -> parsed document.
            default_locale: Locale used when a call does not name one.
        """
        self._documents = MappingProxyType(dict(documents or {}))
        self._default_locale = default_locale

    @property
    def default_locale(self) -> str:
        return self._default_locale

    @property
    def locales(self) -> Tuple[str, ...]:
        """Loaded locale names, in load order."""
        return tuple(self._documents)

    @property
    def documents(self) -> Mapping[str, Any]:
        return self._documents

    def document(self, locale: str) -> Any:
        """Get the document for a locale.

        Raises:
            UnknownLocaleError: If the locale is not loaded.
        """
        try:
            return self._documents[locale]
        except KeyError:
            raise UnknownLocaleError(locale) from None

    def has_key(self, key: KeyLike, locale: Optional[str] = None) -> bool:
        """Check if a string message exists for key in locale.

        No pluralization or fallback is applied.
        """
        if locale is None:
            locale = self._default_locale
        document = self._documents.get(locale)
        if document is None:
            return False
        return find_template(KeyPath.of(key), document) is not None

    def translate(self, key: KeyLike, *opts: Any) -> str:
        """Translate a message.

        Args:
            key: Dotted string, segment list or KeyPath.
            *opts: ``Opts`` values or option fragments (``Locale``, ``Var``,
                ``Count``, ``DefaultKey``). None is accepted and ignored.

        Returns:
            The resolved, interpolated message.

        Raises:
            UnknownLocaleError: If the effective locale is not loaded.
            UnknownKeyError: If neither the key nor the fallback key resolve
                to a string.
            InterpolationError: If the template references a missing
                variable or is malformed.
        """
        options = Opts.of(*opts)
        key_path = KeyPath.of(key)

        if options.count is not None:
            key_path = key_path.chain([plural_suffix(options.count)])

        locale = options.locale if options.locale is not None else self._default_locale
        document = self.document(locale)

        template = find_template(key_path, document)
        if template is None:
            if options.default_key is None:
                logger.debug(
                    "translation_not_found",
                    key=key_path.to_display_string(),
                    locale=locale,
                )
                raise UnknownKeyError(key_path.to_display_string())

            template = find_template(options.default_key, document)
            if template is None:
                logger.debug(
                    "translation_not_found",
                    key=key_path.to_display_string(),
                    default_key=options.default_key.to_display_string(),
                    locale=locale,
                )
                raise UnknownKeyError(options.default_key.to_display_string())

            logger.debug(
                "used_fallback_key",
                key=key_path.to_display_string(),
                default_key=options.default_key.to_display_string(),
                locale=locale,
            )

        if options.variables is None:
            return template

        return interpolate(template, options.variables)

    t = translate

    def __repr__(self) -> str:
        return (
            f"Dictionary(locales={list(self._documents)!r}, "
            f"default_locale={self._default_locale!r})"
        )
