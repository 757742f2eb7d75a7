"""Process-wide configuration and dictionary.

The global configuration can be set once. The global Dictionary is built
from it on first use and the outcome, success or failure, is kept for the
life of the process.

Usage:
    import loon

    loon.set_config(loon.PathPattern("locales/*.yml"))
    loon.t("greeting")
"""

import threading
from typing import Any, Optional

from loon.config import Config
from loon.dictionary import Dictionary
from loon.errors import ConfigurationAlreadySetError, DocumentLoadError
from loon.keys import KeyLike
from loon.logging import get_module_logger

logger = get_module_logger()


class DictionaryRegistry:
    """Holds a once-settable Config and the Dictionary built from it.

    Attributes:
        config: The configuration in effect, or None before first use.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._config: Optional[Config] = None
        self._dictionary: Optional[Dictionary] = None
        self._error: Optional[DocumentLoadError] = None

    @property
    def config(self) -> Optional[Config]:
        return self._config

    def set_config(self, *parts: Any) -> None:
        """Set the configuration for the global dictionary.

        Args:
            *parts: A Config and/or configuration fragments.

        Raises:
            ConfigurationAlreadySetError: If a configuration was already set,
                either explicitly or by a translate call that installed the
                default configuration.
        """
        config = Config.of(*parts)
        with self._lock:
            if self._config is not None:
                logger.warning("configuration_already_set")
                raise ConfigurationAlreadySetError()
            self._config = config
        logger.info("configuration_set", path_pattern=config.path_pattern)

    def dictionary(self) -> Dictionary:
        """Get the global dictionary, building it on first use.

        Raises:
            DocumentLoadError: If loading failed. The first failure is
                re-raised on every call; loading is never retried.
        """
        with self._lock:
            if self._dictionary is None and self._error is None:
                if self._config is None:
                    self._config = Config.global_default()
                try:
                    self._dictionary = self._config.finish()
                except DocumentLoadError as e:
                    logger.error("global_dictionary_failed", error=str(e))
                    self._error = e

            if self._error is not None:
                raise self._error
            return self._dictionary

    def translate(self, key: KeyLike, *opts: Any) -> str:
        return self.dictionary().translate(key, *opts)


_registry = DictionaryRegistry()


def set_config(*parts: Any) -> None:
    """Set the Config used by the global ``translate`` call.

    Raises:
        ConfigurationAlreadySetError: On any call after the first.
    """
    _registry.set_config(*parts)


def get_dictionary() -> Dictionary:
    """Get the global Dictionary, building it on first use."""
    return _registry.dictionary()


def translate(key: KeyLike, *opts: Any) -> str:
    """Translate a message using the global configuration.

    If ``set_config`` was never called, documents are looked up with the
    pattern from ``LOON_LOCALES_PATH_PATTERN`` (``config/locales/*.*``).
    """
    return _registry.translate(key, *opts)


def t(key: KeyLike, *opts: Any) -> str:
    """Shortcut for ``translate``."""
    return _registry.translate(key, *opts)
