"""Document loading interface and implementations.

Defines the contract for reading a locale document from disk and provides
a loader for JSON, YAML and TOML files.
"""

import json
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable, Dict, Union

import yaml

from loon.errors import DocumentLoadError
from loon.logging import get_module_logger

logger = get_module_logger()

PathLike = Union[str, Path]


def normalize_document(value: Any) -> Any:
    """Convert a parsed tree to plain JSON-like types.

    Mapping keys become strings (YAML allows ``1:`` or ``yes:`` keys) and
    tuples become lists, so lookups only ever deal with str-keyed dicts.
    """
    if isinstance(value, dict):
        return {_normalize_key(k): normalize_document(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [normalize_document(item) for item in value]
    return value


def _normalize_key(key: Any) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    return str(key)


class DocumentLoader(ABC):
    """Abstract base for document loaders.

    Implementations decide which files they can read and how to parse them
    into a document tree.
    """

    @abstractmethod
    def supports(self, path: PathLike) -> bool:
        """Check if the loader can read this file."""

    @abstractmethod
    def load(self, path: PathLike) -> Any:
        """Load a document from a file.

        Args:
            path: File to read.

        Returns:
            Parsed document tree.

        Raises:
            DocumentLoadError: If the file cannot be read or parsed.
        """


def _load_json(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


class _DocumentYAMLLoader(yaml.SafeLoader):
    """SafeLoader that builds every mapping with string keys.

    Keys are converted while the mapping is built, so ``1:`` and ``true:``
    stay distinct instead of colliding as the Python keys ``1`` and ``True``.
    """


def _construct_str_keyed_mapping(loader: yaml.SafeLoader, node: yaml.MappingNode) -> dict:
    loader.flatten_mapping(node)
    mapping = {}
    for key_node, value_node in node.value:
        key = _normalize_key(loader.construct_object(key_node, deep=True))
        mapping[key] = loader.construct_object(value_node, deep=True)
    return mapping


_DocumentYAMLLoader.add_constructor(
    yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG, _construct_str_keyed_mapping
)


def _load_yaml(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.load(f, Loader=_DocumentYAMLLoader)  # nosec B506


def _load_toml(path: Path) -> Any:
    with open(path, "rb") as f:
        return tomllib.load(f)


class FileDocumentLoader(DocumentLoader):
    """Loader for locale documents stored as JSON, YAML or TOML files.

    The parser is chosen by file suffix.

    Attributes:
        parsers: Mapping of lower-case suffix -> parser callable.
    """

    PARSERS: Dict[str, Callable[[Path], Any]] = {
        ".json": _load_json,
        ".yml": _load_yaml,
        ".yaml": _load_yaml,
        ".toml": _load_toml,
    }

    def __init__(self, parsers: Dict[str, Callable[[Path], Any]] = None):
        self.parsers = dict(parsers if parsers is not None else self.PARSERS)

    def supports(self, path: PathLike) -> bool:
        return Path(path).suffix.lower() in self.parsers

    def load(self, path: PathLike) -> Any:
        path = Path(path)
        parser = self.parsers.get(path.suffix.lower())
        if parser is None:
            raise DocumentLoadError(
                f"Unsupported document format: {path.suffix or '<none>'}", path=path
            )

        try:
            data = parser(path)
        except OSError as e:
            logger.error("document_read_error", file=str(path), error=str(e))
            raise DocumentLoadError(f"Failed to read {path}: {e}", path=path) from e
        except (
            json.JSONDecodeError,
            yaml.YAMLError,
            tomllib.TOMLDecodeError,
            UnicodeDecodeError,
        ) as e:
            logger.error("document_parse_error", file=str(path), error=str(e))
            raise DocumentLoadError(f"Failed to parse {path}: {e}", path=path) from e

        logger.debug("loaded_document", file=str(path))
        return normalize_document(data)
