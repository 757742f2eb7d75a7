"""Shared fixtures for loon tests.

Provides sample documents, dictionaries, temporary locale directories and
an isolated global registry.
"""

import json
from pathlib import Path

import pytest
import yaml

from loon import registry
from loon.registry import DictionaryRegistry
from loon.settings import get_settings
from tests.factories.documents import (
    make_de_document,
    make_dictionary,
    make_en_document,
)

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def en_document():
    return make_en_document()


@pytest.fixture
def de_document():
    return make_de_document()


@pytest.fixture
def dictionary():
    """Dictionary with en (default) and de documents."""
    return make_dictionary()


@pytest.fixture
def fixture_locales_dir():
    """Directory with the checked-in en.yml and de.yml documents."""
    return FIXTURES_DIR / "locales"


@pytest.fixture
def temp_locales_dir(tmp_path, en_document, de_document):
    """Create temporary directory with locale documents in each format.

    Returns a directory structure like:
    - en.yml
    - de.json
    - fr.toml
    - notes.txt
    """
    with open(tmp_path / "en.yml", "w", encoding="utf-8") as f:
        yaml.dump(en_document, f, allow_unicode=True)

    with open(tmp_path / "de.json", "w", encoding="utf-8") as f:
        json.dump(de_document, f, ensure_ascii=False)

    (tmp_path / "fr.toml").write_text(
        'greeting = "Bonjour le monde !"\n'
        "\n"
        "[messages]\n"
        'zero = "Vous n\'avez aucun message."\n'
        'one = "Vous avez un message."\n'
        'other = "Vous avez {count} messages."\n',
        encoding="utf-8",
    )

    (tmp_path / "notes.txt").write_text("not a locale document\n", encoding="utf-8")

    return tmp_path


@pytest.fixture
def fresh_registry(monkeypatch):
    """Replace the module-level registry with an empty one."""
    fresh = DictionaryRegistry()
    monkeypatch.setattr(registry, "_registry", fresh)
    return fresh


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Drop cached settings so environment changes take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
