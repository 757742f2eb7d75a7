"""Tests for loon.loader module."""

import pytest

from loon.errors import DocumentLoadError
from loon.loader import FileDocumentLoader, normalize_document


class TestFileDocumentLoader:
    """Tests for FileDocumentLoader."""

    @pytest.fixture
    def loader(self):
        return FileDocumentLoader()

    @pytest.mark.parametrize(
        "name,supported",
        [
            ("en.yml", True),
            ("en.yaml", True),
            ("en.YML", True),
            ("de.json", True),
            ("fr.toml", True),
            ("notes.txt", False),
            ("README", False),
        ],
    )
    def test_supports(self, loader, name, supported):
        """supports() is decided by suffix."""
        assert loader.supports(name) is supported

    def test_load_yaml(self, loader, temp_locales_dir, en_document):
        """YAML documents load into plain trees."""
        assert loader.load(temp_locales_dir / "en.yml") == en_document

    def test_load_json(self, loader, temp_locales_dir, de_document):
        """JSON documents load into plain trees."""
        assert loader.load(temp_locales_dir / "de.json") == de_document

    def test_load_toml(self, loader, temp_locales_dir):
        """TOML documents load into plain trees."""
        document = loader.load(temp_locales_dir / "fr.toml")
        assert document["greeting"] == "Bonjour le monde !"
        assert document["messages"]["other"] == "Vous avez {count} messages."

    def test_formats_agree(self, loader, tmp_path):
        """The same content loads identically from every format."""
        (tmp_path / "a.json").write_text('{"a": {"b": ["x", "y"]}}', encoding="utf-8")
        (tmp_path / "a.yml").write_text("a:\n  b:\n    - x\n    - y\n", encoding="utf-8")
        (tmp_path / "a.toml").write_text('[a]\nb = ["x", "y"]\n', encoding="utf-8")
        documents = [loader.load(tmp_path / name) for name in ("a.json", "a.yml", "a.toml")]
        assert documents[0] == documents[1] == documents[2] == {"a": {"b": ["x", "y"]}}

    def test_load_missing_file(self, loader, tmp_path):
        """A missing file raises DocumentLoadError from OSError."""
        path = tmp_path / "absent.yml"
        with pytest.raises(DocumentLoadError) as exc_info:
            loader.load(path)
        assert exc_info.value.path == path
        assert isinstance(exc_info.value.__cause__, OSError)

    @pytest.mark.parametrize(
        "name,content",
        [
            ("bad.json", "{not json"),
            ("bad.yml", "a: [unclosed"),
            ("bad.toml", "a = "),
        ],
    )
    def test_load_invalid_content(self, loader, tmp_path, name, content):
        """Parse errors raise DocumentLoadError."""
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        with pytest.raises(DocumentLoadError) as exc_info:
            loader.load(path)
        assert exc_info.value.__cause__ is not None

    def test_load_unsupported(self, loader, temp_locales_dir):
        """Unsupported formats raise DocumentLoadError."""
        with pytest.raises(DocumentLoadError):
            loader.load(temp_locales_dir / "notes.txt")

    def test_custom_parsers(self, tmp_path):
        """Parsers can be replaced per instance."""
        path = tmp_path / "en.txt"
        path.write_text("hello", encoding="utf-8")
        loader = FileDocumentLoader({".txt": lambda p: {"greeting": p.read_text()}})
        assert loader.supports(path)
        assert loader.load(path) == {"greeting": "hello"}
        assert not loader.supports("en.yml")

    def test_yaml_keys_normalized(self, loader, tmp_path):
        """Non-string YAML keys become strings."""
        path = tmp_path / "en.yml"
        path.write_text("1: one\ntrue: yes\nnull: nothing\n", encoding="utf-8")
        assert loader.load(path) == {"1": "one", "true": True, "null": "nothing"}

    def test_yaml_colliding_keys_stay_distinct(self, loader, tmp_path):
        """Keys equal as Python values stay separate once stringified."""
        path = tmp_path / "en.yml"
        path.write_text("counts:\n  1: one\n  1.0: one point oh\n  true: yes\n", encoding="utf-8")
        assert loader.load(path) == {"counts": {"1": "one", "1.0": "one point oh", "true": True}}

    def test_yaml_merge_keys(self, loader, tmp_path):
        """YAML merge keys still work."""
        path = tmp_path / "en.yml"
        path.write_text(
            "base: &base\n  greeting: Hi\nderived:\n  <<: *base\n  farewell: Bye\n",
            encoding="utf-8",
        )
        assert loader.load(path)["derived"] == {"greeting": "Hi", "farewell": "Bye"}


class TestNormalizeDocument:
    """Tests for normalize_document()."""

    def test_nested(self):
        """Keys are normalized at every depth; tuples become lists."""
        document = normalize_document({1: {False: ("a", {None: 2.5})}})
        assert document == {"1": {"false": ["a", {"null": 2.5}]}}

    def test_scalars_unchanged(self):
        """Scalars pass through."""
        assert normalize_document("x") == "x"
        assert normalize_document(None) is None
