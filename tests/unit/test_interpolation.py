"""Tests for loon.interpolation module."""

import pytest

from loon.errors import InterpolationError
from loon.interpolation import interpolate


class TestInterpolate:
    """Tests for interpolate()."""

    def test_single_placeholder(self):
        """Placeholders are replaced by their value."""
        assert interpolate("Hello, {name}!!!", {"name": "Jacob"}) == "Hello, Jacob!!!"

    def test_repeated_and_multiple_placeholders(self):
        """Every occurrence is replaced."""
        result = interpolate("{a}-{b}-{a}", {"a": "x", "b": "y"})
        assert result == "x-y-x"

    def test_no_placeholders(self):
        """Plain templates come back unchanged."""
        assert interpolate("Hello, World!", {}) == "Hello, World!"

    def test_extra_variables_ignored(self):
        """Unused variables are fine."""
        assert interpolate("Hi", {"unused": "1"}) == "Hi"

    def test_escaped_braces(self):
        """Doubled braces are literal braces."""
        assert interpolate("Use {{name}} here", {}) == "Use {name} here"

    def test_format_spec(self):
        """A format spec is applied to the string value."""
        assert interpolate("[{n:>4}]", {"n": "7"}) == "[   7]"

    def test_value_is_not_reinterpreted(self):
        """Values containing braces are inserted as-is."""
        assert interpolate("{a}", {"a": "{b}"}) == "{b}"

    def test_missing_variable(self):
        """A placeholder without a value raises InterpolationError."""
        with pytest.raises(InterpolationError) as exc_info:
            interpolate("Hello, {name}!", {"other": "x"})
        assert exc_info.value.placeholder == "name"
        assert exc_info.value.template == "Hello, {name}!"
        assert "name" in str(exc_info.value)

    def test_missing_variable_is_value_error(self):
        """InterpolationError is a ValueError."""
        with pytest.raises(ValueError):
            interpolate("{x}", {})

    @pytest.mark.parametrize(
        "template",
        [
            "Hello, {name",
            "Hello, name}",
            "{}",
            "{name!r}",
            "{name:{width}}",
        ],
    )
    def test_malformed(self, template):
        """Malformed placeholders raise InterpolationError."""
        with pytest.raises(InterpolationError):
            interpolate(template, {"name": "x", "width": "3"})

    def test_bad_format_spec(self):
        """An invalid format spec raises InterpolationError."""
        with pytest.raises(InterpolationError) as exc_info:
            interpolate("{n:d}", {"n": "7"})
        assert exc_info.value.placeholder == "n"
