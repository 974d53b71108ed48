"""
Tests for aspect ratio parsing.
"""
import pytest

from letterbox.aspect import parse_aspect
from letterbox.errors import AspectParseError, ConfigError


class TestParseAspect:
    """Tests for parse_aspect."""

    def test_default_ratio(self):
        """16:9 gives the smaller component over the larger."""
        assert parse_aspect("16:9") == pytest.approx(9 / 16)

    @pytest.mark.parametrize("a,b", [("16", "9"), ("4", "3"), ("1.5", "2.25"), ("21", "9"), ("1", "1")])
    def test_order_insensitive(self, a, b):
        """A:B and B:A normalise to the same ratio in (0, 1]."""
        forward = parse_aspect(f"{a}:{b}")
        backward = parse_aspect(f"{b}:{a}")
        assert forward == backward
        assert 0 < forward <= 1

    def test_square(self):
        assert parse_aspect("1:1") == 1.0

    @pytest.mark.parametrize("s", ["16x9", "16", "", "16:9:1", "a:9", "16:b", "16:", ":9", "nan:1", "inf:2", "0:9", "-16:9"])
    def test_invalid(self, s):
        """Malformed, non-numeric and non-positive inputs are rejected."""
        with pytest.raises(AspectParseError):
            parse_aspect(s)

    def test_is_config_error(self):
        """Aspect failures are configuration errors."""
        with pytest.raises(ConfigError):
            parse_aspect("wide")
