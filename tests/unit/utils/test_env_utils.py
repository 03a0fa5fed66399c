"""Tests for environment parsing helpers."""

from lazy_holder.utils.env_utils import parse_float_env, parse_list_env, parse_str_env


class TestParseFloatEnv:
    """Tests for parse_float_env."""

    def test_unset_returns_default(self, monkeypatch):
        monkeypatch.delenv("TEST_FLOAT", raising=False)
        assert parse_float_env("TEST_FLOAT", 1.5) == 1.5

    def test_parses_value(self, monkeypatch):
        monkeypatch.setenv("TEST_FLOAT", "0.25")
        assert parse_float_env("TEST_FLOAT", 1.5) == 0.25

    def test_blank_returns_default(self, monkeypatch):
        monkeypatch.setenv("TEST_FLOAT", "  ")
        assert parse_float_env("TEST_FLOAT", 1.5) == 1.5

    def test_invalid_returns_default(self, monkeypatch):
        monkeypatch.setenv("TEST_FLOAT", "abc")
        assert parse_float_env("TEST_FLOAT", 1.5) == 1.5


class TestParseListEnv:
    """Tests for parse_list_env."""

    def test_unset_returns_copy_of_default(self, monkeypatch):
        """Test the default list is copied, not shared."""
        monkeypatch.delenv("TEST_LIST", raising=False)
        default = ["x"]
        result = parse_list_env("TEST_LIST", default)
        assert result == ["x"]
        assert result is not default

    def test_splits_and_strips(self, monkeypatch):
        monkeypatch.setenv("TEST_LIST", "FOO,, BAR ")
        assert parse_list_env("TEST_LIST", []) == ["FOO", "BAR"]


class TestParseStrEnv:
    """Tests for parse_str_env."""

    def test_value_and_default(self, monkeypatch):
        monkeypatch.setenv("TEST_STR", "hello")
        assert parse_str_env("TEST_STR") == "hello"
        monkeypatch.delenv("TEST_STR")
        assert parse_str_env("TEST_STR", "fallback") == "fallback"
