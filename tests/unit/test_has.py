"""Tests for has()."""

from path_unset import has, unset


class TestHas:
    """Test has() membership probe."""

    def test_existing_paths(self):
        """Resolvable paths return True."""
        data = {"a": {"b": [{"c": None}]}}

        assert has(data, "a") is True
        assert has(data, "a.b") is True
        assert has(data, "a.b.0.c") is True
        assert has(data, ["a", "b", 0]) is True

    def test_missing_paths(self):
        """Unresolvable paths return False."""
        data = {"a": {"b": 1}}

        assert has(data, "x") is False
        assert has(data, "a.x") is False
        assert has(data, "a.b.c") is False

    def test_empty_path(self):
        """The empty path addresses nothing."""
        assert has({"a": 1}, []) is False

    def test_scalar_target(self):
        """Scalars contain nothing."""
        assert has(None, "a") is False
        assert has("abc", "0") is False

    def test_agrees_with_unset(self):
        """A deleted key is no longer reported."""
        data = {"user": {"name": "Alice", "email": "a@example.com"}}

        assert has(data, "user.name") is True
        unset(data, "user.name")
        assert has(data, "user.name") is False
        assert has(data, "user.email") is True
