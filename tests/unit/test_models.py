"""Tests for payload models."""

import pytest
from pydantic import ValidationError

from lazy_holder.models import SingletonValue


class TestSingletonValue:
    """Tests for SingletonValue."""

    def test_from_init_value(self):
        """Test the holder factory copies the init value."""
        payload = SingletonValue.from_init_value("FOO")
        assert payload.value == "FOO"

    def test_value_is_mutable(self):
        """Test the payload field can be updated in place."""
        payload = SingletonValue(value="FOO")
        payload.value = "BAR"
        assert payload.value == "BAR"

    def test_empty_string_allowed(self):
        """Test an empty init value is still a valid payload."""
        assert SingletonValue.from_init_value("").value == ""

    @pytest.mark.parametrize("bad_value", [None, 42, ["FOO"]])
    def test_non_string_rejected(self, bad_value):
        """Test non-string init values fail construction."""
        with pytest.raises(ValidationError):
            SingletonValue.from_init_value(bad_value)
