"""Tests for the exception hierarchy."""

import pytest

from openiban.exceptions import (
    ArgumentError,
    BicNotFoundError,
    ConfigurationError,
    InvalidCharacterError,
    OpenIBANError,
    UnsupportedAccountDetails,
    UnsupportedCountryError,
)

pytestmark = pytest.mark.unit


class TestContext:
    """Tests for the structured context carried by exceptions."""

    @pytest.mark.parametrize(
        "build_error,added_key",
        [
            (lambda ctx: ArgumentError("bad", field="bank_code", context=ctx), "field"),
            (lambda ctx: UnsupportedCountryError("US", context=ctx), "field"),
            (lambda ctx: BicNotFoundError("GB", "200000", context=ctx), "country_code"),
            (lambda ctx: InvalidCharacterError("bad", character="-", context=ctx), "character"),
            (lambda ctx: UnsupportedAccountDetails("bad", rule="000100", context=ctx), "rule"),
            (lambda ctx: ConfigurationError("bad", setting="structure_file", context=ctx), "setting"),
        ],
    )  # fmt: skip
    def test_caller_context_not_modified(self, build_error, added_key):
        """Test that context passed in by the caller is copied, not changed."""
        caller_context = {"request_id": "abc"}

        error = build_error(caller_context)

        assert caller_context == {"request_id": "abc"}
        assert error.context["request_id"] == "abc"
        assert added_key in error.context

    def test_context_not_shared_with_caller(self):
        """Test that later changes to the error's context don't reach the caller."""
        caller_context = {"request_id": "abc"}
        error = OpenIBANError("bad", context=caller_context)

        error.context["extra"] = 1

        assert caller_context == {"request_id": "abc"}

    def test_str_includes_context(self):
        """Test that the string form lists the context."""
        error = ArgumentError("missing field", field="account_number")

        assert str(error) == "missing field (field=account_number)"

    def test_value_is_truncated(self):
        """Test that long values are cut to 100 characters."""
        error = ArgumentError("bad", value="1" * 150)

        assert len(error.context["value"]) == 100

    def test_hierarchy(self):
        """Test the base classes callers can catch."""
        assert issubclass(UnsupportedCountryError, ArgumentError)
        assert issubclass(ArgumentError, ValueError)
        assert issubclass(InvalidCharacterError, ValueError)
        for error_class in (BicNotFoundError, UnsupportedAccountDetails, ConfigurationError):
            assert issubclass(error_class, OpenIBANError)
