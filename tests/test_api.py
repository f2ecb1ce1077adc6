"""Tests for the package-level functions."""

import pytest

import openiban
from openiban import IBAN

pytestmark = pytest.mark.unit


class TestValidate:
    """Tests for openiban.validate."""

    def test_valid(self):
        """Test a valid IBAN."""
        assert openiban.validate("GB82 WEST 1234 5698 7654 32") == {"valid": True, "errors": {}}

    def test_invalid(self):
        """Test that errors are reported by field."""
        result = openiban.validate("GB12WEST12345698765432")

        assert result["valid"] is False
        assert set(result["errors"]) == {"check_digits"}

    @pytest.mark.parametrize(
        "iban",
        ["NO9386011117947", "DE89370400440532013000", "SE4550000000058398257466"],
    )
    def test_valid_countries(self, iban):
        """Test valid IBANs from several countries."""
        assert openiban.validate(iban) == {"valid": True, "errors": {}}

    def test_norway_decomposes(self):
        """Test that Norwegian IBANs split into their fields."""
        assert openiban.decompose("NO9386011117947") == {
            "country_code": "NO",
            "check_digits": "93",
            "bank_code": "8601",
            "branch_code": "",
            "account_number": "1117947",
        }

    def test_unknown_country(self):
        """Test that only the country code is reported for an unknown country."""
        result = openiban.validate("AA123456789123456")

        assert result["valid"] is False
        assert set(result["errors"]) == {"country_code"}


class TestDecompose:
    """Tests for openiban.decompose."""

    def test_decompose(self):
        """Test that a valid IBAN is split into its SWIFT fields."""
        assert openiban.decompose("GB82WEST12345698765432") == {
            "country_code": "GB",
            "check_digits": "82",
            "bank_code": "WEST",
            "branch_code": "123456",
            "account_number": "98765432",
        }

    def test_missing_fields_are_empty(self):
        """Test that fields a country doesn't use come back as empty strings."""
        result = openiban.decompose("DE89370400440532013000")

        assert result["bank_code"] == "37040044"
        assert result["branch_code"] == ""
        assert result["account_number"] == "0532013000"

    def test_wrong_length(self):
        """Test that an undecomposable IBAN keeps only its country code."""
        assert openiban.decompose("GB82WEST123456987654") == {
            "country_code": "GB",
            "check_digits": "",
            "bank_code": "",
            "branch_code": "",
            "account_number": "",
        }


class TestAssembleAndBuild:
    """Tests for openiban.assemble and openiban.build."""

    def test_assemble(self):
        """Test assembly from SWIFT details."""
        assert openiban.assemble(
            {"country_code": "DE", "bank_code": "37040044", "account_number": "0532013000"}
        ) == "DE89370400440532013000"

    def test_assemble_never_raises(self):
        """Test that unusable details give None."""
        assert openiban.assemble({"country_code": "IT", "bank_code": "05428"}) is None

    def test_build(self):
        """Test that build returns an IBAN object."""
        iban = openiban.build(country_code="NL", bank_code="ABNA", account_number="417164300")

        assert isinstance(iban, IBAN)
        assert iban.iban == "NL91ABNA0417164300"

    def test_build_raises(self):
        """Test that build raises on bad input."""
        with pytest.raises(openiban.ArgumentError):
            openiban.build(bank_code="ABNA", account_number="417164300")


class TestCleanLocalDetails:
    """Tests for openiban.clean_local_details and the default BIC finder."""

    def test_clean(self):
        """Test that details are cleaned."""
        result = openiban.clean_local_details(
            {"country_code": "NL", "bank_code": "ABNA", "account_number": "417164300"}
        )

        assert result["account_number"] == "0417164300"
        assert result["swift_account_number"] == "0417164300"

    def test_set_bic_finder(self, bic_finder):
        """Test that the process-wide finder is used by every entry point."""
        openiban.set_bic_finder(bic_finder)
        opts = {"country_code": "IE", "branch_code": "931152", "account_number": "12345678"}

        assert openiban.clean_local_details(opts)["bank_code"] == "BOFI"
        assert openiban.build(**opts).iban == "IE79BOFI93115212345678"

    def test_version(self):
        """Test that the package exposes its version."""
        assert openiban.__version__ == "1.0.0"


class TestModulusChecker:
    """Tests for openiban.set_modulus_checker."""

    class RejectingAccounts:
        def valid_bank_code(self, iban):
            return True

        def valid_branch_code(self, iban):
            return True

        def valid_account_number(self, iban):
            return iban.account_number != "98765432"

    def test_set_modulus_checker(self):
        """Test that the process-wide checker feeds valid_full but not validate."""
        openiban.set_modulus_checker(self.RejectingAccounts())
        iban = IBAN("GB82WEST12345698765432")

        assert openiban.validate("GB82WEST12345698765432")["valid"] is True
        assert iban.valid_full() is False
        assert iban.errors == {"account_number": "is invalid"}
