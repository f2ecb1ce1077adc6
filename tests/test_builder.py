"""Tests for strict IBAN construction."""

import pytest

from openiban.builder import IBANBuilder, required_fields
from openiban.exceptions import (
    ArgumentError,
    BicNotFoundError,
    InvalidCharacterError,
    UnsupportedAccountDetails,
    UnsupportedCountryError,
)

pytestmark = pytest.mark.unit


class TestRequiredFields:
    """Tests for the builder's per-country required fields."""

    def test_defaults(self):
        """Test the field sets of a few countries."""
        assert required_fields("DE") == ("bank_code", "account_number")
        assert required_fields("ES") == ("account_number",)
        assert required_fields("IT") == ("bank_code", "branch_code", "account_number")

    def test_bic_countries_with_finder(self, bic_finder):
        """Test that a BIC finder makes the bank code optional."""
        assert required_fields("GB") == ("bank_code", "branch_code", "account_number")
        assert required_fields("GB", bic_finder) == ("branch_code", "account_number")


class TestBuild:
    """Tests for building IBANs from local details."""

    @pytest.mark.parametrize(
        "opts,expected",
        [
            ({"country_code": "AT", "bank_code": "19043", "account_number": "234573201"}, "AT611904300234573201"),
            ({"country_code": "BE", "account_number": "510-0075470-61"}, "BE62510007547061"),
            ({"country_code": "EE", "account_number": "0221020145685"}, "EE382200221020145685"),
            ({"country_code": "EE", "account_number": "111020145685"}, "EE412200111020145685"),
            ({"country_code": "ES", "bank_code": "2310", "branch_code": "0001", "account_number": "0000012345"}, "ES8023100001180000012345"),
            ({"country_code": "ES", "bank_code": "2310", "branch_code": "0001", "account_number": "12345"}, "ES8023100001180000012345"),
            ({"country_code": "ES", "bank_code": "2310", "branch_code": "0001", "account_number": "180000012345"}, "ES8023100001180000012345"),
            ({"country_code": "ES", "account_number": "2310-0001-18-0000012345"}, "ES8023100001180000012345"),
            ({"country_code": "FI", "bank_code": "423456", "account_number": "78510"}, "FI3442345670008510"),
            ({"country_code": "FR", "bank_code": "20041", "branch_code": "01005", "account_number": "0500013M026"}, "FR1420041010050500013M02606"),
            ({"country_code": "FR", "bank_code": "20041", "branch_code": "01005", "account_number": "0500013M026", "rib_key": "00"}, "FR7920041010050500013M02600"),
            ({"country_code": "FR", "bank_code": "20041", "branch_code": "01005", "account_number": "0500013M02606"}, "FR1420041010050500013M02606"),
            ({"country_code": "MC", "bank_code": "20041", "branch_code": "01005", "account_number": "0500013M026"}, "MC9320041010050500013M02606"),
            ({"country_code": "IE", "bank_code": "AIBK", "branch_code": "931152", "account_number": "12345678"}, "IE29AIBK93115212345678"),
            ({"country_code": "IT", "bank_code": "05428", "branch_code": "11101", "account_number": "000000123456"}, "IT60X0542811101000000123456"),
            ({"country_code": "LU", "bank_code": "001", "account_number": "9400644750000"}, "LU280019400644750000"),
            ({"country_code": "LV", "bank_code": "BANK", "account_number": "1234567890123"}, "LV72BANK1234567890123"),
            ({"country_code": "PT", "bank_code": "0002", "branch_code": "0023", "account_number": "00238430005"}, "PT50000200230023843000578"),
            ({"country_code": "PT", "bank_code": "0002", "branch_code": "0023", "account_number": "0023843000578"}, "PT50000200230023843000578"),
            ({"country_code": "SI", "bank_code": "19100", "account_number": "1234"}, "SI56191000000123438"),
            ({"country_code": "SK", "bank_code": "1200", "account_number": "8742637541", "account_number_prefix": "000019"}, "SK3112000000198742637541"),
        ],
    )  # fmt: skip
    def test_known_ibans(self, opts, expected):
        """Test building against known IBANs."""
        iban = IBANBuilder.build(**opts)

        assert iban.iban == expected
        assert iban.valid()

    def test_gb_bank_code_from_bic(self, bic_finder):
        """Test that a GB bank code is looked up from the sort code."""
        iban = IBANBuilder.build(
            bic_finder=bic_finder,
            country_code="GB",
            branch_code="20-00-00",
            account_number="55779911",
        )

        assert iban.iban == "GB60BARC20000055779911"
        assert iban.bank_code == "BARC"

    def test_gb_with_bank_code(self):
        """Test that no BIC finder is needed when the bank code is given."""
        iban = IBANBuilder.build(
            country_code="GB", bank_code="BARC", branch_code="200000", account_number="55779911"
        )

        assert iban.iban == "GB60BARC20000055779911"


class TestBuildErrors:
    """Tests for the exceptions raised on bad details."""

    def test_missing_country_code(self):
        """Test that a country code is always required."""
        with pytest.raises(ArgumentError, match="You must provide a country_code") as exc_info:
            IBANBuilder.build(bank_code="37040044", account_number="0532013000")

        assert exc_info.value.context["field"] == "country_code"

    @pytest.mark.parametrize("country_code", ["US", "FU", "GI"])
    def test_unsupported_country(self, country_code):
        """Test that countries without construction support raise."""
        with pytest.raises(UnsupportedCountryError) as exc_info:
            IBANBuilder.build(country_code=country_code, account_number="12345678")

        assert exc_info.value.country_code == country_code
        assert isinstance(exc_info.value, ArgumentError)

    @pytest.mark.parametrize(
        "opts,field",
        [
            ({"country_code": "DE", "bank_code": "37040044"}, "account_number"),
            ({"country_code": "DE", "account_number": "0532013000"}, "bank_code"),
            ({"country_code": "IT", "bank_code": "05428", "account_number": "123456"}, "branch_code"),
            ({"country_code": "GB", "branch_code": "200000", "account_number": "55779911"}, "bank_code"),
        ],
    )  # fmt: skip
    def test_missing_required_field(self, opts, field):
        """Test that each required field is named when missing."""
        with pytest.raises(ArgumentError, match=f"{field} is a required field") as exc_info:
            IBANBuilder.build(**opts)

        assert exc_info.value.context["field"] == field

    def test_bic_not_found(self, bic_finder):
        """Test that an unknown branch raises when the bank code is needed."""
        with pytest.raises(BicNotFoundError) as exc_info:
            IBANBuilder.build(
                bic_finder=bic_finder,
                country_code="GB",
                branch_code="999999",
                account_number="55779911",
            )

        assert exc_info.value.context == {"country_code": "GB", "national_id": "999999"}

    def test_german_rule_rejects_account(self):
        """Test that accounts the bank's IBAN rule rejects raise."""
        with pytest.raises(UnsupportedAccountDetails):
            IBANBuilder.build(country_code="DE", bank_code="10020500", account_number="1234567890")

    def test_bad_character_in_check_digit_input(self):
        """Test that characters the Spanish checksum can't handle raise."""
        with pytest.raises(InvalidCharacterError):
            IBANBuilder.build(
                country_code="ES", bank_code="2310", branch_code="0001", account_number="123h5"
            )

    def test_details_that_dont_assemble(self):
        """Test that details with the wrong shape raise instead of returning an empty IBAN."""
        with pytest.raises(ArgumentError, match="Could not build an HU IBAN"):
            IBANBuilder.build(country_code="HU", account_number="11773016-1111101")
