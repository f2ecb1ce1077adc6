"""Tests for Swedish bank detail validation."""

import pytest

from openiban.sweden import Validator

pytestmark = pytest.mark.unit


class TestLocalDetailValidators:
    """Tests for clearing code and serial number validation."""

    @pytest.mark.parametrize(
        "clearing_code,expected",
        [(None, False), ("1001", False), ("1101", True)],
    )
    def test_bank_code_exists_for_clearing_code(self, clearing_code, expected):
        """Test whether a clearing code belongs to a bank."""
        assert Validator.bank_code_exists_for_clearing_code(clearing_code) is expected

    @pytest.mark.parametrize(
        "clearing_code,expected",
        [
            (None, None),
            ("1001", None),
            ("1101", True),
            ("80001", True),
            ("40001", False),
        ],
    )
    def test_valid_clearing_code_length(self, clearing_code, expected):
        """Test that the clearing code length matches the bank's."""
        assert Validator.valid_clearing_code_length(clearing_code) is expected

    @pytest.mark.parametrize(
        "clearing_code,serial_number,expected",
        [
            (None, "1234567", None),
            ("1001", "1234567", None),
            ("1101", "1234567", True),
            ("1101", "123456", False),
            ("9960", "123456", True),
            ("9960", "12345678901", False),
            ("9960", None, False),
        ],
    )
    def test_valid_serial_number_length(self, clearing_code, serial_number, expected):
        """Test serial number lengths, with zerofill where the bank allows it."""
        result = Validator.valid_serial_number_length(
            clearing_code=clearing_code, serial_number=serial_number
        )

        assert result is expected


class TestSwiftDetailValidators:
    """Tests for SWIFT bank code and account number validation."""

    @pytest.mark.parametrize(
        "bank_code,expected",
        [(None, False), ("123", False), ("120", True)],
    )
    def test_bank_code_exists(self, bank_code, expected):
        """Test whether a SWIFT bank code is known."""
        assert Validator.bank_code_exists(bank_code) is expected

    @pytest.mark.parametrize(
        "bank_code,expected",
        [(None, None), ("500", False), ("120", True)],
    )
    def test_bank_code_possible_for_account_number(self, bank_code, expected):
        """Test that the clearing code in the account number fits the bank."""
        result = Validator.bank_code_possible_for_account_number(
            bank_code=bank_code, account_number="12810105723"
        )

        assert result is expected

    @pytest.mark.parametrize(
        "bank_code,account_number,expected",
        [
            (None, "12810105723", None),
            ("500", "12810105723", None),
            ("500", "00000054391024039", True),
            ("500", "00000005439102403", False),
            ("500", "00000543910240391", False),
            ("120", "12810105723", True),
            ("120", "00000128101057231", False),
            ("120", "00000001281010572", True),
            ("600", "00000000219161038", True),
            ("600", "00000000021916103", True),
            ("600", "00000002191610381", False),
            ("950", "00099603401258276", True),
        ],
    )
    def test_account_number_length_valid_for_bank_code(self, bank_code, account_number, expected):
        """Test SWIFT account number lengths against every range of the bank."""
        result = Validator.account_number_length_valid_for_bank_code(
            bank_code=bank_code, account_number=account_number
        )

        assert result is expected
