"""Tests for Swedish clearing code lookup and local details conversion."""

import pytest

from openiban.sweden import BankLookup, LocalDetailsConverter

pytestmark = pytest.mark.unit


def convert(account_number: str, branch_code: str | None = None) -> dict:
    return LocalDetailsConverter(branch_code=branch_code, account_number=account_number).convert()


class TestBankLookup:
    """Tests for the clearing code range table."""

    def test_for_clearing_code(self):
        """Test finding a bank by four digit clearing code."""
        assert BankLookup.for_clearing_code("1281").bank_code == 120

    def test_for_clearing_code_uses_first_four_digits(self):
        """Test that five digit Swedbank clearing codes are matched on four digits."""
        bank = BankLookup.for_clearing_code("83279")

        assert bank.bank_code == 800
        assert bank.clearing_code_length == 5

    @pytest.mark.parametrize("clearing_code", ["1001", None, ""])
    def test_no_bank(self, clearing_code):
        """Test that unknown or missing clearing codes find nothing."""
        assert BankLookup.for_clearing_code(clearing_code) is None

    def test_for_bank_code_returns_every_range(self):
        """Test that a bank code can span several clearing code ranges."""
        ranges = BankLookup.for_bank_code("120")

        assert len(ranges) >= 3
        assert {bank.bank_code for bank in ranges} == {120}

    def test_for_unknown_bank_code(self):
        """Test that an unknown bank code finds nothing."""
        assert BankLookup.for_bank_code("123") == []


class TestLocalDetailsConverter:
    """Tests for converting local Swedish details to SWIFT details."""

    def test_danske_bank(self):
        """Test a type 1 account with the clearing code in the account number."""
        assert convert("12810105723") == {
            "account_number": "0105723",
            "branch_code": "1281",
            "swift_bank_code": "120",
            "swift_account_number": "00000012810105723",
        }

    def test_separators_removed(self):
        """Test that hyphens, dots and spaces are ignored."""
        result = convert("5439-10 240 39")

        assert result["swift_bank_code"] == "500"
        assert result["swift_account_number"] == "00000054391024039"

    def test_short_serial_number(self):
        """Test that short serial numbers are kept as given."""
        result = convert("1281-1")

        assert result["account_number"] == "1"
        assert result["swift_account_number"] == "00000000000012811"

    def test_explicit_branch_code(self):
        """Test details with the clearing code given separately."""
        result = convert("0105723", branch_code="1281")

        assert result["branch_code"] == "1281"
        assert result["account_number"] == "0105723"
        assert result["swift_account_number"] == "00000012810105723"

    def test_unknown_clearing_code(self):
        """Test that an unknown clearing code leaves only a padded account number."""
        assert convert("1001-1") == {
            "swift_bank_code": None,
            "swift_account_number": "00000000000010011",
        }

    def test_swedbank_7000s(self):
        """Test a Swedbank account in the type 1 range."""
        result = convert("7507-1211203")

        assert result["swift_bank_code"] == "800"
        assert result["swift_account_number"] == "00000075071211203"

    @pytest.mark.parametrize(
        "account_number,branch_code,serial_number,swift_account_number",
        [
            ("8327-9 33395390-9", "83279", "0333953909", "00832790333953909"),
            ("8201-6 914357963-0", "82016", "9143579630", "00820169143579630"),
        ],
    )
    def test_swedbank_8000s(self, account_number, branch_code, serial_number, swift_account_number):
        """Test that Swedbank 8000s accounts use a five digit clearing code."""
        result = convert(account_number)

        assert result["branch_code"] == branch_code
        assert result["account_number"] == serial_number
        assert result["swift_bank_code"] == "800"
        assert result["swift_account_number"] == swift_account_number

    def test_clearing_code_only(self):
        """Test that a bare clearing code gives no serial or SWIFT account number."""
        assert convert("8004") == {
            "account_number": None,
            "branch_code": "8004",
            "swift_bank_code": "800",
            "swift_account_number": None,
        }

    @pytest.mark.parametrize(
        "account_number,bank_code,serial_number,swift_account_number",
        [
            ("9300-35299478", "930", "35299478", "00000000035299478"),
            ("9330-5930160535", "933", "5930160535", "00000005930160535"),
            ("9570-5250093407", "957", "5250093407", "00000005250093407"),
            ("6000-806967498", "600", "806967498", "00000000806967498"),
            ("9960-3401258276", "950", "3401258276", "00099603401258276"),
        ],
    )
    def test_type_2_accounts(self, account_number, bank_code, serial_number, swift_account_number):
        """Test banks whose IBAN account number excludes or zerofills the serial."""
        result = convert(account_number)

        assert result["account_number"] == serial_number
        assert result["swift_bank_code"] == bank_code
        assert result["swift_account_number"] == swift_account_number

    def test_handelsbanken_zerofills_short_serials(self):
        """Test that Handelsbanken serial numbers are padded to nine digits."""
        result = convert("6000-80696749")

        assert result["account_number"] == "080696749"
        assert result["swift_account_number"] == "00000000080696749"
