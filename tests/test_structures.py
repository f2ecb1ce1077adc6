"""Tests for the per-country structure table and the IBAN splitter."""

import pytest

from openiban import structures
from openiban.exceptions import ConfigurationError
from openiban.splitter import IBANSplitter
from openiban.structures import swift_to_regex
from openiban.utils.config import reload_settings

pytestmark = pytest.mark.unit


class TestSwiftToRegex:
    """Tests for SWIFT registry notation conversion."""

    @pytest.mark.parametrize(
        "swift_format,expected",
        [
            ("4!n", r"\d{4}"),
            ("3!a", "[A-Z]{3}"),
            ("12!c", "[A-Z0-9]{12}"),
            ("4!a6!n8!n", r"[A-Z]{4}\d{6}\d{8}"),
        ],
    )
    def test_conversion(self, swift_format, expected):
        """Test that each token becomes a character class with a repeat count."""
        assert swift_to_regex(swift_format) == expected


class TestLookup:
    """Tests for structure lookup."""

    def test_germany(self):
        """Test the German structure."""
        structure = structures.lookup("DE")

        assert structure.total_length == 22
        assert structure.bank_code_length == 8
        assert structure.branch_code_length == 0
        assert structure.account_number_length == 10
        assert structure.bban_length == 18

    def test_great_britain_field_slices(self):
        """Test that field slices index into the full IBAN string."""
        structure = structures.lookup("GB")
        iban = "GB82WEST12345698765432"

        assert iban[structure.field_slice("bank_code")] == "WEST"
        assert iban[structure.field_slice("branch_code")] == "123456"
        assert iban[structure.field_slice("account_number")] == "98765432"

    def test_absent_field_has_no_slice(self):
        """Test that fields a country doesn't use have no slice."""
        assert structures.lookup("DE").field_slice("branch_code") is None

    def test_unknown_country(self):
        """Test that countries without IBANs have no structure."""
        assert structures.lookup("US") is None
        assert structures.lookup(None) is None

    def test_sweden_supports_pseudo_ibans(self):
        """Test the Swedish pseudo-IBAN field lengths."""
        structure = structures.lookup("SE")

        assert structure.supports_pseudo_iban
        assert structure.pseudo_iban_bank_code_length == 0
        assert structure.pseudo_iban_branch_code_length == 5
        assert structure.pseudo_iban_account_number_length == 10

    def test_local_check_digit_position(self):
        """Test that local check digit positions are loaded."""
        structure = structures.lookup("SI")

        assert structure.local_check_digit_position == 14
        assert structure.local_check_digit_length == 2

    def test_all_fields_fit_within_iban(self):
        """Test that no field extends past the end of the IBAN."""
        for structure in structures.all_structures().values():
            for field in ("bank_code", "branch_code", "account_number"):
                field_range = structure.field_slice(field)
                if field_range is not None:
                    assert field_range.stop <= structure.total_length

    def test_norway(self):
        """Test that the NO country code is loaded as a string key."""
        structure = structures.lookup("NO")

        assert structure is not None
        assert structure.total_length == 15
        assert all(isinstance(code, str) for code in structures.all_structures())

    def test_table_is_cached(self):
        """Test that repeated lookups share one loaded table."""
        assert structures.all_structures() is structures.all_structures()


class TestStructureFileSettings:
    """Tests for loading the structure table from configured locations."""

    def test_missing_file(self, monkeypatch, tmp_path):
        """Test that a missing structure file raises ConfigurationError."""
        monkeypatch.setenv("OPENIBAN_DATA_DIR", str(tmp_path))
        reload_settings()

        with pytest.raises(ConfigurationError) as exc_info:
            structures.lookup("DE")

        assert exc_info.value.context["setting"] == "structure_file"

    def test_custom_structure_file(self, monkeypatch, data_dir):
        """Test that a structure file in a custom data dir is used."""
        (data_dir / "custom.yml").write_text(
            "XX:\n"
            "  total_length: 8\n"
            "  national_id_length: 2\n"
            '  bban_format: "2!n2!n"\n'
            '  bank_code: {position: 1, length: 2, format: "2!n"}\n'
            '  account_number: {position: 3, length: 2, format: "2!n"}\n',
            encoding="utf-8",
        )
        monkeypatch.setenv("OPENIBAN_DATA_DIR", str(data_dir))
        monkeypatch.setenv("OPENIBAN_STRUCTURE_FILE", "custom.yml")
        reload_settings()

        assert structures.lookup("XX").total_length == 8
        assert structures.lookup("DE") is None

    def test_unquoted_boolean_country_code(self, monkeypatch, data_dir):
        """Test that a country code YAML reads as a boolean is rejected."""
        (data_dir / "boolean.yml").write_text(
            "NO:\n"
            "  total_length: 15\n"
            "  national_id_length: 4\n"
            '  bban_format: "4!n7!n"\n'
            '  bank_code: {position: 1, length: 4, format: "4!n"}\n'
            '  account_number: {position: 5, length: 7, format: "7!n"}\n',
            encoding="utf-8",
        )
        monkeypatch.setenv("OPENIBAN_DATA_DIR", str(data_dir))
        monkeypatch.setenv("OPENIBAN_STRUCTURE_FILE", "boolean.yml")
        reload_settings()

        with pytest.raises(ConfigurationError, match="must be strings") as exc_info:
            structures.lookup("NO")

        assert exc_info.value.context["setting"] == "structure_file"

    def test_field_past_end_of_iban(self, monkeypatch, data_dir):
        """Test that a field extending past the IBAN length is rejected."""
        (data_dir / "broken.yml").write_text(
            "XX:\n"
            "  total_length: 8\n"
            "  national_id_length: 2\n"
            '  bban_format: "2!n2!n"\n'
            '  bank_code: {position: 1, length: 2, format: "2!n"}\n'
            '  account_number: {position: 3, length: 4, format: "4!n"}\n',
            encoding="utf-8",
        )
        monkeypatch.setenv("OPENIBAN_DATA_DIR", str(data_dir))
        monkeypatch.setenv("OPENIBAN_STRUCTURE_FILE", "broken.yml")
        reload_settings()

        with pytest.raises(ValueError, match="does not fit"):
            structures.lookup("XX")


class TestIBANSplitter:
    """Tests for splitting IBANs into SWIFT components."""

    def test_split_gb(self):
        """Test splitting a British IBAN."""
        assert IBANSplitter.split("GB82WEST12345698765432") == {
            "country_code": "GB",
            "check_digits": "82",
            "bank_code": "WEST",
            "branch_code": "123456",
            "account_number": "98765432",
        }

    def test_split_without_branch_code(self):
        """Test that a country without branch codes gives None for it."""
        parts = IBANSplitter.split("DE89370400440532013000")

        assert parts["bank_code"] == "37040044"
        assert parts["branch_code"] is None
        assert parts["account_number"] == "0532013000"

    def test_wrong_length(self):
        """Test that an IBAN of the wrong length keeps only its country code."""
        assert IBANSplitter.split("GB82WEST1234569876543") == {
            "country_code": "GB",
            "check_digits": None,
            "bank_code": None,
            "branch_code": None,
            "account_number": None,
        }

    def test_unknown_country(self):
        """Test that an unknown country gives no fields."""
        parts = IBANSplitter.split("AA123456789123456")

        assert parts["country_code"] == "AA"
        assert parts["bank_code"] is None

    @pytest.mark.parametrize("iban", ["", None])
    def test_empty(self, iban):
        """Test that an empty IBAN gives no country code."""
        assert IBANSplitter.split(iban)["country_code"] is None
