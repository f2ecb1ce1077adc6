"""Per-country IBAN structures.

The structure table drives decomposition of an IBAN into bank code, branch
code and account number, and the length and format validations. It is read
from ``data/structures.yml`` once per process.

Formats in the data file use the SWIFT registry notation (``4!n``, ``3!a``,
``12!c``) and are converted to regular expressions on load.

Usage:
    >>> structure = lookup("DE")
    >>> structure.total_length
    22
    >>> structure.bank_code_length
    8
"""

import re
from dataclasses import dataclass
from typing import Any

from openiban.data import load_table, load_yaml
from openiban.exceptions import ConfigurationError
from openiban.utils.config import get_settings
from openiban.utils.logging import get_logger

logger = get_logger(__name__)

_SWIFT_TOKEN = re.compile(r"(\d+)!([nac])")
_SWIFT_CLASSES = {"n": r"\d", "a": "[A-Z]", "c": "[A-Z0-9]"}


def swift_to_regex(swift_format: str) -> str:
    """Convert SWIFT registry notation into a regular expression.

    Example:
        >>> swift_to_regex("4!a6!n")
        '[A-Z]{4}\\\\d{6}'
    """
    return _SWIFT_TOKEN.sub(
        lambda m: f"{_SWIFT_CLASSES[m.group(2)]}{{{m.group(1)}}}",
        swift_format,
    )


@dataclass(frozen=True)
class CountryStructure:
    """IBAN structure for a single country.

    Positions are 1-based offsets into the BBAN. A length of 0 means the
    field does not exist for the country.

    Attributes:
        country_code: ISO 3166-1 alpha-2 code
        total_length: Full IBAN length, including country code and check digits
        national_id_length: Length of the national id (bank + branch prefix)
        bban_format: Regex the whole BBAN must match
    """

    country_code: str
    total_length: int
    national_id_length: int
    bban_format: str
    bank_code_position: int = 0
    bank_code_length: int = 0
    bank_code_format: str | None = None
    branch_code_position: int = 0
    branch_code_length: int = 0
    branch_code_format: str | None = None
    account_number_position: int = 0
    account_number_length: int = 0
    account_number_format: str | None = None
    local_check_digit_position: int | None = None
    local_check_digit_length: int | None = None
    pseudo_iban_bank_code_length: int | None = None
    pseudo_iban_branch_code_length: int | None = None
    pseudo_iban_account_number_length: int | None = None

    @property
    def bban_length(self) -> int:
        return self.total_length - 4

    @property
    def supports_pseudo_iban(self) -> bool:
        return self.pseudo_iban_account_number_length is not None

    def field_slice(self, field: str) -> slice | None:
        """Slice of the full IBAN string holding ``field``, or None if absent."""
        length = getattr(self, f"{field}_length")
        if not length:
            return None
        start = 4 + getattr(self, f"{field}_position") - 1
        return slice(start, start + length)


def _field(record: dict[str, Any], name: str) -> dict[str, Any]:
    spec = record.get(name)
    if not spec:
        return {}
    return {
        f"{name}_position": spec["position"],
        f"{name}_length": spec["length"],
        f"{name}_format": swift_to_regex(spec["format"]),
    }


def _build_structure(country_code: str, record: dict[str, Any]) -> CountryStructure:
    fields: dict[str, Any] = {
        "country_code": country_code,
        "total_length": record["total_length"],
        "national_id_length": record["national_id_length"],
        "bban_format": swift_to_regex(record["bban_format"]),
    }
    for name in ("bank_code", "branch_code", "account_number"):
        fields.update(_field(record, name))

    check_digit = record.get("local_check_digit")
    if check_digit:
        fields["local_check_digit_position"] = check_digit["position"]
        fields["local_check_digit_length"] = check_digit["length"]

    pseudo = record.get("pseudo_iban")
    if pseudo:
        fields["pseudo_iban_bank_code_length"] = pseudo["bank_code_length"]
        fields["pseudo_iban_branch_code_length"] = pseudo["branch_code_length"]
        fields["pseudo_iban_account_number_length"] = pseudo["account_number_length"]

    structure = CountryStructure(**fields)

    for name in ("bank_code", "branch_code", "account_number"):
        field_range = structure.field_slice(name)
        if field_range is not None and field_range.stop > structure.total_length:
            raise ValueError(f"{country_code} {name} does not fit within the IBAN length")

    return structure


def _load_structures() -> dict[str, CountryStructure]:
    settings = get_settings()
    raw = load_yaml(settings.structure_path, "structure_file")

    # YAML 1.1 reads bare NO/ON/YES as booleans
    bad_keys = [code for code in raw if not isinstance(code, str)]
    if bad_keys:
        raise ConfigurationError(
            f"Country codes must be strings, got {bad_keys!r}; quote them in the data file",
            setting="structure_file",
            path=str(settings.structure_path),
        )

    structures = {code: _build_structure(code, record) for code, record in raw.items()}
    logger.info("structures_loaded", countries=len(structures))
    return structures


def all_structures() -> dict[str, CountryStructure]:
    """Return the full country code to structure mapping."""
    return load_table("structures", _load_structures)


def lookup(country_code: str | None) -> CountryStructure | None:
    """Return the structure for ``country_code``, or None if it has no IBAN."""
    if country_code is None:
        return None
    return all_structures().get(country_code)
