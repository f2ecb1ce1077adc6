"""IBAN value object.

An ``IBAN`` is built from an IBAN string, a pseudo-IBAN string or a dict of
local bank details. Construction never raises: problems are reported by the
validation predicates, each of which returns True, False or None (None when
a check can't run because something it depends on is missing) and records
a message in ``errors`` when it fails.

Usage:
    >>> iban = IBAN("GB82 WEST 1234 5698 7654 32")
    >>> iban.valid()
    True
    >>> iban.to_s("formatted")
    'GB82 WEST 1234 5698 7654 32'
"""

import re
from collections.abc import Mapping
from typing import Any

from openiban import check_digits, structures
from openiban.assembler import assemble
from openiban.bic import BicFinder
from openiban.constants import PSEUDO_IBAN_CHECK_DIGITS, PSEUDO_IBAN_COUNTRIES
from openiban.exceptions import UnsupportedAccountDetails
from openiban.germany import GermanDetailsConverter
from openiban.local_details import clean
from openiban.modulus import get_modulus_checker
from openiban.pseudo_iban import PseudoIBANAssembler, PseudoIBANSplitter
from openiban.splitter import IBANSplitter
from openiban.structures import CountryStructure
from openiban.sweden import Validator as SwedishValidator
from openiban.utils.logging import get_logger

logger = get_logger(__name__)

_WHITESPACE = re.compile(r"\s+")
_INVALID_CHARACTERS = re.compile(r"[^A-Z0-9]")

# Error messages
INVALID_COUNTRY_CODE = "'{country_code}' is not a valid ISO 3166-1 IBAN country code"
NON_ALPHANUMERIC_CHARACTERS = "Non-alphanumeric characters found: {characters}"
INVALID_CHECK_DIGITS = (
    "Check digits failed modulus check. Expected '{expected}', received '{check_digits}'."
)
INVALID_LENGTH = (
    "Length doesn't match SWIFT specification (expected {expected} characters, received {length})"
)
INVALID_FORMAT = "Unexpected format for a {country_code} IBAN."
IS_REQUIRED = "is required"
IS_INVALID = "is invalid"
WRONG_LENGTH = "is the wrong length (should be {expected} characters)"
NOT_USED_IN_COUNTRY = "is not used in {country_code}"
DOES_NOT_SUPPORT_PAYMENTS = "does not support payments"

CORE_CHECKS = ("country_code", "characters", "check_digits", "length", "format")


class IBAN:
    """An IBAN and its components.

    Attributes:
        iban: Normalised IBAN string (no whitespace, upper case), or None
            when local details couldn't be assembled into one
        country_code: ISO 3166-1 alpha-2 code
        check_digits: The two IBAN check digits
        bank_code, branch_code, account_number: Local details. For
            countries with pseudo-IBANs these are only known when the IBAN
            was built from local details or a pseudo-IBAN.
        swift_bank_code, swift_branch_code, swift_account_number: The
            fields as they appear in the IBAN
        errors: Field name to message, filled in by the validation predicates
    """

    def __init__(self, value: str | Mapping[str, Any], bic_finder: BicFinder | None = None):
        self.iban: str | None = None
        self.country_code: str | None = None
        self.check_digits: str | None = None
        self.bank_code: str | None = None
        self.branch_code: str | None = None
        self.account_number: str | None = None
        self.swift_bank_code: str | None = None
        self.swift_branch_code: str | None = None
        self.swift_account_number: str | None = None
        self.errors: dict[str, str] = {}

        if isinstance(value, str):
            normalised = _WHITESPACE.sub("", value).upper()
            local_details = None
            if normalised[2:4] == PSEUDO_IBAN_CHECK_DIGITS:
                local_details = PseudoIBANSplitter(normalised).split()

            if local_details is not None:
                self._build_from_local_details(local_details, bic_finder)
            else:
                self.iban = normalised
                self._extract_swift_details()
        elif isinstance(value, Mapping):
            self._build_from_local_details(value, bic_finder)
        else:
            raise TypeError("Must pass an IBAN string or a mapping of local details")

    @classmethod
    def from_local_details(
        cls, local_details: Mapping[str, Any], bic_finder: BicFinder | None = None
    ) -> "IBAN":
        return cls(local_details, bic_finder=bic_finder)

    def __str__(self) -> str:
        return self.to_s()

    def __repr__(self) -> str:
        return f"IBAN({self.iban!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IBAN):
            return NotImplemented
        return self.iban == other.iban

    def __hash__(self) -> int:
        return hash(self.iban)

    def to_s(self, format: str = "compact") -> str:
        """The IBAN as a string, ``compact`` or ``formatted`` in groups of four."""
        if format == "compact":
            return self.iban or ""
        if format == "formatted":
            compact = self.iban or ""
            return " ".join(compact[i : i + 4] for i in range(0, len(compact), 4))
        raise ValueError(f"invalid format '{format}'")

    # =========================================================================
    # Component parts
    # =========================================================================

    @property
    def structure(self) -> CountryStructure | None:
        return structures.lookup(self.country_code)

    @property
    def bban(self) -> str | None:
        return self.iban[4:] if self.iban is not None else None

    @property
    def national_id(self) -> str | None:
        if self.structure is None:
            return None
        national_id = (self.bank_code or "") + (self.branch_code or "")
        return national_id[: self.structure.national_id_length]

    @property
    def swift_national_id(self) -> str | None:
        if not self._decomposable() or self.structure is None:
            return None
        national_id = (self.swift_bank_code or "") + (self.swift_branch_code or "")
        return national_id[: self.structure.national_id_length]

    @property
    def local_check_digits(self) -> str | None:
        structure = self.structure
        if not self._decomposable() or structure is None:
            return None
        if structure.local_check_digit_position is None or self.iban is None:
            return None
        start = 4 + structure.local_check_digit_position - 1
        return self.iban[start : start + (structure.local_check_digit_length or 0)]

    @property
    def pseudo_iban(self) -> str | None:
        return PseudoIBANAssembler(
            country_code=self.country_code,
            bank_code=self.bank_code,
            branch_code=self.branch_code,
            account_number=self.account_number,
        ).assemble()

    # =========================================================================
    # Core validations
    # =========================================================================

    def valid(self) -> bool:
        """Country code, characters, check digits, length and format all pass."""
        results = [getattr(self, f"valid_{check}")() for check in CORE_CHECKS]
        return all(result is True for result in results)

    def valid_full(self) -> bool:
        """Core validations plus field-level and country-specific checks."""
        results = [
            self.valid_country_code(),
            self.valid_characters(),
            self.valid_check_digits(),
            self.valid_length(),
            self.valid_bank_code_length(),
            self.valid_branch_code_length(),
            self.valid_account_number_length(),
            self.valid_format(),
            self.valid_bank_code_format(),
            self.valid_branch_code_format(),
            self.valid_account_number_format(),
            self.valid_local_modulus_check(),
            self.passes_country_specific_checks(),
        ]
        return all(result is True for result in results)

    def valid_country_code(self) -> bool:
        if self.structure is not None:
            return self._passed("country_code")
        return self._failed(
            "country_code", INVALID_COUNTRY_CODE.format(country_code=self.country_code or "")
        )

    def valid_characters(self) -> bool | None:
        if self.iban is None:
            return None
        invalid = _INVALID_CHARACTERS.findall(self.iban)
        if not invalid:
            return self._passed("characters")
        return self._failed(
            "characters", NON_ALPHANUMERIC_CHARACTERS.format(characters=" ".join(invalid))
        )

    def valid_check_digits(self) -> bool | None:
        if not self._decomposable() or not self.valid_characters():
            return None

        expected = check_digits.iban(self.country_code or "", self.bban or "")

        if self.check_digits == expected:
            return self._passed("check_digits")
        return self._failed(
            "check_digits",
            INVALID_CHECK_DIGITS.format(expected=expected, check_digits=self.check_digits),
        )

    def valid_length(self) -> bool | None:
        if not self.valid_country_code() or self.iban is None:
            return None

        expected = self.structure.total_length
        if len(self.iban) == expected:
            return self._passed("length")
        return self._failed("length", INVALID_LENGTH.format(expected=expected, length=len(self.iban)))

    def valid_format(self) -> bool | None:
        if not self.valid_country_code():
            return None

        if re.fullmatch(self.structure.bban_format, self.bban or ""):
            return self._passed("format")
        return self._failed("format", INVALID_FORMAT.format(country_code=self.country_code))

    # =========================================================================
    # Field validations
    # =========================================================================

    def valid_bank_code_length(self) -> bool | None:
        if not self.valid_country_code():
            return None

        if not self.swift_bank_code:
            return self._failed("bank_code", IS_REQUIRED)

        expected = self.structure.bank_code_length
        if len(self.swift_bank_code) == expected:
            return self._passed("bank_code")
        return self._failed("bank_code", WRONG_LENGTH.format(expected=expected))

    def valid_branch_code_length(self) -> bool | None:
        if not self.valid_country_code():
            return None

        expected = self.structure.branch_code_length
        if len(self.swift_branch_code or "") == expected:
            return self._passed("branch_code")

        if expected == 0:
            message = NOT_USED_IN_COUNTRY.format(country_code=self.country_code)
        elif not self.swift_branch_code:
            message = IS_REQUIRED
        else:
            message = WRONG_LENGTH.format(expected=expected)
        return self._failed("branch_code", message)

    def valid_account_number_length(self) -> bool | None:
        if not self.valid_country_code():
            return None

        if self.swift_account_number is None:
            return self._failed("account_number", IS_REQUIRED)

        expected = self.structure.account_number_length
        if len(self.swift_account_number) == expected:
            return self._passed("account_number")
        return self._failed("account_number", WRONG_LENGTH.format(expected=expected))

    def valid_bank_code_format(self) -> bool | None:
        if not self.valid_bank_code_length():
            return None

        if re.fullmatch(self.structure.bank_code_format or "", self.swift_bank_code or ""):
            return True
        return self._failed("bank_code", IS_INVALID)

    def valid_branch_code_format(self) -> bool | None:
        if not self.valid_branch_code_length():
            return None
        if self.structure.branch_code_format is None:
            return True

        if re.fullmatch(self.structure.branch_code_format, self.swift_branch_code or ""):
            return True
        return self._failed("branch_code", IS_INVALID)

    def valid_account_number_format(self) -> bool | None:
        if not self.valid_account_number_length():
            return None

        if re.fullmatch(self.structure.account_number_format or "", self.swift_account_number or ""):
            return True
        return self._failed("account_number", IS_INVALID)

    def valid_local_modulus_check(self) -> bool | None:
        """Run the registered modulus checker, if any, over each component."""
        if not self.valid_format():
            return None

        checker = get_modulus_checker()
        if checker is None:
            return True

        if not checker.valid_bank_code(self):
            return self._failed("bank_code", IS_INVALID)
        if not checker.valid_branch_code(self):
            return self._failed("branch_code", IS_INVALID)
        if not checker.valid_account_number(self):
            return self._failed("account_number", IS_INVALID)
        return True

    # =========================================================================
    # Country-specific validations
    # =========================================================================

    def passes_country_specific_checks(self) -> bool | None:
        if not self.valid_country_code():
            return None

        if self.country_code == "DE":
            return self.valid_german_details()
        if self.country_code == "SE":
            return self.valid_swedish_details()
        return True

    def valid_german_details(self) -> bool | None:
        """Whether the bank's IBAN rule accepts the account."""
        if not self.valid_format():
            return None
        if self.country_code != "DE":
            return True

        try:
            GermanDetailsConverter.convert(self.swift_bank_code or "", self.swift_account_number or "")
        except UnsupportedAccountDetails:
            return self._failed("account_number", DOES_NOT_SUPPORT_PAYMENTS)
        return True

    def valid_swedish_details(self) -> bool:
        if self.country_code != "SE":
            return True

        if self.branch_code:
            return self._valid_swedish_local_details()
        return self._valid_swedish_swift_details()

    def _valid_swedish_swift_details(self) -> bool:
        if not SwedishValidator.bank_code_exists(self.swift_bank_code):
            if self.bank_code is None:
                self.errors.pop("bank_code", None)
                return self._failed("account_number", IS_INVALID)
            return self._failed("bank_code", IS_INVALID)

        length_valid = SwedishValidator.account_number_length_valid_for_bank_code(
            bank_code=self.swift_bank_code,
            account_number=self.swift_account_number,
        )
        if not length_valid:
            return self._failed("account_number", IS_INVALID)
        return True

    def _valid_swedish_local_details(self) -> bool:
        if not SwedishValidator.valid_clearing_code_length(self.branch_code):
            return self._failed("branch_code", IS_INVALID)

        valid_serial_number = SwedishValidator.valid_serial_number_length(
            clearing_code=self.branch_code,
            serial_number=self.account_number,
        )
        if not valid_serial_number:
            return self._failed("account_number", IS_INVALID)
        return True

    # =========================================================================
    # Helpers
    # =========================================================================

    def _passed(self, field: str) -> bool:
        self.errors.pop(field, None)
        return True

    def _failed(self, field: str, message: str) -> bool:
        self.errors[field] = message
        return False

    def _decomposable(self) -> bool:
        return None not in (
            self.iban,
            self.country_code,
            self.swift_bank_code,
            self.swift_account_number,
        )

    def _build_from_local_details(
        self, details: Mapping[str, Any], bic_finder: BicFinder | None
    ) -> None:
        local_details = clean(dict(details), bic_finder=bic_finder)

        self.country_code = local_details.get("country_code")
        self.bank_code = local_details.get("bank_code")
        self.branch_code = local_details.get("branch_code")
        self.account_number = local_details.get("account_number")

        self.swift_bank_code = local_details.get("swift_bank_code")
        self.swift_branch_code = local_details.get("swift_branch_code")
        self.swift_account_number = local_details.get("swift_account_number")

        self.iban = assemble(
            {
                "country_code": self.country_code,
                "bank_code": self.swift_bank_code,
                "branch_code": self.swift_branch_code,
                "account_number": self.swift_account_number,
            }
        )
        if self.iban is not None:
            self.check_digits = self.iban[2:4]
        else:
            logger.debug("iban_not_assembled", country_code=self.country_code)

    def _extract_swift_details(self) -> None:
        parts = IBANSplitter.split(self.iban)

        self.country_code = parts["country_code"]
        self.check_digits = parts["check_digits"]

        self.swift_bank_code = parts["bank_code"]
        self.swift_branch_code = parts["branch_code"]
        self.swift_account_number = parts["account_number"]

        if self.country_code in PSEUDO_IBAN_COUNTRIES:
            return

        self.bank_code = parts["bank_code"]
        self.branch_code = parts["branch_code"]
        self.account_number = parts["account_number"]
