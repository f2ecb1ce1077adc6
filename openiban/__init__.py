"""OpenIBAN - IBAN validation, decomposition and construction.

Usage:
    >>> import openiban
    >>> openiban.validate("GB82WEST12345698765432")
    {'valid': True, 'errors': {}}
    >>> openiban.assemble(
    ...     {"country_code": "DE", "bank_code": "37040044", "account_number": "0532013000"}
    ... )
    'DE89370400440532013000'
"""

from typing import Any

__version__ = "1.0.0"

from openiban.assembler import assemble as _assemble
from openiban.bic import BicFinder, set_bic_finder
from openiban.builder import IBANBuilder
from openiban.constants import CONSTRUCTABLE_COUNTRIES, PSEUDO_IBAN_COUNTRIES
from openiban.exceptions import (
    ArgumentError,
    BicNotFoundError,
    ConfigurationError,
    InvalidCharacterError,
    OpenIBANError,
    UnsupportedAccountDetails,
    UnsupportedCountryError,
)
from openiban.iban import IBAN
from openiban.local_details import clean
from openiban.modulus import ModulusChecker, set_modulus_checker
from openiban.pseudo_iban import PseudoIBANAssembler, PseudoIBANSplitter
from openiban.splitter import IBANSplitter
from openiban.utils.logging import install_library_logging

install_library_logging()


def validate(iban: str) -> dict[str, Any]:
    """Run the core IBAN validations.

    Returns:
        ``{"valid": bool, "errors": {field: message}}``
    """
    parsed = IBAN(iban)
    valid = parsed.valid()
    return {"valid": valid, "errors": dict(parsed.errors)}


def decompose(iban: str) -> dict[str, str]:
    """Split an IBAN into its components; undeterminable fields are ``""``."""
    parsed = IBAN(iban)
    return {
        "country_code": parsed.country_code or "",
        "check_digits": parsed.check_digits or "",
        "bank_code": parsed.swift_bank_code or "",
        "branch_code": parsed.swift_branch_code or "",
        "account_number": parsed.swift_account_number or "",
    }


def assemble(local_details: dict[str, Any]) -> str | None:
    """IBAN string for SWIFT bank details, or None. Never raises."""
    return _assemble(local_details)


def build(bic_finder: BicFinder | None = None, **opts: Any) -> IBAN:
    """Build an IBAN from local details, raising on bad input.

    See ``IBANBuilder.build`` for the exceptions raised.
    """
    return IBANBuilder.build(bic_finder=bic_finder, **opts)


def clean_local_details(
    local_details: dict[str, Any], bic_finder: BicFinder | None = None
) -> dict[str, Any]:
    return clean(local_details, bic_finder=bic_finder)


__all__ = [
    "CONSTRUCTABLE_COUNTRIES",
    "IBAN",
    "PSEUDO_IBAN_COUNTRIES",
    "ArgumentError",
    "BicNotFoundError",
    "ConfigurationError",
    "IBANBuilder",
    "IBANSplitter",
    "ModulusChecker",
    "InvalidCharacterError",
    "OpenIBANError",
    "PseudoIBANAssembler",
    "PseudoIBANSplitter",
    "UnsupportedAccountDetails",
    "UnsupportedCountryError",
    "__version__",
    "assemble",
    "build",
    "clean_local_details",
    "decompose",
    "set_bic_finder",
    "set_modulus_checker",
    "validate",
]
