"""Assembly of IBANs from SWIFT bank details.

``assemble`` expects details already in the shape of the country's BBAN
fields (see ``openiban.local_details.clean``). It checks that exactly the
fields the country needs were supplied, joins them into a BBAN and prefixes
the country code and check digits. It never raises: details it can't turn
into an IBAN give None.
"""

from collections.abc import Callable
from typing import Any

from openiban import check_digits
from openiban.constants import CONSTRUCTABLE_COUNTRIES
from openiban.exceptions import InvalidCharacterError
from openiban.utils.logging import get_logger

logger = get_logger(__name__)

BANK_AND_ACCOUNT = ("bank_code", "account_number")
ALL_FIELDS = ("bank_code", "branch_code", "account_number")

_REQUIRED_FIELDS: dict[str, tuple[str, ...]] = {
    **dict.fromkeys(
        [
            "AT", "CY", "CZ", "DE", "DK", "EE", "FI", "HR", "IS", "LT",
            "LU", "LV", "NL", "NO", "PL", "RO", "SE", "SI", "SK",
        ],
        BANK_AND_ACCOUNT,
    ),
    "BE": ("account_number",),
}  # fmt: skip

# Optional fields on top of the required ones
_EXTRA_FIELDS: dict[str, tuple[str, ...]] = {
    "BE": ("bank_code",),
    "CY": ("branch_code",),
    "IT": ("check_digit",),
    "CZ": ("account_number_prefix",),
    "SK": ("account_number_prefix",),
}


def required_fields(country_code: str) -> tuple[str, ...]:
    return _REQUIRED_FIELDS.get(country_code, ALL_FIELDS)


def allowed_fields(country_code: str) -> tuple[str, ...]:
    return required_fields(country_code) + _EXTRA_FIELDS.get(country_code, ())


def valid_arguments(local_details: dict[str, Any]) -> bool:
    """Every required field present, and nothing the country doesn't take."""
    country_code = local_details.get("country_code")
    supplied = {
        key for key, value in local_details.items() if value is not None and key != "country_code"
    }
    allowed = set(allowed_fields(country_code))

    return set(required_fields(country_code)) <= supplied and supplied <= allowed


def can_assemble(local_details: dict[str, Any]) -> bool:
    return local_details.get("country_code") in CONSTRUCTABLE_COUNTRIES and valid_arguments(
        local_details
    )


# =============================================================================
# BBAN construction
# =============================================================================


def assemble_general_bban(details: dict[str, Any]) -> str:
    return "".join(details.get(field) or "" for field in ALL_FIELDS)


def assemble_be_bban(details: dict[str, Any]) -> str:
    # The account number already starts with the bank code
    return details["account_number"]


def assemble_it_bban(details: dict[str, Any]) -> str:
    """Italian and Sammarinese BBAN: the CIN check character, then the fields."""
    partial_bban = assemble_general_bban(details)
    check_digit = details.get("check_digit") or check_digits.italian(partial_bban)
    return check_digit + partial_bban


BBAN_ASSEMBLERS: dict[str, Callable[[dict[str, Any]], str]] = {
    **dict.fromkeys(
        [
            "AT", "BG", "CY", "CZ", "DE", "DK", "EE", "ES", "FI", "FR", "GB",
            "GR", "HR", "HU", "IE", "IS", "LT", "LU", "LV", "MC", "MT", "NL",
            "NO", "PL", "PT", "RO", "SE", "SI", "SK",
        ],
        assemble_general_bban,
    ),
    "BE": assemble_be_bban,
    "IT": assemble_it_bban,
    "SM": assemble_it_bban,
}  # fmt: skip

if set(BBAN_ASSEMBLERS) != CONSTRUCTABLE_COUNTRIES:
    raise RuntimeError("BBAN assemblers do not cover the constructable countries")


def assemble_bban(country_code: str, details: dict[str, Any]) -> str:
    return BBAN_ASSEMBLERS[country_code](details)


def assemble_iban(country_code: str, bban: str) -> str:
    """Prefix a BBAN with its country code and IBAN check digits.

    Raises:
        InvalidCharacterError: If the BBAN contains characters outside A-Z0-9
    """
    return country_code + check_digits.iban(country_code, bban) + bban


def assemble(local_details: dict[str, Any]) -> str | None:
    """Build an IBAN string from SWIFT bank details, or None if that isn't possible.

    Example:
        >>> assemble({"country_code": "DE", "bank_code": "37040044", "account_number": "0532013000"})
        'DE89370400440532013000'
    """
    if not can_assemble(local_details):
        return None

    country_code = local_details["country_code"]
    try:
        return assemble_iban(country_code, assemble_bban(country_code, local_details))
    except InvalidCharacterError as e:
        logger.debug("iban_assembly_failed", country_code=country_code, error=str(e))
        return None
