"""Normalisation of local bank details.

Customers write their bank details in many ways: with separators, without
leading zeros, or with the bank code embedded in the account number. The
cleaner turns them into the components of the country's BBAN, ready for
assembly into an IBAN.

Cleaning is total. Details for a country that can't be built, or that lack
the fields the country's cleaner needs, are returned unchanged. Either way
the result also carries ``swift_bank_code``, ``swift_branch_code`` and
``swift_account_number`` unless the country's cleaner set them itself.

Usage:
    >>> details = {"country_code": "NL", "bank_code": "ABNA", "account_number": "417164300"}
    >>> clean(details)["account_number"]
    '0417164300'
    >>> clean(details)["swift_account_number"]
    '0417164300'
"""

import re
from typing import Any

from openiban.bic import BicFinder, find_bic, resolve_bic_finder
from openiban.constants import CONSTRUCTABLE_COUNTRIES
from openiban.exceptions import UnsupportedAccountDetails
from openiban.germany import GermanDetailsConverter
from openiban.sweden import LocalDetailsConverter as SwedishDetailsConverter
from openiban.utils.logging import get_logger
from openiban.utils.text import remove_separators, strip_leading_zeros

logger = get_logger(__name__)

LocalDetails = dict[str, Any]

_WHITESPACE = re.compile(r"\s")
_NORWEGIAN_SEPARATORS = re.compile(r"[-.\s]")

BANK_AND_ACCOUNT = ("bank_code", "account_number")
ACCOUNT_ONLY = ("account_number",)
ALL_FIELDS = ("bank_code", "branch_code", "account_number")

_REQUIRED_FIELDS = {
    **dict.fromkeys(
        ["AT", "CY", "DE", "FI", "LT", "LU", "LV", "NL", "RO", "SI", "SK"], BANK_AND_ACCOUNT
    ),
    **dict.fromkeys(
        ["BE", "CZ", "DK", "EE", "ES", "HR", "HU", "IS", "NO", "PL", "SE"], ACCOUNT_ONLY
    ),
}

# Countries that can find their bank code from a BIC
_BIC_COUNTRIES = {"GB", "IE", "MT"}


def required_fields(country_code: str, bic_finder: BicFinder | None = None) -> tuple[str, ...]:
    """Fields the cleaner needs before it will touch ``country_code`` details."""
    if country_code in _BIC_COUNTRIES:
        if resolve_bic_finder(bic_finder) is None:
            return ALL_FIELDS
        return ("branch_code", "account_number")
    return _REQUIRED_FIELDS.get(country_code, ALL_FIELDS)


def _bank_code_from_bic(
    details: LocalDetails, country_code: str, branch_code: str, bic_finder: BicFinder | None
) -> str | None:
    if details.get("bank_code") is not None:
        return details["bank_code"]
    bic = find_bic(country_code, branch_code, bic_finder)
    return bic[:4] if bic is not None else None


def _tail(value: str, start: int) -> str | None:
    """``value[start:]``, or None when ``start`` is past the end."""
    if start > len(value):
        return None
    return value[start:]


# =============================================================================
# Country-specific cleaning
# =============================================================================


def clean_at_details(details: LocalDetails) -> LocalDetails:
    # Account numbers are 4-11 digits
    if len(details["account_number"]) < 4:
        return {}
    return {
        "bank_code": details["bank_code"],
        "account_number": details["account_number"].rjust(11, "0"),
    }


def clean_be_details(details: LocalDetails) -> LocalDetails:
    account_number = details["account_number"].replace("-", "")
    bank_code = details.get("bank_code")
    return {
        "bank_code": bank_code if bank_code is not None else account_number[:3],
        "account_number": account_number,
    }


def clean_unchanged_details(details: LocalDetails) -> LocalDetails:
    """For countries whose national details are the IBAN's BBAN fields as-is."""
    return details


def clean_cy_details(details: LocalDetails) -> LocalDetails:
    cleaned_bank_code = remove_separators(details["bank_code"])

    branch_code = details.get("branch_code")
    if branch_code is None and len(cleaned_bank_code) > 3:
        branch_code = cleaned_bank_code[3:]

    account_number = details["account_number"]
    if len(account_number) >= 7:
        account_number = account_number.rjust(16, "0")

    return {
        "bank_code": cleaned_bank_code[:3],
        "branch_code": branch_code,
        "account_number": account_number,
    }


def clean_cz_details(details: LocalDetails) -> LocalDetails:
    """Czech and Slovak details, with or without a separate account number prefix."""
    if "account_number_prefix" in details:
        account_number = (
            details["account_number_prefix"].rjust(6, "0")
            + details["account_number"].rjust(10, "0")
        )
    else:
        account_number = details["account_number"].replace("-", "").rjust(16, "0")

    return {"bank_code": details.get("bank_code"), "account_number": account_number}


def clean_de_details(details: LocalDetails) -> LocalDetails:
    try:
        converted = GermanDetailsConverter.convert(details["bank_code"], details["account_number"])
    except UnsupportedAccountDetails:
        converted = {
            "bank_code": details["bank_code"],
            "account_number": details["account_number"],
        }

    if len(converted["account_number"]) < 4:
        return {}

    return {
        "bank_code": converted["bank_code"],
        "account_number": converted["account_number"].rjust(10, "0"),
    }


def clean_dk_details(details: LocalDetails) -> LocalDetails:
    account_number = details["account_number"]

    if details.get("bank_code") is not None:
        bank_code = details["bank_code"]
    elif "-" in account_number:
        bank_code, account_number = account_number.split("-", 1)
    elif len(_WHITESPACE.sub("", account_number)) == 14:
        cleaned = _WHITESPACE.sub("", account_number)
        bank_code, account_number = cleaned[:4], cleaned[4:14]
    else:
        return {}

    return {
        "bank_code": bank_code.rjust(4, "0"),
        "account_number": account_number.replace("-", "").rjust(10, "0"),
    }


_ESTONIAN_BANK_CODES = {"11": "22", "93": "00"}


def clean_ee_details(details: LocalDetails) -> LocalDetails:
    # The bank code is derived from the first two digits of the account number
    domestic_bank_code = strip_leading_zeros(details["account_number"])[:2]
    return {
        "bank_code": _ESTONIAN_BANK_CODES.get(domestic_bank_code, domestic_bank_code),
        "account_number": details["account_number"].rjust(14, "0"),
    }


def clean_es_details(details: LocalDetails) -> LocalDetails:
    """Spanish details as separate components or a single 20 digit string."""
    if details.get("bank_code") is not None and details.get("branch_code") is not None:
        return {
            "bank_code": details["bank_code"],
            "branch_code": details["branch_code"],
            "account_number": remove_separators(details["account_number"]),
        }

    cleaned = remove_separators(details["account_number"])
    return {
        "bank_code": cleaned[:4],
        "branch_code": cleaned[4:8],
        "account_number": _tail(cleaned, 8),
    }


def clean_fi_details(details: LocalDetails) -> LocalDetails:
    # Expanded into "electronic format"; the padding point depends on the bank
    account_number = details["account_number"]
    if details["bank_code"][:1] in ("4", "5", "6"):
        account_number = account_number[:1] + account_number[1:].rjust(7, "0")
    else:
        account_number = account_number.rjust(8, "0")
    return {"bank_code": details["bank_code"], "account_number": account_number}


def clean_fr_details(details: LocalDetails) -> LocalDetails:
    return {
        "bank_code": details.get("bank_code"),
        "branch_code": details.get("branch_code"),
        "account_number": remove_separators(details["account_number"]),
    }


def _clean_sort_code_details(
    details: LocalDetails, country_code: str, bic_finder: BicFinder | None
) -> LocalDetails:
    branch_code = remove_separators(details["branch_code"])
    bank_code = _bank_code_from_bic(details, country_code, branch_code, bic_finder)

    # Account numbers are 6-8 digits
    account_number = remove_separators(details["account_number"])
    if len(account_number) > 5:
        account_number = account_number.rjust(8, "0")

    return {"bank_code": bank_code, "branch_code": branch_code, "account_number": account_number}


def clean_gb_details(details: LocalDetails, bic_finder: BicFinder | None = None) -> LocalDetails:
    return _clean_sort_code_details(details, "GB", bic_finder)


def clean_ie_details(details: LocalDetails, bic_finder: BicFinder | None = None) -> LocalDetails:
    return _clean_sort_code_details(details, "IE", bic_finder)


def clean_mt_details(details: LocalDetails, bic_finder: BicFinder | None = None) -> LocalDetails:
    branch_code = details["branch_code"]
    bank_code = _bank_code_from_bic(details, "MT", branch_code, bic_finder)
    return {
        "bank_code": bank_code,
        "branch_code": branch_code,
        "account_number": remove_separators(details["account_number"]).rjust(18, "0"),
    }


def clean_hr_details(details: LocalDetails) -> LocalDetails:
    if details.get("bank_code") is not None or "-" not in details["account_number"]:
        return details

    bank_code, account_number = details["account_number"].split("-", 1)
    return {"bank_code": bank_code, "account_number": account_number}


def clean_hu_details(details: LocalDetails) -> LocalDetails:
    """Hungarian details as separate components or a single 16 or 24 digit string."""
    if details.get("bank_code") is not None or details.get("branch_code") is not None:
        return details

    cleaned = remove_separators(details["account_number"])
    if len(cleaned) == 16:
        return {
            "bank_code": cleaned[:3],
            "branch_code": cleaned[3:7],
            "account_number": cleaned[7:16].ljust(17, "0"),
        }
    if len(cleaned) == 24:
        return {
            "bank_code": cleaned[:3],
            "branch_code": cleaned[3:7],
            "account_number": cleaned[7:24],
        }
    return details


def _split_parts(value: str) -> list[str]:
    parts = value.split("-")
    while parts and not parts[-1]:
        parts.pop()
    return parts


def _pad_is_account_number(parts: list[str | None]) -> str:
    parts = parts + [None] * (4 - len(parts))
    branch = parts[0].rjust(2, "0") if parts[0] is not None else ""
    account = parts[1].rjust(6, "0") if parts[1] is not None else ""
    id_first = parts[2].rjust(6, "0") if parts[2] is not None else ""
    id_second = parts[3].rjust(4, "0") if parts[3] is not None else ""

    # kennitala: the holder's national id number
    kennitala = (id_first + id_second).rjust(10, "0") if id_first else ""
    return branch + account + kennitala


def clean_is_details(details: LocalDetails) -> LocalDetails:
    account_number = details["account_number"]
    parts: list[str | None]

    if details.get("bank_code") is not None:
        bank_code = details["bank_code"]
        parts = list(_split_parts(account_number))
    elif "-" in account_number:
        bank_code, *rest = _split_parts(account_number) or [""]
        parts = list(rest)
    else:
        bank_code = account_number[:4]
        tail = _tail(account_number, 4)
        parts = [tail] if tail is not None else []

    return {
        "bank_code": bank_code.rjust(4, "0"),
        "account_number": _pad_is_account_number(parts),
    }


def clean_it_details(details: LocalDetails) -> LocalDetails:
    return {
        "bank_code": details["bank_code"],
        "branch_code": details["branch_code"],
        "account_number": details["account_number"].rjust(12, "0"),
    }


def _clean_ten_digit_account(details: LocalDetails) -> LocalDetails:
    return {
        "bank_code": details["bank_code"],
        "account_number": details["account_number"].rjust(10, "0"),
    }


def clean_no_details(details: LocalDetails) -> LocalDetails:
    """Norwegian details as separate components or a single 11 digit string."""
    if details.get("bank_code") is not None:
        return {"bank_code": details["bank_code"], "account_number": details["account_number"]}

    cleaned = _NORWEGIAN_SEPARATORS.sub("", details["account_number"])
    return {"bank_code": cleaned[:4], "account_number": _tail(cleaned, 4)}


def clean_pl_details(details: LocalDetails) -> LocalDetails:
    """Polish details as separate components or a single 26 digit string."""
    if details.get("bank_code") is not None:
        return {"bank_code": details["bank_code"], "account_number": details["account_number"]}

    cleaned = _WHITESPACE.sub("", details["account_number"])
    return {"bank_code": cleaned[2:10], "account_number": _tail(cleaned, 10)}


def clean_se_details(details: LocalDetails) -> LocalDetails:
    if details.get("bank_code") is not None:
        # A bank code without a clearing code means these are already SWIFT details
        return {
            "swift_account_number": details["account_number"],
            "swift_bank_code": details["bank_code"],
        }

    return SwedishDetailsConverter(
        branch_code=details.get("branch_code"),
        account_number=details["account_number"],
    ).convert()


_CLEANERS = {
    "AT": clean_at_details,
    "BE": clean_be_details,
    # National details replaced by IBANs, or no central convention published
    "BG": clean_unchanged_details,
    "GR": clean_unchanged_details,
    "LT": clean_unchanged_details,
    "LU": clean_unchanged_details,
    "LV": clean_unchanged_details,
    "PT": clean_unchanged_details,
    "RO": clean_unchanged_details,
    "CY": clean_cy_details,
    "CZ": clean_cz_details,
    "SK": clean_cz_details,
    "DE": clean_de_details,
    "DK": clean_dk_details,
    "EE": clean_ee_details,
    "ES": clean_es_details,
    "FI": clean_fi_details,
    "FR": clean_fr_details,
    "MC": clean_fr_details,
    "HR": clean_hr_details,
    "HU": clean_hu_details,
    "IS": clean_is_details,
    "IT": clean_it_details,
    "SM": clean_it_details,
    "NL": _clean_ten_digit_account,
    "SI": _clean_ten_digit_account,
    "NO": clean_no_details,
    "PL": clean_pl_details,
    "SE": clean_se_details,
}

_BIC_CLEANERS = {
    "GB": clean_gb_details,
    "IE": clean_ie_details,
    "MT": clean_mt_details,
}

if set(_CLEANERS) | set(_BIC_CLEANERS) != CONSTRUCTABLE_COUNTRIES:
    raise RuntimeError("Local details cleaners do not cover the constructable countries")


# =============================================================================
# Entry point
# =============================================================================


def can_clean(
    country_code: str | None, details: LocalDetails, bic_finder: BicFinder | None = None
) -> bool:
    if country_code not in CONSTRUCTABLE_COUNTRIES:
        return False
    return all(details.get(field) is not None for field in required_fields(country_code, bic_finder))


def swift_details_for(details: LocalDetails) -> LocalDetails:
    return {
        "swift_bank_code": details.get("bank_code"),
        "swift_branch_code": details.get("branch_code"),
        "swift_account_number": details.get("account_number"),
    }


def clean(local_details: LocalDetails, bic_finder: BicFinder | None = None) -> LocalDetails:
    """Clean local details for IBAN assembly.

    Args:
        local_details: Dict with ``country_code`` and any of ``bank_code``,
            ``branch_code``, ``account_number`` plus country-specific extras
        bic_finder: Finder used when GB, IE or MT details lack a bank code.
            Defaults to the one set with ``set_bic_finder``.

    Returns:
        A new dict; the input is never modified
    """
    details = dict(local_details)
    country_code = details.get("country_code")

    if can_clean(country_code, details, bic_finder):
        if country_code in _BIC_CLEANERS:
            cleaned = _BIC_CLEANERS[country_code](details, bic_finder)
        else:
            cleaned = _CLEANERS[country_code](details)
        details = {**details, **cleaned}
        logger.debug("local_details_cleaned", country_code=country_code)

    if "swift_account_number" in details:
        return details

    return {**swift_details_for(details), **details}
