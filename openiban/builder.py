"""Strict IBAN construction from local bank details.

Unlike ``IBAN.from_local_details``, which never raises, ``IBANBuilder.build``
reports bad input as exceptions: a missing country code or field, a country
that can't be built, a bank code that no BIC lookup could supply, or German
details the bank's rules reject. It also computes the national check digits
that some countries embed in their BBAN when the caller leaves them out.
"""

from collections.abc import Callable
from typing import Any

from openiban import check_digits
from openiban.bic import BicFinder, find_bic, resolve_bic_finder
from openiban.constants import CONSTRUCTABLE_COUNTRIES
from openiban.exceptions import ArgumentError, BicNotFoundError, UnsupportedCountryError
from openiban.germany import GermanDetailsConverter
from openiban.iban import IBAN
from openiban.utils.logging import get_logger
from openiban.utils.text import remove_separators

logger = get_logger(__name__)

BuildOptions = dict[str, Any]

BANK_AND_ACCOUNT = ("bank_code", "account_number")
ACCOUNT_ONLY = ("account_number",)
ALL_FIELDS = ("bank_code", "branch_code", "account_number")

_REQUIRED_FIELDS: dict[str, tuple[str, ...]] = {
    **dict.fromkeys(
        [
            "AT", "CY", "CZ", "DE", "FI", "LT", "LU", "LV", "NL", "RO",
            "SI", "SK",
        ],
        BANK_AND_ACCOUNT,
    ),
    **dict.fromkeys(
        ["BE", "DK", "EE", "ES", "HR", "HU", "IS", "NO", "PL", "SE"], ACCOUNT_ONLY
    ),
}  # fmt: skip

_BIC_COUNTRIES = {"GB", "IE", "MT"}


def required_fields(country_code: str, bic_finder: BicFinder | None = None) -> tuple[str, ...]:
    if country_code in _BIC_COUNTRIES and resolve_bic_finder(bic_finder) is not None:
        return ("branch_code", "account_number")
    return _REQUIRED_FIELDS.get(country_code, ALL_FIELDS)


# =============================================================================
# National check digits
# =============================================================================


def _no_check_digits(opts: BuildOptions) -> BuildOptions:
    return opts


def _spanish_check_digits(opts: BuildOptions) -> BuildOptions:
    # Two digits between the branch code and a 10 digit account number
    account_number = remove_separators(opts["account_number"])
    if opts.get("bank_code") is None or opts.get("branch_code") is None:
        return opts
    if len(account_number) > 10:
        return opts

    account_number = account_number.rjust(10, "0")
    national_id = opts["bank_code"] + opts["branch_code"]
    digits = check_digits.spanish("00" + national_id) + check_digits.spanish(account_number)
    return {**opts, "account_number": digits + account_number}


def _french_check_digits(opts: BuildOptions) -> BuildOptions:
    # The RIB key follows an 11 character account number
    account_number = remove_separators(opts["account_number"])
    if len(account_number) != 11:
        return opts

    rib_key = opts.get("rib_key") or check_digits.rib(
        opts["bank_code"], opts["branch_code"], account_number
    )
    details = {**opts, "account_number": account_number + rib_key}
    details.pop("rib_key", None)
    return details


def _portuguese_check_digits(opts: BuildOptions) -> BuildOptions:
    account_number = opts["account_number"]
    if len(account_number) != 11:
        return opts

    digits = check_digits.mod_97_10(opts["bank_code"] + opts["branch_code"] + account_number)
    return {**opts, "account_number": account_number + digits}


def _slovenian_check_digits(opts: BuildOptions) -> BuildOptions:
    account_number = opts["account_number"]
    if len(account_number) > 8:
        return opts

    account_number = account_number.rjust(8, "0")
    digits = check_digits.mod_97_10(opts["bank_code"] + account_number)
    return {**opts, "account_number": account_number + digits}


# Italian and Sammarinese CIN characters are added during assembly
CHECK_DIGIT_HANDLERS: dict[str, Callable[[BuildOptions], BuildOptions]] = {
    **dict.fromkeys(
        [
            "AT", "BE", "BG", "CY", "CZ", "DE", "DK", "EE", "FI", "GB", "GR",
            "HR", "HU", "IE", "IS", "IT", "LT", "LU", "LV", "MT", "NL", "NO",
            "PL", "RO", "SE", "SK", "SM",
        ],
        _no_check_digits,
    ),
    "ES": _spanish_check_digits,
    "FR": _french_check_digits,
    "MC": _french_check_digits,
    "PT": _portuguese_check_digits,
    "SI": _slovenian_check_digits,
}  # fmt: skip

if set(CHECK_DIGIT_HANDLERS) != CONSTRUCTABLE_COUNTRIES:
    raise RuntimeError("Check digit handlers do not cover the constructable countries")


# =============================================================================
# Builder
# =============================================================================


class IBANBuilder:
    """Builds IBANs, raising on details that can't make one.

    Usage:
        >>> IBANBuilder.build(
        ...     country_code="ES", bank_code="2310", branch_code="0001", account_number="0000012345"
        ... ).iban
        'ES8023100001180000012345'
    """

    @classmethod
    def build(cls, bic_finder: BicFinder | None = None, **opts: Any) -> IBAN:
        """Build an IBAN.

        Args:
            bic_finder: Finder for GB, IE and MT bank codes; defaults to the
                one set with ``set_bic_finder``
            **opts: ``country_code`` plus the country's local details

        Raises:
            ArgumentError: If ``country_code`` or a required field is missing,
                or the details don't form an IBAN
            UnsupportedCountryError: If IBANs can't be built for the country
            BicNotFoundError: If the bank code had to be looked up and wasn't found
            UnsupportedAccountDetails: If a German bank's rules reject the account
            InvalidCharacterError: If check digits can't be computed over the details
        """
        country_code = opts.get("country_code")
        if country_code is None:
            raise ArgumentError("You must provide a country_code", field="country_code")
        if country_code not in CONSTRUCTABLE_COUNTRIES:
            raise UnsupportedCountryError(country_code)

        cls.require_fields(country_code, opts, bic_finder)

        if country_code in _BIC_COUNTRIES and opts.get("bank_code") is None:
            opts = cls._with_bank_code_from_bic(country_code, opts, bic_finder)

        if country_code == "DE":
            GermanDetailsConverter.convert(opts["bank_code"], opts["account_number"])

        details = CHECK_DIGIT_HANDLERS[country_code](opts)
        iban = IBAN.from_local_details(details, bic_finder=bic_finder)

        if iban.iban is None:
            raise ArgumentError(
                f"Could not build an {country_code} IBAN from the given details",
                field="country_code",
                value=country_code,
            )

        logger.debug("iban_built", country_code=country_code, iban=iban.iban)
        return iban

    @classmethod
    def require_fields(
        cls, country_code: str, opts: BuildOptions, bic_finder: BicFinder | None = None
    ) -> None:
        for field in required_fields(country_code, bic_finder):
            if opts.get(field) is None:
                raise ArgumentError(
                    f"{field} is a required field when building an {country_code} IBAN",
                    field=field,
                )

    @classmethod
    def _with_bank_code_from_bic(
        cls, country_code: str, opts: BuildOptions, bic_finder: BicFinder | None
    ) -> BuildOptions:
        branch_code = opts["branch_code"]
        if country_code != "MT":
            branch_code = remove_separators(branch_code)

        bic = find_bic(country_code, branch_code, bic_finder)
        if bic is None:
            raise BicNotFoundError(country_code, branch_code)
        return {**opts, "bank_code": bic[:4]}
