"""Pseudo-IBANs.

A pseudo-IBAN carries local bank details for a country whose local format
can't be turned into a real IBAN without extra information (currently only
Sweden). It looks like an IBAN with the fixed check digits ``ZZ``; each
field is left-padded to a fixed width, and fields of width 0 are left out.

Usage:
    >>> PseudoIBANAssembler(country_code="SE", branch_code="1281", account_number="0105723").assemble()
    'SEZZX1281XXX0105723'
    >>> PseudoIBANSplitter("SEZZX1281XXX0105723").split()["account_number"]
    '0105723'
"""

from openiban import structures
from openiban.constants import (
    PSEUDO_IBAN_CHECK_DIGITS,
    PSEUDO_IBAN_COUNTRIES,
    PSEUDO_IBAN_PADDING_CHARACTER,
)
from openiban.structures import CountryStructure

PSEUDO_FIELDS = ("bank_code", "branch_code", "account_number")


def _field_length(structure: CountryStructure, field: str) -> int:
    return getattr(structure, f"pseudo_iban_{field}_length") or 0


class PseudoIBANAssembler:
    def __init__(
        self,
        country_code: str | None = None,
        bank_code: str | None = None,
        branch_code: str | None = None,
        account_number: str | None = None,
    ):
        self.country_code = country_code
        self.fields = {
            "bank_code": bank_code,
            "branch_code": branch_code,
            "account_number": account_number,
        }

    def assemble(self) -> str | None:
        """Pseudo-IBAN for the details, or None if they can't make one."""
        if self.country_code not in PSEUDO_IBAN_COUNTRIES:
            return None

        structure = structures.lookup(self.country_code)
        if structure is None or not structure.supports_pseudo_iban:
            return None

        padding = PSEUDO_IBAN_PADDING_CHARACTER[self.country_code]
        parts = [self.country_code, PSEUDO_IBAN_CHECK_DIGITS]
        for field in PSEUDO_FIELDS:
            value = self.fields[field]
            length = _field_length(structure, field)
            if value is None:
                # Only fields the country doesn't use may be missing
                if length != 0:
                    return None
                continue
            parts.append(value.rjust(length, padding))

        return "".join(parts)


class PseudoIBANSplitter:
    def __init__(self, pseudo_iban: str):
        self.pseudo_iban = pseudo_iban

    @property
    def country_code(self) -> str:
        return self.pseudo_iban[:2]

    @property
    def check_digits(self) -> str:
        return self.pseudo_iban[2:4]

    def split(self) -> dict[str, str | None] | None:
        """Local details held in the pseudo-IBAN, or None if it isn't one."""
        country_code = self.country_code
        if country_code not in PSEUDO_IBAN_COUNTRIES:
            return None
        if self.check_digits != PSEUDO_IBAN_CHECK_DIGITS:
            return None

        structure = structures.lookup(country_code)
        if structure is None or not structure.supports_pseudo_iban:
            return None

        lengths = [_field_length(structure, field) for field in PSEUDO_FIELDS]
        if len(self.pseudo_iban) != 4 + sum(lengths):
            return None

        padding = PSEUDO_IBAN_PADDING_CHARACTER[country_code]
        result: dict[str, str | None] = {
            "country_code": country_code,
            "check_digits": self.check_digits,
        }

        start = 4
        for field, length in zip(PSEUDO_FIELDS, lengths, strict=True):
            if length == 0:
                result[field] = None
                continue
            result[field] = self.pseudo_iban[start : start + length].lstrip(padding)
            start += length

        return result
