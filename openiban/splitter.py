"""Decomposition of an IBAN string into its SWIFT components."""

from openiban import structures
from openiban.structures import CountryStructure

IBANParts = dict[str, str | None]


class IBANSplitter:
    """Slices an IBAN into country code, check digits and BBAN fields.

    Fields that cannot be determined (unknown country, wrong length, or a
    field the country doesn't use) are None.

    Usage:
        >>> IBANSplitter.split("GB82WEST12345698765432")["branch_code"]
        '123456'
    """

    @classmethod
    def split(cls, iban: str | None) -> IBANParts:
        structure = cls.structure(iban)
        decomposable = cls.decomposable(iban, structure)

        return {
            "country_code": cls.country_code_from(iban),
            "check_digits": iban[2:4] if decomposable and iban else None,
            "bank_code": cls._field(iban, structure, "bank_code") if decomposable else None,
            "branch_code": cls._field(iban, structure, "branch_code") if decomposable else None,
            "account_number": (
                cls._field(iban, structure, "account_number") if decomposable else None
            ),
        }

    @staticmethod
    def country_code_from(iban: str | None) -> str | None:
        if not iban:
            return None
        return iban[:2]

    @classmethod
    def structure(cls, iban: str | None) -> CountryStructure | None:
        return structures.lookup(cls.country_code_from(iban))

    @staticmethod
    def decomposable(iban: str | None, structure: CountryStructure | None) -> bool:
        return iban is not None and structure is not None and len(iban) == structure.total_length

    @staticmethod
    def _field(iban: str | None, structure: CountryStructure | None, field: str) -> str | None:
        if iban is None or structure is None:
            return None
        field_range = structure.field_slice(field)
        if field_range is None:
            return None
        return iban[field_range]
