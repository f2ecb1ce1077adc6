"""Swedish bank detail validation.

Predicates return ``None`` rather than ``False`` when the bank a check
depends on cannot be found, so callers can tell "wrong" from "unknown".
"""

from openiban.sweden.bank_lookup import BankLookup
from openiban.utils.text import leading_int, strip_leading_zeros


class Validator:
    # =========================================================================
    # Local detail validators
    # =========================================================================

    @classmethod
    def bank_code_exists_for_clearing_code(cls, clearing_code: str | int | None) -> bool:
        return BankLookup.for_clearing_code(clearing_code) is not None

    @classmethod
    def valid_clearing_code_length(cls, clearing_code: str | int | None) -> bool | None:
        bank_info = BankLookup.for_clearing_code(clearing_code)
        if bank_info is None:
            return None
        return bank_info.clearing_code_length == len(str(clearing_code or ""))

    @classmethod
    def valid_serial_number_length(
        cls,
        clearing_code: str | int | None = None,
        serial_number: str | None = None,
    ) -> bool | None:
        if serial_number is None:
            return False

        bank_info = BankLookup.for_clearing_code(clearing_code)
        if bank_info is None:
            return None

        if bank_info.zerofill_serial_number:
            serial_number = serial_number.rjust(bank_info.serial_number_length, "0")

        return bank_info.serial_number_length == len(serial_number)

    # =========================================================================
    # SWIFT detail validators
    # =========================================================================

    @classmethod
    def bank_code_exists(cls, bank_code: str | int | None) -> bool:
        return bool(BankLookup.for_bank_code(bank_code))

    @classmethod
    def bank_code_possible_for_account_number(
        cls,
        bank_code: str | int | None = None,
        account_number: str | None = None,
    ) -> bool | None:
        if not cls.bank_code_exists(bank_code):
            return None

        clearing_code = leading_int(strip_leading_zeros(account_number or "")[:4])
        return any(
            not bank.include_clearing_code or clearing_code in bank.clearing_code_range
            for bank in BankLookup.for_bank_code(bank_code)
        )

    @classmethod
    def account_number_length_valid_for_bank_code(
        cls,
        bank_code: str | int | None = None,
        account_number: str | None = None,
    ) -> bool | None:
        if not cls.bank_code_possible_for_account_number(
            bank_code=bank_code, account_number=account_number
        ):
            return None

        cleaned = strip_leading_zeros(account_number or "")
        for bank in BankLookup.for_bank_code(bank_code):
            length = bank.serial_number_length
            if bank.include_clearing_code:
                length += bank.clearing_code_length

            candidate = cleaned
            if bank.zerofill_serial_number and not bank.include_clearing_code:
                candidate = candidate.rjust(bank.serial_number_length, "0")

            if len(candidate) == length:
                return True
        return False
