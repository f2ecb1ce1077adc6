"""Swedish local details to SWIFT details conversion."""

import re

from openiban.sweden.bank_lookup import BankLookup, SwedishBankInfo

_BAD_CHARACTERS = re.compile(r"[-.\s]")


def _remove_bad_chars(number: str | None) -> str | None:
    if number is None:
        return None
    return _BAD_CHARACTERS.sub("", number)


class LocalDetailsConverter:
    """Converts local Swedish details into SWIFT details.

    Local details come either as a clearing code in ``branch_code`` and the
    serial number in ``account_number``, or with no ``branch_code`` and the
    clearing code written at the start of ``account_number``.

    The reverse is not possible: the clearing code cannot be recovered from a
    SWIFT account number, so don't pass one in here.
    """

    def __init__(self, branch_code: str | None = None, account_number: str | None = None):
        self.branch_code = branch_code
        self.account_number = account_number
        self.cleaned_branch_code = _remove_bad_chars(branch_code)
        self.cleaned_account_number = _remove_bad_chars(account_number) or ""
        self.bank_info = BankLookup.for_clearing_code(self._bank_info_key())

    def convert(self) -> dict[str, str | None]:
        if self.bank_info is None:
            return {
                "swift_bank_code": None,
                "swift_account_number": self.cleaned_account_number.rjust(17, "0"),
            }

        return {
            "account_number": self.serial_number(self.bank_info),
            "branch_code": self.clearing_code(self.bank_info),
            "swift_bank_code": str(self.bank_info.bank_code),
            "swift_account_number": self.swift_account_number(self.bank_info),
        }

    def _bank_info_key(self) -> str:
        if self.cleaned_branch_code is not None:
            return self.cleaned_branch_code[:4]
        return self.cleaned_account_number[:4]

    def clearing_code(self, bank_info: SwedishBankInfo) -> str:
        if self.cleaned_branch_code is not None:
            return self.cleaned_branch_code
        return self.cleaned_account_number[: bank_info.clearing_code_length]

    def serial_number(self, bank_info: SwedishBankInfo) -> str | None:
        if self.branch_code is None:
            # Nothing left after the clearing code
            if len(self.cleaned_account_number) < bank_info.clearing_code_length:
                return None
            serial_number = self.cleaned_account_number[bank_info.clearing_code_length :]
        else:
            serial_number = self.cleaned_account_number

        if not bank_info.zerofill_serial_number:
            return serial_number
        return serial_number.rjust(bank_info.serial_number_length, "0")

    def swift_account_number(self, bank_info: SwedishBankInfo) -> str | None:
        clearing_code = self.clearing_code(bank_info)
        serial_number = self.serial_number(bank_info)

        if bank_info.include_clearing_code and serial_number is not None:
            return (clearing_code + serial_number).rjust(17, "0")
        if serial_number is None:
            return None
        return serial_number.rjust(17, "0")
