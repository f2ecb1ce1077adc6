"""Swedish clearing code to bank lookup."""

from dataclasses import dataclass
from typing import Any

from openiban.data import load_table, load_yaml
from openiban.utils.config import get_settings
from openiban.utils.logging import get_logger
from openiban.utils.text import leading_int

logger = get_logger(__name__)


@dataclass(frozen=True)
class SwedishBankInfo:
    """One clearing code range of a Swedish bank.

    Attributes:
        bank_code: SWIFT bank code used in the IBAN
        clearing_code_range: Four-digit clearing codes covered (inclusive)
        clearing_code_length: Length of the clearing code (4, or 5 for Swedbank 8xxx-x)
        serial_number_length: Length of the serial number
        include_clearing_code: Whether the clearing code is part of the IBAN account number
        zerofill_serial_number: Whether short serial numbers are left-padded with zeros
    """

    bank_code: int
    clearing_code_range: range
    clearing_code_length: int
    serial_number_length: int
    include_clearing_code: bool
    zerofill_serial_number: bool


def _build_bank_info(record: dict[str, Any]) -> SwedishBankInfo:
    low, high = record["range"]
    return SwedishBankInfo(
        bank_code=int(record["bank_code"]),
        clearing_code_range=range(int(low), int(high) + 1),
        clearing_code_length=int(record["clearing_code_length"]),
        serial_number_length=int(record["serial_number_length"]),
        include_clearing_code=bool(record["include_clearing_code"]),
        zerofill_serial_number=bool(record["zerofill_serial_number"]),
    )


def _load_bank_info() -> tuple[SwedishBankInfo, ...]:
    settings = get_settings()
    raw = load_yaml(settings.swedish_bank_lookup_path, "swedish_bank_lookup_file") or []
    banks = tuple(_build_bank_info(record) for record in raw)
    logger.info("swedish_banks_loaded", ranges=len(banks))
    return banks


class BankLookup:
    """Finds Swedish banks by clearing code or SWIFT bank code."""

    @classmethod
    def bank_info_table(cls) -> tuple[SwedishBankInfo, ...]:
        return load_table("swedish_bank_lookup", _load_bank_info)

    @classmethod
    def for_clearing_code(cls, clearing_code: str | int | None) -> SwedishBankInfo | None:
        """Bank whose range contains the first four digits of ``clearing_code``."""
        code = leading_int(str(clearing_code or "")[:4])
        for bank in cls.bank_info_table():
            if code in bank.clearing_code_range:
                return bank
        return None

    @classmethod
    def for_bank_code(cls, bank_code: str | int | None) -> list[SwedishBankInfo]:
        """Every clearing code range of the bank with SWIFT code ``bank_code``."""
        code = leading_int(bank_code)
        return [bank for bank in cls.bank_info_table() if bank.bank_code == code]
