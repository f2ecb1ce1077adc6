"""Swedish clearing code handling."""

from openiban.sweden.bank_lookup import BankLookup, SwedishBankInfo
from openiban.sweden.converter import LocalDetailsConverter
from openiban.sweden.validator import Validator

__all__ = ["BankLookup", "LocalDetailsConverter", "SwedishBankInfo", "Validator"]
