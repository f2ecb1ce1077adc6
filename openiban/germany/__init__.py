"""German bank code rules."""

from openiban.germany.checks import check63_valid, check76_valid
from openiban.germany.converter import GermanDetailsConverter, bank_rules
from openiban.germany.rules import RULES, ConvertedDetails, Unsupported

__all__ = [
    "RULES",
    "ConvertedDetails",
    "GermanDetailsConverter",
    "Unsupported",
    "bank_rules",
    "check63_valid",
    "check76_valid",
]
