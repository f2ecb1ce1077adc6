"""Modulus checker registry.

National account-number modulus checks need per-bank data that OpenIBAN does
not ship. Callers who have it provide a checker, and ``IBAN.valid_full`` then
runs its bank code, branch code and account number checks.

Usage:
    from openiban.modulus import set_modulus_checker

    set_modulus_checker(VocaLinkChecker())
    IBAN("GB82WEST12345698765432").valid_full()
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from openiban.iban import IBAN


class ModulusChecker(Protocol):
    """Contract for local modulus checkers.

    Each method receives the ``IBAN`` being validated and returns whether the
    named component passes the bank's modulus check.
    """

    def valid_bank_code(self, iban: "IBAN") -> bool: ...

    def valid_branch_code(self, iban: "IBAN") -> bool: ...

    def valid_account_number(self, iban: "IBAN") -> bool: ...


_modulus_checker: ModulusChecker | None = None


def set_modulus_checker(checker: ModulusChecker | None) -> None:
    """Set (or with None, clear) the process-wide modulus checker."""
    global _modulus_checker
    _modulus_checker = checker


def get_modulus_checker() -> ModulusChecker | None:
    return _modulus_checker
