"""Bank code to rule lookup and the converter entry point."""

from typing import Any

from openiban.data import load_table, load_yaml
from openiban.exceptions import UnsupportedAccountDetails
from openiban.germany.rules import RULES, BankDetails, RuleResult, Unsupported
from openiban.utils.config import get_settings
from openiban.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_RULE = "000000"


def _load_rules() -> dict[str, dict[str, Any]]:
    settings = get_settings()
    raw = load_yaml(settings.german_rules_path, "german_rules_file") or {}

    rules = {}
    for bank_code, record in raw.items():
        rule_id = str(record["iban_rule"])
        if rule_id not in RULES:
            raise ValueError(f"Bank code {bank_code} refers to unknown IBAN rule {rule_id}")
        rules[str(bank_code)] = {
            "iban_rule": rule_id,
            "check_digit_rule": (
                str(record["check_digit_rule"]) if record.get("check_digit_rule") else None
            ),
        }

    logger.info("german_rules_loaded", bank_codes=len(rules))
    return rules


def bank_rules() -> dict[str, dict[str, Any]]:
    """Bank code to ``{"iban_rule", "check_digit_rule"}`` for every bank with a rule."""
    return load_table("german_iban_rules", _load_rules)


class GermanDetailsConverter:
    """Converts German bank details into the details used in the IBAN.

    Usage:
        >>> GermanDetailsConverter.convert(bank_code="10010010", account_number="135")
        {'bank_code': '10010010', 'account_number': '0990021440'}
    """

    @classmethod
    def rule_for(cls, bank_code: str | None) -> str:
        record = bank_rules().get(bank_code or "", {})
        return record.get("iban_rule", DEFAULT_RULE)

    @classmethod
    def convert_details(cls, bank_code: str, account_number: str) -> RuleResult:
        """Apply the bank's rule without raising on rejection."""
        record = bank_rules().get(bank_code, {})
        rule_id = record.get("iban_rule", DEFAULT_RULE)
        details = BankDetails(bank_code, account_number, record.get("check_digit_rule"))

        result = RULES[rule_id](details)
        if isinstance(result, Unsupported):
            logger.info(
                "german_account_unsupported",
                bank_code=bank_code,
                account_number=account_number,
                rule=rule_id,
                reason=result.reason,
            )
        return result

    @classmethod
    def convert(cls, bank_code: str, account_number: str) -> dict[str, str]:
        """Convert details into the ones used in the IBAN.

        Raises:
            UnsupportedAccountDetails: If the bank's rule rejects the account
        """
        result = cls.convert_details(bank_code, account_number)
        if isinstance(result, Unsupported):
            raise UnsupportedAccountDetails(
                result.reason, bank_code=bank_code, rule=cls.rule_for(bank_code)
            )

        return result.as_dict()
