"""German IBAN rules.

German bank details don't map directly to IBANs: each bank has its own
conventions for turning a customer's account number into the one used in
the IBAN, and some accounts can't receive payments at all. The Bundesbank
publishes these conventions as numbered rules. Each bank code in the rule
table is tagged with one rule id.

Every rule is a function from ``BankDetails`` to a ``RuleResult``:

- ``ConvertedDetails`` with the (possibly rewritten) bank code and account number
- ``Unsupported`` when the account is known not to take payments

Rules are registered by id in ``RULES``. Most are built from a few shared
shapes (identity, bank code replacement, pseudo account table); the rest are
written out individually.
"""

from collections.abc import Callable
from dataclasses import dataclass

from openiban.germany import tables
from openiban.germany.checks import check63_valid, check76_valid
from openiban.utils.text import leading_int, strip_leading_zeros

NOT_USED_FOR_PAYMENTS = "Bank code {bank_code} is not used for payment transactions"
ACCOUNT_NOT_SUPPORTED = "Account does not support payment transactions"


@dataclass(frozen=True)
class BankDetails:
    """Input to a rule: the details as supplied, plus the bank's check digit rule."""

    bank_code: str
    account_number: str
    check_digit_rule: str | None = None

    @property
    def padded(self) -> str:
        return self.account_number.rjust(10, "0")

    @property
    def unpadded(self) -> str:
        return strip_leading_zeros(self.account_number)

    @property
    def numeric(self) -> int:
        return leading_int(self.account_number)

    @property
    def compound_key(self) -> str:
        return f"{self.bank_code}_{self.padded}"


@dataclass(frozen=True)
class ConvertedDetails:
    bank_code: str
    account_number: str

    def as_dict(self) -> dict[str, str]:
        return {"bank_code": self.bank_code, "account_number": self.account_number}


@dataclass(frozen=True)
class Unsupported:
    reason: str


RuleResult = ConvertedDetails | Unsupported
Rule = Callable[[BankDetails], RuleResult]

RULES: dict[str, Rule] = {}


def register(rule_id: str, handler: Rule) -> Rule:
    if rule_id in RULES:
        raise ValueError(f"German IBAN rule {rule_id} registered twice")
    RULES[rule_id] = handler
    return handler


def rule(rule_id: str) -> Callable[[Rule], Rule]:
    """Decorator registering a rule function under ``rule_id``."""

    def decorator(handler: Rule) -> Rule:
        return register(rule_id, handler)

    return decorator


# =============================================================================
# Shared rule shapes
# =============================================================================


def unchanged(details: BankDetails) -> RuleResult:
    return ConvertedDetails(details.bank_code, details.account_number)


def not_supported(details: BankDetails) -> Unsupported:
    return Unsupported(ACCOUNT_NOT_SUPPORTED)


def replace_bank_code(bank_code: str) -> Rule:
    """Rule that moves every account to a successor bank code."""

    def handler(details: BankDetails) -> RuleResult:
        return ConvertedDetails(bank_code, details.account_number)

    return handler


def pseudo_account_number(table: dict[str, str], details: BankDetails) -> str:
    """Real account number for a pseudo account number, or the input unchanged."""
    return table.get(details.padded, details.account_number)


def pseudo_account_table(table: dict[str, str]) -> Rule:
    """Rule that only substitutes pseudo account numbers."""

    def handler(details: BankDetails) -> RuleResult:
        return ConvertedDetails(details.bank_code, pseudo_account_number(table, details))

    return handler


def hypo_bank_code(details: BankDetails) -> str:
    """Successor bank code for a legacy HypoVereinsbank account prefix."""
    return tables.HYPO_BANK_CODES.get(details.padded[:3], details.bank_code)


def _in_8xx_range(details: BankDetails) -> bool:
    return 800000000 <= details.numeric <= 899999999


# =============================================================================
# Pass-through rules
# =============================================================================

register("000000", unchanged)
# 002600, 002700 and 003000 concern modulus checking, not IBAN construction
register("002600", unchanged)
register("002700", unchanged)
register("003000", unchanged)
# 004501 concerns BICs, which are already correct in the bank code directory
register("004501", unchanged)


# =============================================================================
# Bank code replacements
# =============================================================================

for _rule_id, _bank_code in {
    "000800": "50020200",
    "001201": "50050000",
    "001301": "30050000",
    "001400": "30060601",
    "001900": "50120383",
    "002101": "36020030",
    "002500": "60050101",
    "002800": "25050180",
    "003700": "30010700",
    "003800": "28590075",
    "003900": "28020050",
    "004001": "68052328",
    "004301": "66650085",
    "004600": "31010833",
    "004800": "36010200",
    "005000": "28550000",
    "005500": "25410200",
    "005700": "66010200",
}.items():
    register(_rule_id, replace_bank_code(_bank_code))


# =============================================================================
# Pseudo account number tables
# =============================================================================

for _rule_id, _table in {
    "000400": tables.PSEUDO_ACCOUNTS_000400,
    "000600": tables.PSEUDO_ACCOUNTS_000600,
    "000700": tables.PSEUDO_ACCOUNTS_000700,
    "001100": tables.PSEUDO_ACCOUNTS_001100,
    "001501": tables.PSEUDO_ACCOUNTS_001501,
    "001600": tables.PSEUDO_ACCOUNTS_001600,
    "001700": tables.PSEUDO_ACCOUNTS_001700,
    "001800": tables.PSEUDO_ACCOUNTS_001800,
    "002200": tables.PSEUDO_ACCOUNTS_002200,
    "002300": tables.PSEUDO_ACCOUNTS_002300,
    "002400": tables.PSEUDO_ACCOUNTS_002400,
    "004400": tables.PSEUDO_ACCOUNTS_004400,
    "005100": tables.PSEUDO_ACCOUNTS_005100,
    "005401": tables.PSEUDO_ACCOUNTS_005401,
}.items():
    register(_rule_id, pseudo_account_table(_table))


# =============================================================================
# Individual rules
# =============================================================================


@rule("000100")
def _bank_not_used(details: BankDetails) -> RuleResult:
    return Unsupported(NOT_USED_FOR_PAYMENTS.format(bank_code=details.bank_code))


@rule("000200")
def _reject_account_types_6_and_86(details: BankDetails) -> RuleResult:
    padded = details.padded
    if padded[7] == "6" or padded[7:9] == "86":
        return not_supported(details)
    return unchanged(details)


@rule("000300")
def _reject_single_account(details: BankDetails) -> RuleResult:
    if details.account_number == "6161604670":
        return not_supported(details)
    return unchanged(details)


def _commerzbank_padding(details: BankDetails) -> str:
    unpadded = details.unpadded

    if details.check_digit_rule == "13":
        if 6 <= len(unpadded) <= 7:
            return unpadded + "00"
        return details.account_number

    if details.check_digit_rule == "76":
        if 7 <= len(unpadded) <= 8:
            if check76_valid(details.account_number):
                return details.account_number
            return unpadded + "00"
        if 5 <= len(unpadded) <= 6:
            return unpadded + "00"

    return details.account_number


@rule("000503")
def _commerzbank(details: BankDetails) -> RuleResult:
    account_number = tables.PSEUDO_ACCOUNTS_000503.get(details.compound_key)
    if account_number is None:
        account_number = _commerzbank_padding(details)

    if (
        details.bank_code in tables.EXCEPTION_BANK_CODES_000503
        and 998000000 <= leading_int(account_number) <= 999499999
    ):
        return not_supported(details)

    return ConvertedDetails(details.bank_code, account_number)


@rule("000900")
def _landesbank_saar(details: BankDetails) -> RuleResult:
    padded = details.padded
    account_number = details.account_number
    if padded[:4] == "1116":
        account_number = "3047" + padded[4:10]
    return ConvertedDetails("68351557", account_number)


@rule("001001")
def _bank_code_and_pseudo_account(details: BankDetails) -> RuleResult:
    account_number = tables.PSEUDO_ACCOUNTS_001001.get(
        details.compound_key, details.account_number
    )
    bank_code = tables.BANK_CODES_001001.get(details.bank_code, details.bank_code)
    return ConvertedDetails(bank_code, account_number)


@rule("002002")
def _deutsche_bank(details: BankDetails) -> RuleResult:
    unpadded = details.unpadded

    if unpadded == "9999" and details.bank_code == "50070010":
        return ConvertedDetails("50070010", "92777202")

    length = len(unpadded)
    if length in (5, 6):
        account_number = unpadded + "00"
    elif length == 7:
        account_number = unpadded + "00" if check63_valid(unpadded + "00") else unpadded
    elif length in (8, 9):
        account_number = unpadded
    else:
        return not_supported(details)

    return ConvertedDetails(details.bank_code, account_number)


@rule("002900")
def _societe_generale(details: BankDetails) -> RuleResult:
    account_number = details.account_number
    if len(account_number) == 10 and account_number[3] == "0":
        account_number = "0" + account_number[:3] + account_number[4:10]
    return ConvertedDetails(details.bank_code, account_number)


@rule("003200")
def _hypo_remap_excluding_8xx(details: BankDetails) -> RuleResult:
    if _in_8xx_range(details):
        return not_supported(details)
    return ConvertedDetails(hypo_bank_code(details), details.account_number)


def _hypo_with_pseudo_accounts(table: dict[str, str], reject_8xx: bool) -> Rule:
    def handler(details: BankDetails) -> RuleResult:
        if reject_8xx and _in_8xx_range(details):
            return not_supported(details)
        return ConvertedDetails(hypo_bank_code(details), pseudo_account_number(table, details))

    return handler


register("003301", _hypo_with_pseudo_accounts(tables.PSEUDO_ACCOUNTS_003301, reject_8xx=False))
register("003400", _hypo_with_pseudo_accounts(tables.PSEUDO_ACCOUNTS_003400, reject_8xx=True))
register("003501", _hypo_with_pseudo_accounts(tables.PSEUDO_ACCOUNTS_003501, reject_8xx=True))


_RULE_003600_KEPT_RANGES = (
    (30000000, 59999999),
    (100000000, 899999999),
    (1000000000, 1999999999),
    (3000000000, 7099999999),
    (8500000000, 8599999999),
    (9000000000, 9999999999),
)


@rule("003600")
def _hsh_nordbank(details: BankDetails) -> RuleResult:
    value = details.numeric
    if 100000 <= value <= 899999:
        account_number = details.account_number + "000"
    elif any(low <= value <= high for low, high in _RULE_003600_KEPT_RANGES):
        account_number = details.account_number
    else:
        return not_supported(details)
    return ConvertedDetails("20050000", account_number)


@rule("004100")
def _single_target_account(details: BankDetails) -> RuleResult:
    return ConvertedDetails("50060400", "0000011404")


@rule("004200")
def _bundesbank(details: BankDetails) -> RuleResult:
    value = details.numeric
    if 50462000 <= value <= 50463999 or 50469000 <= value <= 50469999:
        return unchanged(details)

    unpadded = details.unpadded
    if len(unpadded) != 8 or unpadded[3] != "0" or unpadded[3:8] in ("00000", "00999"):
        return not_supported(details)

    return unchanged(details)


@rule("004700")
def _doppelte_nullen(details: BankDetails) -> RuleResult:
    unpadded = details.unpadded
    if len(unpadded) == 8:
        account_number = unpadded.ljust(10, "0")
    else:
        account_number = unpadded.rjust(10, "0")
    return ConvertedDetails(details.bank_code, account_number)


@rule("004900")
def _dz_bank(details: BankDetails) -> RuleResult:
    padded = details.padded
    account_number = details.account_number
    if padded[4] == "9":
        account_number = padded[4:10] + padded[:4]

    account_number = tables.PSEUDO_ACCOUNTS_004900.get(
        account_number.rjust(10, "0"), account_number
    )
    return ConvertedDetails(details.bank_code, account_number)


@rule("005200")
def _landesbank_bw_pseudo_only(details: BankDetails) -> RuleResult:
    account_number = tables.PSEUDO_ACCOUNTS_005200.get(details.compound_key)
    if account_number is None:
        return Unsupported(NOT_USED_FOR_PAYMENTS.format(bank_code=details.bank_code))
    return ConvertedDetails("60050101", account_number)


@rule("005300")
def _landesbank_bw(details: BankDetails) -> RuleResult:
    account_number = tables.PSEUDO_ACCOUNTS_005300.get(details.compound_key)
    if account_number is None:
        return unchanged(details)
    return ConvertedDetails("60050101", account_number)


@rule("005600")
def _seb(details: BankDetails) -> RuleResult:
    account_number = pseudo_account_number(tables.PSEUDO_ACCOUNTS_005600, details)

    if (
        len(strip_leading_zeros(account_number)) < 10
        and details.bank_code in tables.EXCEPTION_BANK_CODES_005600
    ):
        return not_supported(details)

    return ConvertedDetails(details.bank_code, account_number)
