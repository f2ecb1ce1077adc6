"""BIC finder registry.

OpenIBAN never looks BICs up itself. Building GB, IE and MT IBANs without a
bank code needs the first four characters of the branch's BIC, so callers
provide a finder: any callable taking ``(country_code, national_id)`` and
returning a BIC string or None.

Usage:
    >>> set_bic_finder(lambda country_code, national_id: "BARCGB22")
    >>> find_bic("GB", "200000")
    'BARCGB22'
"""

from collections.abc import Callable

from openiban.exceptions import ConfigurationError
from openiban.utils.logging import get_logger

logger = get_logger(__name__)

BicFinder = Callable[[str, str], str | None]

_bic_finder: BicFinder | None = None


def set_bic_finder(finder: BicFinder | None) -> None:
    """Set (or with None, clear) the process-wide default BIC finder."""
    global _bic_finder
    _bic_finder = finder


def resolve_bic_finder(bic_finder: BicFinder | None = None) -> BicFinder | None:
    """The explicit finder if given, else the process-wide default."""
    return bic_finder if bic_finder is not None else _bic_finder


def find_bic(
    country_code: str,
    national_id: str,
    bic_finder: BicFinder | None = None,
) -> str | None:
    """Look up the BIC for a branch.

    Raises:
        ConfigurationError: If no finder was passed and no default is set
    """
    finder = resolve_bic_finder(bic_finder)
    if finder is None:
        raise ConfigurationError("BIC finder is not defined", setting="bic_finder")

    bic = finder(country_code, national_id)
    if bic is None:
        logger.debug("bic_not_found", country_code=country_code, national_id=national_id)
    return bic
