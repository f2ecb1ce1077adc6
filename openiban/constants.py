"""Country code sets shared across the engine."""

CONSTRUCTABLE_COUNTRIES: frozenset[str] = frozenset(
    [
        "AT", "BE", "BG", "CY", "CZ", "DE", "DK", "EE", "ES", "FI", "FR",
        "GB", "GR", "HR", "HU", "IE", "IS", "IT", "LT", "LU", "LV", "MC",
        "MT", "NL", "NO", "PL", "PT", "RO", "SE", "SI", "SK", "SM",
    ]
)  # fmt: skip

PSEUDO_IBAN_COUNTRIES: frozenset[str] = frozenset(["SE"])

PSEUDO_IBAN_CHECK_DIGITS = "ZZ"

PSEUDO_IBAN_PADDING_CHARACTER = {
    "SE": "X",
}
