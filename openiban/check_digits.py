"""Check digit algorithms.

Every function is pure and returns a fixed-width string. Characters outside
the alphabet an algorithm accepts raise ``InvalidCharacterError``.

Only ``iban``/``mod_97_10``, ``spanish``, ``italian`` and ``rib`` are used
when building IBANs. The others validate digits that are already part of a
national account number and are provided for callers that need them.
"""

from openiban.exceptions import InvalidCharacterError

# Values for characters in even (0-based) positions of the Italian CIN
ITALIAN_ODD_MAPPING = {
    "A": 1, "B": 0, "C": 5, "D": 7, "E": 9, "F": 13, "G": 15, "H": 17,
    "I": 19, "J": 21, "K": 2, "L": 4, "M": 18, "N": 20, "O": 11, "P": 3,
    "Q": 6, "R": 8, "S": 12, "T": 14, "U": 16, "V": 10, "W": 22, "X": 25,
    "Y": 24, "Z": 23, "0": 1, "1": 0, "2": 5, "3": 7, "4": 9, "5": 13,
    "6": 15, "7": 17, "8": 19, "9": 21,
}  # fmt: skip

RIB_MAPPING = {
    "A": 1, "B": 2, "C": 3, "D": 4, "E": 5, "F": 6, "G": 7, "H": 8, "I": 9,
    "J": 1, "K": 2, "L": 3, "M": 4, "N": 5, "O": 6, "P": 7, "Q": 8, "R": 9,
    "S": 2, "T": 3, "U": 4, "V": 5, "W": 6, "X": 7, "Y": 8, "Z": 9,
    "0": 0, "1": 1, "2": 2, "3": 3, "4": 4, "5": 5, "6": 6, "7": 7, "8": 8,
    "9": 9,
}  # fmt: skip


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_upper(char: str) -> bool:
    return "A" <= char <= "Z"


def _digits(string: str) -> list[int]:
    for char in string:
        if not _is_digit(char):
            raise InvalidCharacterError(
                f"Unexpected non-numeric character '{char}'", character=char
            )
    return [int(char) for char in string]


def mod_97_10(payload: str) -> str:
    """ISO 7064 MOD 97-10 check digits for ``payload``.

    Letters are expanded to two digits (A=10 ... Z=35) and ``"00"`` is
    appended before taking the remainder.
    """
    expanded = []
    for char in payload + "00":
        if _is_digit(char):
            expanded.append(char)
        elif _is_upper(char):
            expanded.append(str(ord(char) - 55))
        else:
            raise InvalidCharacterError(f"Unexpected character '{char}'", character=char)

    remainder = int("".join(expanded)) % 97
    return f"{98 - remainder:02d}"


def iban(country_code: str, bban: str) -> str:
    """IBAN check digits for a BBAN in ``country_code``."""
    return mod_97_10(bban + country_code)


def spanish(string: str) -> str:
    """Spanish mod-11 check digit (one digit) over a string of up to 10 digits."""
    padded = string.rjust(10, "0")
    total = sum(digit * (2**index % 11) for index, digit in enumerate(_digits(padded)))
    result = 11 - total % 11
    return str(result if result < 10 else 11 - result)


def italian(string: str) -> str:
    """Italian CIN: a single letter over bank, branch and account codes."""
    total = 0
    for index, char in enumerate(string):
        if index % 2 == 0:
            if char not in ITALIAN_ODD_MAPPING:
                raise InvalidCharacterError(
                    f"Unexpected byte '{char}' in IBAN code", character=char
                )
            total += ITALIAN_ODD_MAPPING[char]
        elif _is_digit(char):
            total += int(char)
        elif _is_upper(char):
            total += ord(char) - 65
        else:
            raise InvalidCharacterError(
                f"Unexpected byte '{char}' in IBAN code", character=char
            )

    return chr(total % 26 + 65)


def belgian(string: str) -> str:
    """Belgian account number check digits (mod 97, with 97 for a zero remainder)."""
    remainder = int("".join(str(d) for d in _digits(string))) % 97
    return f"{remainder or 97:02d}"


def estonian(string: str) -> str:
    """Estonian 7-3-1 check digit, weighted from the right."""
    weights = [7, 3, 1]
    digits = _digits(string)[::-1]
    total = sum(digit * weights[index % 3] for index, digit in enumerate(digits))
    return str(total % 10)


def _mod_11(digits: list[int], weights: list[int]) -> str:
    total = sum(digit * weight for digit, weight in zip(digits, weights, strict=False))
    result = 11 - total % 11
    return str(result if result < 10 else 11 - result)


def slovakian_prefix(string: str) -> str:
    """Check digit for the 6-digit Slovak account number prefix."""
    return _mod_11(_digits(string), [10, 5, 8, 4, 2])


def slovakian_basic(string: str) -> str:
    """Check digit for the 10-digit Slovak basic account number."""
    return _mod_11(_digits(string), [6, 3, 7, 9, 10, 5, 8, 4, 2])


def dutch(string: str) -> str:
    """Dutch 11-proof check digit over a 10-digit account number."""
    digits = _digits(string.rjust(10, "0"))
    return _mod_11(digits, [10 - index for index in range(len(digits))])


def lund(string: str) -> str:
    """Luhn check digit, as used for Finnish account numbers."""
    weights = [2, 1]
    total = 0
    for index, digit in enumerate(_digits(string)[::-1]):
        product = digit * weights[index % 2]
        total += product % 10 + 1 if product >= 10 else product
    return str((10 - total % 10) % 10)


def _rib_value(string: str) -> int:
    mapped = []
    for char in string:
        if char not in RIB_MAPPING:
            raise InvalidCharacterError(f"Unexpected byte '{char}' in RIB", character=char)
        mapped.append(str(RIB_MAPPING[char]))
    return int("".join(mapped)) if mapped else 0


def rib(bank_code: str, branch_code: str, account_number: str) -> str:
    """French and Monegasque RIB key."""
    remainder = (
        89 * _rib_value(bank_code) + 15 * _rib_value(branch_code) + 3 * _rib_value(account_number)
    ) % 97
    return f"{97 - remainder:02d}"
