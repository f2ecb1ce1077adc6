"""Embedded account number checks used by German IBAN rules.

Both checks decide between two paddings of an account number whose length
is ambiguous. They are not general-purpose German modulus checks.
"""

from openiban.utils.text import leading_int, strip_leading_zeros


def check63_valid(account_number: str) -> bool:
    """Deutsche Bank variant of check method 63.

    Digits 2-7 of the padded number are weighted 2,1,2,1,2,1 from the right
    and the digit sums of the products are added up. The check digit sits in
    the eighth position.
    """
    padded = account_number.rjust(10, "0")
    weights = [2, 1, 2, 1, 2, 1]

    total = 0
    for index, digit in enumerate(reversed(padded[1:7])):
        product = leading_int(digit) * weights[index]
        total += sum(int(d) for d in str(product))

    expected_check_digit = (10 - total % 10) % 10
    return expected_check_digit == leading_int(padded[-3])


def check76_valid(account_number: str) -> bool:
    """Commerzbank check method 76 over the variable-length master number.

    The master number is digits 2-8 of the padded number without leading
    zeros; it must be 5-7 digits long and the account type (first digit)
    one of 0, 4, 6, 7, 8, 9.
    """
    padded = account_number.rjust(10, "0")
    master_number = strip_leading_zeros(padded[1:8])

    if len(master_number) not in (5, 6, 7):
        return False
    if leading_int(padded[0]) not in (0, 4, 6, 7, 8, 9):
        return False

    weights = [2, 3, 4, 5, 6, 7, 8]
    digits = reversed(master_number[:-1])
    total = sum(leading_int(digit) * weights[index] for index, digit in enumerate(digits))
    return total % 11 in (leading_int(master_number[-1]), 10)
