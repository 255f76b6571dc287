"""Card number generation with Luhn check digits."""

import random

from card_txn_gen.models.financial import CardBrand


def luhn_check_digit(payload: str) -> int:
    """Compute the Luhn check digit to append to ``payload``.

    Starting from the rightmost payload digit, every second digit is doubled
    (minus 9 when the result exceeds 9) and all digits are summed.

    Parameters
    ----------
    payload : str
        Card number without its check digit.

    Returns
    -------
    int
        Check digit in 0-9.
    """
    if not payload.isdigit():
        raise ValueError(f"Luhn payload must be numeric, got {payload!r}")

    total = 0
    for position, char in enumerate(reversed(payload)):
        digit = int(char)
        if position % 2 == 0:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return (10 - total % 10) % 10


def luhn_is_valid(number: str) -> bool:
    """Check whether the last digit of ``number`` is its Luhn check digit."""
    if len(number) < 2 or not number.isdigit():
        return False
    return luhn_check_digit(number[:-1]) == int(number[-1])


def generate_card_number(
    brand: CardBrand,
    rng: random.Random,
    length: int | None = None,
) -> str:
    """Generate a Luhn-valid card number for a brand.

    The check digit is computed over exactly ``length - 1`` digits, so the
    number is never truncated after the check digit is appended.

    Parameters
    ----------
    brand : CardBrand
        Brand supplying prefixes and valid lengths.
    rng : random.Random
        Random source.
    length : int | None
        Target length. Must be one of ``brand.lengths``; picked at random
        when omitted.

    Returns
    -------
    str
        Numeric card number of exactly ``length`` digits.
    """
    prefix = rng.choice(brand.prefixes)
    if length is None:
        length = rng.choice(brand.lengths)
    elif length not in brand.lengths:
        raise ValueError(f"{brand.name} numbers cannot be {length} digits long")

    body = prefix + "".join(str(rng.randint(0, 9)) for _ in range(length - 1 - len(prefix)))
    return f"{body}{luhn_check_digit(body)}"


def generate_cvv(length: int, rng: random.Random) -> str:
    """Generate a CVV of ``length`` random digits."""
    return "".join(str(rng.randint(0, 9)) for _ in range(length))
