"""Single-field generators for card transactions.

Each function draws from the ``random.Random`` it is given, so a seeded
source makes the output reproducible.
"""

import random
import string
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Sequence

from card_txn_gen.generators.financial.reference import ZERO_DECIMAL_CURRENCIES
from card_txn_gen.models.financial import CardExpiry

TRANSACTION_ID_PREFIX = "TXN"
TRANSACTION_ID_ALPHABET = string.ascii_uppercase + string.digits
TRANSACTION_ID_LENGTH = 9

DEVICE_ID_PREFIX = "DEV"

# Transactions fall within the last three years
MAX_TRANSACTION_AGE_DAYS = 365 * 3

CENT = Decimal("0.01")


def generate_transaction_id(rng: random.Random) -> str:
    """Generate a transaction ID such as ``TXN4K9Z0QW2M``."""
    suffix = "".join(rng.choices(TRANSACTION_ID_ALPHABET, k=TRANSACTION_ID_LENGTH))
    return f"{TRANSACTION_ID_PREFIX}{suffix}"


def generate_ip_address(rng: random.Random) -> str:
    """Generate a public-looking IPv4 address."""
    return ".".join(
        str(octet)
        for octet in (
            rng.randint(1, 254),
            rng.randint(0, 254),
            rng.randint(0, 254),
            rng.randint(0, 254),
        )
    )


def generate_device_id(rng: random.Random) -> str:
    """Generate a device ID such as ``DEV48213``."""
    return f"{DEVICE_ID_PREFIX}{rng.randint(10000, 99999)}"


def generate_transaction_date(rng: random.Random, now: datetime | None = None) -> datetime:
    """Generate a timestamp up to three years before ``now``.

    Parameters
    ----------
    rng : random.Random
        Random source.
    now : datetime | None
        Reference instant (default: current UTC time).

    Returns
    -------
    datetime
        Timezone-aware timestamp a whole number of days before ``now``.
    """
    if now is None:
        now = datetime.now(timezone.utc)
    return now - timedelta(days=rng.randrange(MAX_TRANSACTION_AGE_DAYS))


def generate_expiry(rng: random.Random, now: datetime | None = None) -> CardExpiry:
    """Generate an expiry one to five years after the current year."""
    if now is None:
        now = datetime.now(timezone.utc)
    month = rng.randint(1, 12)
    return CardExpiry(month=month, year=now.year + rng.randint(1, 5))


def generate_amount(rng: random.Random, currency: str) -> Decimal:
    """Generate a transaction amount for a currency.

    Zero-decimal currencies get a whole amount in [100, 50000]. Others get
    a whole part in [1, 1000] plus floored cents, so the result is below
    1001 with exactly two decimal places.
    """
    if currency in ZERO_DECIMAL_CURRENCIES:
        return Decimal(rng.randint(100, 50000))

    whole = rng.randint(1, 1000)
    cents = int(rng.random() * 100)
    return (Decimal(whole) + Decimal(cents) / 100).quantize(CENT)


def generate_cardholder_name(
    rng: random.Random,
    first_names: Sequence[str],
    last_names: Sequence[str],
) -> str:
    """Combine a random first and last name."""
    return f"{rng.choice(first_names)} {rng.choice(last_names)}"
