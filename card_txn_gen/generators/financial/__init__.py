"""Payment card generators."""

from card_txn_gen.generators.financial.card_number import (
    generate_card_number,
    generate_cvv,
    luhn_check_digit,
    luhn_is_valid,
)
from card_txn_gen.generators.financial.transaction import TransactionGenerator

__all__ = [
    "TransactionGenerator",
    "generate_card_number",
    "generate_cvv",
    "luhn_check_digit",
    "luhn_is_valid",
]
