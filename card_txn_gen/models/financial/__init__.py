"""Payment card domain models."""

from card_txn_gen.models.financial.card import CardBrand, CardExpiry
from card_txn_gen.models.financial.enums import DeclineReason, OutputFormat, TransactionStatus
from card_txn_gen.models.financial.merchant import Merchant
from card_txn_gen.models.financial.transaction import FIELD_NAMES, PAYMENT_METHOD, Transaction

__all__ = [
    "FIELD_NAMES",
    "PAYMENT_METHOD",
    "CardBrand",
    "CardExpiry",
    "DeclineReason",
    "Merchant",
    "OutputFormat",
    "Transaction",
    "TransactionStatus",
]
