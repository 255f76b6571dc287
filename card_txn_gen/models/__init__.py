"""Domain models for synthetic card transaction generation."""

from card_txn_gen.models.financial import (
    CardBrand,
    CardExpiry,
    DeclineReason,
    Merchant,
    Transaction,
    TransactionStatus,
)

__all__ = [
    "CardBrand",
    "CardExpiry",
    "DeclineReason",
    "Merchant",
    "Transaction",
    "TransactionStatus",
]
