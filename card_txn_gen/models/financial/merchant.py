"""Merchant model for payment card domain."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Merchant:
    """Merchant accepting card payments."""

    name: str
    merchant_id: str
    category: str  # Spending category label, e.g. "Grocery"
