"""Enumeration types for payment card entities."""

from enum import Enum


class TransactionStatus(str, Enum):
    APPROVED = "approved"
    DECLINED = "declined"
    PENDING = "pending"
    REFUNDED = "refunded"


class DeclineReason(str, Enum):
    INSUFFICIENT_FUNDS = "insufficient_funds"
    CARD_EXPIRED = "card_expired"
    INVALID_CARD = "invalid_card"
    SUSPICIOUS_ACTIVITY = "suspicious_activity"


class OutputFormat(str, Enum):
    CSV = "csv"
    JSON = "json"
    CONSOLE = "console"
