"""Card transaction model for payment card domain."""

from dataclasses import dataclass, fields
from decimal import Decimal

from card_txn_gen.exceptions import InvalidRecordError
from card_txn_gen.models.financial.enums import DeclineReason, TransactionStatus

PAYMENT_METHOD = "credit_card"


@dataclass(frozen=True)
class Transaction:
    """Synthetic card transaction.

    Field order is the column order of every output format.
    """

    transaction_id: str  # TXN + 9 alphanumerics
    transaction_date: str  # ISO-8601 with UTC offset
    status: TransactionStatus
    decline_reason: DeclineReason | None  # Only set when declined
    cardholder_name: str
    card_number: str
    card_brand: str
    card_expiry: str  # MM/YY
    cvv: str
    amount: Decimal
    currency: str  # ISO 4217 code
    merchant_name: str
    merchant_id: str
    merchant_category: str
    payment_method: str
    ip_address: str
    device_id: str
    user_agent: str

    def __post_init__(self) -> None:
        declined = self.status == TransactionStatus.DECLINED
        if declined and self.decline_reason is None:
            raise InvalidRecordError(f"{self.transaction_id}: declined without a decline reason")
        if not declined and self.decline_reason is not None:
            raise InvalidRecordError(
                f"{self.transaction_id}: decline reason set on a {self.status.value} transaction"
            )


FIELD_NAMES: tuple[str, ...] = tuple(f.name for f in fields(Transaction))
