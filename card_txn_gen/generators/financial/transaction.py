"""Card transaction generator."""

import random
from datetime import datetime
from typing import Iterator

from card_txn_gen.config import MAX_RECORDS, validate_count
from card_txn_gen.generators.base import BaseGenerator
from card_txn_gen.generators.financial import fields, reference
from card_txn_gen.generators.financial.card_number import generate_card_number, generate_cvv
from card_txn_gen.logging import get_logger
from card_txn_gen.models.financial import (
    PAYMENT_METHOD,
    CardBrand,
    DeclineReason,
    Transaction,
    TransactionStatus,
)

logger = get_logger(__name__)


class TransactionGenerator(BaseGenerator):
    """Generate synthetic card transactions.

    Every record is an independent sample: brand, merchant, names, currency
    and user agent are drawn uniformly from the reference tables, and the
    status is drawn uniformly from the four statuses.
    """

    STATUSES = list(TransactionStatus)
    DECLINE_REASONS = list(DeclineReason)

    def __init__(
        self,
        seed: int | None = None,
        rng: random.Random | None = None,
        max_records: int = MAX_RECORDS,
    ) -> None:
        super().__init__(seed, rng=rng)
        self.max_records = max_records

    def generate(
        self,
        brand: CardBrand | None = None,
        now: datetime | None = None,
    ) -> Transaction:
        """Generate a single transaction.

        Parameters
        ----------
        brand : CardBrand | None
            Card brand to use. Drawn from the reference tables when omitted.
        now : datetime | None
            Reference instant for the transaction date and card expiry.

        Returns
        -------
        Transaction
            Generated transaction.
        """
        rng = self.rng

        if brand is None:
            brand = rng.choice(reference.CARD_BRANDS)
        merchant = rng.choice(reference.MERCHANTS)
        cardholder_name = fields.generate_cardholder_name(
            rng, reference.FIRST_NAMES, reference.LAST_NAMES
        )
        currency = rng.choice(reference.CURRENCIES)
        user_agent = rng.choice(reference.USER_AGENTS)

        status = rng.choice(self.STATUSES)
        decline_reason = None
        if status == TransactionStatus.DECLINED:
            decline_reason = rng.choice(self.DECLINE_REASONS)

        return Transaction(
            transaction_id=fields.generate_transaction_id(rng),
            transaction_date=fields.generate_transaction_date(rng, now).isoformat(),
            status=status,
            decline_reason=decline_reason,
            cardholder_name=cardholder_name,
            card_number=generate_card_number(brand, rng),
            card_brand=brand.name,
            card_expiry=str(fields.generate_expiry(rng, now)),
            cvv=generate_cvv(brand.cvv_length, rng),
            amount=fields.generate_amount(rng, currency),
            currency=currency,
            merchant_name=merchant.name,
            merchant_id=merchant.merchant_id,
            merchant_category=merchant.category,
            payment_method=PAYMENT_METHOD,
            ip_address=fields.generate_ip_address(rng),
            device_id=fields.generate_device_id(rng),
            user_agent=user_agent,
        )

    def iter_transactions(
        self,
        count: int,
        brand: CardBrand | None = None,
    ) -> Iterator[Transaction]:
        """Yield ``count`` independent transactions.

        The count is validated before the first record is generated.
        """
        validate_count(count, self.max_records)
        return self._iter(count, brand)

    def _iter(self, count: int, brand: CardBrand | None) -> Iterator[Transaction]:
        for _ in range(count):
            yield self.generate(brand=brand)

    def generate_batch(
        self,
        count: int,
        brand: CardBrand | None = None,
    ) -> list[Transaction]:
        """Generate a batch of independent transactions.

        Parameters
        ----------
        count : int
            Number of transactions, 0 <= count <= ``max_records``.
        brand : CardBrand | None
            Pin every record to one card brand.

        Returns
        -------
        list[Transaction]
            Generated transactions.

        Raises
        ------
        InvalidRecordCountError
            If ``count`` is out of range.
        """
        transactions = list(self.iter_transactions(count, brand=brand))
        logger.debug("Generated %d transactions", len(transactions))
        return transactions
