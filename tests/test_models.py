"""Tests for payment card models."""

from dataclasses import FrozenInstanceError, replace
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from card_txn_gen.exceptions import InvalidRecordError
from card_txn_gen.models.financial import (
    FIELD_NAMES,
    PAYMENT_METHOD,
    CardBrand,
    CardExpiry,
    DeclineReason,
    Merchant,
    Transaction,
    TransactionStatus,
)


def make_transaction(**overrides: object) -> Transaction:
    """Build a valid approved transaction with optional overrides."""
    values: dict = {
        "transaction_id": "TXNABC123XYZ",
        "transaction_date": "2025-06-15T12:00:00+00:00",
        "status": TransactionStatus.APPROVED,
        "decline_reason": None,
        "cardholder_name": "Jane Smith",
        "card_number": "4111111111111111",
        "card_brand": "Visa",
        "card_expiry": "09/28",
        "cvv": "123",
        "amount": Decimal("42.50"),
        "currency": "USD",
        "merchant_name": "Acme Retail",
        "merchant_id": "MER12345",
        "merchant_category": "Retail",
        "payment_method": PAYMENT_METHOD,
        "ip_address": "10.0.0.1",
        "device_id": "DEV12345",
        "user_agent": "Mozilla/5.0",
    }
    values.update(overrides)
    return Transaction(**values)


class TestEnums:
    """Tests for status and decline reason enums."""

    def test_status_values(self) -> None:
        assert [s.value for s in TransactionStatus] == [
            "approved",
            "declined",
            "pending",
            "refunded",
        ]

    def test_decline_reason_values(self) -> None:
        assert [r.value for r in DeclineReason] == [
            "insufficient_funds",
            "card_expired",
            "invalid_card",
            "suspicious_activity",
        ]

    def test_str_enum_compares_to_label(self) -> None:
        assert TransactionStatus.DECLINED == "declined"


class TestCardBrand:
    """Tests for CardBrand."""

    def test_valid_brand(self) -> None:
        brand = CardBrand(name="Test", prefixes=("12", "345"), lengths=(16,), cvv_length=3)

        assert brand.prefixes == ("12", "345")

    def test_prefix_must_be_shorter_than_length(self) -> None:
        with pytest.raises(ValueError, match="shorter"):
            CardBrand(name="Bad", prefixes=("1234",), lengths=(4,), cvv_length=3)

    def test_prefix_must_be_numeric(self) -> None:
        with pytest.raises(ValueError, match="non-numeric"):
            CardBrand(name="Bad", prefixes=("4a",), lengths=(16,), cvv_length=3)

    def test_requires_prefix_and_length(self) -> None:
        with pytest.raises(ValueError):
            CardBrand(name="Bad", prefixes=(), lengths=(16,), cvv_length=3)

    def test_cvv_length(self) -> None:
        with pytest.raises(ValueError, match="CVV"):
            CardBrand(name="Bad", prefixes=("4",), lengths=(16,), cvv_length=5)

    def test_frozen(self) -> None:
        brand = CardBrand(name="Test", prefixes=("4",), lengths=(16,), cvv_length=3)

        with pytest.raises(FrozenInstanceError):
            brand.name = "Other"  # type: ignore[misc]


class TestCardExpiry:
    """Tests for CardExpiry."""

    def test_str_zero_pads(self) -> None:
        assert str(CardExpiry(month=3, year=2099)) == "03/99"

    def test_str_two_digit_year(self) -> None:
        assert str(CardExpiry(month=12, year=2105)) == "12/05"

    @pytest.mark.parametrize("month", [0, 13])
    def test_invalid_month(self, month: int) -> None:
        with pytest.raises(ValueError):
            CardExpiry(month=month, year=2099)

    def test_past_year_rejected(self) -> None:
        last_year = datetime.now(timezone.utc).year - 1

        with pytest.raises(ValueError, match="before"):
            CardExpiry(month=12, year=last_year)

    def test_current_year_accepted(self) -> None:
        this_year = datetime.now(timezone.utc).year

        assert CardExpiry(month=1, year=this_year).year == this_year


class TestMerchant:
    """Tests for Merchant."""

    def test_fields(self) -> None:
        merchant = Merchant(name="BookWorld", merchant_id="MER61234", category="Books & Media")

        assert merchant.merchant_id == "MER61234"
        assert merchant.category == "Books & Media"


class TestTransaction:
    """Tests for Transaction."""

    def test_field_names(self) -> None:
        assert FIELD_NAMES == (
            "transaction_id",
            "transaction_date",
            "status",
            "decline_reason",
            "cardholder_name",
            "card_number",
            "card_brand",
            "card_expiry",
            "cvv",
            "amount",
            "currency",
            "merchant_name",
            "merchant_id",
            "merchant_category",
            "payment_method",
            "ip_address",
            "device_id",
            "user_agent",
        )

    def test_approved_without_reason(self) -> None:
        tx = make_transaction()

        assert tx.decline_reason is None

    def test_declined_with_reason(self) -> None:
        tx = make_transaction(
            status=TransactionStatus.DECLINED,
            decline_reason=DeclineReason.CARD_EXPIRED,
        )

        assert tx.decline_reason == DeclineReason.CARD_EXPIRED

    def test_declined_requires_reason(self) -> None:
        with pytest.raises(InvalidRecordError, match="without a decline reason"):
            make_transaction(status=TransactionStatus.DECLINED)

    @pytest.mark.parametrize(
        "status",
        [TransactionStatus.APPROVED, TransactionStatus.PENDING, TransactionStatus.REFUNDED],
    )
    def test_reason_only_when_declined(self, status: TransactionStatus) -> None:
        with pytest.raises(InvalidRecordError, match="decline reason set"):
            make_transaction(status=status, decline_reason=DeclineReason.INVALID_CARD)

    def test_immutable(self) -> None:
        tx = make_transaction()

        with pytest.raises(FrozenInstanceError):
            tx.amount = Decimal("1.00")  # type: ignore[misc]

    def test_replace_revalidates(self) -> None:
        tx = make_transaction()

        with pytest.raises(InvalidRecordError):
            replace(tx, status=TransactionStatus.DECLINED)
