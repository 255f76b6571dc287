"""Tests for single-field generators and reference tables."""

import random
import re
from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from card_txn_gen.exceptions import UnknownBrandError
from card_txn_gen.generators.financial import fields, reference


class TestReferenceTables:
    """Tests for the static reference tables."""

    def test_table_sizes(self) -> None:
        assert len(reference.CARD_BRANDS) == 4
        assert len(reference.MERCHANTS) == 10
        assert len(reference.FIRST_NAMES) == 20
        assert len(reference.LAST_NAMES) == 20
        assert len(reference.CURRENCIES) == 6
        assert len(reference.USER_AGENTS) == 3

    def test_merchant_ids_unique(self) -> None:
        ids = [merchant.merchant_id for merchant in reference.MERCHANTS]

        assert len(set(ids)) == len(ids)

    def test_tables_are_immutable(self) -> None:
        assert isinstance(reference.CARD_BRANDS, tuple)
        assert isinstance(reference.MERCHANTS, tuple)
        assert isinstance(reference.CURRENCIES, tuple)

    def test_brand_by_name(self) -> None:
        assert reference.brand_by_name("visa").prefixes == ("4",)
        assert reference.brand_by_name("American Express").lengths == (15,)

    def test_unknown_brand(self) -> None:
        with pytest.raises(UnknownBrandError, match="Diners"):
            reference.brand_by_name("Diners")


class TestTransactionId:
    """Tests for generate_transaction_id."""

    def test_format(self, rng: random.Random) -> None:
        for _ in range(100):
            assert re.fullmatch(r"TXN[A-Z0-9]{9}", fields.generate_transaction_id(rng))

    def test_alphabet(self) -> None:
        assert len(fields.TRANSACTION_ID_ALPHABET) == 36


class TestIpAddress:
    """Tests for generate_ip_address."""

    def test_octet_ranges(self, rng: random.Random) -> None:
        for _ in range(500):
            octets = [int(part) for part in fields.generate_ip_address(rng).split(".")]

            assert len(octets) == 4
            assert 1 <= octets[0] <= 254
            assert all(0 <= octet <= 254 for octet in octets[1:])


class TestDeviceId:
    """Tests for generate_device_id."""

    def test_format(self, rng: random.Random) -> None:
        for _ in range(100):
            device_id = fields.generate_device_id(rng)

            assert device_id.startswith("DEV")
            assert 10000 <= int(device_id[3:]) <= 99999


class TestTransactionDate:
    """Tests for generate_transaction_date."""

    def test_within_three_years(self, rng: random.Random, fixed_now: datetime) -> None:
        for _ in range(200):
            ts = fields.generate_transaction_date(rng, fixed_now)
            age = fixed_now - ts

            assert age >= timedelta(0)
            assert age < timedelta(days=1095)
            assert age.seconds == 0  # Whole days only

    def test_iso_format_with_offset(self, rng: random.Random) -> None:
        rendered = fields.generate_transaction_date(rng).isoformat()

        assert rendered.endswith("+00:00")
        assert datetime.fromisoformat(rendered).tzinfo is not None


class TestExpiry:
    """Tests for generate_expiry."""

    def test_always_in_future(self, rng: random.Random, fixed_now: datetime) -> None:
        for _ in range(200):
            expiry = fields.generate_expiry(rng, fixed_now)

            assert 1 <= expiry.month <= 12
            assert fixed_now.year + 1 <= expiry.year <= fixed_now.year + 5

    def test_rendering(self, rng: random.Random) -> None:
        assert re.fullmatch(r"(0[1-9]|1[0-2])/\d{2}", str(fields.generate_expiry(rng)))


class TestAmount:
    """Tests for generate_amount."""

    def test_jpy_whole_amount(self, rng: random.Random) -> None:
        for _ in range(500):
            amount = fields.generate_amount(rng, "JPY")

            assert amount == amount.to_integral_value()
            assert 100 <= amount <= 50000

    @pytest.mark.parametrize("currency", ["USD", "EUR", "GBP", "CAD", "AUD"])
    def test_two_decimal_amount(self, currency: str, rng: random.Random) -> None:
        for _ in range(500):
            amount = fields.generate_amount(rng, currency)

            assert Decimal("1") <= amount < Decimal("1001")
            assert amount.as_tuple().exponent == -2

    def test_upper_bound_when_fraction_near_one(self) -> None:
        rng = random.Random()
        rng.randint = lambda a, b: b  # type: ignore[method-assign]
        rng.random = lambda: 0.9999999  # type: ignore[method-assign]

        assert fields.generate_amount(rng, "USD") == Decimal("1000.99")


class TestCardholderName:
    """Tests for generate_cardholder_name."""

    def test_combines_tables(self, rng: random.Random) -> None:
        name = fields.generate_cardholder_name(rng, reference.FIRST_NAMES, reference.LAST_NAMES)
        first, last = name.split(" ")

        assert first in reference.FIRST_NAMES
        assert last in reference.LAST_NAMES
