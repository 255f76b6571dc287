"""Static reference tables for card transaction generation."""

from card_txn_gen.exceptions import UnknownBrandError
from card_txn_gen.models.financial import CardBrand, Merchant

# Prefixes and lengths follow each issuer's public numbering scheme
CARD_BRANDS: tuple[CardBrand, ...] = (
    CardBrand(name="Visa", prefixes=("4",), lengths=(16,), cvv_length=3),
    CardBrand(
        name="Mastercard",
        prefixes=("51", "52", "53", "54", "55"),
        lengths=(16,),
        cvv_length=3,
    ),
    CardBrand(name="American Express", prefixes=("34", "37"), lengths=(15,), cvv_length=4),
    CardBrand(
        name="Discover",
        prefixes=("6011", "644", "645", "646", "647", "648", "649", "65"),
        lengths=(16,),
        cvv_length=3,
    ),
)

MERCHANTS: tuple[Merchant, ...] = (
    Merchant(name="Acme Retail", merchant_id="MER12345", category="Retail"),
    Merchant(name="Sunshine Groceries", merchant_id="MER22468", category="Grocery"),
    Merchant(name="Tech Universe", merchant_id="MER39521", category="Electronics"),
    Merchant(name="Cozy Coffee Shop", merchant_id="MER41327", category="Food & Beverage"),
    Merchant(name="Fitness Plus", merchant_id="MER57845", category="Health & Fitness"),
    Merchant(name="BookWorld", merchant_id="MER61234", category="Books & Media"),
    Merchant(name="QuickMart", merchant_id="MER78523", category="Convenience Store"),
    Merchant(name="Urban Fashion", merchant_id="MER84751", category="Clothing"),
    Merchant(name="Travel Now", merchant_id="MER92456", category="Travel"),
    Merchant(name="Gourmet Dining", merchant_id="MER10387", category="Restaurant"),
)

FIRST_NAMES: tuple[str, ...] = (
    "John", "Jane", "Michael", "Emily", "David",
    "Sarah", "Robert", "Lisa", "William", "Emma",
    "James", "Olivia", "Daniel", "Sophia", "Matthew",
    "Ava", "Christopher", "Mia", "Andrew", "Isabella",
)

LAST_NAMES: tuple[str, ...] = (
    "Smith", "Johnson", "Williams", "Brown", "Jones",
    "Garcia", "Miller", "Davis", "Rodriguez", "Martinez",
    "Hernandez", "Lopez", "Gonzalez", "Wilson", "Anderson",
    "Thomas", "Taylor", "Moore", "Jackson", "Martin",
)

CURRENCIES: tuple[str, ...] = ("USD", "EUR", "GBP", "CAD", "AUD", "JPY")

# Currencies without minor units
ZERO_DECIMAL_CURRENCIES = frozenset({"JPY"})

USER_AGENTS: tuple[str, ...] = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/14.1.1 Safari/605.1.15",
    "Mozilla/5.0 (iPhone; CPU iPhone OS 14_6 like Mac OS X) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/14.0 Mobile/15E148 Safari/604.1",
)


def brand_by_name(name: str) -> CardBrand:
    """Look up a card brand by name (case-insensitive).

    Raises
    ------
    UnknownBrandError
        If no brand has that name.
    """
    for brand in CARD_BRANDS:
        if brand.name.lower() == name.lower():
            return brand
    known = ", ".join(brand.name for brand in CARD_BRANDS)
    raise UnknownBrandError(f"Unknown card brand {name!r} (known: {known})")
