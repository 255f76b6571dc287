"""Card brand and expiry models for payment card domain."""

from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True)
class CardBrand:
    """Card issuing scheme.

    Every prefix must be numeric and shorter than every total length so a
    generated number always has room for random digits and the check digit.
    """

    name: str
    prefixes: tuple[str, ...]
    lengths: tuple[int, ...]
    cvv_length: int

    def __post_init__(self) -> None:
        if not self.prefixes or not self.lengths:
            raise ValueError(f"Brand {self.name!r} needs at least one prefix and one length")
        if not all(prefix.isdigit() for prefix in self.prefixes):
            raise ValueError(f"Brand {self.name!r} has a non-numeric prefix")
        longest_prefix = max(len(prefix) for prefix in self.prefixes)
        if longest_prefix >= min(self.lengths):
            raise ValueError(
                f"Brand {self.name!r}: prefix length {longest_prefix} "
                f"must be shorter than card length {min(self.lengths)}"
            )
        if self.cvv_length not in (3, 4):
            raise ValueError(f"Brand {self.name!r}: CVV length must be 3 or 4")


@dataclass(frozen=True)
class CardExpiry:
    """Card expiry month and year."""

    month: int  # 1-12
    year: int  # Four-digit year, not before the current year

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"Expiry month must be in 1-12, got {self.month}")
        current_year = datetime.now(timezone.utc).year
        if self.year < current_year:
            raise ValueError(f"Expiry year {self.year} is before {current_year}")

    def __str__(self) -> str:
        return f"{self.month:02d}/{self.year % 100:02d}"
