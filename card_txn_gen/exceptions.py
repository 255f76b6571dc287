"""Custom exception hierarchy for card-txn-gen."""


class DataGenError(Exception):
    """Base exception for all card-txn-gen errors."""


class ConfigurationError(DataGenError):
    """Raised when configuration is invalid or missing."""


class InvalidRecordCountError(ConfigurationError):
    """Raised when a requested record count is negative, too large or not an int."""


class UnknownBrandError(ConfigurationError):
    """Raised when a card brand name is not in the reference tables."""


class InvalidRecordError(DataGenError):
    """Raised when a transaction record breaks one of its invariants."""


class SinkError(DataGenError):
    """Raised when a sink operation fails."""
