"""Shared serialization utilities for sinks."""

import csv
import json
from decimal import Decimal
from enum import Enum
from pathlib import Path
from typing import Any

from card_txn_gen.models.financial import (
    FIELD_NAMES,
    DeclineReason,
    Transaction,
    TransactionStatus,
)


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return float(value)
    elif isinstance(value, Enum):
        return value.value
    return value


def to_record_dict(tx: Transaction) -> dict[str, Any]:
    """Convert a transaction to a JSON-ready dict in column order."""
    return {name: serialize_value(getattr(tx, name)) for name in FIELD_NAMES}


def to_dict(obj: Any) -> dict:
    """Convert a transaction or plain dict to a dictionary.

    Raises
    ------
    TypeError
        If ``obj`` is neither a ``Transaction`` nor a dict.
    """
    if isinstance(obj, Transaction):
        return to_record_dict(obj)
    elif isinstance(obj, dict):
        return obj
    raise TypeError(f"Cannot serialize {type(obj).__name__} records")


def from_record_dict(data: dict[str, Any]) -> Transaction:
    """Build a transaction from a parsed CSV row or JSON object.

    An empty string and ``None`` both mean "no decline reason". The amount
    is read through ``str`` so JSON floats become exact decimals.

    Raises
    ------
    KeyError
        If a field is missing.
    ValueError
        If a status or decline reason label is unknown.
    """
    values = {name: data[name] for name in FIELD_NAMES}
    reason = values["decline_reason"]
    values["status"] = TransactionStatus(values["status"])
    values["decline_reason"] = DeclineReason(reason) if reason else None
    values["amount"] = Decimal(str(values["amount"]))
    return Transaction(**values)


def read_csv(path: str | Path) -> list[Transaction]:
    """Parse a CSV file written by ``CsvFileSink``."""
    with open(path, newline="", encoding="utf-8") as f:
        return [from_record_dict(row) for row in csv.DictReader(f)]


def read_json(path: str | Path) -> list[Transaction]:
    """Parse a JSON file written by ``JsonFileSink``."""
    with open(path, encoding="utf-8") as f:
        return [from_record_dict(obj) for obj in json.load(f)]
