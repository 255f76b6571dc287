"""Output sinks for exporting generated transactions."""

from card_txn_gen.sinks.console import ConsoleSink
from card_txn_gen.sinks.csv_file import CsvFileSink
from card_txn_gen.sinks.json_file import JsonFileSink

__all__ = ["ConsoleSink", "CsvFileSink", "JsonFileSink"]
