"""Scenarios for generating card transaction datasets."""

from card_txn_gen.scenarios.datasets import DatasetScenario

__all__ = ["DatasetScenario"]
