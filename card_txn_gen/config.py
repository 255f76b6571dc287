"""Configuration management for card-txn-gen."""

from dataclasses import dataclass, field
from pathlib import Path

from card_txn_gen.exceptions import ConfigurationError, InvalidRecordCountError
from card_txn_gen.models.financial.enums import OutputFormat

DEFAULT_DATASET_SIZES: tuple[int, ...] = (100, 250, 500)

# Upper bound on a single batch; everything is held in memory
MAX_RECORDS = 1_000_000


def validate_count(count: int, max_records: int = MAX_RECORDS) -> int:
    """Check a requested record count and return it unchanged.

    Parameters
    ----------
    count : int
        Number of records to generate.
    max_records : int
        Largest accepted count.

    Returns
    -------
    int
        The validated count.

    Raises
    ------
    InvalidRecordCountError
        If ``count`` is not an int, is negative or exceeds ``max_records``.
    """
    # bool is an int subclass but never a meaningful count
    if not isinstance(count, int) or isinstance(count, bool):
        raise InvalidRecordCountError(f"Record count must be an integer, got {count!r}")
    if count < 0:
        raise InvalidRecordCountError(f"Record count must be >= 0, got {count}")
    if count > max_records:
        raise InvalidRecordCountError(
            f"Record count {count} exceeds the maximum of {max_records}"
        )
    return count


@dataclass
class OutputConfig:
    """Output configuration."""

    output_dir: Path = field(default_factory=lambda: Path("."))
    pretty_json: bool = True
    formats: tuple[OutputFormat, ...] = (OutputFormat.CSV, OutputFormat.JSON)
    filename_prefix: str = "transactions"

    def dataset_name(self, count: int) -> str:
        """Get the file stem for a dataset of ``count`` records."""
        return f"{self.filename_prefix}_{count}"


@dataclass
class GeneratorConfig:
    """Main configuration for card-txn-gen."""

    dataset_sizes: tuple[int, ...] = DEFAULT_DATASET_SIZES
    seed: int | None = None
    max_records: int = MAX_RECORDS
    log_level: str = "INFO"
    output: OutputConfig = field(default_factory=OutputConfig)

    def validate(self) -> None:
        """Validate the configuration before any generation work begins.

        Raises
        ------
        InvalidRecordCountError
            If any dataset size is invalid.
        ConfigurationError
            If no output format is selected or a size is repeated.
        """
        for size in self.dataset_sizes:
            validate_count(size, self.max_records)
        if len(set(self.dataset_sizes)) != len(self.dataset_sizes):
            raise ConfigurationError(
                f"Dataset sizes must be unique, got {list(self.dataset_sizes)}"
            )
        if not self.output.formats:
            raise ConfigurationError("At least one output format is required")
