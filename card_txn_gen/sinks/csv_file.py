"""CSV file sink for exporting transactions."""

from enum import Enum
from pathlib import Path
from typing import Iterable

from card_txn_gen.exceptions import SinkError
from card_txn_gen.logging import get_logger
from card_txn_gen.models.financial import FIELD_NAMES, Transaction

logger = get_logger(__name__)

# Free-text columns are always quoted; no other column is escaped
QUOTED_FIELDS = frozenset({"cardholder_name", "user_agent"})


def _quote(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def format_row(tx: Transaction) -> str:
    """Format one transaction as a CSV line (without line terminator)."""
    if not isinstance(tx, Transaction):
        raise TypeError(f"Cannot write {type(tx).__name__} records as CSV")
    cells = []
    for name in FIELD_NAMES:
        value = getattr(tx, name)
        if name == "amount":
            cell = f"{value:.2f}"
        elif value is None:
            cell = ""
        elif isinstance(value, Enum):
            cell = value.value
        else:
            cell = str(value)
        cells.append(_quote(cell) if name in QUOTED_FIELDS else cell)
    return ",".join(cells)


class CsvFileSink:
    """Output transactions to CSV files."""

    extension = "csv"

    def __init__(self, output_dir: str | Path) -> None:
        """Initialize CSV file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write CSV files.
        """
        self.output_dir = Path(output_dir)
        self._counts: dict[str, int] = {}

    def write_batch(self, name: str, records: Iterable[Transaction]) -> Path:
        """Write transactions to ``<name>.csv``, replacing any existing file.

        Returns
        -------
        Path
            Path of the written file.

        Raises
        ------
        SinkError
            If the directory or file cannot be created or written.
        """
        file_path = self.output_dir / f"{name}.{self.extension}"
        count = 0
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            with open(file_path, "w", encoding="utf-8", newline="") as f:
                f.write(",".join(FIELD_NAMES) + "\n")
                for tx in records:
                    f.write(format_row(tx) + "\n")
                    count += 1
        except OSError as e:
            raise SinkError(f"Failed to write {file_path}: {e}") from e

        self._counts[name] = count
        logger.info("Wrote %d records to %s", count, file_path)
        return file_path

    def close(self) -> None:
        """Log summary."""
        for name, count in self._counts.items():
            logger.debug("  %s.%s: %d records", name, self.extension, count)
