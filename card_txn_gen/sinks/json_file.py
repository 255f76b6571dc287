"""JSON file sink for exporting transactions."""

import json
from pathlib import Path
from typing import Any, Iterable

from card_txn_gen.exceptions import SinkError
from card_txn_gen.logging import get_logger
from card_txn_gen.sinks.serialization import to_dict

logger = get_logger(__name__)


class JsonFileSink:
    """Output transactions to JSON files."""

    extension = "json"

    def __init__(self, output_dir: str | Path, pretty: bool = True) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print JSON output.
        """
        self.output_dir = Path(output_dir)
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    def write_batch(self, name: str, records: Iterable[Any]) -> Path:
        """Write records to ``<name>.json`` as one array, replacing any existing file.

        Absent decline reasons are written as ``null``.

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
        data = [to_dict(record) for record in records]

        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            with open(file_path, "w", encoding="utf-8") as f:
                if self.pretty:
                    json.dump(data, f, indent=2, ensure_ascii=False)
                else:
                    json.dump(data, f, ensure_ascii=False)
        except OSError as e:
            raise SinkError(f"Failed to write {file_path}: {e}") from e

        self._counts[name] = len(data)
        logger.info("Wrote %d records to %s", len(data), file_path)
        return file_path

    def close(self) -> None:
        """Log summary."""
        for name, count in self._counts.items():
            logger.debug("  %s.%s: %d records", name, self.extension, count)
