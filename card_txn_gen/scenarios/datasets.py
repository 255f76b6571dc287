"""Dataset scenario writing sized transaction batches to file sinks."""

from pathlib import Path
from typing import Any

from card_txn_gen.config import GeneratorConfig, validate_count
from card_txn_gen.generators.financial import TransactionGenerator
from card_txn_gen.logging import get_logger
from card_txn_gen.models.financial import OutputFormat
from card_txn_gen.sinks import ConsoleSink, CsvFileSink, JsonFileSink

logger = get_logger(__name__)


class DatasetScenario:
    """Generate one transaction batch per configured size and export it.

    With the default configuration this writes six files to the current
    directory: ``transactions_{100,250,500}.csv`` and the matching
    ``.json`` files. Files are written one at a time; a failure leaves
    the files already written in place.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        generator: TransactionGenerator | None = None,
    ) -> None:
        """Initialize dataset scenario.

        Parameters
        ----------
        config : GeneratorConfig | None
            Scenario configuration (defaults to ``GeneratorConfig()``).
        generator : TransactionGenerator | None
            Transaction generator. Built from ``config.seed`` when omitted.
        """
        self.config = config or GeneratorConfig()
        self.generator = generator or TransactionGenerator(
            seed=self.config.seed,
            max_records=self.config.max_records,
        )
        self.sinks = self._build_sinks()

    def _build_sinks(self) -> list[Any]:
        output = self.config.output
        sinks: list[Any] = []
        for fmt in output.formats:
            if fmt == OutputFormat.CSV:
                sinks.append(CsvFileSink(output.output_dir))
            elif fmt == OutputFormat.JSON:
                sinks.append(JsonFileSink(output.output_dir, pretty=output.pretty_json))
            elif fmt == OutputFormat.CONSOLE:
                sinks.append(ConsoleSink(max_records=5))
        return sinks

    def run(self) -> list[Path]:
        """Generate and export every dataset.

        Returns
        -------
        list[Path]
            Written files, in write order.

        Raises
        ------
        InvalidRecordCountError
            If a dataset size is invalid. Raised before any generation.
        SinkError
            If a file cannot be written.
        """
        self.config.validate()
        # An injected generator may accept fewer records than the config
        for size in self.config.dataset_sizes:
            validate_count(size, self.generator.max_records)

        logger.info(
            "Generating %d datasets: %s",
            len(self.config.dataset_sizes),
            ", ".join(str(size) for size in self.config.dataset_sizes),
        )

        datasets = {
            size: self.generator.generate_batch(size) for size in self.config.dataset_sizes
        }

        logger.info("Writing datasets to %s", self.config.output.output_dir)
        written: list[Path] = []
        for sink in self.sinks:
            for size, transactions in datasets.items():
                path = sink.write_batch(self.config.output.dataset_name(size), transactions)
                if path is not None:
                    written.append(path)

        for sink in self.sinks:
            sink.close()

        return written
