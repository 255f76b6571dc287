"""Command-line entry point for generating card transaction datasets.

Run without arguments to write ``transactions_100``, ``transactions_250``
and ``transactions_500`` as CSV and JSON into the current directory.
"""

import argparse
import sys
from pathlib import Path

from card_txn_gen.config import DEFAULT_DATASET_SIZES, GeneratorConfig, OutputConfig
from card_txn_gen.exceptions import ConfigurationError, SinkError
from card_txn_gen.logging import get_logger, setup_logging
from card_txn_gen.models.financial import OutputFormat
from card_txn_gen.scenarios import DatasetScenario

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Generate synthetic card transaction datasets as CSV and JSON",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("."),
        help="Directory for generated files (default: current directory)",
    )
    parser.add_argument(
        "--sizes",
        type=int,
        nargs="+",
        default=list(DEFAULT_DATASET_SIZES),
        help="Record count of each dataset (default: 100 250 500)",
    )
    parser.add_argument(
        "--formats",
        nargs="+",
        choices=[fmt.value for fmt in OutputFormat],
        default=[OutputFormat.CSV.value, OutputFormat.JSON.value],
        help="Output formats (default: csv json)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible output",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Log level (default: INFO)",
    )
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        default="standard",
        help="Log format (default: standard)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Generate the datasets and return a process exit code."""
    args = build_parser().parse_args(argv)

    config = GeneratorConfig(
        dataset_sizes=tuple(args.sizes),
        seed=args.seed,
        log_level=args.log_level,
        output=OutputConfig(
            output_dir=args.output_dir,
            formats=tuple(OutputFormat(fmt) for fmt in args.formats),
        ),
    )
    setup_logging(config.log_level, args.log_format)

    print("Generating test datasets...")
    try:
        written = DatasetScenario(config).run()
    except ConfigurationError as e:
        logger.error("Invalid configuration: %s", e)
        return EXIT_CONFIG_ERROR
    except SinkError as e:
        logger.error("%s", e)
        return EXIT_IO_ERROR

    print(f"Done! Generated {len(written)} files:")
    for fmt in config.output.formats:
        names = [path.name for path in written if path.suffix == f".{fmt.value}"]
        if names:
            print(f"- {fmt.value.upper()} files: {', '.join(names)}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
