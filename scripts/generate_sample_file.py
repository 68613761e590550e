#!/usr/bin/env python3
"""Generate a sample CNAB 240 remittance file from synthetic data.

Usage:
    python scripts/generate_sample_file.py
    python scripts/generate_sample_file.py --family PAYROLL --payments 20
    python scripts/generate_sample_file.py --family SUPPLIER --family TAX --stdout
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from cnab_gen.config import CnabGenConfig
from cnab_gen.exceptions import CnabGenError
from cnab_gen.generators import BatchGenerator, CompanyGenerator
from cnab_gen.logging import setup_logging
from cnab_gen.models.enums import PaymentFamily
from cnab_gen.orchestrator import FileOrchestrator
from cnab_gen.sinks import ConsoleSink, TextFileSink

logger = logging.getLogger(__name__)


def main() -> int:
    """Main entry point."""
    config = CnabGenConfig.from_env()

    parser = argparse.ArgumentParser(description="Generate a sample CNAB 240 remittance file")
    parser.add_argument(
        "--family",
        action="append",
        choices=[family.value for family in PaymentFamily],
        help="Payment family of a batch; repeat for several batches (default: SUPPLIER)",
    )
    parser.add_argument(
        "--payments",
        type=int,
        default=5,
        help="Payments per batch (default: 5)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for reproducibility (default: 42)",
    )
    parser.add_argument(
        "--bank",
        type=str,
        default=None,
        help="Bank code of the company account (default: random)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=config.output.output_dir,
        help=f"Directory for the generated file (default: {config.output.output_dir})",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the file instead of writing it",
    )
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        default="standard",
        help="Log output format",
    )
    args = parser.parse_args()

    setup_logging(config.log_level, args.log_format)

    families = args.family or [PaymentFamily.SUPPLIER.value]
    company = CompanyGenerator(seed=args.seed).generate(bank_code=args.bank)
    batch_gen = BatchGenerator(seed=args.seed)
    batches = [batch_gen.generate(family, args.payments) for family in families]

    if args.stdout:
        sink = ConsoleSink(ruler=True)
    else:
        sink = TextFileSink(args.output_dir, config.output.encoding)

    try:
        report = FileOrchestrator(config).generate(company, batches, sink)
    except CnabGenError as exc:
        logger.error("Generation failed: %s", exc)
        return 1

    logger.info("=" * 60)
    logger.info("File: %s", report.location)
    logger.info("Batches: %d", report.result.batch_count)
    logger.info("Records: %d", report.result.record_count)
    logger.info("Size: %d bytes", report.byte_size)
    logger.info("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
