#!/usr/bin/env python3
"""Encode a JSON payment request into a CNAB 240 remittance file.

The request holds a ``company`` object and a ``batches`` list; see
``cnab_gen.parsing`` for the accepted shape.

Usage:
    python scripts/encode_json.py request.json
    python scripts/encode_json.py request.json --output-dir out --filename REM0001.rem
    python scripts/encode_json.py request.json --stats
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from cnab_gen.config import CnabGenConfig
from cnab_gen.exceptions import CnabGenError
from cnab_gen.logging import setup_logging
from cnab_gen.orchestrator import FileOrchestrator
from cnab_gen.parsing import request_from_dict
from cnab_gen.sinks import TextFileSink

logger = logging.getLogger(__name__)


def main() -> int:
    """Main entry point."""
    config = CnabGenConfig.from_env()

    parser = argparse.ArgumentParser(description="Encode a JSON request into a CNAB 240 file")
    parser.add_argument("request", type=Path, help="JSON request file")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=config.output.output_dir,
        help=f"Directory for the generated file (default: {config.output.output_dir})",
    )
    parser.add_argument(
        "--filename",
        type=str,
        default=None,
        help="File name (default: <prefix>_<family>_<timestamp>.rem)",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Print generation statistics as JSON",
    )
    args = parser.parse_args()

    setup_logging(config.log_level)

    try:
        with open(args.request, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Cannot read request %s: %s", args.request, exc)
        return 2

    try:
        company, batches = request_from_dict(data)
        sink = TextFileSink(args.output_dir, config.output.encoding)
        report = FileOrchestrator(config).generate(company, batches, sink, args.filename)
    except CnabGenError as exc:
        logger.error("Encoding failed: %s", exc)
        return 1

    if args.stats:
        print(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
    else:
        logger.info("Wrote %s (%d bytes)", report.location, report.byte_size)
    return 0


if __name__ == "__main__":
    sys.exit(main())
