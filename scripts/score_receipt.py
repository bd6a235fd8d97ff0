#!/usr/bin/env python3
"""Score receipt JSON files from the command line.

Every file is submitted to one engine sharing one score store, so the
printed identifiers can be looked up against each other within a run.

Usage:
    python scripts/score_receipt.py examples/receipts/target.json --explain
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from receipt_points.engine import ReceiptProcessingEngine, load_config
from receipt_points.errors import ClientError, ConfigurationError
from receipt_points.logging.config import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Score receipt JSON files.")
    parser.add_argument("files", nargs="+", type=Path, help="Receipt JSON files")
    parser.add_argument("--explain", action="store_true",
                        help="Print the points each rule awarded")
    parser.add_argument("--config-dir", type=Path, default=None,
                        help="Directory holding points.yaml")
    parser.add_argument("--log-level", default=None,
                        help="Override the configured log level")
    parser.add_argument("--json-logs", action="store_true",
                        help="Emit logs as JSON lines")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.log_level:
        overrides["logging"] = {"level": args.log_level.upper()}
    if args.json_logs:
        overrides.setdefault("logging", {})["format_json"] = True

    try:
        config = load_config(args.config_dir, overrides)
    except ConfigurationError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 2

    configure_logging(level=config.logging.level, format_json=config.logging.format_json)
    engine = ReceiptProcessingEngine(config=config)

    failures = 0
    for path in args.files:
        try:
            body = path.read_bytes()
        except OSError as e:
            print(f"❌ {path}: cannot read file ({e.strerror})")
            failures += 1
            continue

        try:
            receipt_id = engine.process_receipt(body)
        except ClientError as e:
            print(f"❌ {path}: rejected ({type(e).__name__})")
            failures += 1
            continue

        print(f"✅ {path}: id={receipt_id} points={engine.get_points(receipt_id)}")

        if args.explain:
            breakdown = engine.explain_receipt(body)
            for award in breakdown.awards:
                print(f"    {award.rule:<24} {award.points:>5}  {award.detail}")
            if breakdown.aborted:
                print("    (total not parseable, remaining rules skipped)")

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
