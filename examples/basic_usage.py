#!/usr/bin/env python3
"""
Basic Usage Example - Receipt Points Engine

This script demonstrates the basic usage of the receipt scoring engine. It
shows how to:
- Initialize the engine with a shared score store
- Submit receipts and collect their identifiers
- Retrieve stored points
- Inspect the per-rule breakdown
- Handle rejected submissions

Run: python examples/basic_usage.py
"""

import json
from pathlib import Path

from receipt_points.engine import ReceiptProcessingEngine, encode_response
from receipt_points.errors import ClientError, ReceiptNotFoundError
from receipt_points.logging.config import configure_logging
from receipt_points.persistence.score_store import ScoreStore

RECEIPTS_DIR = Path(__file__).parent / "receipts"


def main():
    """Main demonstration function."""
    print("🧾 Receipt Points Engine - Basic Usage Demo")
    print("=" * 50)

    configure_logging(level="WARNING")

    print("1. Initializing engine...")
    store = ScoreStore()
    engine = ReceiptProcessingEngine(store=store)
    print()

    print("2. Submitting sample receipts...")
    submitted = {}
    for path in sorted(RECEIPTS_DIR.glob("*.json")):
        body = path.read_text()
        response = engine.submit(body)
        submitted[path.stem] = response["id"]
        print(f"   {path.name}: {encode_response(response)}")
    print()

    print("3. Retrieving points...")
    for name, receipt_id in submitted.items():
        print(f"   {name}: {encode_response(engine.retrieve(receipt_id))}")
    print()

    print("4. Rule breakdown for target.json:")
    breakdown = engine.explain_receipt((RECEIPTS_DIR / "target.json").read_text())
    for award in breakdown.awards:
        print(f"   {award.rule:<24} {award.points:>4}  {award.detail}")
    print(f"   {'total':<24} {breakdown.total:>4}")
    print()

    print("5. Rejected submissions:")
    bad_submissions = {
        "corrupt JSON": '{"retailer": "Target", "items": [',
        "missing retailer": json.dumps({
            "purchaseDate": "2022-01-01",
            "purchaseTime": "13:01",
            "total": "1.00",
            "items": [{"shortDescription": "Gum", "price": "1.00"}],
        }),
    }
    for label, body in bad_submissions.items():
        try:
            engine.submit(body)
        except ClientError as e:
            print(f"   {label}: {type(e).__name__} -> HTTP {e.status_code}")

    try:
        engine.retrieve("no-such-receipt")
    except ReceiptNotFoundError as e:
        print(f"   unknown id: {type(e).__name__} -> HTTP {e.status_code}")
    print()

    print(f"✅ Demo completed: {len(store)} receipts stored")


if __name__ == "__main__":
    main()
