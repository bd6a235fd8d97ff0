#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from receipt_points.config.loader import ConfigLoader
from receipt_points.config.validation import ConfigValidator
from receipt_points.errors import ConfigurationError


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    print("🔍 Validating receipt points configuration...")

    loader = ConfigLoader.create(config_dir)
    print(f"📁 Config directory: {loader.config_dir}")

    try:
        config = loader.merge_config()
    except ConfigurationError as e:
        print(f"❌ {e}")
        sys.exit(1)

    errors = ConfigValidator.validate_config(config)

    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        sys.exit(1)

    scoring = config["scoring"]
    print("✅ Configuration is valid")
    print(f"  • round dollar: {scoring['round_dollar_points']} points")
    print(f"  • quarter multiple: {scoring['quarter_multiple_points']} points")
    print(f"  • afternoon hour: {scoring['afternoon_hour']}:00")
    sys.exit(0)


if __name__ == "__main__":
    main()
