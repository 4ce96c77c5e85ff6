#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from roster_app.config.loader import ConfigLoader
from roster_app.config.validation import ConfigValidator, ValidationError


def validate_settings(overrides: Optional[Dict[str, Any]] = None) -> List[ValidationError]:
    """Validate merged configuration with optional overrides."""
    loader = ConfigLoader.create()
    config = loader.merge_config(overrides)
    return ConfigValidator.validate_config(config)


def report(label: str, errors: List[ValidationError]) -> bool:
    if errors:
        print(f"❌ {label}: {len(errors)} validation errors")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        return False
    print(f"✅ {label} is valid")
    return True


def main():
    """Main validation function."""
    print("🔍 Validating roster_app configuration...")

    all_valid = report("config/settings.yaml", validate_settings())

    print("\n📋 Testing query overrides...")
    test_overrides = {
        "query": {
            "courses": ["History"],
            "min_age": 18,
            "max_age": 70,
        }
    }
    all_valid = report("Query overrides", validate_settings(test_overrides)) and all_valid

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
