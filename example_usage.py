#!/usr/bin/env python3
"""
Example usage of the release configuration loader.

Run from the Android directory of a mobile app project (the one holding
key.properties and keys.properties), or pass the root as an argument.
"""

import sys
from pathlib import Path

from release_props.build.config import ProjectLayout, assemble_build_config, get, load


def main():
    """Demonstrate loading property files and assembling the release config."""
    root = Path(sys.argv[1]) if len(sys.argv) > 1 else Path.cwd()
    layout = ProjectLayout(root=root)

    print("🚀 Release Configuration Example")
    print("=" * 50)

    # Example 1: Plain lookups; missing files are empty
    print("\n📋 Example 1: Property lookups")
    print("-" * 30)
    keys = load(layout.keys_path)
    print(f"MAPS_API_KEY set: {bool(get(keys, 'MAPS_API_KEY'))}")
    print(f"Missing key with default: {get(keys, 'NOT_THERE', 'fallback')}")

    # Example 2: The assembled build configuration
    print("\n📋 Example 2: Assembled release config")
    print("-" * 30)
    config = assemble_build_config(layout)
    print(f"Version: {config.version_name} ({config.version_code})")
    print(f"SDK: min {config.min_sdk}, target {config.target_sdk}")
    if config.signing.enabled:
        print(f"Signing with keystore {config.signing.config.store_file}")
    else:
        print(f"Signing disabled: '{config.signing.reason}' not set")


if __name__ == "__main__":
    main()
