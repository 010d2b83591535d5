#!/usr/bin/env python3
"""Regenerate tests/golden/golden_data from the current examples."""

import sys
sys.path.insert(0, "src")

from pattern_catalog.cli import main

if __name__ == "__main__":
    main(
        ["run", "--expected-dir", "tests/golden/golden_data", "--update-expected"]
        + sys.argv[1:],
        standalone_mode=False,
    )
