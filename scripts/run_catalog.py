#!/usr/bin/env python3
"""Run the catalog from a source checkout."""

import sys
sys.path.insert(0, "src")

from pattern_catalog.cli import main

if __name__ == "__main__":
    main(["run"] + sys.argv[1:], standalone_mode=False)
