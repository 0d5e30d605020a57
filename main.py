#!/usr/bin/env python3
"""
N-Queens Genetic Algorithm - Main entry point.

Runs the GA from the command line. Settings come from an optional YAML
file and can be overridden with flags.

Usage:
    python3 main.py
    python3 main.py --config config.yaml
    python3 main.py --size 10 --seed 42 --history-csv output/history.csv
    python3 main.py --help
"""

import sys
from pathlib import Path

# Add project root to path if needed
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from queens_ga.cli import main


if __name__ == '__main__':
    sys.exit(main())
