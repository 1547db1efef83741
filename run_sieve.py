#!/usr/bin/env python3
"""
Print every prime below 1,000,000, tab separated.

Usage:
    python run_sieve.py
    python run_sieve.py --N 1e3
    python run_sieve.py --config config/default.yaml
"""

import sys

from eratosthenes.cli import main


if __name__ == '__main__':
    sys.exit(main())
